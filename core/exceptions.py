class PinError(Exception):
    """Base exception for all pin card errors."""
    pass


class ValidationError(PinError):
    """Raised when the query is missing username or repo."""
    pass


class RepositoryNotFoundError(PinError):
    """Raised when GitHub answers 404 for the repository."""
    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo
        super().__init__(f"Repository not found: {owner}/{repo}")


class RateLimitError(PinError):
    """Raised when the GitHub REST quota is exhausted (403 or remaining=0)."""
    def __init__(self, message: str = "GitHub API rate limit exceeded."):
        super().__init__(message)


class UpstreamError(PinError):
    """Raised when GitHub returns an unexpected non-success status."""
    def __init__(self, status_code: int, excerpt: str = ""):
        self.status_code = status_code
        self.excerpt = excerpt
        super().__init__(f"GitHub API error: {status_code}")


class NetworkError(PinError):
    """Raised when GitHub could not be reached at all."""
    pass
