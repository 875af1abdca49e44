import pytest


@pytest.fixture
def repo_payload():
    """Trimmed GET /repos/alice/repo1 response."""
    return {
        "name": "repo1",
        "full_name": "alice/repo1",
        "private": False,
        "description": "A tiny <b>demo</b> & friends",
        "stargazers_count": 1500,
        "forks_count": 42,
        "language": "Python",
        "updated_at": "2024-01-05T10:20:30Z",
        "topics": ["svg", "github", "readme", "cards", "vercel"],
        "license": {"key": "mit", "name": "MIT License", "spdx_id": "MIT"},
    }
