import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from core.exceptions import (
    NetworkError,
    RateLimitError,
    RepositoryNotFoundError,
    UpstreamError,
)

API = "https://api.github.com"
TIMEOUT = 10
USER_AGENT = "github-readme-pin/1.0"
EXCERPT_CHARS = 200

logger = logging.getLogger(__name__)


def build_headers(secrets: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    headers = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}
    # Check secrets.json first, then fall back to env var (Vercel / GitHub Actions)
    token = (secrets or {}).get("GITHUB_TOKEN") or os.environ.get("GITHUB_TOKEN")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def repo_url(owner: str, repo: str) -> str:
    # safe="" so a slash inside either part cannot reach another endpoint
    return f"{API}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def _body_excerpt(r: requests.Response) -> str:
    try:
        return (r.text or "")[:EXCERPT_CHARS]
    except Exception:
        return "Unknown error"


def is_rate_limited(r: requests.Response) -> bool:
    if r.status_code == 403:
        return True
    return r.status_code == 200 and r.headers.get("X-RateLimit-Remaining") == "0"


def fetch_repository(owner: str, repo: str, headers: Dict[str, str]) -> Dict[str, Any]:
    """
    GET /repos/{owner}/{repo}, exactly once.

    Returns the repository JSON on success. Every other outcome is raised:
    - RateLimitError: 403, or 200 with X-RateLimit-Remaining == 0
    - RepositoryNotFoundError: 404
    - UpstreamError: any other non-2xx status (carries status + body excerpt)
    - NetworkError: no response at all (DNS, connection, timeout)
    """
    url = repo_url(owner, repo)
    try:
        r = requests.get(url, headers=headers, timeout=TIMEOUT)
    except requests.RequestException as e:
        raise NetworkError(f"GitHub API unreachable: {e}") from e

    if is_rate_limited(r):
        raise RateLimitError()
    if r.status_code == 404:
        raise RepositoryNotFoundError(owner, repo)
    if not 200 <= r.status_code < 300:
        excerpt = _body_excerpt(r)
        logger.debug("GET %s -> %s", url, r.status_code)
        raise UpstreamError(r.status_code, excerpt)

    return r.json()
