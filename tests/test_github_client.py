from unittest.mock import MagicMock, patch

import pytest
import requests

from core.exceptions import NetworkError, RateLimitError, RepositoryNotFoundError, UpstreamError
from core.github_client import TIMEOUT, build_headers, fetch_repository, repo_url


def _response(status, json_data=None, headers=None, text=""):
    r = MagicMock()
    r.status_code = status
    r.headers = headers or {}
    r.text = text
    r.json.return_value = json_data
    return r


def test_build_headers_without_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    headers = build_headers({})
    assert headers["User-Agent"] == "github-readme-pin/1.0"
    assert headers["Accept"] == "application/vnd.github+json"
    assert "Authorization" not in headers


def test_build_headers_env_token(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    assert build_headers()["Authorization"] == "Bearer env-token"


def test_build_headers_secrets_take_precedence(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    assert build_headers({"GITHUB_TOKEN": "file-token"})["Authorization"] == "Bearer file-token"


def test_repo_url_encodes_each_part():
    assert repo_url("a b", "c/d") == "https://api.github.com/repos/a%20b/c%2Fd"


@patch("core.github_client.requests.get")
def test_success_returns_json(mock_get):
    mock_get.return_value = _response(200, {"full_name": "alice/repo1"}, {"X-RateLimit-Remaining": "59"})
    headers = {"User-Agent": "t"}

    assert fetch_repository("alice", "repo1", headers) == {"full_name": "alice/repo1"}
    mock_get.assert_called_once_with(
        "https://api.github.com/repos/alice/repo1", headers=headers, timeout=TIMEOUT
    )


@patch("core.github_client.requests.get")
def test_403_is_rate_limited(mock_get):
    mock_get.return_value = _response(403)
    with pytest.raises(RateLimitError):
        fetch_repository("alice", "repo1", {})


@patch("core.github_client.requests.get")
def test_200_with_zero_remaining_is_rate_limited(mock_get):
    mock_get.return_value = _response(200, {}, {"X-RateLimit-Remaining": "0"})
    with pytest.raises(RateLimitError):
        fetch_repository("alice", "repo1", {})


@patch("core.github_client.requests.get")
def test_404_is_not_found(mock_get):
    mock_get.return_value = _response(404)
    with pytest.raises(RepositoryNotFoundError) as exc:
        fetch_repository("alice", "missing", {})
    assert (exc.value.owner, exc.value.repo) == ("alice", "missing")


@patch("core.github_client.requests.get")
def test_other_status_is_upstream_error(mock_get):
    mock_get.return_value = _response(502, text="x" * 500)
    with pytest.raises(UpstreamError) as exc:
        fetch_repository("alice", "repo1", {})
    assert exc.value.status_code == 502
    assert exc.value.excerpt == "x" * 200


@pytest.mark.parametrize("error", [
    requests.ConnectionError("dns"),
    requests.Timeout("slow"),
])
@patch("core.github_client.requests.get")
def test_transport_failure_is_network_error(mock_get, error):
    mock_get.side_effect = error
    with pytest.raises(NetworkError):
        fetch_repository("alice", "repo1", {})
    assert mock_get.call_count == 1
