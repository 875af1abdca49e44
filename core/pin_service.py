"""
Request pipeline behind /api/pin.

handle_pin_request() turns a parsed query string into a PinResponse
(status, headers, SVG body). Apart from bad parameters (400) and unexpected
failures (500), every outcome is a 200 with a renderable card, since the
endpoint is embedded as an <img> and anything else shows as a broken image.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from cards.pin_card import generate_pin_svg, render_error_svg, render_rate_limited_svg
from cards.themes import DEFAULT_THEME, THEMES, Theme, resolve_theme
from core.exceptions import (
    NetworkError,
    RateLimitError,
    RepositoryNotFoundError,
    UpstreamError,
    ValidationError,
)
from core.github_client import build_headers, fetch_repository
from core.models import CardOptions, RepositorySnapshot

logger = logging.getLogger(__name__)

CONTENT_TYPE = "image/svg+xml;charset=utf-8"
DEFAULT_CACHE_SECONDS = 1800
MAX_CACHE_SECONDS = 86400
RATE_LIMIT_MAX_AGE = 3600
ERROR_MAX_AGE = 300
STALE_WHILE_REVALIDATE = 3600

NO_STORE = "no-store"
NO_CACHE = "no-cache, no-store, must-revalidate"


@dataclass(frozen=True)
class PinRequest:
    username: str
    repo: str
    theme: Theme
    hide_border: bool = False
    show_owner: bool = True
    cache_seconds: int = DEFAULT_CACHE_SECONDS

    @property
    def options(self) -> CardOptions:
        return CardOptions(hide_border=self.hide_border, show_owner=self.show_owner)


@dataclass
class PinResponse:
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)


def _param(query: Mapping[str, List[str]], name: str, default: str = "") -> str:
    values = query.get(name) or [default]
    return values[0]


def parse_cache_seconds(raw: str) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return DEFAULT_CACHE_SECONDS
    if value <= 0:
        return DEFAULT_CACHE_SECONDS
    return min(value, MAX_CACHE_SECONDS)


def parse_pin_request(query: Mapping[str, List[str]]) -> PinRequest:
    """Build a PinRequest from parse_qs() output. Raises ValidationError."""
    username = _param(query, "username").strip()
    repo = _param(query, "repo").strip()
    if not username or not repo:
        raise ValidationError("Missing parameters: username & repo required")

    hide_border = _param(query, "hide_border", "false")
    return PinRequest(
        username=username,
        repo=repo,
        theme=resolve_theme(_param(query, "theme", DEFAULT_THEME)),
        hide_border=hide_border in ("true", "1"),
        show_owner=_param(query, "show_owner", "true") != "false",
        cache_seconds=parse_cache_seconds(_param(query, "cache_seconds", str(DEFAULT_CACHE_SECONDS))),
    )


def _svg_response(status: int, body: str, cache_control: str) -> PinResponse:
    return PinResponse(
        status=status,
        body=body,
        headers={"Content-Type": CONTENT_TYPE, "Cache-Control": cache_control},
    )


def handle_pin_request(
    query: Mapping[str, List[str]],
    headers: Optional[Dict[str, str]] = None,
) -> PinResponse:
    try:
        try:
            req = parse_pin_request(query)
        except ValidationError as e:
            return _svg_response(400, render_error_svg(str(e), THEMES["dark"]), NO_STORE)

        try:
            payload = fetch_repository(req.username, req.repo, headers or build_headers())
        except RateLimitError:
            logger.warning("GitHub rate limit hit for %s/%s", req.username, req.repo)
            max_age = min(req.cache_seconds, RATE_LIMIT_MAX_AGE)
            return _svg_response(
                200,
                render_rate_limited_svg(req.theme),
                f"public, max-age={max_age}, stale-while-revalidate={STALE_WHILE_REVALIDATE}",
            )
        except RepositoryNotFoundError:
            return _svg_response(
                200,
                render_error_svg(f"Repository not found: {req.username}/{req.repo}", req.theme),
                f"public, max-age={ERROR_MAX_AGE}",
            )
        except UpstreamError as e:
            logger.error("GitHub API unexpected response: %s %s", e.status_code, e.excerpt)
            return _svg_response(
                200,
                render_error_svg(f"GitHub API error: {e.status_code}", req.theme),
                f"public, max-age={ERROR_MAX_AGE}",
            )
        except NetworkError as e:
            logger.error("GitHub API unreachable: %s", e)
            return _svg_response(
                200,
                render_error_svg("GitHub API unreachable", req.theme),
                f"public, max-age={ERROR_MAX_AGE}",
            )

        snapshot = RepositorySnapshot.from_api(payload, req.username, req.repo, req.show_owner)
        resp = _svg_response(
            200,
            generate_pin_svg(snapshot, req.theme, req.options),
            f"public, max-age={req.cache_seconds}, stale-while-revalidate={STALE_WHILE_REVALIDATE}",
        )
        resp.headers["Access-Control-Allow-Origin"] = "*"
        return resp

    except Exception:
        logger.exception("Error in /api/pin")
        return _svg_response(500, render_error_svg("Internal server error", THEMES["dark"]), NO_CACHE)
