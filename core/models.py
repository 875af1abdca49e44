from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from core.utils import parse_iso_date

NO_DESCRIPTION = "No description provided"
UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class CardOptions:
    hide_border: bool = False
    show_owner: bool = True


def _count(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class RepositorySnapshot:
    """Normalized view of one GET /repos/{owner}/{repo} payload."""

    display_name: str
    description: str = NO_DESCRIPTION
    stars: int = 0
    forks: int = 0
    language: str = UNKNOWN_LANGUAGE
    updated_at: Optional[date] = None
    topics: Tuple[str, ...] = field(default_factory=tuple)
    license_label: Optional[str] = None
    is_private: bool = False

    @classmethod
    def from_api(
        cls,
        payload: Dict[str, Any],
        username: str,
        repo: str,
        show_owner: bool = True,
    ) -> "RepositorySnapshot":
        if show_owner:
            display_name = payload.get("full_name") or f"{username}/{repo}"
        else:
            display_name = payload.get("name") or repo

        lic = payload.get("license") or {}
        license_label = lic.get("spdx_id") or lic.get("name") or None

        return cls(
            display_name=str(display_name),
            description=payload.get("description") or NO_DESCRIPTION,
            stars=_count(payload.get("stargazers_count")),
            forks=_count(payload.get("forks_count")),
            language=payload.get("language") or UNKNOWN_LANGUAGE,
            updated_at=parse_iso_date(payload.get("updated_at")),
            topics=tuple(str(t) for t in (payload.get("topics") or [])),
            license_label=license_label,
            is_private=bool(payload.get("private")),
        )
