import json
import logging
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Fixed English abbreviations, independent of LC_TIME
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def load_json_file(path: Path) -> Optional[Dict[str, Any]]:
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed to load JSON %s: %s", path, e)
        return None


def load_secrets(secrets_path: Path) -> Dict[str, str]:
    data = load_json_file(secrets_path)
    return data if isinstance(data, dict) else {}


def abbreviate(n: int) -> str:
    """999 -> '999', 1250 -> '1.3k' (half up), 2000 -> '2k', 999999 -> '1000k'."""
    if n < 1000:
        return str(n)
    text = str((Decimal(n) / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}k"


def truncate_text(text: str, max_chars: int) -> str:
    return text if len(text) <= max_chars else text[: max_chars - 1] + "…"


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Calendar date (UTC) of a GitHub ISO-8601 timestamp, or None."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def format_date(value: Optional[date]) -> str:
    # "Jan 5, 2024"
    if value is None:
        return "Unknown"
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"
