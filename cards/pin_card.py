"""
Repository pin card renderer.
Generates the SVG documents served by /api/pin:

  - generate_pin_svg          success card (repository metadata)
  - render_error_svg          small error card (bad params, not found, API errors)
  - render_rate_limited_svg   small static card for an exhausted GitHub quota

All functions are pure string templating. Every dynamic value goes through
escape_svg exactly once before it is placed in the document.
"""
import textwrap
from html import escape as esc
from pathlib import Path
from typing import Any, List

from cards.themes import THEMES, Theme
from core.models import CardOptions, RepositorySnapshot
from core.utils import abbreviate, format_date, truncate_text

FONT_FAMILY = "'Segoe UI', 'Inter', Arial, sans-serif"
XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'

# Small cards (error / rate limit)
MESSAGE_W, MESSAGE_H = 520, 140
# Pin card
CARD_W, CARD_H = 540, 190
PAD_X = 20

PRIVATE_COLOR = "#ff6b6b"
PUBLIC_COLOR = "#50fa7b"

DESC_LINE_CHARS = 62
DESC_MAX_LINES = 2
MAX_TOPICS = 3


def escape_svg(value: Any) -> str:
    """Make any value safe for SVG text content and attribute values."""
    if value is None or value == "":
        return ""
    return esc(str(value), quote=True)


def wrap_description(text: str) -> List[str]:
    lines = textwrap.wrap(text, width=DESC_LINE_CHARS) or [""]
    if len(lines) > DESC_MAX_LINES:
        lines = lines[:DESC_MAX_LINES]
        # force the ellipsis even when the last kept line is already short
        lines[-1] = truncate_text(lines[-1] + " …", DESC_LINE_CHARS)
    return lines


def format_topics(topics) -> str:
    shown = ", ".join(escape_svg(t) for t in topics[:MAX_TOPICS])
    return shown + ("..." if len(topics) > MAX_TOPICS else "")


def _message_svg(aria_label: str, title: str, messages: List[str], theme: Theme) -> str:
    """Shared 520x140 layout; every argument must already be escaped."""
    lines: List[str] = [XML_PROLOG]
    lines.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{MESSAGE_W}" height="{MESSAGE_H}" '
        f'viewBox="0 0 {MESSAGE_W} {MESSAGE_H}" role="img" aria-label="{aria_label}">'
    )
    lines.append("  <style>")
    lines.append(f"    .bg {{ fill: {theme.bg}; }}")
    lines.append(f"    .title {{ font: 700 16px {FONT_FAMILY}; fill: {theme.accent}; }}")
    lines.append(f"    .msg {{ font: 400 13px {FONT_FAMILY}; fill: {theme.fg}; }}")
    lines.append("  </style>")
    lines.append('  <rect width="100%" height="100%" rx="10" class="bg"/>')
    lines.append(f'  <text x="{PAD_X}" y="44" class="title">{title}</text>')
    y = 74
    for msg in messages:
        lines.append(f'  <text x="{PAD_X}" y="{y}" class="msg">{msg}</text>')
        y += 22
    lines.append("</svg>")
    return "\n".join(lines)


def render_error_svg(message: str, theme: Theme = THEMES["dark"]) -> str:
    text = escape_svg(message)
    return _message_svg(text, "⚠️ Error", [text], theme)


def render_rate_limited_svg(theme: Theme = THEMES["dark"]) -> str:
    return _message_svg(
        "GitHub API rate limit reached",
        "⏳ Rate limit reached",
        [
            "The GitHub API quota for this server is exhausted.",
            "Try again later, or configure GITHUB_TOKEN for a higher limit.",
        ],
        theme,
    )


def generate_pin_svg(snapshot: RepositorySnapshot, theme: Theme, options: CardOptions) -> str:
    name = escape_svg(snapshot.display_name)
    status_color = PRIVATE_COLOR if snapshot.is_private else PUBLIC_COLOR
    status_label = "Private" if snapshot.is_private else "Public"
    # Hidden border keeps the same element, only the stroke disappears
    stroke = theme.bg if options.hide_border else theme.accent
    stroke_w = 0 if options.hide_border else 2
    status_x = min(max(len(snapshot.display_name) * 8 + 40, 160), CARD_W - 80)

    lines: List[str] = [XML_PROLOG]
    lines.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{CARD_W}" height="{CARD_H}" '
        f'viewBox="0 0 {CARD_W} {CARD_H}" role="img" aria-label="{name}">'
    )
    lines.append("  <style>")
    lines.append(f"    .card {{ fill: {theme.bg}; stroke: {stroke}; stroke-width: {stroke_w}; }}")
    lines.append(f"    .title {{ font: 600 17px {FONT_FAMILY}; fill: {theme.fg}; }}")
    lines.append(f"    .desc {{ font: 400 13px {FONT_FAMILY}; fill: {theme.fg}; opacity: 0.85; }}")
    lines.append(f"    .label {{ font: 600 12px {FONT_FAMILY}; fill: {theme.fg}; }}")
    lines.append(f"    .value {{ font: 500 13px {FONT_FAMILY}; fill: {theme.accent}; }}")
    lines.append(f"    .muted {{ font: 400 11px {FONT_FAMILY}; fill: {theme.fg}; opacity: 0.7; }}")
    lines.append(f"    .hint {{ font: 400 10px {FONT_FAMILY}; fill: {theme.fg}; opacity: 0.7; text-anchor: end; }}")
    lines.append(f"    .status-dot {{ fill: {status_color}; }}")
    lines.append(f"    .lang-dot {{ fill: {theme.accent}; }}")
    lines.append("  </style>")

    # Background + border
    lines.append(f'  <rect x="1" y="1" width="{CARD_W - 2}" height="{CARD_H - 2}" rx="12" class="card"/>')

    # Header: status dot, name, visibility
    lines.append(f'  <g transform="translate({PAD_X}, 30)">')
    lines.append('    <circle cx="0" cy="-6" r="6" class="status-dot"/>')
    lines.append(f'    <text x="14" y="0" class="title">{name}</text>')
    lines.append(f'    <text x="{status_x}" y="0" class="muted">{status_label}</text>')
    lines.append("  </g>")

    # Description
    y = 58
    for line in wrap_description(snapshot.description):
        lines.append(f'  <text x="{PAD_X}" y="{y}" class="desc">{escape_svg(line)}</text>')
        y += 17

    # Stats row
    lines.append(f'  <g transform="translate({PAD_X}, 100)">')
    lines.append('    <circle cx="6" cy="8" r="5" class="lang-dot"/>')
    lines.append('    <text x="18" y="12" class="label">Language:</text>')
    lines.append(f'    <text x="85" y="12" class="value">{escape_svg(snapshot.language)}</text>')
    lines.append('    <text x="190" y="12" class="label">⭐ Stars:</text>')
    lines.append(f'    <text x="250" y="12" class="value">{abbreviate(snapshot.stars)}</text>')
    lines.append('    <text x="320" y="12" class="label">🍴 Forks:</text>')
    lines.append(f'    <text x="385" y="12" class="value">{abbreviate(snapshot.forks)}</text>')
    lines.append("  </g>")

    # Topics + updated
    lines.append(f'  <g transform="translate({PAD_X}, 140)">')
    lines.append('    <text x="0" y="0" class="label">🏷️ Topics:</text>')
    lines.append(f'    <text x="75" y="0" class="muted">{format_topics(snapshot.topics)}</text>')
    lines.append('    <text x="320" y="0" class="label">📅 Updated:</text>')
    lines.append(f'    <text x="400" y="0" class="muted">{escape_svg(format_date(snapshot.updated_at))}</text>')
    lines.append("  </g>")

    if snapshot.license_label:
        lines.append(f'  <g transform="translate({PAD_X}, 162)" class="license">')
        lines.append('    <text x="0" y="0" class="label">📜 License:</text>')
        lines.append(f'    <text x="75" y="0" class="muted">{escape_svg(snapshot.license_label)}</text>')
        lines.append("  </g>")

    lines.append(f'  <text x="{CARD_W - PAD_X}" y="{CARD_H - 10}" class="hint">Click to visit →</text>')
    lines.append("</svg>")
    return "\n".join(lines)


def render_pin_svg(
    snapshot: RepositorySnapshot,
    theme: Theme,
    options: CardOptions,
    out_path: Path,
) -> None:
    """Write pin card SVG to file."""
    content = generate_pin_svg(snapshot, theme, options)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        f.write(content)
