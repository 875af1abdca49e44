from typing import Dict, NamedTuple


class Theme(NamedTuple):
    bg: str
    fg: str
    accent: str


DEFAULT_THEME = "radical"

THEMES: Dict[str, Theme] = {
    "radical":      Theme(bg="#0b1020", fg="#ffffff", accent="#ff0078"),
    "dark":         Theme(bg="#0f1724", fg="#e6eef8", accent="#38bdf8"),
    "light":        Theme(bg="#ffffff", fg="#0f1724", accent="#2563eb"),
    "github_dark":  Theme(bg="#0d1117", fg="#c9d1d9", accent="#238636"),
    "github_light": Theme(bg="#ffffff", fg="#24292e", accent="#0969da"),
    "dracula":      Theme(bg="#282a36", fg="#f8f8f2", accent="#ff79c6"),
}


def resolve_theme(name: str) -> Theme:
    """Look up a theme by name, falling back to the default for unknown names."""
    return THEMES.get(str(name or ""), THEMES[DEFAULT_THEME])
