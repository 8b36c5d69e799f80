"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker rows and the prompt line.
The plain theme is used whenever color output is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    prompt: str
    query: str
    counter: str
    pointer: str
    selected_row: str
    row: str
    match: str
    selected_match: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[1;38;5;81m",
    query="\033[1m",
    counter="\033[2;38;5;250m",
    pointer="\033[1;38;5;81m",
    selected_row="\033[1;38;5;229m",
    row="\033[38;5;252m",
    match="\033[38;5;214m",
    selected_match="\033[1;4;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt="\033[1;38;5;45m",
    query="\033[1;38;5;153m",
    counter="\033[2;38;5;110m",
    pointer="\033[1;38;5;39m",
    selected_row="\033[1;38;5;117m",
    row="\033[38;5;252m",
    match="\033[38;5;84m",
    selected_match="\033[1;4;38;5;84m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    query="",
    counter="",
    pointer="",
    selected_row="",
    row="",
    match="",
    selected_match="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
