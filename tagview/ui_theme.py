"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the table chrome and cells. The plain theme is
used when color is disabled and emits no escape sequences at all.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    header: str
    header_focus: str
    header_bar: str
    column_sep: str
    cell: str
    cell_focus: str
    missing: str
    missing_focus: str
    field_sep: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;252m",
    header_focus="\033[1;7;38;5;81m",
    header_bar="\033[38;5;245m",
    column_sep="\033[2m",
    cell="\033[38;5;252m",
    cell_focus="\033[7;38;5;81m",
    missing="\033[2;38;5;240m",
    missing_focus="\033[7;38;5;240m",
    field_sep="\033[1;38;5;214m",
    status="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;117m",
    header_focus="\033[1;7;38;5;45m",
    header_bar="\033[38;5;31m",
    column_sep="\033[2;38;5;31m",
    cell="\033[38;5;153m",
    cell_focus="\033[7;38;5;45m",
    missing="\033[2;38;5;24m",
    missing_focus="\033[7;38;5;24m",
    field_sep="\033[1;38;5;215m",
    status="\033[7;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    header_focus="",
    header_bar="",
    column_sep="",
    cell="",
    cell_focus="",
    missing="",
    missing_focus="",
    field_sep="",
    status="",
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
