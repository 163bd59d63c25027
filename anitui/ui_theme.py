"""UI theme definitions and selection helpers.

Themes are ANSI SGR palettes for the chrome (borders, titles, list rows,
status bar). Poster images are drawn in their own colours.
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import COMPLETED, ON_HOLD, ONGOING, Status


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the view composer."""

    name: str
    reset: str
    header: str
    border: str
    title: str
    input_text: str
    input_cursor: str
    mode_normal: str
    mode_insert: str
    list_highlight: str
    status_ongoing: str
    status_completed: str
    status_on_hold: str
    status_other: str
    details_text: str
    empty_hint: str
    status_bar: str

    def status_style(self, status: Status) -> str:
        if status == ONGOING:
            return self.status_ongoing
        if status == COMPLETED:
            return self.status_completed
        if status == ON_HOLD:
            return self.status_on_hold
        return self.status_other


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;255m",
    border="\033[2m",
    title="\033[1;38;5;81m",
    input_text="\033[38;5;255m",
    input_cursor="\033[7m",
    mode_normal="\033[1;38;5;44m",
    mode_insert="\033[1;38;5;214m",
    list_highlight="\033[7m",
    status_ongoing="\033[38;5;110m",
    status_completed="\033[38;5;42m",
    status_on_hold="\033[38;5;214m",
    status_other="\033[38;5;252m",
    details_text="\033[38;5;252m",
    empty_hint="\033[2;38;5;250m",
    status_bar="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    input_text="\033[38;5;153m",
    input_cursor="\033[7;38;5;45m",
    mode_normal="\033[1;38;5;39m",
    mode_insert="\033[1;38;5;117m",
    list_highlight="\033[1;38;5;16;48;5;45m",
    status_ongoing="\033[38;5;117m",
    status_completed="\033[38;5;73m",
    status_on_hold="\033[38;5;153m",
    status_other="\033[38;5;252m",
    details_text="\033[38;5;153m",
    empty_hint="\033[2;38;5;110m",
    status_bar="\033[1;38;5;16;48;5;31m",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return theme ``name`` (case-insensitive), falling back to the default."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
