"""View composition: derive screen regions from the terminal size and paint them.

The composer reads application state and hands each region plus its content
to the widget functions. The only state it writes back is the list scroll
offset, which has to follow the selection cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..input.modes import InputMode
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_text, display_width
from .layout import Length, Min, Percentage, Rect, split_horizontal, split_vertical
from .widgets import ScreenBuffer, render_block, render_list, render_paragraph

if TYPE_CHECKING:
    from ..runtime.state import AppState

APP_TITLE = "AniTUI"
LIST_TITLE = "Anime List"
DETAILS_TITLE = "Details"
IMAGE_TITLE = "Poster"
NO_SELECTION_TEXT = "No item selected"
EMPTY_CATALOG_TEXT = "Catalog is empty - press i to add an entry"
INPUT_BLOCK_HEIGHT = 3

NORMAL_HINTS = "↑/↓ select  i add  q/Esc quit"
INSERT_HINTS = "Enter add  Esc cancel  Backspace erase"


@dataclass(frozen=True)
class Regions:
    header: Rect
    input: Rect
    list: Rect
    details: Rect
    image: Rect | None
    status: Rect


@dataclass(frozen=True)
class Frame:
    """Composed frame text plus where an out-of-band image may be placed."""

    text: str
    image_region: Rect | None


def compose_regions(area: Rect, show_image: bool) -> Regions:
    """Split ``area`` into header, input, main panes, and status row."""
    header, input_area, main, status = split_vertical(
        area,
        [Length(1), Length(INPUT_BLOCK_HEIGHT), Min(1), Length(1)],
    )
    if show_image:
        list_area, details_area, image_area = split_horizontal(
            main,
            [Percentage(50), Percentage(30), Percentage(20)],
        )
        return Regions(header, input_area, list_area, details_area, image_area, status)
    list_area, details_area = split_horizontal(main, [Percentage(60), Percentage(40)])
    return Regions(header, input_area, list_area, details_area, None, status)


def build_status_line(left_text: str, width: int, right_text: str) -> str:
    """Left/right-justify two strings into one row of ``width`` columns."""
    usable = max(1, width)
    right_width = display_width(right_text)
    if usable <= right_width:
        return clip_text(right_text, usable)
    left = clip_text(left_text, max(0, usable - right_width - 1))
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right_text}"


class ViewComposer:
    """Paints the whole application view for one state snapshot."""

    def __init__(self, theme: UITheme = DEFAULT_THEME) -> None:
        self.theme = theme

    def compose(self, state: AppState, width: int, height: int) -> Frame:
        screen = ScreenBuffer(width, height)
        image_region = self.paint(state, screen)
        return Frame(text=screen.to_ansi(), image_region=image_region)

    def paint(self, state: AppState, screen: ScreenBuffer) -> Rect | None:
        """Paint every region into ``screen``; return the image pane's inner area."""
        show_image = state.image_binding is not None
        regions = compose_regions(screen.area, show_image)
        self._paint_header(screen, regions.header)
        self._paint_input(state, screen, regions.input)
        self._paint_list(state, screen, regions.list)
        self._paint_details(state, screen, regions.details)
        image_region = self._paint_image(state, screen, regions.image)
        self._paint_status(state, screen, regions.status)
        return image_region

    def _paint_header(self, screen: ScreenBuffer, rect: Rect) -> None:
        render_paragraph(screen, rect, APP_TITLE, self.theme.header, center=True)

    def _paint_input(self, state: AppState, screen: ScreenBuffer, rect: Rect) -> None:
        theme = self.theme
        mode_style = theme.mode_insert if state.mode is InputMode.CAPTURE else theme.mode_normal
        inner = render_block(
            screen,
            rect,
            f"Search [{state.mode.indicator}]",
            border_style=theme.border,
            title_style=mode_style,
        )
        if inner.width <= 0 or inner.height <= 0:
            return
        text = state.capture.text
        # Keep the tail of long input visible next to the cursor.
        visible = text
        while visible and display_width(visible) > inner.width - 1:
            visible = visible[1:]
        used = screen.put_text(inner.x, inner.y, visible, theme.input_text, inner.width)
        if state.mode is InputMode.CAPTURE and used < inner.width:
            screen.put(inner.x + used, inner.y, " ", theme.input_cursor)

    def _paint_list(self, state: AppState, screen: ScreenBuffer, rect: Rect) -> None:
        theme = self.theme
        inner = render_block(screen, rect, LIST_TITLE, border_style=theme.border, title_style=theme.title)
        if state.catalog.is_empty():
            render_paragraph(screen, inner, EMPTY_CATALOG_TEXT, theme.empty_hint, wrap=True)
            return
        state.list_offset = render_list(
            screen,
            inner,
            state.catalog.labels(),
            state.cursor.selected,
            offset=state.list_offset,
            highlight_style=theme.list_highlight,
            styles=[theme.status_style(item.status) for item in state.catalog],
        )

    def _paint_details(self, state: AppState, screen: ScreenBuffer, rect: Rect) -> None:
        theme = self.theme
        inner = render_block(screen, rect, DETAILS_TITLE, border_style=theme.border, title_style=theme.title)
        item = state.cursor.selected_item()
        if item is None:
            render_paragraph(screen, inner, NO_SELECTION_TEXT, theme.empty_hint)
            return
        render_paragraph(screen, inner, item.details(), theme.details_text, wrap=True)

    def _paint_image(self, state: AppState, screen: ScreenBuffer, rect: Rect | None) -> Rect | None:
        binding = state.image_binding
        if rect is None or binding is None:
            return None
        inner = render_block(screen, rect, IMAGE_TITLE, border_style=self.theme.border, title_style=self.theme.title)
        if inner.width <= 0 or inner.height <= 0:
            return None
        if binding.drawable is not None:
            binding.protocol.paint(binding.drawable, inner, screen)
        return inner

    def _paint_status(self, state: AppState, screen: ScreenBuffer, rect: Rect) -> None:
        if rect.height <= 0:
            return
        hints = INSERT_HINTS if state.mode is InputMode.CAPTURE else NORMAL_HINTS
        count = len(state.catalog)
        right = f"{count} item" if count == 1 else f"{count} items"
        line = build_status_line(hints, rect.width, right)
        screen.put_text(rect.x, rect.y, line, self.theme.status_bar, rect.width)
