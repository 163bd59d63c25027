"""Cell buffer and the primitive widgets painted into it.

Widgets receive fully computed geometry and strings; they hold no state of
their own. ``ScreenBuffer.to_ansi`` turns the painted cells into one frame.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

from .ansi import char_display_width, clip_text
from .layout import Rect

RESET = "\033[0m"
HIGHLIGHT_SYMBOL = ">>"


@dataclass
class Cell:
    ch: str = " "
    style: str = ""


class ScreenBuffer:
    """Fixed-size grid of styled cells.

    A wide character occupies its own cell plus a continuation cell holding
    an empty string, which is skipped when the frame is emitted.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.cells: list[list[Cell]] = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, ch: str, style: str = "") -> None:
        if not self.in_bounds(x, y):
            return
        cell = self.cells[y][x]
        cell.ch = ch
        cell.style = style

    def put_text(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)``; return the columns consumed."""
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        col = 0
        for ch in clip_text(text, max(0, limit)):
            w = char_display_width(ch)
            if w == 0:
                continue
            self.put(x + col, y, ch, style)
            if w == 2:
                self.put(x + col + 1, y, "", style)
            col += w
        return col

    def fill(self, rect: Rect, ch: str = " ", style: str = "") -> None:
        for y in range(rect.y, rect.y + rect.height):
            for x in range(rect.x, rect.x + rect.width):
                self.put(x, y, ch, style)

    def row_text(self, y: int) -> str:
        """Return the plain characters of row ``y`` (no styling)."""
        return "".join(cell.ch for cell in self.cells[y])

    def to_ansi(self) -> str:
        """Compose the buffer into a full-screen ANSI frame."""
        out: list[str] = ["\033[H\033[J"]
        for y, row in enumerate(self.cells):
            current_style = ""
            for cell in row:
                if cell.ch == "":
                    continue
                if cell.style != current_style:
                    out.append(RESET)
                    if cell.style:
                        out.append(cell.style)
                    current_style = cell.style
                out.append(cell.ch)
            if current_style:
                out.append(RESET)
            if y < self.height - 1:
                out.append("\r\n")
        return "".join(out)


def render_block(
    screen: ScreenBuffer,
    rect: Rect,
    title: str = "",
    *,
    borders: bool = True,
    border_style: str = "",
    title_style: str = "",
) -> Rect:
    """Draw a (optionally bordered, titled) box and return its inner area."""
    if rect.width <= 0 or rect.height <= 0:
        return Rect(rect.x, rect.y, 0, 0)
    if not borders:
        if title:
            screen.put_text(rect.x, rect.y, title, title_style, rect.width)
            return Rect(rect.x, rect.y + 1, rect.width, max(0, rect.height - 1))
        return rect

    right = rect.x + rect.width - 1
    bottom = rect.y + rect.height - 1
    for x in range(rect.x + 1, right):
        screen.put(x, rect.y, "─", border_style)
        screen.put(x, bottom, "─", border_style)
    for y in range(rect.y + 1, bottom):
        screen.put(rect.x, y, "│", border_style)
        screen.put(right, y, "│", border_style)
    screen.put(rect.x, rect.y, "┌", border_style)
    screen.put(right, rect.y, "┐", border_style)
    screen.put(rect.x, bottom, "└", border_style)
    screen.put(right, bottom, "┘", border_style)
    if title and rect.width > 2:
        screen.put_text(rect.x + 1, rect.y, title, title_style, rect.width - 2)
    return rect.inner()


def render_paragraph(
    screen: ScreenBuffer,
    rect: Rect,
    text: str,
    style: str = "",
    *,
    wrap: bool = False,
    center: bool = False,
) -> None:
    lines: list[str] = []
    for raw_line in text.split("\n"):
        if wrap and rect.width > 0:
            lines.extend(textwrap.wrap(raw_line, rect.width) or [""])
        else:
            lines.append(raw_line)
    for row, line in enumerate(lines[: rect.height]):
        line = clip_text(line, rect.width)
        x = rect.x
        if center:
            x += max(0, (rect.width - sum(char_display_width(ch) for ch in line)) // 2)
        screen.put_text(x, rect.y + row, line, style, rect.width)


def list_offset_for(selected: int | None, offset: int, visible_rows: int, count: int) -> int:
    """Return the scroll offset that keeps ``selected`` inside the viewport."""
    visible_rows = max(1, visible_rows)
    if selected is not None:
        if selected < offset:
            offset = selected
        elif selected >= offset + visible_rows:
            offset = selected - visible_rows + 1
    return max(0, min(offset, max(0, count - visible_rows)))


def render_list(
    screen: ScreenBuffer,
    rect: Rect,
    labels: list[str],
    selected: int | None,
    *,
    offset: int = 0,
    highlight_symbol: str = HIGHLIGHT_SYMBOL,
    highlight_style: str = "",
    styles: list[str] | None = None,
) -> int:
    """Paint list rows and return the scroll offset actually used.

    While an entry is selected every row is indented by the width of
    ``highlight_symbol`` and the selected row carries the symbol.
    """
    if rect.height <= 0 or rect.width <= 0:
        return offset
    offset = list_offset_for(selected, offset, rect.height, len(labels))
    indent = len(highlight_symbol) if selected is not None else 0
    for row in range(rect.height):
        idx = offset + row
        if idx >= len(labels):
            break
        y = rect.y + row
        is_selected = idx == selected
        style = styles[idx] if styles is not None and idx < len(styles) else ""
        if is_selected:
            style = highlight_style or style
            screen.fill(Rect(rect.x, y, rect.width, 1), " ", style)
            screen.put_text(rect.x, y, highlight_symbol, style, rect.width)
        screen.put_text(rect.x + indent, y, labels[idx], style, max(0, rect.width - indent))
    return offset
