"""Fallback image adapter drawing with upper-half-block characters.

Each terminal cell shows two vertically stacked pixels: the top one as the
24-bit foreground colour of ``▀`` and the bottom one as the background.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from ..render.layout import Rect
from ..render.widgets import ScreenBuffer
from .protocol import fit_within

HALF_BLOCK = "▀"

Row = list[tuple[str, str]]


@dataclass(eq=False)
class HalfBlockDrawable:
    image: Image.Image
    rendered: dict[tuple[int, int], list[Row]] = field(default_factory=dict)


def render_halfblocks(image: Image.Image, columns: int, rows: int) -> list[Row]:
    """Return cell rows of ``(char, sgr_style)`` fitting ``columns`` x ``rows``."""
    target = fit_within(image.size, (columns, rows * 2))
    if target == (0, 0):
        return []
    img = image.convert("RGB").resize(target, Image.Resampling.LANCZOS)
    pixels = img.load()
    out: list[Row] = []
    for y in range(0, img.height, 2):
        row: Row = []
        for x in range(img.width):
            top = pixels[x, y]
            bottom = pixels[x, y + 1] if y + 1 < img.height else top
            style = f"\033[38;2;{top[0]};{top[1]};{top[2]}m\033[48;2;{bottom[0]};{bottom[1]};{bottom[2]}m"
            row.append((HALF_BLOCK, style))
        out.append(row)
    return out


class HalfBlockImageProtocol:
    name = "halfblock"

    def bind(self, image: Image.Image) -> HalfBlockDrawable:
        return HalfBlockDrawable(image=image)

    def rows_for(self, drawable: HalfBlockDrawable, region: Rect) -> list[Row]:
        key = (region.width, region.height)
        rows = drawable.rendered.get(key)
        if rows is None:
            rows = render_halfblocks(drawable.image, region.width, region.height)
            drawable.rendered[key] = rows
        return rows

    def paint(self, drawable: HalfBlockDrawable, region: Rect, screen: ScreenBuffer) -> None:
        rows = self.rows_for(drawable, region)
        if not rows:
            return
        left = region.x + max(0, (region.width - len(rows[0])) // 2)
        for dy, row in enumerate(rows[: region.height]):
            for dx, (ch, style) in enumerate(row):
                screen.put(left + dx, region.y + dy, ch, style)

    def place(self, drawable: HalfBlockDrawable, region: Rect) -> str:
        return ""

    def clear(self) -> str:
        return ""
