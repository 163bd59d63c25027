"""Rendering primitives: cell buffer, widgets, and layout geometry.

``anitui.render.composer`` builds whole frames on top of these and is imported
explicitly so the image adapters can depend on the primitives alone.
"""

from .ansi import ANSI_ESCAPE_RE, char_display_width, clip_text, display_width, strip_ansi
from .layout import Length, Min, Percentage, Rect, split_horizontal, split_vertical
from .widgets import ScreenBuffer, render_block, render_list, render_paragraph

__all__ = [
    "ANSI_ESCAPE_RE",
    "Length",
    "Min",
    "Percentage",
    "Rect",
    "ScreenBuffer",
    "char_display_width",
    "clip_text",
    "display_width",
    "render_block",
    "render_list",
    "render_paragraph",
    "split_horizontal",
    "split_vertical",
    "strip_ansi",
]
