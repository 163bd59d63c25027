"""Capability interface for terminal image protocols.

The runtime only ever talks to an adapter through ``ImageProtocol``; the
drawable returned by ``bind`` is opaque to everything except the adapter
that produced it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from PIL import Image

if TYPE_CHECKING:
    from ..render.layout import Rect
    from ..render.widgets import ScreenBuffer


class Drawable(Protocol):
    """Opaque, protocol-encoded image handle."""


class ImageProtocol(Protocol):
    name: str

    def bind(self, image: Image.Image) -> Drawable:
        """Wrap a decoded raster image into a drawable handle."""
        ...

    def paint(self, drawable: Drawable, region: Rect, screen: ScreenBuffer) -> None:
        """Paint in-band cell content for ``drawable`` into ``screen``."""
        ...

    def place(self, drawable: Drawable, region: Rect) -> str:
        """Return out-of-band escape output that shows ``drawable`` over ``region``."""
        ...

    def clear(self) -> str:
        """Return escape output removing every out-of-band placement."""
        ...


def fit_within(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    """Scale ``size`` to fit inside ``box`` preserving aspect ratio."""
    width, height = size
    box_w, box_h = box
    if width <= 0 or height <= 0 or box_w <= 0 or box_h <= 0:
        return (0, 0)
    scale = min(box_w / width, box_h / height)
    return (max(1, int(width * scale)), max(1, int(height * scale)))
