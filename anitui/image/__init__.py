"""Terminal image support: protocol adapters, selection binding, posters."""

from .binding import ImageBinding
from .halfblock import HalfBlockImageProtocol
from .kitty import KittyImageProtocol
from .posters import make_poster
from .protocol import Drawable, ImageProtocol


def select_image_protocol(
    kitty_supported: bool,
    cell_pixels: tuple[int, int] | None = None,
) -> ImageProtocol:
    """Pick the single adapter used for this session."""
    if kitty_supported:
        if cell_pixels is None:
            return KittyImageProtocol()
        return KittyImageProtocol(cell_pixels)
    return HalfBlockImageProtocol()


__all__ = [
    "Drawable",
    "HalfBlockImageProtocol",
    "ImageBinding",
    "ImageProtocol",
    "KittyImageProtocol",
    "make_poster",
    "select_image_protocol",
]
