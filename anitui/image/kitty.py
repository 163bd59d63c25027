"""Kitty graphics protocol adapter.

Images are resized with Pillow to the target region's pixel box, encoded as
PNG, and transmitted inline in base64 chunks. Encodings are cached per
region size on the drawable so re-placing an unchanged image costs nothing.
"""

from __future__ import annotations

import base64
import io
import logging
import math
from dataclasses import dataclass, field

from PIL import Image

from ..render.layout import Rect
from ..render.widgets import ScreenBuffer
from .protocol import fit_within

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096
DEFAULT_CELL_PIXELS = (8, 16)


@dataclass(frozen=True)
class KittyPayload:
    data: str
    columns: int
    rows: int


@dataclass(eq=False)
class KittyDrawable:
    image: Image.Image
    encoded: dict[tuple[int, int], KittyPayload] = field(default_factory=dict)


def encode_png(image: Image.Image) -> str:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


def transmit_sequence(payload: KittyPayload) -> str:
    """Build chunked transmit-and-display escape codes for ``payload``."""
    chunks = [payload.data[i : i + CHUNK_SIZE] for i in range(0, len(payload.data), CHUNK_SIZE)] or [""]
    out: list[str] = []
    for idx, chunk in enumerate(chunks):
        more = 1 if idx < len(chunks) - 1 else 0
        if idx == 0:
            control = f"a=T,f=100,q=2,c={payload.columns},r={payload.rows},m={more}"
        else:
            control = f"m={more}"
        out.append(f"\x1b_G{control};{chunk}\x1b\\")
    return "".join(out)


class KittyImageProtocol:
    name = "kitty"

    def __init__(self, cell_pixels: tuple[int, int] = DEFAULT_CELL_PIXELS) -> None:
        self.cell_width = max(1, cell_pixels[0])
        self.cell_height = max(1, cell_pixels[1])

    def bind(self, image: Image.Image) -> KittyDrawable:
        return KittyDrawable(image=image.convert("RGBA"))

    def payload_for(self, drawable: KittyDrawable, region: Rect) -> KittyPayload | None:
        key = (region.width, region.height)
        cached = drawable.encoded.get(key)
        if cached is not None:
            return cached
        box = (region.width * self.cell_width, region.height * self.cell_height)
        target = fit_within(drawable.image.size, box)
        if target == (0, 0):
            return None
        resized = drawable.image.resize(target, Image.Resampling.LANCZOS)
        payload = KittyPayload(
            data=encode_png(resized),
            columns=max(1, min(region.width, math.ceil(target[0] / self.cell_width))),
            rows=max(1, min(region.height, math.ceil(target[1] / self.cell_height))),
        )
        drawable.encoded[key] = payload
        logger.debug("Encoded kitty payload %sx%s px for region %s", target[0], target[1], key)
        return payload

    def paint(self, drawable: KittyDrawable, region: Rect, screen: ScreenBuffer) -> None:
        screen.fill(region)

    def place(self, drawable: KittyDrawable, region: Rect) -> str:
        payload = self.payload_for(drawable, region)
        if payload is None:
            return ""
        # Save cursor, move to the region origin (1-based), draw, restore.
        return f"\x1b7\x1b[{region.y + 1};{region.x + 1}H" + transmit_sequence(payload) + "\x1b8"

    def clear(self) -> str:
        return "\x1b_Ga=d,d=A,q=2;\x1b\\"
