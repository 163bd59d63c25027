"""Placeholder poster artwork generated with Pillow."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

POSTER_SIZE = (240, 360)
POSTER_MARGIN = 16
TEXT_LINE_GAP = 6


def _text_color(background: tuple[int, int, int]) -> tuple[int, int, int]:
    r, g, b = background
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return (20, 20, 20) if luminance > 150 else (245, 245, 245)


def make_poster(
    title: str,
    color: tuple[int, int, int],
    size: tuple[int, int] = POSTER_SIZE,
) -> Image.Image:
    """Render a solid-colour poster with a frame and the title, one word per line."""
    width, height = size
    image = Image.new("RGB", (max(1, width), max(1, height)), color)
    draw = ImageDraw.Draw(image)
    ink = _text_color(color)
    draw.rectangle(
        (POSTER_MARGIN // 2, POSTER_MARGIN // 2, width - POSTER_MARGIN // 2, height - POSTER_MARGIN // 2),
        outline=ink,
        width=2,
    )

    font = ImageFont.load_default()
    y = POSTER_MARGIN * 2
    for word in title.split():
        left, top, right, bottom = draw.textbbox((0, 0), word, font=font)
        x = max(POSTER_MARGIN, (width - (right - left)) // 2)
        draw.text((x, y), word, fill=ink, font=font)
        y += (bottom - top) + TEXT_LINE_GAP
        if y >= height - POSTER_MARGIN:
            break
    return image
