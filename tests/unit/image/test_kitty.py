"""Tests for kitty graphics escape generation."""

from __future__ import annotations

import base64
import unittest

from PIL import Image

from anitui.image.kitty import (
    CHUNK_SIZE,
    KittyDrawable,
    KittyImageProtocol,
    KittyPayload,
    transmit_sequence,
)
from anitui.render.layout import Rect
from anitui.render.widgets import ScreenBuffer


class TransmitSequenceTests(unittest.TestCase):
    def test_single_chunk(self) -> None:
        self.assertEqual(
            transmit_sequence(KittyPayload(data="QUJD", columns=3, rows=2)),
            "\x1b_Ga=T,f=100,q=2,c=3,r=2,m=0;QUJD\x1b\\",
        )

    def test_large_payload_is_chunked(self) -> None:
        data = "A" * (CHUNK_SIZE + 10)
        sequence = transmit_sequence(KittyPayload(data=data, columns=1, rows=1))
        self.assertTrue(sequence.startswith("\x1b_Ga=T,f=100,q=2,c=1,r=1,m=1;"))
        self.assertTrue(sequence.endswith("\x1b_Gm=0;" + "A" * 10 + "\x1b\\"))
        self.assertEqual(sequence.count("\x1b_G"), 2)


class KittyImageProtocolTests(unittest.TestCase):
    def setUp(self) -> None:
        self.protocol = KittyImageProtocol((8, 16))
        self.drawable = self.protocol.bind(Image.new("RGB", (16, 32), (200, 10, 10)))

    def test_bind_converts_to_rgba(self) -> None:
        self.assertIsInstance(self.drawable, KittyDrawable)
        self.assertEqual(self.drawable.image.mode, "RGBA")

    def test_place_positions_and_sizes_image(self) -> None:
        output = self.protocol.place(self.drawable, Rect(2, 3, 4, 4))
        self.assertTrue(output.startswith("\x1b7\x1b[4;3H\x1b_Ga=T,f=100,q=2,c=4,r=4,m=0;"))
        self.assertTrue(output.endswith("\x1b\\\x1b8"))

        encoded = output.split(";", 2)[-1]
        png = base64.b64decode(encoded[: encoded.index("\x1b")])
        self.assertTrue(png.startswith(b"\x89PNG"))

    def test_payload_is_cached_per_region_size(self) -> None:
        first = self.protocol.payload_for(self.drawable, Rect(0, 0, 4, 4))
        moved = self.protocol.payload_for(self.drawable, Rect(9, 9, 4, 4))
        resized = self.protocol.payload_for(self.drawable, Rect(0, 0, 2, 2))
        self.assertIs(first, moved)
        self.assertIsNot(first, resized)
        self.assertEqual((resized.columns, resized.rows), (2, 2))

    def test_empty_region_places_nothing(self) -> None:
        self.assertEqual(self.protocol.place(self.drawable, Rect(0, 0, 0, 3)), "")

    def test_paint_blanks_region_and_clear_deletes_all(self) -> None:
        screen = ScreenBuffer(4, 2)
        screen.put_text(0, 0, "xxxx")
        self.protocol.paint(self.drawable, Rect(1, 0, 2, 1), screen)
        self.assertEqual(screen.row_text(0), "x  x")
        self.assertEqual(self.protocol.clear(), "\x1b_Ga=d,d=A,q=2;\x1b\\")


if __name__ == "__main__":
    unittest.main()
