from __future__ import annotations

import unittest

from anitui.render.composer import compose_regions
from anitui.render.layout import Length, Min, Percentage, Rect, solve_sizes, split_horizontal, split_vertical


class SolveSizesTests(unittest.TestCase):
    def test_min_absorbs_leftover_space(self) -> None:
        self.assertEqual(solve_sizes(24, [Length(1), Length(3), Min(1), Length(1)]), [1, 3, 19, 1])

    def test_percentages_give_rounding_remainder_to_last_slot(self) -> None:
        self.assertEqual(solve_sizes(81, [Percentage(50), Percentage(30), Percentage(20)]), [40, 24, 17])

    def test_overflow_is_trimmed_from_the_end(self) -> None:
        self.assertEqual(solve_sizes(3, [Length(1), Length(3), Min(1), Length(1)]), [1, 2, 0, 0])

    def test_zero_total(self) -> None:
        self.assertEqual(solve_sizes(0, [Length(2), Min(1)]), [0, 0])
        self.assertEqual(solve_sizes(5, []), [])


class SplitTests(unittest.TestCase):
    def test_split_vertical_stacks_rows(self) -> None:
        top, bottom = split_vertical(Rect(2, 1, 10, 6), [Length(2), Min(0)])
        self.assertEqual(top, Rect(2, 1, 10, 2))
        self.assertEqual(bottom, Rect(2, 3, 10, 4))

    def test_split_horizontal_places_columns(self) -> None:
        left, right = split_horizontal(Rect(0, 5, 10, 3), [Percentage(60), Percentage(40)])
        self.assertEqual(left, Rect(0, 5, 6, 3))
        self.assertEqual(right, Rect(6, 5, 4, 3))

    def test_rect_inner(self) -> None:
        self.assertEqual(Rect(0, 0, 10, 4).inner(), Rect(1, 1, 8, 2))
        self.assertEqual(Rect(0, 0, 1, 1).inner(), Rect(1, 1, 0, 0))


class ComposeRegionsTests(unittest.TestCase):
    def test_regions_with_image_pane(self) -> None:
        regions = compose_regions(Rect(0, 0, 80, 24), show_image=True)
        self.assertEqual(regions.header, Rect(0, 0, 80, 1))
        self.assertEqual(regions.input, Rect(0, 1, 80, 3))
        self.assertEqual(regions.list, Rect(0, 4, 40, 19))
        self.assertEqual(regions.details, Rect(40, 4, 24, 19))
        self.assertEqual(regions.image, Rect(64, 4, 16, 19))
        self.assertEqual(regions.status, Rect(0, 23, 80, 1))

    def test_regions_without_image_pane(self) -> None:
        regions = compose_regions(Rect(0, 0, 80, 24), show_image=False)
        self.assertIsNone(regions.image)
        self.assertEqual(regions.list, Rect(0, 4, 48, 19))
        self.assertEqual(regions.details, Rect(48, 4, 32, 19))


if __name__ == "__main__":
    unittest.main()
