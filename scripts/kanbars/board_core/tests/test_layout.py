from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from board_core.layout import Breakpoints, select_layout, select_layout_kind  # noqa: E402
from board_core.models import LayoutKind  # noqa: E402


class LayoutKindTests(unittest.TestCase):
    def test_vertical(self):
        self.assertEqual(select_layout_kind(75), LayoutKind.VERTICAL)
        self.assertEqual(select_layout_kind(79), LayoutKind.VERTICAL)

    def test_two_column(self):
        self.assertEqual(select_layout_kind(80), LayoutKind.TWO_COLUMN)
        self.assertEqual(select_layout_kind(119), LayoutKind.TWO_COLUMN)

    def test_four_column(self):
        self.assertEqual(select_layout_kind(120), LayoutKind.FOUR_COLUMN)
        self.assertEqual(select_layout_kind(240), LayoutKind.FOUR_COLUMN)

    def test_custom_breakpoints(self):
        breakpoints = Breakpoints(two_column=60, four_column=100)
        self.assertEqual(select_layout_kind(59, breakpoints), LayoutKind.VERTICAL)
        self.assertEqual(select_layout_kind(60, breakpoints), LayoutKind.TWO_COLUMN)
        self.assertEqual(select_layout_kind(100, breakpoints), LayoutKind.FOUR_COLUMN)


class SelectLayoutTests(unittest.TestCase):
    def test_narrow_is_vertical_regardless_of_lanes(self):
        for lanes in range(0, 5):
            layout = select_layout(75, lanes)
            self.assertEqual(layout.kind, LayoutKind.VERTICAL)
            self.assertEqual(layout.column_count, 1)
            self.assertEqual(layout.column_width, 73)

    def test_two_column_with_three_lanes(self):
        layout = select_layout(100, 3)
        self.assertEqual(layout.kind, LayoutKind.TWO_COLUMN)
        self.assertEqual(layout.column_count, 2)
        self.assertEqual(layout.column_width, 48)

    def test_four_column(self):
        layout = select_layout(123, 4)
        self.assertEqual(layout.column_count, 4)
        self.assertEqual(layout.column_width, 29)

    def test_degrades_to_visible_lane_count(self):
        self.assertEqual(select_layout(150, 1).column_count, 1)
        self.assertEqual(select_layout(150, 1).column_width, 148)
        self.assertEqual(select_layout(150, 3).column_count, 3)
        self.assertEqual(select_layout(150, 3).column_width, 48)
        self.assertEqual(select_layout(150, 0).column_count, 1)

    def test_non_positive_width_is_degenerate_vertical(self):
        for width in (-10, 0, 1, 2):
            with self.subTest(width=width):
                layout = select_layout(width, 4)
                self.assertEqual(layout.kind, LayoutKind.VERTICAL)
                self.assertEqual(layout.column_width, 0)
                self.assertTrue(layout.is_degenerate)

    def test_falls_back_to_vertical_when_columns_do_not_fit(self):
        breakpoints = Breakpoints(two_column=3, four_column=5)
        layout = select_layout(6, 4, breakpoints)
        self.assertEqual(layout.kind, LayoutKind.VERTICAL)
        self.assertEqual(layout.column_count, 1)
        self.assertEqual(layout.column_width, 4)

    def test_width_never_negative(self):
        for lanes in range(0, 5):
            for width in range(-5, 300):
                layout = select_layout(width, lanes)
                self.assertGreaterEqual(layout.column_width, 0)
                if layout.column_width == 0:
                    self.assertEqual(layout.kind, LayoutKind.VERTICAL)

    def test_monotonic_within_strategy(self):
        for lanes in range(1, 5):
            previous = None
            for width in range(0, 300):
                layout = select_layout(width, lanes)
                if previous is not None and previous.kind == layout.kind:
                    self.assertGreaterEqual(layout.column_width, previous.column_width)
                previous = layout

    def test_monotonic_for_single_lane(self):
        widths = [select_layout(width, 1).column_width for width in range(-5, 300)]
        self.assertEqual(widths, sorted(widths))


if __name__ == "__main__":
    unittest.main()
