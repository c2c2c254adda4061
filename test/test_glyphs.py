#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""
Tests for the connectivity classifier and the glyph tables.
"""

import unittest

from lineart.glyphs import (
    FLAG_UP,
    FLAG_DOWN,
    FLAG_LEFT,
    FLAG_RIGHT,
    NO_CHAR,
    SQUARE_GLYPHS,
    ROUNDED_GLYPHS,
    is_connector,
    glyph_for,
)

# Masks with exactly two adjacent directions set
CORNER_MASKS = {
    FLAG_LEFT | FLAG_UP,
    FLAG_LEFT | FLAG_DOWN,
    FLAG_RIGHT | FLAG_UP,
    FLAG_RIGHT | FLAG_DOWN,
}


class TestIsConnector(unittest.TestCase):
    """Test which characters join a junction."""

    def test_ascii_markers(self):
        for ch in "|-+*":
            self.assertTrue(is_connector(ch), ch)

    def test_box_drawing_block(self):
        """The whole U+2500..U+257F range should count as connectors."""
        self.assertTrue(is_connector("─"))
        self.assertTrue(is_connector("┼"))
        self.assertTrue(is_connector("╭"))
        self.assertTrue(is_connector("╿"))

    def test_outside_box_drawing_block(self):
        self.assertFalse(is_connector("⓿"))
        self.assertFalse(is_connector("▀"))

    def test_other_characters(self):
        for ch in ("a", " ", "=", "/", "\\", "\r", "�"):
            self.assertFalse(is_connector(ch), repr(ch))

    def test_sentinel(self):
        self.assertFalse(is_connector(NO_CHAR))


class TestGlyphTables(unittest.TestCase):
    """Test the square and rounded lookup tables."""

    def test_tables_have_sixteen_entries(self):
        self.assertEqual(len(SQUARE_GLYPHS), 16)
        self.assertEqual(len(ROUNDED_GLYPHS), 16)

    def test_isolated_junction_is_unchanged(self):
        self.assertEqual(SQUARE_GLYPHS[0], "+")
        self.assertEqual(ROUNDED_GLYPHS[0], "+")

    def test_cross(self):
        mask = FLAG_UP | FLAG_DOWN | FLAG_LEFT | FLAG_RIGHT
        self.assertEqual(SQUARE_GLYPHS[mask], "┼")
        self.assertEqual(ROUNDED_GLYPHS[mask], "┼")

    def test_square_corners(self):
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT | FLAG_DOWN], "┌")
        self.assertEqual(SQUARE_GLYPHS[FLAG_LEFT | FLAG_DOWN], "┐")
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT | FLAG_UP], "└")
        self.assertEqual(SQUARE_GLYPHS[FLAG_LEFT | FLAG_UP], "┘")

    def test_rounded_corners(self):
        self.assertEqual(ROUNDED_GLYPHS[FLAG_RIGHT | FLAG_DOWN], "╭")
        self.assertEqual(ROUNDED_GLYPHS[FLAG_LEFT | FLAG_DOWN], "╮")
        self.assertEqual(ROUNDED_GLYPHS[FLAG_RIGHT | FLAG_UP], "╰")
        self.assertEqual(ROUNDED_GLYPHS[FLAG_LEFT | FLAG_UP], "╯")

    def test_straight_lines(self):
        self.assertEqual(SQUARE_GLYPHS[FLAG_UP | FLAG_DOWN], "│")
        self.assertEqual(SQUARE_GLYPHS[FLAG_LEFT | FLAG_RIGHT], "─")

    def test_tees(self):
        self.assertEqual(SQUARE_GLYPHS[FLAG_LEFT | FLAG_DOWN | FLAG_UP], "┤")
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT | FLAG_DOWN | FLAG_UP], "├")
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT | FLAG_LEFT | FLAG_UP], "┴")
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT | FLAG_LEFT | FLAG_DOWN], "┬")

    def test_half_lines(self):
        """Single-direction masks should point towards their neighbor."""
        self.assertEqual(SQUARE_GLYPHS[FLAG_UP], "╵")
        self.assertEqual(SQUARE_GLYPHS[FLAG_DOWN], "╷")
        self.assertEqual(SQUARE_GLYPHS[FLAG_LEFT], "╴")
        self.assertEqual(SQUARE_GLYPHS[FLAG_RIGHT], "╶")

    def test_styles_differ_only_on_corners(self):
        """Square and rounded tables should differ exactly on single corners."""
        for mask in range(16):
            with self.subTest(mask=mask):
                if mask in CORNER_MASKS:
                    self.assertNotEqual(SQUARE_GLYPHS[mask], ROUNDED_GLYPHS[mask])
                else:
                    self.assertEqual(SQUARE_GLYPHS[mask], ROUNDED_GLYPHS[mask])

    def test_non_zero_entries_are_box_drawing(self):
        for mask in range(1, 16):
            self.assertTrue(is_connector(SQUARE_GLYPHS[mask]))
            self.assertTrue(is_connector(ROUNDED_GLYPHS[mask]))


class TestGlyphFor(unittest.TestCase):
    """Test marker based style selection."""

    def test_plus_selects_square(self):
        self.assertEqual(glyph_for("+", FLAG_RIGHT | FLAG_DOWN), "┌")

    def test_star_selects_rounded(self):
        self.assertEqual(glyph_for("*", FLAG_RIGHT | FLAG_DOWN), "╭")

    def test_unknown_marker(self):
        with self.assertRaises(ValueError):
            glyph_for("#", 0)

    def test_mask_out_of_range(self):
        with self.assertRaises(ValueError):
            glyph_for("+", 16)
        with self.assertRaises(ValueError):
            glyph_for("+", -1)


if __name__ == '__main__':
    unittest.main()
