#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""
Conversion of ASCII line-art into box-drawing glyphs.

The pass walks the grid in row-major order:

- ``|`` becomes ``│`` and ``-`` becomes ``─``.
- ``+`` and ``*`` become the glyph matching their connected neighbors, with
  square corners for ``+`` and rounded corners for ``*``.
- Every other character is left as is.

Examples
--------
>>> print(convert_text("+--+\\n|  |\\n+--+"))
┌──┐
│  │
└──┘
"""

import logging

from lineart.glyphs import (
    FLAG_UP,
    FLAG_DOWN,
    FLAG_LEFT,
    FLAG_RIGHT,
    VERTICAL_MARKER,
    HORIZONTAL_MARKER,
    JUNCTION_MARKERS,
    VERTICAL,
    HORIZONTAL,
    is_connector,
    glyph_for,
)
from lineart.grid import Grid

logger = logging.getLogger(__name__)


def neighbor_mask(grid: Grid, row: int, col: int) -> int:
    """Return the bitmask of connectors above, below, left and right of a cell."""
    mask = 0
    if is_connector(grid.get(row - 1, col)):
        mask |= FLAG_UP
    if is_connector(grid.get(row + 1, col)):
        mask |= FLAG_DOWN
    if is_connector(grid.get(row, col - 1)):
        mask |= FLAG_LEFT
    if is_connector(grid.get(row, col + 1)):
        mask |= FLAG_RIGHT
    return mask


def convert_grid(grid: Grid) -> Grid:
    """Replace line-art markers in place and return the same grid.

    Junctions look at the current grid contents, so cells are always visited
    top to bottom, left to right.
    """
    replaced = 0
    for row in range(grid.height):
        for col in range(grid.width):
            ch = grid.get(row, col)
            if ch == VERTICAL_MARKER:
                grid.set(row, col, VERTICAL)
            elif ch == HORIZONTAL_MARKER:
                grid.set(row, col, HORIZONTAL)
            elif ch in JUNCTION_MARKERS:
                grid.set(row, col, glyph_for(ch, neighbor_mask(grid, row, col)))
            else:
                continue
            replaced += 1

    logger.debug(f"Replaced {replaced} cells in {grid!r}")
    return grid


def convert_bytes(data: bytes) -> str:
    """Convert raw file content and return the resulting text."""
    return convert_grid(Grid.from_bytes(data)).serialize()


def convert_text(text: str) -> str:
    """Convert decoded text and return the resulting text."""
    return convert_grid(Grid.from_text(text)).serialize()
