#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""
LineArt: ASCII line-art to Unicode box-drawing conversion.

Diagrams drawn with ``-``, ``|``, ``+`` and ``*`` are turned into connected
box-drawing glyphs while keeping their layout:

- ``-`` and ``|`` become horizontal and vertical lines.
- ``+`` becomes the square corner, tee or cross matching its neighbors.
- ``*`` does the same with rounded corners.

Architecture
------------
bytes → Grid → conversion pass (glyph tables) → text

Examples
--------
>>> from lineart import convert_text
>>> print(convert_text("*--*\\n|  |\\n*--*"))
╭──╮
│  │
╰──╯
"""

__version__ = "0.1.0"

from lineart.grid import Grid
from lineart.glyphs import is_connector, glyph_for, SQUARE_GLYPHS, ROUNDED_GLYPHS
from lineart.convert import neighbor_mask, convert_grid, convert_bytes, convert_text

__all__ = [
    "Grid",
    "is_connector",
    "glyph_for",
    "SQUARE_GLYPHS",
    "ROUNDED_GLYPHS",
    "neighbor_mask",
    "convert_grid",
    "convert_bytes",
    "convert_text",
]
