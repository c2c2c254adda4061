#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""
Character grid over the lines of a text file.

The grid keeps each line at its original length. Reads outside a row return
``NO_CHAR`` and writes outside a row are ignored, so neighbor lookups at the
edges of a diagram need no special casing.
"""

import logging
from typing import List

from lineart.glyphs import ENCODING, NO_CHAR

logger = logging.getLogger(__name__)


class Grid:
    """Row-major store of characters, addressable by (row, col).

    Attributes:
        rows: One list of characters per input line. Rows are never padded.
    """

    def __init__(self, rows: List[List[str]]):
        self.rows = rows
        self._width = max((len(row) for row in rows), default=0)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Build a grid from decoded text, splitting on newlines only."""
        return cls([list(line) for line in text.split("\n")])

    @classmethod
    def from_bytes(cls, data: bytes) -> "Grid":
        """Build a grid from raw file content.

        Invalid UTF-8 sequences decode to U+FFFD instead of failing.
        """
        grid = cls.from_text(data.decode(ENCODING, errors="replace"))
        logger.debug(f"Loaded {grid!r} from {len(data)} bytes")
        return grid

    @property
    def width(self) -> int:
        """Length of the longest row at construction time."""
        return self._width

    @property
    def height(self) -> int:
        return len(self.rows)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])

    def get(self, row: int, col: int) -> str:
        """Return the character at (row, col), or NO_CHAR outside that row."""
        if not self._in_bounds(row, col):
            return NO_CHAR
        return self.rows[row][col]

    def set(self, row: int, col: int, ch: str) -> None:
        """Overwrite the character at (row, col); no-op outside that row."""
        if self._in_bounds(row, col):
            self.rows[row][col] = ch

    def serialize(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
