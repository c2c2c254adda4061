#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""
Box-drawing glyph definitions.

This module defines the neighbor flags, the connectivity classifier and the
two glyph tables (square and rounded corners) used by the conversion pass.

References
----------
- Unicode Standard, Box Drawing block (U+2500..U+257F)
"""

# Constants ----------------------------------------------------------------------------------------

ENCODING = "utf-8"

# Returned by Grid.get() for cells outside a row
NO_CHAR = "\x00"

# Neighbor flags (one bit per direction)
FLAG_UP    = 1 << 0
FLAG_DOWN  = 1 << 1
FLAG_LEFT  = 1 << 2
FLAG_RIGHT = 1 << 3

MASK_COUNT = 16

# ASCII markers
VERTICAL_MARKER   = "|"
HORIZONTAL_MARKER = "-"
SQUARE_MARKER     = "+"
ROUNDED_MARKER    = "*"

JUNCTION_MARKERS = (SQUARE_MARKER, ROUNDED_MARKER)

# Unicode box-drawing block
BOX_DRAWING_FIRST = 0x2500
BOX_DRAWING_LAST  = 0x257F

VERTICAL   = "│"
HORIZONTAL = "─"

# Glyph Tables -------------------------------------------------------------------------------------

SQUARE_GLYPHS = (
    "+",  # (none)
    "╵",  #                  Up
    "╷",  #             Down
    "│",  #             Down Up
    "╴",  #        Left
    "┘",  #        Left      Up
    "┐",  #        Left Down
    "┤",  #        Left Down Up
    "╶",  # Right
    "└",  # Right           Up
    "┌",  # Right      Down
    "├",  # Right      Down Up
    "─",  # Right Left
    "┴",  # Right Left      Up
    "┬",  # Right Left Down
    "┼",  # Right Left Down Up
)

ROUNDED_GLYPHS = (
    "+",  # (none)
    "╵",  #                  Up
    "╷",  #             Down
    "│",  #             Down Up
    "╴",  #        Left
    "╯",  #        Left      Up
    "╮",  #        Left Down
    "┤",  #        Left Down Up
    "╶",  # Right
    "╰",  # Right           Up
    "╭",  # Right      Down
    "├",  # Right      Down Up
    "─",  # Right Left
    "┴",  # Right Left      Up
    "┬",  # Right Left Down
    "┼",  # Right Left Down Up
)

STYLE_TABLES = {
    SQUARE_MARKER:  SQUARE_GLYPHS,
    ROUNDED_MARKER: ROUNDED_GLYPHS,
}

# Helpers ------------------------------------------------------------------------------------------

def is_connector(ch):
    """
    Tell whether a character joins a junction.

    Raw ASCII markers and glyphs from the box-drawing block both count, so a
    converted diagram still connects when it is converted again.

    Parameters
    ----------
    ch : str
        Single character, or ``NO_CHAR`` for an out-of-bounds cell.

    Returns
    -------
    bool
        True if the character is a line segment or junction.

    Examples
    --------
    >>> is_connector("-")
    True
    >>> is_connector("┌")
    True
    >>> is_connector(NO_CHAR)
    False
    """
    if len(ch) != 1:
        return False
    if ch in (VERTICAL_MARKER, HORIZONTAL_MARKER, SQUARE_MARKER, ROUNDED_MARKER):
        return True
    return BOX_DRAWING_FIRST <= ord(ch) <= BOX_DRAWING_LAST


def glyph_for(marker, mask):
    """
    Look up the glyph replacing a junction marker.

    Parameters
    ----------
    marker : str
        ``"+"`` selects square corners, ``"*"`` rounded corners.
    mask : int
        Neighbor bitmask built from ``FLAG_UP``, ``FLAG_DOWN``,
        ``FLAG_LEFT`` and ``FLAG_RIGHT``.

    Returns
    -------
    str
        The box-drawing glyph for that exact set of connections.

    Raises
    ------
    ValueError
        If ``marker`` is not a junction marker or ``mask`` is out of range.
    """
    table = STYLE_TABLES.get(marker)
    if table is None:
        raise ValueError(f"Not a junction marker: {marker!r}")
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"Neighbor mask out of range: {mask}")
    return table[mask]
