from __future__ import annotations

from typing import Optional, Tuple

# 100 km tile codes; row = floor(northing / 100000), column = floor(easting / 100000)
TILE_LETTERS: Tuple[Tuple[str, ...], ...] = (
    ("SV", "SW", "SX", "SY", "SZ", "TV", "TW"),
    ("SQ", "SR", "SS", "ST", "SU", "TQ", "TR"),
    ("SL", "SM", "SN", "SO", "SP", "TL", "TM"),
    ("SF", "SG", "SH", "SJ", "SK", "TF", "TG"),
    ("SA", "SB", "SC", "SD", "SE", "TA", "TB"),
    ("NV", "NW", "NX", "NY", "NZ", "OV", "OW"),
    ("NQ", "NR", "NS", "NT", "NU", "OQ", "OR"),
    ("NL", "NM", "NN", "NO", "NP", "OL", "OM"),
    ("NF", "NG", "NH", "NJ", "NK", "OF", "OG"),
    ("NA", "NB", "NC", "ND", "NE", "OA", "OB"),
    ("HV", "HW", "HX", "HY", "HZ", "JV", "JW"),
    ("HQ", "HR", "HS", "HT", "HU", "JQ", "JR"),
    ("HL", "HM", "HN", "HO", "HP", "JL", "JM"),
)

TILE_SIZE = 100000
MAJOR_TILE_SIZE = 500000

# 5x5 letter grid read bottom row first, left to right; 'I' is not used
GRID_LETTERS = "VWXYZQRSTULMNOPFGHJKABCDE"

# First letters of the 500 km tiles that cover the grid
MAJOR_LETTERS = "THJONS"

# Offset of the false origin from the south-west corner of the 'V' major tile
MAJOR_EASTING_SHIFT = 1000000
MAJOR_NORTHING_SHIFT = 500000


def tile_letters(x: int, y: int) -> Optional[str]:
    """Return the tile code for easting band *x* and northing band *y*, or None."""
    if 0 <= y < len(TILE_LETTERS) and 0 <= x < len(TILE_LETTERS[y]):
        return TILE_LETTERS[y][x]
    return None


def letter_offset(letter: str) -> Tuple[int, int]:
    """Column and row of *letter* within the 5x5 grid.

    Raises ValueError for letters outside GRID_LETTERS.
    """
    idx = GRID_LETTERS.index(letter)
    return idx % 5, idx // 5


def major_origin(letter: str) -> Tuple[int, int]:
    """Easting/northing of the south-west corner of a 500 km tile."""
    col, row = letter_offset(letter)
    return col * MAJOR_TILE_SIZE - MAJOR_EASTING_SHIFT, row * MAJOR_TILE_SIZE - MAJOR_NORTHING_SHIFT


def minor_origin(letter: str) -> Tuple[int, int]:
    """Easting/northing of a 100 km tile relative to its 500 km tile."""
    col, row = letter_offset(letter)
    return col * TILE_SIZE, row * TILE_SIZE


__all__ = [
    "TILE_LETTERS",
    "TILE_SIZE",
    "MAJOR_TILE_SIZE",
    "GRID_LETTERS",
    "MAJOR_LETTERS",
    "tile_letters",
    "letter_offset",
    "major_origin",
    "minor_origin",
]
