"""Encode/decode British National Grid references.

A full grid reference is two tile letters followed by 5-digit easting and
northing residuals within that 100 km tile, e.g. ``NY 37297 03695``. Shorter
digit groups (1-4 digits) are accepted on decode and describe a coarser cell:
``NY 372 036`` is the 100 m square whose south-west corner is 337200, 503600.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional, Tuple

from gridref.tiles import (
    GRID_LETTERS,
    MAJOR_LETTERS,
    TILE_SIZE,
    major_origin,
    minor_origin,
    tile_letters,
)
from gridref.types import (
    FORMAT_FAILURE,
    PRECONDITION_FAILURE,
    VALIDATION_FAILURE,
    BoundsCheck,
    GridReference,
    Invalid,
    Ok,
    ProjectedCoordinate,
    Result,
)
from qc.bounds import check_projected_bounds

logger = logging.getLogger(__name__)

MAX_DIGITS = 5
INVALID_GRIDREF = "Invalid grid reference."

_GRIDREF_RE = re.compile(
    rf"^([{MAJOR_LETTERS}][{GRID_LETTERS}])\s*([0-9]+)(?:\s+([0-9]+))?$"
)


def _split_digits(first: str, second: Optional[str]) -> Optional[Tuple[str, str]]:
    # Two explicit groups must match in length; a single run is halved
    if second is None:
        if len(first) % 2 or not 2 <= len(first) <= 2 * MAX_DIGITS:
            return None
        half = len(first) // 2
        return first[:half], first[half:]
    if len(first) != len(second) or not 1 <= len(first) <= MAX_DIGITS:
        return None
    return first, second


def parse_gridref(text: Any) -> Optional[GridReference]:
    """Parse *text* into a GridReference, or None if it is not well-formed."""
    ref = str(text).strip().upper()
    m = _GRIDREF_RE.match(ref)
    if not m:
        return None
    digits = _split_digits(m.group(2), m.group(3))
    if digits is None:
        return None
    return GridReference(letters=m.group(1), eastings=digits[0], northings=digits[1])


def validate_gridref(text: Any) -> BoundsCheck:
    ok = parse_gridref(text) is not None
    return BoundsCheck(valid=ok, message="" if ok else INVALID_GRIDREF)


def to_gridref(coord: ProjectedCoordinate) -> Result:
    """Encode a projected coordinate as a full (1 m) grid reference."""
    test = check_projected_bounds(coord)
    if not test.valid:
        logger.debug("to_gridref rejected %s: %s", coord, test.message)
        return Invalid(test.message, VALIDATION_FAILURE)

    x = math.floor(coord.easting / TILE_SIZE)
    y = math.floor(coord.northing / TILE_SIZE)
    letters = tile_letters(x, y)
    if letters is None:
        return Invalid(f"No grid tile at band ({x}, {y}).", PRECONDITION_FAILURE)

    e = math.floor(coord.easting % TILE_SIZE)
    n = math.floor(coord.northing % TILE_SIZE)
    return Ok(
        GridReference(
            letters=letters,
            eastings=str(e).zfill(MAX_DIGITS),
            northings=str(n).zfill(MAX_DIGITS),
        )
    )


def gridref_to_coordinate(ref: GridReference) -> ProjectedCoordinate:
    """South-west corner of the cell described by a parsed reference."""
    major_e, major_n = major_origin(ref.letters[0])
    minor_e, minor_n = minor_origin(ref.letters[1])
    scale = 10 ** (MAX_DIGITS - ref.precision)
    return ProjectedCoordinate(
        easting=major_e + minor_e + int(ref.eastings) * scale,
        northing=major_n + minor_n + int(ref.northings) * scale,
    )


def from_gridref(text: Any) -> Result:
    """Decode grid reference text to the easting/northing of its cell.

    The result is not bounds checked: some valid letter pairs lie outside
    the mapped extent.
    """
    ref = parse_gridref(text)
    if ref is None:
        logger.debug("from_gridref rejected %r", text)
        return Invalid(INVALID_GRIDREF, FORMAT_FAILURE)
    return Ok(gridref_to_coordinate(ref))


__all__ = [
    "MAX_DIGITS",
    "INVALID_GRIDREF",
    "parse_gridref",
    "validate_gridref",
    "to_gridref",
    "gridref_to_coordinate",
    "from_gridref",
]
