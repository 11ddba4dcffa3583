from __future__ import annotations

import math
from typing import Any, Mapping, Tuple

from gridref.types import BoundsCheck, GeographicCoordinate, ProjectedCoordinate

# ((min_x, min_y), (max_x, max_y)) for the extent of Great Britain
PROJECTED_BOUNDS: Tuple[Tuple[float, float], Tuple[float, float]] = ((0.0, 0.0), (699999.9, 1299999.9))
GEOGRAPHIC_BOUNDS: Tuple[Tuple[float, float], Tuple[float, float]] = ((-8.74, 49.84), (1.96, 60.9))

OUT_OF_RANGE = "Coordinates out of range."


def _within(x: float, y: float, bounds: Tuple[Tuple[float, float], Tuple[float, float]]) -> bool:
    (min_x, min_y), (max_x, max_y) = bounds
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (x, y)):
        return False
    if not (math.isfinite(x) and math.isfinite(y)):
        return False
    return min_x <= x <= max_x and min_y <= y <= max_y


def _result(ok: bool) -> BoundsCheck:
    return BoundsCheck(valid=ok, message="" if ok else OUT_OF_RANGE)


def check_projected_bounds(coord: ProjectedCoordinate) -> BoundsCheck:
    """Easting/northing must fall inside PROJECTED_BOUNDS (inclusive)."""
    return _result(_within(coord.easting, coord.northing, PROJECTED_BOUNDS))


def check_geographic_bounds(coord: GeographicCoordinate) -> BoundsCheck:
    """Longitude/latitude must fall inside GEOGRAPHIC_BOUNDS (inclusive)."""
    return _result(_within(coord.longitude, coord.latitude, GEOGRAPHIC_BOUNDS))


def check_bounds(coordinate: Any) -> BoundsCheck:
    """Validate either coordinate shape against its matching extent.

    Accepts the two coordinate dataclasses or a mapping with ``ea``/``no`` or
    ``lat``/``lng`` keys. Input of neither shape cannot be checked and is
    reported as valid.
    """
    if isinstance(coordinate, ProjectedCoordinate):
        return check_projected_bounds(coordinate)
    if isinstance(coordinate, GeographicCoordinate):
        return check_geographic_bounds(coordinate)
    if isinstance(coordinate, Mapping):
        if "ea" in coordinate and "no" in coordinate:
            return _result(_within(coordinate["ea"], coordinate["no"], PROJECTED_BOUNDS))
        if "lat" in coordinate and "lng" in coordinate:
            return _result(_within(coordinate["lng"], coordinate["lat"], GEOGRAPHIC_BOUNDS))
    return BoundsCheck(valid=True)


__all__ = [
    "PROJECTED_BOUNDS",
    "GEOGRAPHIC_BOUNDS",
    "OUT_OF_RANGE",
    "check_projected_bounds",
    "check_geographic_bounds",
    "check_bounds",
]
