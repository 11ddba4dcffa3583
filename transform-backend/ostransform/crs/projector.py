from __future__ import annotations

import logging
import math
import threading
from typing import Any, Dict, Sequence, Tuple

from pyproj import Transformer

from gridref.types import (
    PRECONDITION_FAILURE,
    VALIDATION_FAILURE,
    GeographicCoordinate,
    Invalid,
    Ok,
    ProjectedCoordinate,
    Result,
)
from qc.bounds import check_geographic_bounds, check_projected_bounds

from .definitions import OSGB36_NATIONAL_GRID, WGS84_GEOGRAPHIC, get_crs

logger = logging.getLogger(__name__)

LATLNG_DECIMALS = 7
PROJECTED_DECIMALS = 2

# pyproj transformers must not be shared between threads
_local = threading.local()


def _transformer(source: str, target: str) -> Transformer:
    cache: Dict[Tuple[str, str], Transformer] = getattr(_local, "transformers", None)
    if cache is None:
        cache = _local.transformers = {}
    key = (source.upper(), target.upper())
    t = cache.get(key)
    if t is None:
        t = Transformer.from_crs(get_crs(source), get_crs(target), always_xy=True)
        cache[key] = t
    return t


def project(source: str, target: str, point: Sequence[float]) -> Tuple[float, float]:
    """Transform an ``(x, y)`` pair between two registered CRS ids.

    Geographic points are ``(longitude, latitude)``. Raises KeyError for
    an unregistered id.
    """
    x, y = point
    out_x, out_y = _transformer(source, target).transform(x, y)
    return float(out_x), float(out_y)


def _check_decimals(decimals: Any) -> bool:
    return isinstance(decimals, int) and not isinstance(decimals, bool) and decimals >= 0


def to_latlng(coord: ProjectedCoordinate, decimals: int = LATLNG_DECIMALS) -> Result:
    """National Grid easting/northing -> WGS84 latitude/longitude."""
    test = check_projected_bounds(coord)
    if not test.valid:
        return Invalid(test.message, VALIDATION_FAILURE)
    if not _check_decimals(decimals):
        return Invalid(f"decimals must be a non-negative integer, got {decimals!r}", VALIDATION_FAILURE)

    lng, lat = project(OSGB36_NATIONAL_GRID, WGS84_GEOGRAPHIC, (coord.easting, coord.northing))
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return Invalid("Projection produced a non-finite result.", PRECONDITION_FAILURE)
    return Ok(GeographicCoordinate(latitude=round(lat, decimals), longitude=round(lng, decimals)))


def from_latlng(coord: GeographicCoordinate, decimals: int = PROJECTED_DECIMALS) -> Result:
    """WGS84 latitude/longitude -> National Grid easting/northing."""
    test = check_geographic_bounds(coord)
    if not test.valid:
        return Invalid(test.message, VALIDATION_FAILURE)
    if not _check_decimals(decimals):
        return Invalid(f"decimals must be a non-negative integer, got {decimals!r}", VALIDATION_FAILURE)

    ea, no = project(WGS84_GEOGRAPHIC, OSGB36_NATIONAL_GRID, (coord.longitude, coord.latitude))
    if not (math.isfinite(ea) and math.isfinite(no)):
        return Invalid("Projection produced a non-finite result.", PRECONDITION_FAILURE)
    return Ok(ProjectedCoordinate(easting=round(ea, decimals), northing=round(no, decimals)))


__all__ = ["project", "to_latlng", "from_latlng", "LATLNG_DECIMALS", "PROJECTED_DECIMALS"]
