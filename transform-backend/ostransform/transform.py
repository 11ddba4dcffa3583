"""The five conversions offered by the service.

Each returns ``Ok(value)`` or ``Invalid(reason, kind)``; an Invalid means the
input was declined (out of bounds or malformed) and is never raised.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from gridref import codec
from gridref.types import GeographicCoordinate, Invalid, ProjectedCoordinate, Result
from ostransform.crs import projector

logger = logging.getLogger(__name__)


def _log_invalid(op: str, res: Result) -> Result:
    if isinstance(res, Invalid):
        logger.info("%s declined: %s", op, res.reason, extra={"kind": res.kind})
    return res


def to_latlng(easting: float, northing: float, decimals: Optional[int] = None) -> Result:
    coord = ProjectedCoordinate(easting=easting, northing=northing)
    if decimals is None:
        decimals = projector.LATLNG_DECIMALS
    return _log_invalid("to_latlng", projector.to_latlng(coord, decimals))


def from_latlng(lat: float, lng: float, decimals: Optional[int] = None) -> Result:
    coord = GeographicCoordinate(latitude=lat, longitude=lng)
    if decimals is None:
        decimals = projector.PROJECTED_DECIMALS
    return _log_invalid("from_latlng", projector.from_latlng(coord, decimals))


def to_gridref(easting: float, northing: float) -> Result:
    coord = ProjectedCoordinate(easting=easting, northing=northing)
    return _log_invalid("to_gridref", codec.to_gridref(coord))


def from_gridref(gridref: Any) -> Result:
    return _log_invalid("from_gridref", codec.from_gridref(gridref))


def gridref_to_latlng(gridref: Any, decimals: Optional[int] = None) -> Result:
    """Decode a grid reference and project the cell corner to WGS84."""
    decoded = from_gridref(gridref)
    if isinstance(decoded, Invalid):
        return decoded
    coord: ProjectedCoordinate = decoded.value
    return to_latlng(coord.easting, coord.northing, decimals)


__all__ = ["to_latlng", "from_latlng", "to_gridref", "from_gridref", "gridref_to_latlng"]
