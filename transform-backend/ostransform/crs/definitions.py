from __future__ import annotations

from typing import Dict

from pyproj import CRS

# The two coordinate systems the service converts between. The National Grid
# carries an explicit 7-parameter Helmert shift to WGS84 so no grid files or
# network lookups are needed.
OSGB36_NATIONAL_GRID = "EPSG:27700"
WGS84_GEOGRAPHIC = "EPSG:4326"

PROJ_STRINGS: Dict[str, str] = {
    OSGB36_NATIONAL_GRID: (
        "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 "
        "+ellps=airy +towgs84=446.448,-125.157,542.06,0.15,0.247,0.842,-20.489 "
        "+units=m +no_defs"
    ),
    WGS84_GEOGRAPHIC: "+proj=longlat +datum=WGS84 +no_defs",
}

CRS_DEFINITIONS: Dict[str, CRS] = {
    crs_id: CRS.from_proj4(proj) for crs_id, proj in PROJ_STRINGS.items()
}


def get_crs(crs_id: str) -> CRS:
    """Return the registered CRS for *crs_id*; KeyError if unknown."""
    return CRS_DEFINITIONS[crs_id.upper()]


__all__ = ["OSGB36_NATIONAL_GRID", "WGS84_GEOGRAPHIC", "PROJ_STRINGS", "CRS_DEFINITIONS", "get_crs"]
