"""CRS (Coordinate Reference System) support.

Modules:
 - definitions: the National Grid and WGS84 CRS registered with pyproj
 - projector: point transforms between them, bounds checked and rounded
"""

__all__ = [
    "definitions",
    "projector",
]
