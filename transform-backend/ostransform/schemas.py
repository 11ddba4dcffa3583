from __future__ import annotations

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gridref.types import GeographicCoordinate, GridReference, ProjectedCoordinate

MAX_DECIMALS = 15


class _Request(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProjectedRequest(_Request):
    """Easting/northing input for /api/to-latlng and /api/to-gridref."""

    ea: float = Field(description="Easting in meters")
    no: float = Field(description="Northing in meters")
    decimals: Optional[int] = Field(default=None, ge=0, le=MAX_DECIMALS)


class GeographicRequest(_Request):
    lat: float = Field(description="WGS84 latitude in degrees")
    lng: float = Field(description="WGS84 longitude in degrees")
    decimals: Optional[int] = Field(default=None, ge=0, le=MAX_DECIMALS)


class GridRefRequest(_Request):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    gridref: str = Field(min_length=1, description="Grid reference, e.g. 'NY 37297 03695'")
    decimals: Optional[int] = Field(default=None, ge=0, le=MAX_DECIMALS)


class LatLngResponse(BaseModel):
    lat: float
    lng: float

    @classmethod
    def from_coordinate(cls, coord: GeographicCoordinate) -> "LatLngResponse":
        return cls(lat=coord.latitude, lng=coord.longitude)


class EastingNorthingResponse(BaseModel):
    # whole meters from a grid reference stay integers
    ea: Union[int, float]
    no: Union[int, float]

    @classmethod
    def from_coordinate(cls, coord: ProjectedCoordinate) -> "EastingNorthingResponse":
        return cls(ea=coord.easting, no=coord.northing)


class GridRefResponse(BaseModel):
    text: str
    html: str
    letters: str
    eastings: str
    northings: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "NY 37297 03695",
                "html": "NY&thinsp;37297&thinsp;03695",
                "letters": "NY",
                "eastings": "37297",
                "northings": "03695",
            }
        }
    )

    @classmethod
    def from_gridref(cls, ref: GridReference) -> "GridRefResponse":
        return cls(**ref.to_dict())


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    endpoints: Dict[str, str] = Field(default_factory=dict)


__all__ = [
    "ProjectedRequest",
    "GeographicRequest",
    "GridRefRequest",
    "LatLngResponse",
    "EastingNorthingResponse",
    "GridRefResponse",
    "ErrorResponse",
    "HealthResponse",
    "MAX_DECIMALS",
]
