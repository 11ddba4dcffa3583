from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")

# Failure kinds carried on Invalid.kind
VALIDATION_FAILURE = "ValidationFailure"
FORMAT_FAILURE = "FormatFailure"
PRECONDITION_FAILURE = "PreconditionFailure"


@dataclass(frozen=True)
class ProjectedCoordinate:
    """Easting/northing in meters from the National Grid false origin."""

    easting: float
    northing: float

    def to_dict(self) -> Dict[str, float]:
        return {"ea": self.easting, "no": self.northing}


@dataclass(frozen=True)
class GeographicCoordinate:
    """WGS84 latitude/longitude in decimal degrees."""

    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True)
class GridReference:
    """A lettered grid reference split into its components.

    ``eastings`` and ``northings`` always have the same number of digits; that
    count is the precision of the reference (5 digits = 1 m).
    """

    letters: str
    eastings: str
    northings: str

    def __post_init__(self) -> None:
        if len(self.eastings) != len(self.northings):
            raise ValueError("eastings and northings must have equal length")

    @property
    def precision(self) -> int:
        return len(self.eastings)

    @property
    def text(self) -> str:
        return f"{self.letters} {self.eastings} {self.northings}"

    @property
    def html(self) -> str:
        return f"{self.letters}&thinsp;{self.eastings}&thinsp;{self.northings}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "text": self.text,
            "html": self.html,
            "letters": self.letters,
            "eastings": self.eastings,
            "northings": self.northings,
        }


@dataclass(frozen=True)
class BoundsCheck:
    valid: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """An operation declined its input. ``kind`` is one of the *_FAILURE names."""

    reason: str
    kind: str = VALIDATION_FAILURE

    def __bool__(self) -> bool:
        return False


Result = Union[Ok[Any], Invalid]


__all__ = [
    "ProjectedCoordinate",
    "GeographicCoordinate",
    "GridReference",
    "BoundsCheck",
    "Ok",
    "Invalid",
    "Result",
    "VALIDATION_FAILURE",
    "FORMAT_FAILURE",
    "PRECONDITION_FAILURE",
]
