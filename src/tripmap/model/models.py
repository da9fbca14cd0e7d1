from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# --- 座標 -------------------------------------------------------------

@dataclass(frozen=True)
class Coordinate:
    """Validated "x,y" pair. In the source region x is latitude, y is longitude."""
    x: float
    y: float

    @property
    def lat(self) -> float:
        return self.x

    @property
    def lon(self) -> float:
        return self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class BoundingBox:
    """Accepted region.

    The east/west extent is signed and asymmetric: x must satisfy
    ``east <= x <= west``.
    """
    south: float
    north: float
    west: float
    east: float

    def contains(self, x: float, y: float) -> bool:
        if y < self.south or y > self.north:
            return False
        if x > self.west or x < self.east:
            return False
        return True


# Indonesia
DEFAULT_BBOX = BoundingBox(
    south=94.972778,
    north=141.019444,
    west=6.075,
    east=-11.0075,
)

SENTINEL = "-999,-999"


# --- エラー -----------------------------------------------------------

class TripMapError(Exception):
    """Base class for tripmap errors."""


class CoordinateErrorKind(Enum):
    MALFORMED = "LatLong is incorrect"
    NOT_A_NUMBER = "LatLong is not a number"
    OUT_OF_RANGE = "LatLong is out of range"


class CoordinateError(TripMapError, ValueError):
    def __init__(self, kind: CoordinateErrorKind, raw: str):
        super().__init__(f"{kind.value}: {raw!r}")
        self.kind = kind
        self.raw = raw


class RowFormatError(TripMapError):
    """A data row is too short for the fixed coordinate columns."""

    def __init__(self, line: int, fields: int, required: int):
        super().__init__(
            f"line {line}: expected at least {required} fields, got {fields}"
        )
        self.line = line
        self.fields = fields
        self.required = required


class BadInputError(TripMapError):
    """Input path is not a readable file."""


class RenderError(TripMapError):
    pass


class ConfigError(TripMapError):
    pass


__all__ = [
    "Coordinate",
    "BoundingBox",
    "DEFAULT_BBOX",
    "SENTINEL",
    "TripMapError",
    "CoordinateErrorKind",
    "CoordinateError",
    "RowFormatError",
    "BadInputError",
    "RenderError",
    "ConfigError",
]
