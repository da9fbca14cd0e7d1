from .models import (
    BadInputError,
    BoundingBox,
    ConfigError,
    Coordinate,
    CoordinateError,
    CoordinateErrorKind,
    DEFAULT_BBOX,
    RenderError,
    RowFormatError,
    TripMapError,
)
from .coordinates import parse_coordinate

__all__ = [
    "BadInputError",
    "BoundingBox",
    "ConfigError",
    "Coordinate",
    "CoordinateError",
    "CoordinateErrorKind",
    "DEFAULT_BBOX",
    "RenderError",
    "RowFormatError",
    "TripMapError",
    "parse_coordinate",
]
