# markers.py
from dataclasses import dataclass

from tripmap.model.models import Coordinate

ORIGIN_COLOR = "#00ff00"
DESTINATION_COLOR = "#ff0000"
PATH_COLOR = "#000000"
MARKER_RADIUS = 4.0
PATH_WIDTH = 1.0


@dataclass(frozen=True)
class Marker:
    lat: float
    lon: float
    color: str = ORIGIN_COLOR
    radius: float = MARKER_RADIUS

    @classmethod
    def at(cls, c: Coordinate, color: str, radius: float = MARKER_RADIUS) -> "Marker":
        return cls(lat=c.lat, lon=c.lon, color=color, radius=radius)


@dataclass(frozen=True)
class Path:
    points: tuple[tuple[float, float], ...]  # (lat, lon)
    color: str = PATH_COLOR
    width: float = PATH_WIDTH

    @classmethod
    def between(cls, a: Coordinate, b: Coordinate,
                color: str = PATH_COLOR, width: float = PATH_WIDTH) -> "Path":
        return cls(points=((a.lat, a.lon), (b.lat, b.lon)), color=color, width=width)
