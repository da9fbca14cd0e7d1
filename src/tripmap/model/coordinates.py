from __future__ import annotations
import math

from .models import (
    BoundingBox,
    Coordinate,
    CoordinateError,
    CoordinateErrorKind,
    DEFAULT_BBOX,
    SENTINEL,
)


def _to_float(part: str, raw: str) -> float:
    # float() accepts "1_000"; plain decimal only
    if "_" in part:
        raise CoordinateError(CoordinateErrorKind.NOT_A_NUMBER, raw)
    try:
        v = float(part.strip())
    except ValueError:
        raise CoordinateError(CoordinateErrorKind.NOT_A_NUMBER, raw) from None
    if not math.isfinite(v):
        raise CoordinateError(CoordinateErrorKind.NOT_A_NUMBER, raw)
    return v


def parse_coordinate(raw: str, bbox: BoundingBox = DEFAULT_BBOX) -> Coordinate:
    """Parse ``"<x>,<y>"`` and check it against ``bbox``.

    Raises CoordinateError with the matching kind when the value is
    malformed, not numeric or outside the box. The pair is returned as
    parsed (no rounding).
    """
    if raw in ("", ",", SENTINEL):
        raise CoordinateError(CoordinateErrorKind.MALFORMED, raw)

    xy = raw.split(",")
    if len(xy) != 2:
        raise CoordinateError(CoordinateErrorKind.MALFORMED, raw)

    x = _to_float(xy[0], raw)
    y = _to_float(xy[1], raw)

    if not bbox.contains(x, y):
        raise CoordinateError(CoordinateErrorKind.OUT_OF_RANGE, raw)

    return Coordinate(x, y)
