from __future__ import annotations
import csv
import logging
import pathlib
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence

from tripmap.visualizer2d.markers import (
    DESTINATION_COLOR,
    MARKER_RADIUS,
    ORIGIN_COLOR,
    Marker,
    Path,
)
from .coordinates import parse_coordinate
from .models import (
    BadInputError,
    BoundingBox,
    CoordinateError,
    CoordinateErrorKind,
    DEFAULT_BBOX,
    RowFormatError,
)

log = logging.getLogger(__name__)

ORIGIN_COLUMN = 9
DESTINATION_COLUMN = 12
MODES = ("plot", "line")


class RenderContext(Protocol):
    def add_marker(self, marker: Marker) -> None: ...
    def add_path(self, path: Path) -> None: ...


@dataclass
class AccumulationResult:
    rows_examined: int = 0
    rows_plotted: int = 0
    skipped: Counter = field(default_factory=Counter)  # CoordinateErrorKind -> count

    @property
    def rows_skipped(self) -> int:
        return sum(self.skipped.values())


def accumulate(
    rows: Iterable[Sequence[str]],
    context: RenderContext,
    mode: str = "plot",
    limit: int = 0,
    bbox: BoundingBox = DEFAULT_BBOX,
) -> AccumulationResult:
    """Add one origin/destination marker pair per valid data row.

    Blank rows are ignored and the first row is a header. ``limit`` bounds
    the number of data rows examined (0 = all). Rows whose coordinates fail
    to parse are skipped; rows too short to hold both columns raise
    RowFormatError.
    """
    if mode not in MODES:
        raise ValueError(f"unknown mode: {mode!r}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    required = max(ORIGIN_COLUMN, DESTINATION_COLUMN) + 1
    result = AccumulationResult()

    # 空行は行として数えない
    it = (r for r in rows if r)
    if next(it, None) is None:
        return result

    for line, record in enumerate(it, start=2):
        if limit and result.rows_examined >= limit:
            break
        result.rows_examined += 1

        if len(record) < required:
            raise RowFormatError(line, len(record), required)

        try:
            src = parse_coordinate(record[ORIGIN_COLUMN], bbox)
            dst = parse_coordinate(record[DESTINATION_COLUMN], bbox)
        except CoordinateError as e:
            result.skipped[e.kind] += 1
            log.debug("line %d skipped: %s", line, e)
            continue

        context.add_marker(Marker.at(src, ORIGIN_COLOR, MARKER_RADIUS))
        context.add_marker(Marker.at(dst, DESTINATION_COLOR, MARKER_RADIUS))
        if mode == "line":
            context.add_path(Path.between(src, dst))
        result.rows_plotted += 1

    return result


def accumulate_file(
    path: str | pathlib.Path,
    context: RenderContext,
    mode: str = "plot",
    limit: int = 0,
    bbox: BoundingBox = DEFAULT_BBOX,
) -> AccumulationResult:
    """Open a trip CSV and feed it to :func:`accumulate`."""
    p = pathlib.Path(path).expanduser().resolve()
    if p.is_dir():
        raise BadInputError(f"{p} is a directory")
    if not p.exists():
        raise FileNotFoundError(f"no such file: {p}")

    # only the coordinate columns are read; undecodable bytes elsewhere are replaced
    with p.open("r", encoding="utf-8", errors="replace", newline="") as f:
        reader = csv.reader(f)
        try:
            result = accumulate(reader, context, mode=mode, limit=limit, bbox=bbox)
        except (csv.Error, UnicodeDecodeError) as e:
            raise BadInputError(f"{p.name}: line {reader.line_num}: {e}") from e

    log.info("%s: %d rows examined, %d plotted", p.name, result.rows_examined, result.rows_plotted)
    if result.rows_skipped:
        detail = ", ".join(
            f"{k.name.lower()}={result.skipped[k]}" for k in CoordinateErrorKind if result.skipped[k]
        )
        log.warning("%d rows skipped (%s)", result.rows_skipped, detail)
    return result
