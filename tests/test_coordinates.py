"""Tests for tripmap.model.coordinates."""

import pytest

from tripmap.model import (
    BoundingBox,
    Coordinate,
    CoordinateError,
    CoordinateErrorKind,
    DEFAULT_BBOX,
    parse_coordinate,
)


class TestParseValid:
    """Well-formed values inside the box."""

    def test_returns_exact_pair(self):
        c = parse_coordinate("-6.2088,106.8456")
        assert c == Coordinate(-6.2088, 106.8456)
        assert (c.lat, c.lon) == (-6.2088, 106.8456)

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_coordinate(" 1.5 , 100.25 ") == Coordinate(1.5, 100.25)

    def test_bounds_are_inclusive(self):
        b = DEFAULT_BBOX
        assert parse_coordinate(f"{b.west},{b.north}") == Coordinate(b.west, b.north)
        assert parse_coordinate(f"{b.east},{b.south}") == Coordinate(b.east, b.south)

    def test_idempotent(self):
        assert parse_coordinate("3.5952,98.6722") == parse_coordinate("3.5952,98.6722")

    def test_custom_bbox(self):
        box = BoundingBox(south=0.0, north=10.0, west=5.0, east=-5.0)
        assert parse_coordinate("0,5", box) == Coordinate(0.0, 5.0)
        with pytest.raises(CoordinateError):
            parse_coordinate("-6.2088,106.8456", box)


class TestParseFailures:
    """Each failure maps to one error kind."""

    @pytest.mark.parametrize("raw", ["", ",", "-999,-999", "1,2,3", "106.8"])
    def test_malformed(self, raw):
        with pytest.raises(CoordinateError) as exc:
            parse_coordinate(raw)
        assert exc.value.kind is CoordinateErrorKind.MALFORMED
        assert exc.value.raw == raw

    @pytest.mark.parametrize("raw", ["abc,12.0", "1.0,", "1.0,xyz", "nan,100", "1.0,inf", "0_1,1_00", "1.5,1_00.5"])
    def test_not_a_number(self, raw):
        with pytest.raises(CoordinateError) as exc:
            parse_coordinate(raw)
        assert exc.value.kind is CoordinateErrorKind.NOT_A_NUMBER

    @pytest.mark.parametrize(
        "raw",
        [
            "0,94.9",        # y below south
            "0,141.1",       # y above north
            "6.1,100",       # x beyond west
            "-11.1,100",     # x beyond east
            "106.8456,-6.2088",  # swapped
        ],
    )
    def test_out_of_range(self, raw):
        with pytest.raises(CoordinateError) as exc:
            parse_coordinate(raw)
        assert exc.value.kind is CoordinateErrorKind.OUT_OF_RANGE

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_coordinate("-999,-999")


class TestBoundingBox:
    def test_contains(self):
        assert DEFAULT_BBOX.contains(0.0, 120.0)
        assert not DEFAULT_BBOX.contains(0.0, 150.0)
        assert not DEFAULT_BBOX.contains(7.0, 120.0)
