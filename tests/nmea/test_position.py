"""Tests for position parsing, formatting and value types."""

import pytest

from marinenav.nmea.errors import FieldNotAvailable, MalformedField
from marinenav.nmea.fields import FieldAccessor
from marinenav.nmea.framing import build
from marinenav.nmea.position import (
    format_latitude,
    format_longitude,
    parse_latitude,
    parse_longitude,
    parse_position,
    position_fields,
)
from marinenav.nmea.types import Direction, Position, Waypoint


def make_fields(*values: str) -> FieldAccessor:
    return FieldAccessor(build("GP", "XYZ", list(values)))


class TestParseCoordinates:
    """Tests for parse_latitude and parse_longitude."""

    def test_latitude(self):
        assert parse_latitude(make_fields("5536.200"), 1) == pytest.approx(55 + 36.2 / 60)

    def test_longitude(self):
        assert parse_longitude(make_fields("01436.500"), 1) == pytest.approx(14 + 36.5 / 60)

    def test_high_precision(self):
        value = parse_latitude(make_fields("4807.03812345"), 1)
        assert value == pytest.approx(48.11730208, rel=1e-6)

    def test_whole_minutes(self):
        assert parse_latitude(make_fields("4807"), 1) == pytest.approx(48 + 7 / 60)

    @pytest.mark.parametrize("text", ["5560.000", "abc", "5.5", "55-6.0", "55+6.000"])
    def test_malformed_latitude(self, text):
        with pytest.raises(MalformedField):
            parse_latitude(make_fields(text), 1)

    @pytest.mark.parametrize("text", ["\u00b2\u00b307.038", "\u0664\u066807.038"])
    def test_non_ascii_degrees(self, text):
        with pytest.raises(MalformedField):
            parse_latitude(make_fields(text), 1)

    def test_latitude_over_ninety(self):
        with pytest.raises(MalformedField):
            parse_latitude(make_fields("9100.000"), 1)

    def test_longitude_over_one_eighty(self):
        with pytest.raises(MalformedField):
            parse_longitude(make_fields("18100.000"), 1)

    def test_empty_coordinate_not_available(self):
        with pytest.raises(FieldNotAvailable):
            parse_latitude(make_fields(""), 1)


class TestParsePosition:
    """Tests for parse_position."""

    def test_north_east(self):
        position = parse_position(make_fields("5536.200", "N", "01436.500", "E"), 1, 2, 3, 4)
        assert position.latitude == pytest.approx(55.603333, rel=1e-6)
        assert position.longitude == pytest.approx(14.608333, rel=1e-6)
        assert position.lat_hemisphere is Direction.NORTH
        assert position.lon_hemisphere is Direction.EAST

    def test_south_west_are_negative(self):
        position = parse_position(make_fields("3356.123", "S", "15112.456", "W"), 1, 2, 3, 4)
        assert position.latitude == pytest.approx(-33.93538333, rel=1e-6)
        assert position.longitude == pytest.approx(-151.2076, rel=1e-6)

    def test_wrong_axis_hemisphere_is_malformed(self):
        with pytest.raises(MalformedField) as e:
            parse_position(make_fields("5536.200", "E", "01436.500", "E"), 1, 2, 3, 4)
        assert e.value.index == 2

    def test_missing_hemisphere_not_available(self):
        with pytest.raises(FieldNotAvailable):
            parse_position(make_fields("5536.200", "", "01436.500", "E"), 1, 2, 3, 4)

    def test_zero_latitude_keeps_hemisphere(self):
        position = parse_position(make_fields("0000.000", "S", "00000.000", "W"), 1, 2, 3, 4)
        assert position.lat_hemisphere is Direction.SOUTH
        assert position.lon_hemisphere is Direction.WEST


class TestFormatCoordinates:
    """Tests for format_latitude and format_longitude."""

    def test_latitude(self):
        assert format_latitude(55 + 36.2 / 60) == "5536.200"

    def test_longitude_is_padded(self):
        assert format_longitude(14 + 36.5 / 60) == "01436.500"

    def test_sign_is_dropped(self):
        assert format_latitude(-(55 + 36.2 / 60)) == "5536.200"

    def test_zero(self):
        assert format_latitude(0.0) == "0000.000"
        assert format_longitude(0.0) == "00000.000"

    def test_formatted_text_parses_back_exactly(self):
        value = 48 + 7.03812345 / 60
        text = format_latitude(value)
        assert parse_latitude(make_fields(text), 1) == value

    def test_position_fields(self):
        position = Position.from_magnitudes(55 + 36.2 / 60, Direction.NORTH, 14 + 36.5 / 60, Direction.WEST)
        assert position_fields(position) == ("5536.200", "N", "01436.500", "W")


class TestPositionValue:
    """Tests for the Position and Waypoint value types."""

    def test_hemispheres_derived_from_sign(self):
        position = Position(-10.0, 20.0)
        assert position.lat_hemisphere is Direction.SOUTH
        assert position.lon_hemisphere is Direction.EAST

    def test_from_magnitudes_applies_sign(self):
        position = Position.from_magnitudes(10.0, Direction.SOUTH, 20.0, Direction.WEST)
        assert position.latitude == -10.0
        assert position.longitude == -20.0

    @pytest.mark.parametrize("latitude,longitude", [(91.0, 0.0), (0.0, -180.5)])
    def test_out_of_range(self, latitude, longitude):
        with pytest.raises(ValueError):
            Position(latitude, longitude)

    def test_sign_disagreeing_with_hemisphere(self):
        with pytest.raises(ValueError):
            Position(10.0, 0.0, Direction.SOUTH)

    def test_hemisphere_of_wrong_axis(self):
        with pytest.raises(ValueError):
            Position(10.0, 0.0, Direction.EAST)

    def test_position_is_immutable(self):
        position = Position(1.0, 2.0)
        with pytest.raises(AttributeError):
            position.latitude = 3.0

    def test_waypoint_exposes_coordinates(self):
        waypoint = Waypoint("RUSKI", Position(55.5, -14.5))
        assert waypoint.latitude == 55.5
        assert waypoint.longitude == -14.5
        assert waypoint.lat_hemisphere is Direction.NORTH
        assert waypoint.lon_hemisphere is Direction.WEST
