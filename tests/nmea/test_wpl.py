"""Tests for WPL sentence parsing and building."""

import pytest

from marinenav.nmea.errors import FieldNotAvailable, MalformedField
from marinenav.nmea.types import Direction, Position, Waypoint
from marinenav.nmea.wpl import WPLField, WPLSentence
from tests.nmea.helpers import WPL_RUSKI, with_checksum


class TestWPLSentence:
    """Tests for WPLSentence."""

    def test_waypoint(self):
        waypoint = WPLSentence.parse(WPL_RUSKI).get_waypoint()
        assert waypoint.id == "RUSKI"
        assert waypoint.latitude == pytest.approx(55 + 36.2 / 60)
        assert waypoint.longitude == pytest.approx(14 + 36.5 / 60)
        assert waypoint.lat_hemisphere is Direction.NORTH
        assert waypoint.lon_hemisphere is Direction.EAST

    def test_missing_id(self):
        sentence = WPLSentence.parse(with_checksum("$GPWPL,5536.200,N,01436.500,E,"))
        with pytest.raises(FieldNotAvailable) as e:
            sentence.get_waypoint()
        assert e.value.index == WPLField.WAYPOINT_ID

    def test_malformed_latitude(self):
        sentence = WPLSentence.parse(with_checksum("$GPWPL,55x6.200,N,01436.500,E,RUSKI"))
        with pytest.raises(MalformedField):
            sentence.get_waypoint()

    def test_set_waypoint(self):
        sentence = WPLSentence.parse(WPL_RUSKI)
        sentence.set_waypoint(
            Waypoint("WAYP", Position.from_magnitudes(60.5, Direction.SOUTH, 25.25, Direction.WEST))
        )
        assert sentence.to_sentence() == with_checksum("$GPWPL,6030.000,S,02515.000,W,WAYP")

    def test_build_from_empty(self):
        sentence = WPLSentence.empty()
        assert sentence.field_count == 5
        sentence.set_waypoint(Waypoint("RUSKI", Position(55 + 36.2 / 60, 14 + 36.5 / 60)))
        assert sentence.to_sentence() == WPL_RUSKI

    def test_set_waypoint_rejects_bad_id(self):
        sentence = WPLSentence.parse(WPL_RUSKI)
        with pytest.raises(ValueError):
            sentence.set_waypoint(Waypoint("A,B", Position(1.0, 1.0)))
        assert sentence.to_sentence() == WPL_RUSKI

    def test_set_waypoint_rejects_empty_id(self):
        sentence = WPLSentence.parse(WPL_RUSKI)
        with pytest.raises(ValueError):
            sentence.set_waypoint(Waypoint("", Position(1.0, 1.0)))
        assert sentence.get_waypoint().id == "RUSKI"
