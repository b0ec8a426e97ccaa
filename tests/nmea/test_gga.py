"""Tests for GGA sentence parsing and building."""

import pytest

from marinenav.nmea.errors import FieldNotAvailable, MalformedField
from marinenav.nmea.gga import GGAField, GGASentence
from marinenav.nmea.types import GpsFixQuality, Position, Units, UtcTime
from tests.nmea.helpers import GGA_MUNICH, with_checksum


class TestGGASentence:
    """Tests for GGASentence getters."""

    def test_valid_gga_with_fix(self):
        sentence = GGASentence.parse(GGA_MUNICH)
        assert sentence.talker == "GN"
        assert sentence.get_time() == UtcTime(12, 35, 19.0)
        position = sentence.get_position()
        assert position.latitude == pytest.approx(48.1173, rel=1e-4)
        assert position.longitude == pytest.approx(11.5166667, rel=1e-4)
        assert sentence.get_fix_quality() is GpsFixQuality.NORMAL
        assert sentence.get_satellite_count() == 8
        assert sentence.get_horizontal_dop() == pytest.approx(0.9)
        assert sentence.get_altitude() == pytest.approx(545.4)
        assert sentence.get_altitude_units() is Units.METER
        assert sentence.get_geoidal_height() == pytest.approx(47.0)
        assert sentence.get_geoidal_height_units() is Units.METER

    def test_gga_no_fix(self):
        sentence = GGASentence.parse(with_checksum("$GNGGA,123519.00,,,,,0,00,,,,,,,"))
        assert sentence.get_time() == UtcTime(12, 35, 19.0)
        assert sentence.get_fix_quality() is GpsFixQuality.INVALID
        assert sentence.get_satellite_count() == 0
        with pytest.raises(FieldNotAvailable):
            sentence.get_position()
        with pytest.raises(FieldNotAvailable):
            sentence.get_horizontal_dop()

    def test_gga_southern_hemisphere(self):
        sentence = GGASentence.parse(
            with_checksum("$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,")
        )
        position = sentence.get_position()
        assert position.latitude == pytest.approx(-33.93538333, rel=1e-4)
        assert position.longitude == pytest.approx(-151.20760, rel=1e-4)
        assert sentence.get_fix_quality() is GpsFixQuality.DGPS

    @pytest.mark.parametrize(
        "quality,expected",
        [("4", GpsFixQuality.RTK), ("5", GpsFixQuality.FLOAT_RTK), ("6", GpsFixQuality.ESTIMATED)],
    )
    def test_rtk_fix_qualities(self, quality, expected):
        sentence = GGASentence.parse(
            with_checksum(f"$GNGGA,123519.00,4807.038,N,01131.000,E,{quality},12,0.5,545.4,M,47.0,M,,")
        )
        assert sentence.get_fix_quality() is expected
        assert sentence.get_fix_quality().code == int(quality)

    def test_unknown_fix_quality_is_malformed(self):
        sentence = GGASentence.parse(
            with_checksum("$GNGGA,123519.00,4807.038,N,01131.000,E,9,12,0.5,545.4,M,47.0,M,,")
        )
        with pytest.raises(MalformedField) as e:
            sentence.get_fix_quality()
        assert e.value.index == GGAField.FIX_QUALITY

    def test_dgps_fields(self):
        sentence = GGASentence.parse(
            with_checksum("$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000")
        )
        assert sentence.get_geoidal_height() == pytest.approx(-30.0)
        assert sentence.get_dgps_age() == pytest.approx(1.0)
        assert sentence.get_dgps_station_id() == "0000"

    def test_missing_dgps_fields(self):
        sentence = GGASentence.parse(GGA_MUNICH)
        with pytest.raises(FieldNotAvailable):
            sentence.get_dgps_age()
        with pytest.raises(FieldNotAvailable):
            sentence.get_dgps_station_id()

    def test_non_numeric_altitude_is_malformed(self):
        sentence = GGASentence.parse(
            with_checksum("$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,high,M,47.0,M,,")
        )
        with pytest.raises(MalformedField):
            sentence.get_altitude()

    def test_multi_constellation_talkers(self):
        for talker in ("GP", "GN", "GL", "GA", "GB", "GQ"):
            line = with_checksum(
                f"${talker}GGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,"
            )
            assert GGASentence.parse(line, strict=True).talker == talker


class TestGGABuilding:
    """Tests for GGASentence setters."""

    def test_empty_has_unit_indicators(self):
        sentence = GGASentence.empty("GN")
        assert sentence.to_sentence() == with_checksum("$GNGGA,,,,,,,,,,M,,M,,")

    def test_build_matches_received(self):
        sentence = GGASentence.empty("GN")
        sentence.set_time(UtcTime(12, 35, 19.0))
        sentence.set_position(Position(48 + 7.038 / 60, 11 + 31.0 / 60))
        sentence.set_fix_quality(GpsFixQuality.NORMAL)
        sentence.set_satellite_count(8)
        sentence.set_horizontal_dop(0.9)
        sentence.set_altitude(545.4)
        sentence.set_geoidal_height(47.0)
        assert sentence.to_sentence() == with_checksum(
            "$GNGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,"
        )

    def test_altitude_in_feet(self):
        sentence = GGASentence.empty()
        sentence.set_altitude(1000.0, Units.FEET)
        assert sentence.get_altitude() == 1000.0
        assert sentence.get_altitude_units() is Units.FEET

    def test_altitude_rejects_speed_units(self):
        with pytest.raises(ValueError):
            GGASentence.empty().set_altitude(10.0, Units.KNOT)

    def test_negative_satellite_count(self):
        with pytest.raises(ValueError):
            GGASentence.empty().set_satellite_count(-1)

    def test_negative_hdop(self):
        with pytest.raises(ValueError):
            GGASentence.empty().set_horizontal_dop(-0.5)

    def test_negative_dgps_age(self):
        with pytest.raises(ValueError):
            GGASentence.empty().set_dgps_age(-1.0)
