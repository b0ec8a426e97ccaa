"""Tests for GSV sentence parsing and building."""

import pytest

from marinenav.nmea.errors import FieldNotAvailable, MalformedField
from marinenav.nmea.gsv import GSVSentence
from marinenav.nmea.types import SatelliteInfo
from tests.nmea.helpers import with_checksum

GSV_FIRST = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
GSV_LAST = with_checksum("$GPGSV,2,2,08,15,10,145,,17,05,020,33,,,,,,,,")


class TestGSVSentence:
    """Tests for GSVSentence getters."""

    def test_sequence_position(self):
        first = GSVSentence.parse(GSV_FIRST)
        last = GSVSentence.parse(GSV_LAST)
        assert first.get_sentence_count() == 2
        assert first.is_first() is True
        assert first.is_last() is False
        assert last.is_first() is False
        assert last.is_last() is True

    def test_satellite_count(self):
        assert GSVSentence.parse(GSV_FIRST).get_satellite_count() == 8

    def test_satellite_info(self):
        satellites = GSVSentence.parse(GSV_FIRST).get_satellite_info()
        assert len(satellites) == 4
        assert satellites[0] == SatelliteInfo("01", 40, 83, 46)
        assert satellites[3] == SatelliteInfo("14", 22, 228, 45)

    def test_untracked_satellite_has_no_noise(self):
        satellites = GSVSentence.parse(GSV_LAST).get_satellite_info()
        assert [s.id for s in satellites] == ["15", "17"]
        assert satellites[0].noise is None
        assert satellites[1].noise == 33

    def test_block_missing_elevation(self):
        sentence = GSVSentence.parse(with_checksum("$GPGSV,1,1,01,15,,145,20"))
        with pytest.raises(FieldNotAvailable):
            sentence.get_satellite_info()

    def test_elevation_out_of_range(self):
        sentence = GSVSentence.parse(with_checksum("$GPGSV,1,1,01,15,95,145,20"))
        with pytest.raises(MalformedField):
            sentence.get_satellite_info()


class TestGSVBuilding:
    """Tests for GSVSentence setters."""

    def test_build_matches_received(self):
        sentence = GSVSentence.empty()
        sentence.set_sentence_count(2)
        sentence.set_sentence_index(1)
        sentence.set_satellite_count(8)
        sentence.set_satellite_info(
            [
                SatelliteInfo("01", 40, 83, 46),
                SatelliteInfo("02", 17, 308, 41),
                SatelliteInfo("12", 7, 344, 39),
                SatelliteInfo("14", 22, 228, 45),
            ]
        )
        assert sentence.to_sentence() == GSV_FIRST

    def test_fewer_satellites_shorten_sentence(self):
        sentence = GSVSentence.parse(GSV_FIRST)
        sentence.set_satellite_info([SatelliteInfo("15", 10, 145)])
        assert sentence.field_count == 7
        assert sentence.get_satellite_info() == [SatelliteInfo("15", 10, 145)]

    def test_too_many_satellites(self):
        satellites = [SatelliteInfo(f"{n:02d}", 10, 10) for n in range(1, 6)]
        with pytest.raises(ValueError):
            GSVSentence.empty().set_satellite_info(satellites)

    def test_sentence_index_must_be_positive(self):
        with pytest.raises(ValueError):
            GSVSentence.empty().set_sentence_index(0)

    def test_satellite_values_are_validated(self):
        with pytest.raises(ValueError):
            SatelliteInfo("01", 91, 0)
        with pytest.raises(ValueError):
            SatelliteInfo("01", 0, 360)
