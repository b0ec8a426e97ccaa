"""Tests for RTE sentence parsing and building."""

import pytest

from marinenav.nmea.errors import MalformedField
from marinenav.nmea.rte import RTESentence
from marinenav.nmea.types import RouteType
from tests.nmea.helpers import with_checksum

RTE = with_checksum("$GPRTE,2,1,c,0,PBRCPK,PBRTO,PTELGR,PPLAND,PYAMBU,PPFAIR,PWARRN,PMORTL,PLISMR")


class TestRTESentence:
    """Tests for RTESentence getters."""

    def test_sequence_position(self):
        sentence = RTESentence.parse(RTE)
        assert sentence.get_sentence_count() == 2
        assert sentence.get_sentence_index() == 1
        assert sentence.is_first() is True
        assert sentence.is_last() is False

    def test_route_type(self):
        sentence = RTESentence.parse(RTE)
        assert sentence.get_route_type() is RouteType.ACTIVE
        assert sentence.is_active_route() is True
        assert sentence.is_working_route() is False

    def test_route_id(self):
        assert RTESentence.parse(RTE).get_route_id() == "0"

    def test_waypoint_ids(self):
        sentence = RTESentence.parse(RTE)
        ids = sentence.get_waypoint_ids()
        assert ids[0] == "PBRCPK"
        assert ids[-1] == "PLISMR"
        assert sentence.get_waypoint_count() == 9

    def test_unknown_route_type(self):
        sentence = RTESentence.parse(with_checksum("$GPRTE,1,1,x,0,A"))
        with pytest.raises(MalformedField):
            sentence.get_route_type()


class TestRTEBuilding:
    """Tests for RTESentence setters."""

    def test_empty_has_no_waypoints(self):
        sentence = RTESentence.empty()
        assert sentence.field_count == 4
        assert sentence.get_waypoint_ids() == []

    def test_build(self):
        sentence = RTESentence.empty()
        sentence.set_sentence_count(1)
        sentence.set_sentence_index(1)
        sentence.set_route_type(RouteType.WORKING)
        sentence.set_route_id("ROUTE1")
        sentence.set_waypoint_ids(["A", "B"])
        assert sentence.add_waypoint_id("C") == 3
        assert sentence.to_sentence() == with_checksum("$GPRTE,1,1,w,ROUTE1,A,B,C")
        assert sentence.is_last() is True

    def test_set_waypoint_ids_replaces_list(self):
        sentence = RTESentence.parse(RTE)
        sentence.set_waypoint_ids(["ONE"])
        assert sentence.field_count == 5
        assert sentence.get_waypoint_ids() == ["ONE"]
        assert sentence.get_route_id() == "0"

    def test_invalid_waypoint_id(self):
        sentence = RTESentence.empty()
        with pytest.raises(ValueError):
            sentence.add_waypoint_id("A*B")
        with pytest.raises(ValueError):
            sentence.set_waypoint_ids([""])

    @pytest.mark.parametrize("value", [0, -1])
    def test_count_and_index_must_be_positive(self, value):
        sentence = RTESentence.empty()
        with pytest.raises(ValueError):
            sentence.set_sentence_count(value)
        with pytest.raises(ValueError):
            sentence.set_sentence_index(value)
