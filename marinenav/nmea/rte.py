"""RTE sentence parser.

RTE (Routes) lists the waypoints of a route. A long route is split over
several sentences that share the same sentence count.

RTE Sentence Format:
    $GPRTE,2,1,c,0,PBRCPK,PBRTO,PTELGR,PPLAND*hh
           | | | | |
           | | | | +-- Waypoint IDs, any number of fields
           | | | +-- Route ID
           | | +-- Route type (c=complete active route, w=working route)
           | +-- Sentence number (1-based)
           +-- Total number of sentences
"""

from enum import IntEnum

from marinenav.nmea.framing import check_field_value
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.types import RouteType, SentenceId


class RTEField(IntEnum):
    SENTENCE_COUNT = 1
    SENTENCE_INDEX = 2
    ROUTE_TYPE = 3
    ROUTE_ID = 4
    FIRST_WAYPOINT_ID = 5


class RTESentence(Sentence):
    """Route waypoint list, possibly one part of a multi-sentence route."""

    sentence_id = SentenceId.RTE
    layout = RTEField

    def _initialize(self) -> None:
        # A new route holds no waypoints yet
        self.set_waypoint_ids([])

    def get_sentence_count(self) -> int:
        return self.fields.int_field(RTEField.SENTENCE_COUNT)

    def get_sentence_index(self) -> int:
        return self.fields.int_field(RTEField.SENTENCE_INDEX)

    def is_first(self) -> bool:
        return self.get_sentence_index() == 1

    def is_last(self) -> bool:
        return self.get_sentence_index() == self.get_sentence_count()

    def get_route_type(self) -> RouteType:
        return self.fields.enum_field(RTEField.ROUTE_TYPE, RouteType)

    def is_active_route(self) -> bool:
        return self.get_route_type() is RouteType.ACTIVE

    def is_working_route(self) -> bool:
        return self.get_route_type() is RouteType.WORKING

    def get_route_id(self) -> str:
        return self.fields.string_field(RTEField.ROUTE_ID)

    def get_waypoint_count(self) -> int:
        return len(self.get_waypoint_ids())

    def get_waypoint_ids(self) -> list[str]:
        """Waypoint IDs in route order; empty fields are skipped."""
        ids = self.raw.fields[RTEField.FIRST_WAYPOINT_ID - 1:]
        return [waypoint_id for waypoint_id in ids if waypoint_id]

    def set_sentence_count(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"sentence count must be at least 1, got {count}")
        self._set_integer(RTEField.SENTENCE_COUNT, count)

    def set_sentence_index(self, index: int) -> None:
        if index < 1:
            raise ValueError(f"sentence index must be at least 1, got {index}")
        self._set_integer(RTEField.SENTENCE_INDEX, index)

    def set_route_type(self, route_type: RouteType) -> None:
        self._set_enum(RTEField.ROUTE_TYPE, route_type, RouteType)

    def set_route_id(self, route_id: str) -> None:
        self.set_field(RTEField.ROUTE_ID, route_id)

    def set_waypoint_ids(self, ids: list[str]) -> None:
        """Replace the waypoint list; the sentence grows or shrinks to fit.

        Raises:
            ValueError: If an ID is empty or contains reserved characters.
        """
        for waypoint_id in ids:
            check_field_value(waypoint_id)
            if not waypoint_id:
                raise ValueError("waypoint id must not be empty")
        header = list(self.raw.fields[: RTEField.FIRST_WAYPOINT_ID - 1])
        header.extend([""] * (RTEField.FIRST_WAYPOINT_ID - 1 - len(header)))
        self._raw = self._raw.with_fields(header + list(ids))

    def add_waypoint_id(self, waypoint_id: str) -> int:
        """Append one waypoint ID and return the new number of waypoints."""
        ids = self.get_waypoint_ids()
        ids.append(waypoint_id)
        self.set_waypoint_ids(ids)
        return len(ids)
