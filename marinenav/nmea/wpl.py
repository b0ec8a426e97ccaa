"""WPL sentence parser.

WPL (Waypoint Location) names a single waypoint.

WPL Sentence Format:
    $GPWPL,5536.200,N,01436.500,E,RUSKI*1F
           |        | |         | |
           |        | |         | +-- Waypoint identifier
           |        | +---------+-- Longitude + E/W
           +--------+-- Latitude + N/S
"""

from enum import IntEnum

from marinenav.nmea.framing import check_field_value
from marinenav.nmea.position import parse_waypoint
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.types import SentenceId, Waypoint


class WPLField(IntEnum):
    LATITUDE = 1
    LAT_HEMISPHERE = 2
    LONGITUDE = 3
    LON_HEMISPHERE = 4
    WAYPOINT_ID = 5


class WPLSentence(Sentence):
    """Waypoint location."""

    sentence_id = SentenceId.WPL
    layout = WPLField

    def get_waypoint(self) -> Waypoint:
        """Return the waypoint.

        Raises:
            FieldNotAvailable: If the identifier or a position field is empty.
            MalformedField: If a position field cannot be converted.
        """
        return parse_waypoint(
            self.fields,
            WPLField.WAYPOINT_ID,
            WPLField.LATITUDE,
            WPLField.LAT_HEMISPHERE,
            WPLField.LONGITUDE,
            WPLField.LON_HEMISPHERE,
        )

    def set_waypoint(self, waypoint: Waypoint) -> None:
        if not isinstance(waypoint, Waypoint):
            raise ValueError(f"expected Waypoint, got {waypoint!r}")
        if not waypoint.id:
            raise ValueError("waypoint id must not be empty")
        check_field_value(waypoint.id)
        self._set_position(
            waypoint.position,
            WPLField.LATITUDE,
            WPLField.LAT_HEMISPHERE,
            WPLField.LONGITUDE,
            WPLField.LON_HEMISPHERE,
        )
        self.set_field(WPLField.WAYPOINT_ID, waypoint.id)
