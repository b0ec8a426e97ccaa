"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude) reports a position with the
time of fix and a status flag.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,A*hh
           |       | |        | |      | |
           |       | |        | |      | +-- Mode (NMEA 2.3+)
           |       | |        | |      +-- Status (A=active, V=void)
           |       | |        | +-- UTC time of fix
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from enum import IntEnum

from marinenav.nmea.position import parse_position
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.timestamp import format_time, parse_time
from marinenav.nmea.types import DataStatus, GpsMode, Position, SentenceId, UtcTime


class GLLField(IntEnum):
    LATITUDE = 1
    LAT_HEMISPHERE = 2
    LONGITUDE = 3
    LON_HEMISPHERE = 4
    UTC_TIME = 5
    DATA_STATUS = 6
    MODE = 7


class GLLSentence(Sentence):
    """Geographic position, latitude and longitude."""

    sentence_id = SentenceId.GLL
    layout = GLLField

    def get_position(self) -> Position:
        return parse_position(
            self.fields,
            GLLField.LATITUDE,
            GLLField.LAT_HEMISPHERE,
            GLLField.LONGITUDE,
            GLLField.LON_HEMISPHERE,
        )

    def get_time(self) -> UtcTime:
        return parse_time(self.fields, GLLField.UTC_TIME)

    def get_data_status(self) -> DataStatus:
        return self.fields.enum_field(GLLField.DATA_STATUS, DataStatus)

    def get_mode(self) -> GpsMode:
        return self.fields.enum_field(GLLField.MODE, GpsMode)

    def set_position(self, position: Position) -> None:
        self._set_position(
            position,
            GLLField.LATITUDE,
            GLLField.LAT_HEMISPHERE,
            GLLField.LONGITUDE,
            GLLField.LON_HEMISPHERE,
        )

    def set_time(self, time: UtcTime) -> None:
        self.set_field(GLLField.UTC_TIME, format_time(time))

    def set_data_status(self, status: DataStatus) -> None:
        self._set_enum(GLLField.DATA_STATUS, status, DataStatus)

    def set_mode(self, mode: GpsMode) -> None:
        self._set_enum(GLLField.MODE, mode, GpsMode)
