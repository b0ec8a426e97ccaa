"""RMB sentence parser.

RMB (Recommended Minimum Navigation Information) is sent by a navigation
receiver while a destination waypoint is active (GOTO mode).

RMB Sentence Format:
    $GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58
           | |    | | |     |        | |         | |     |     | |
           | |    | | |     |        | |         | |     |     | +-- Arrival status (A=arrived)
           | |    | | |     |        | |         | |     |     +-- Velocity towards destination (knots)
           | |    | | |     |        | |         | |     +-- Bearing to destination (degrees true)
           | |    | | |     |        | |         | +-- Range to destination (nm)
           | |    | | |     +--------+-+---------+-- Destination latitude, longitude
           | |    | | +-- Destination waypoint ID
           | |    | +-- Origin waypoint ID
           | |    +-- Direction to steer (L/R)
           | +-- Cross track error (nm)
           +-- Status (A=active, V=void)

An optional FAA mode field follows the arrival status in NMEA 2.3+.
"""

from enum import IntEnum

from marinenav.nmea.framing import check_field_value
from marinenav.nmea.position import parse_direction, parse_waypoint
from marinenav.nmea.sentence import Sentence, check_bearing, check_non_negative
from marinenav.nmea.types import (
    STEERING_DIRECTIONS,
    DataStatus,
    Direction,
    GpsMode,
    SentenceId,
    Waypoint,
)


class RMBField(IntEnum):
    STATUS = 1
    CROSS_TRACK_ERROR = 2
    STEER_TO = 3
    ORIGIN_ID = 4
    DESTINATION_ID = 5
    DEST_LATITUDE = 6
    DEST_LAT_HEMISPHERE = 7
    DEST_LONGITUDE = 8
    DEST_LON_HEMISPHERE = 9
    RANGE = 10
    BEARING = 11
    VELOCITY = 12
    ARRIVAL_STATUS = 13
    MODE = 14


class RMBSentence(Sentence):
    """Recommended minimum navigation information."""

    sentence_id = SentenceId.RMB
    layout = RMBField

    def get_status(self) -> DataStatus:
        return self.fields.enum_field(RMBField.STATUS, DataStatus)

    def get_cross_track_error(self) -> float:
        """Cross track error (XTE) in nautical miles."""
        return self.fields.float_field(RMBField.CROSS_TRACK_ERROR)

    def get_steer_to(self) -> Direction:
        """Direction to steer to correct the error, LEFT or RIGHT."""
        return parse_direction(self.fields, RMBField.STEER_TO, STEERING_DIRECTIONS)

    def get_origin_id(self) -> str:
        return self.fields.string_field(RMBField.ORIGIN_ID)

    def get_destination(self) -> Waypoint:
        return parse_waypoint(
            self.fields,
            RMBField.DESTINATION_ID,
            RMBField.DEST_LATITUDE,
            RMBField.DEST_LAT_HEMISPHERE,
            RMBField.DEST_LONGITUDE,
            RMBField.DEST_LON_HEMISPHERE,
        )

    def get_range(self) -> float:
        """Range to destination in nautical miles."""
        return self.fields.float_field(RMBField.RANGE)

    def get_bearing(self) -> float:
        """True bearing to destination in degrees."""
        return self.fields.float_field(RMBField.BEARING)

    def get_velocity(self) -> float:
        """Velocity towards destination in knots."""
        return self.fields.float_field(RMBField.VELOCITY)

    def get_arrival_status(self) -> DataStatus:
        """ACTIVE once the destination has been reached, VOID before that."""
        return self.fields.enum_field(RMBField.ARRIVAL_STATUS, DataStatus)

    def has_arrived(self) -> bool:
        return self.get_arrival_status() is DataStatus.ACTIVE

    def get_mode(self) -> GpsMode:
        return self.fields.enum_field(RMBField.MODE, GpsMode)

    def set_status(self, status: DataStatus) -> None:
        self._set_enum(RMBField.STATUS, status, DataStatus)

    def set_cross_track_error(self, xte: float) -> None:
        """Write the cross track error magnitude; use ``set_steer_to`` for the side."""
        self._set_float(RMBField.CROSS_TRACK_ERROR, abs(xte), decimals=2)

    def set_steer_to(self, steer: Direction) -> None:
        if steer not in STEERING_DIRECTIONS:
            raise ValueError(f"steer-to must be LEFT or RIGHT, got {steer!r}")
        self.set_field(RMBField.STEER_TO, steer.to_char())

    def set_origin_id(self, origin_id: str) -> None:
        self.set_field(RMBField.ORIGIN_ID, origin_id)

    def set_destination(self, destination: Waypoint) -> None:
        if not isinstance(destination, Waypoint):
            raise ValueError(f"expected Waypoint, got {destination!r}")
        if not destination.id:
            raise ValueError("destination id must not be empty")
        check_field_value(destination.id)
        self._set_position(
            destination.position,
            RMBField.DEST_LATITUDE,
            RMBField.DEST_LAT_HEMISPHERE,
            RMBField.DEST_LONGITUDE,
            RMBField.DEST_LON_HEMISPHERE,
        )
        self.set_field(RMBField.DESTINATION_ID, destination.id)

    def set_range(self, range_: float) -> None:
        check_non_negative(range_, "range")
        self._set_float(RMBField.RANGE, range_)

    def set_bearing(self, bearing: float) -> None:
        check_bearing(bearing)
        self._set_float(RMBField.BEARING, bearing)

    def set_velocity(self, velocity: float) -> None:
        check_non_negative(velocity, "velocity")
        self._set_float(RMBField.VELOCITY, velocity)

    def set_arrival_status(self, status: DataStatus) -> None:
        self._set_enum(RMBField.ARRIVAL_STATUS, status, DataStatus)

    def set_mode(self, mode: GpsMode) -> None:
        self._set_enum(RMBField.MODE, mode, GpsMode)
