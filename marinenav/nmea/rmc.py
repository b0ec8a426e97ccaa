"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) carries time, date, position,
speed and course in one sentence, plus magnetic variation.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*hh
           |      | |        | |         | |     |     |      |     | |
           |      | |        | |         | |     |     |      |     | +-- Mode (NMEA 2.3+)
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (ddmmyy)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (hhmmss.ss)

Sign convention for magnetic variation:
    EAST -> negative (subtract from true course to get magnetic)
    WEST -> positive
"""

import datetime
from enum import IntEnum

from marinenav.nmea.position import parse_direction, parse_position
from marinenav.nmea.sentence import Sentence, check_bearing, check_non_negative
from marinenav.nmea.timestamp import format_date, format_time, parse_date, parse_time
from marinenav.nmea.types import (
    LONGITUDE_HEMISPHERES,
    DataStatus,
    Direction,
    GpsMode,
    Position,
    SentenceId,
    UtcDate,
    UtcTime,
    combine,
)


class RMCField(IntEnum):
    UTC_TIME = 1
    DATA_STATUS = 2
    LATITUDE = 3
    LAT_HEMISPHERE = 4
    LONGITUDE = 5
    LON_HEMISPHERE = 6
    SPEED = 7
    COURSE = 8
    UTC_DATE = 9
    MAG_VARIATION = 10
    VAR_HEMISPHERE = 11
    MODE = 12


class RMCSentence(Sentence):
    """Recommended minimum specific GNSS data."""

    sentence_id = SentenceId.RMC
    layout = RMCField

    def get_time(self) -> UtcTime:
        return parse_time(self.fields, RMCField.UTC_TIME)

    def get_date(self) -> UtcDate:
        """Return the date; two-digit years are resolved with ``PIVOT_YEAR``."""
        return parse_date(self.fields, RMCField.UTC_DATE)

    def get_date_time(self) -> datetime.datetime:
        """Combine date and time into an aware UTC ``datetime``."""
        return combine(self.get_date(), self.get_time())

    def get_data_status(self) -> DataStatus:
        return self.fields.enum_field(RMCField.DATA_STATUS, DataStatus)

    def get_position(self) -> Position:
        return parse_position(
            self.fields,
            RMCField.LATITUDE,
            RMCField.LAT_HEMISPHERE,
            RMCField.LONGITUDE,
            RMCField.LON_HEMISPHERE,
        )

    def get_speed(self) -> float:
        """Speed over ground in knots."""
        return self.fields.float_field(RMCField.SPEED)

    def get_course(self) -> float:
        """Course over ground in degrees true."""
        return self.fields.float_field(RMCField.COURSE)

    def get_direction_of_variation(self) -> Direction:
        """Return EAST or WEST.

        Raises:
            MalformedField: If the field holds any other direction.
        """
        return parse_direction(self.fields, RMCField.VAR_HEMISPHERE, LONGITUDE_HEMISPHERES)

    def get_variation(self) -> float:
        """Magnetic variation; negative when EAST, positive when WEST.

        Raises:
            FieldNotAvailable: If the magnitude or the direction is empty.
        """
        variation = self.fields.float_field(RMCField.MAG_VARIATION)
        if self.get_direction_of_variation() is Direction.EAST:
            return -variation
        return variation

    def get_corrected_course(self) -> float:
        """Course over ground corrected by the magnetic variation."""
        return self.get_course() + self.get_variation()

    def get_mode(self) -> GpsMode:
        """FAA mode; missing on receivers older than NMEA 2.3.

        Raises:
            FieldNotAvailable: If the sentence has no mode field.
        """
        return self.fields.enum_field(RMCField.MODE, GpsMode)

    def set_time(self, time: UtcTime) -> None:
        self.set_field(RMCField.UTC_TIME, format_time(time))

    def set_date(self, date: UtcDate) -> None:
        self.set_field(RMCField.UTC_DATE, format_date(date))

    def set_date_time(self, value: datetime.datetime) -> None:
        """Write date and time from a ``datetime`` (naive values are taken as UTC)."""
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        second = value.second + value.microsecond / 1_000_000
        self.set_date(UtcDate(value.year, value.month, value.day))
        self.set_time(UtcTime(value.hour, value.minute, second))

    def set_data_status(self, status: DataStatus) -> None:
        self._set_enum(RMCField.DATA_STATUS, status, DataStatus)

    def set_position(self, position: Position) -> None:
        self._set_position(
            position,
            RMCField.LATITUDE,
            RMCField.LAT_HEMISPHERE,
            RMCField.LONGITUDE,
            RMCField.LON_HEMISPHERE,
        )

    def set_speed(self, speed: float) -> None:
        check_non_negative(speed, "speed")
        self._set_float(RMCField.SPEED, speed)

    def set_course(self, course: float) -> None:
        check_bearing(course, "course")
        self._set_float(RMCField.COURSE, course)

    def set_variation(self, variation: float) -> None:
        """Write magnetic variation and its direction from a signed value.

        Negative values are written as EAST, others as WEST, the inverse of
        ``get_variation``.

        Raises:
            ValueError: If the magnitude exceeds 180 degrees.
        """
        if not -180.0 <= variation <= 180.0:
            raise ValueError(f"variation {variation} out of range [-180, 180]")
        direction = Direction.EAST if variation < 0 else Direction.WEST
        self._set_float(RMCField.MAG_VARIATION, abs(variation))
        self.set_field(RMCField.VAR_HEMISPHERE, direction.to_char())

    def set_mode(self, mode: GpsMode) -> None:
        self._set_enum(RMCField.MODE, mode, GpsMode)
