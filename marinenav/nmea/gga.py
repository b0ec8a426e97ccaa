"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |    | | |
           |         |        | |         | | |  |   |     | |    | | +-- DGPS station ID
           |         |        | |         | | |  |   |     | |    | +-- DGPS data age (s)
           |         |        | |         | | |  |   |     | +----+-- Geoidal height + units
           |         |        | |         | | |  |   +-----+-- Altitude above MSL + units
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-8)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (hhmmss.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from enum import IntEnum

from marinenav.nmea.position import parse_position
from marinenav.nmea.sentence import Sentence, check_non_negative
from marinenav.nmea.timestamp import format_time, parse_time
from marinenav.nmea.types import (
    GpsFixQuality,
    Position,
    SentenceId,
    Units,
    UtcTime,
)

_LENGTH_UNITS = (Units.METER, Units.FEET)


class GGAField(IntEnum):
    UTC_TIME = 1
    LATITUDE = 2
    LAT_HEMISPHERE = 3
    LONGITUDE = 4
    LON_HEMISPHERE = 5
    FIX_QUALITY = 6
    SATELLITES_IN_USE = 7
    HORIZONTAL_DILUTION = 8
    ALTITUDE = 9
    ALTITUDE_UNITS = 10
    GEOIDAL_HEIGHT = 11
    GEOIDAL_HEIGHT_UNITS = 12
    DGPS_AGE = 13
    DGPS_STATION_ID = 14


class GGASentence(Sentence):
    """Global positioning system fix data."""

    sentence_id = SentenceId.GGA
    layout = GGAField

    def _initialize(self) -> None:
        self.set_field(GGAField.ALTITUDE_UNITS, Units.METER.to_char())
        self.set_field(GGAField.GEOIDAL_HEIGHT_UNITS, Units.METER.to_char())

    def get_time(self) -> UtcTime:
        return parse_time(self.fields, GGAField.UTC_TIME)

    def get_position(self) -> Position:
        return parse_position(
            self.fields,
            GGAField.LATITUDE,
            GGAField.LAT_HEMISPHERE,
            GGAField.LONGITUDE,
            GGAField.LON_HEMISPHERE,
        )

    def get_fix_quality(self) -> GpsFixQuality:
        return self.fields.enum_field(GGAField.FIX_QUALITY, GpsFixQuality)

    def get_satellite_count(self) -> int:
        return self.fields.int_field(GGAField.SATELLITES_IN_USE)

    def get_horizontal_dop(self) -> float:
        return self.fields.float_field(GGAField.HORIZONTAL_DILUTION)

    def get_altitude(self) -> float:
        """Altitude above mean sea level, in ``get_altitude_units()``."""
        return self.fields.float_field(GGAField.ALTITUDE)

    def get_altitude_units(self) -> Units:
        return self.fields.enum_field(GGAField.ALTITUDE_UNITS, Units)

    def get_geoidal_height(self) -> float:
        """Height of the geoid (MSL) above the WGS84 ellipsoid."""
        return self.fields.float_field(GGAField.GEOIDAL_HEIGHT)

    def get_geoidal_height_units(self) -> Units:
        return self.fields.enum_field(GGAField.GEOIDAL_HEIGHT_UNITS, Units)

    def get_dgps_age(self) -> float:
        """Seconds since the last DGPS update."""
        return self.fields.float_field(GGAField.DGPS_AGE)

    def get_dgps_station_id(self) -> str:
        return self.fields.string_field(GGAField.DGPS_STATION_ID)

    def set_time(self, time: UtcTime) -> None:
        self.set_field(GGAField.UTC_TIME, format_time(time))

    def set_position(self, position: Position) -> None:
        self._set_position(
            position,
            GGAField.LATITUDE,
            GGAField.LAT_HEMISPHERE,
            GGAField.LONGITUDE,
            GGAField.LON_HEMISPHERE,
        )

    def set_fix_quality(self, quality: GpsFixQuality) -> None:
        self._set_enum(GGAField.FIX_QUALITY, quality, GpsFixQuality)

    def set_satellite_count(self, count: int) -> None:
        self._set_integer(GGAField.SATELLITES_IN_USE, count, width=2)

    def set_horizontal_dop(self, hdop: float) -> None:
        check_non_negative(hdop, "HDOP")
        self._set_float(GGAField.HORIZONTAL_DILUTION, hdop)

    def set_altitude(self, altitude: float, units: Units = Units.METER) -> None:
        if units not in _LENGTH_UNITS:
            raise ValueError(f"{units} is not a length unit")
        self._set_float(GGAField.ALTITUDE, altitude)
        self.set_field(GGAField.ALTITUDE_UNITS, units.to_char())

    def set_geoidal_height(self, height: float, units: Units = Units.METER) -> None:
        if units not in _LENGTH_UNITS:
            raise ValueError(f"{units} is not a length unit")
        self._set_float(GGAField.GEOIDAL_HEIGHT, height)
        self.set_field(GGAField.GEOIDAL_HEIGHT_UNITS, units.to_char())

    def set_dgps_age(self, age: float) -> None:
        check_non_negative(age, "DGPS age")
        self._set_float(GGAField.DGPS_AGE, age)

    def set_dgps_station_id(self, station_id: str) -> None:
        self.set_field(GGAField.DGPS_STATION_ID, station_id)
