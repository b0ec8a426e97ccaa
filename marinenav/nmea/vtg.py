"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from enum import IntEnum

from marinenav.nmea.sentence import Sentence, check_bearing, check_non_negative
from marinenav.nmea.types import (
    MAGNETIC_INDICATOR,
    TRUE_INDICATOR,
    GpsMode,
    SentenceId,
    Units,
)

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


class VTGField(IntEnum):
    TRUE_COURSE = 1
    TRUE_INDICATOR = 2
    MAGNETIC_COURSE = 3
    MAGNETIC_INDICATOR = 4
    SPEED_KNOTS = 5
    KNOTS_INDICATOR = 6
    SPEED_KMH = 7
    KMH_INDICATOR = 8
    MODE = 9


class VTGSentence(Sentence):
    """Course and speed over ground."""

    sentence_id = SentenceId.VTG
    layout = VTGField

    def _initialize(self) -> None:
        self.set_field(VTGField.TRUE_INDICATOR, TRUE_INDICATOR)
        self.set_field(VTGField.MAGNETIC_INDICATOR, MAGNETIC_INDICATOR)
        self.set_field(VTGField.KNOTS_INDICATOR, Units.KNOT.to_char())
        self.set_field(VTGField.KMH_INDICATOR, Units.KMH.to_char())

    def get_true_course(self) -> float:
        """Track relative to true north in degrees; empty when stationary."""
        return self.fields.float_field(VTGField.TRUE_COURSE)

    def get_magnetic_course(self) -> float:
        return self.fields.float_field(VTGField.MAGNETIC_COURSE)

    def get_speed_knots(self) -> float:
        return self.fields.float_field(VTGField.SPEED_KNOTS)

    def get_speed_kmh(self) -> float:
        return self.fields.float_field(VTGField.SPEED_KMH)

    def get_speed_mps(self) -> float:
        """Ground speed in m/s, derived from the km/h field."""
        return self.get_speed_kmh() / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND

    def get_mode(self) -> GpsMode:
        """FAA mode; missing on receivers older than NMEA 2.3.

        Raises:
            FieldNotAvailable: If the sentence has no mode field.
        """
        return self.fields.enum_field(VTGField.MODE, GpsMode)

    def set_true_course(self, course: float) -> None:
        check_bearing(course, "course")
        self._set_float(VTGField.TRUE_COURSE, course)

    def set_magnetic_course(self, course: float) -> None:
        check_bearing(course, "course")
        self._set_float(VTGField.MAGNETIC_COURSE, course)

    def set_speed_knots(self, speed: float) -> None:
        check_non_negative(speed, "speed")
        self._set_float(VTGField.SPEED_KNOTS, speed)

    def set_speed_kmh(self, speed: float) -> None:
        check_non_negative(speed, "speed")
        self._set_float(VTGField.SPEED_KMH, speed)

    def set_mode(self, mode: GpsMode) -> None:
        self._set_enum(VTGField.MODE, mode, GpsMode)
