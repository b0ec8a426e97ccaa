"""BOD sentence parser.

BOD (Bearing - Origin to Destination) gives the bearing from the origin
waypoint to the destination waypoint.

BOD Sentence Format:
    $GPBOD,234.9,T,228.8,M,RUSKI,*hh
           |     | |     | |     |
           |     | |     | |     +-- Origin waypoint ID
           |     | |     | +-- Destination waypoint ID
           |     | +-----+-- Magnetic bearing
           +-----+-- True bearing
"""

from enum import IntEnum

from marinenav.nmea.sentence import Sentence, check_bearing
from marinenav.nmea.types import MAGNETIC_INDICATOR, TRUE_INDICATOR, SentenceId


class BODField(IntEnum):
    TRUE_BEARING = 1
    TRUE_INDICATOR = 2
    MAGNETIC_BEARING = 3
    MAGNETIC_INDICATOR = 4
    DESTINATION_ID = 5
    ORIGIN_ID = 6


class BODSentence(Sentence):
    """Bearing from origin to destination waypoint."""

    sentence_id = SentenceId.BOD
    layout = BODField

    def _initialize(self) -> None:
        self.set_field(BODField.TRUE_INDICATOR, TRUE_INDICATOR)
        self.set_field(BODField.MAGNETIC_INDICATOR, MAGNETIC_INDICATOR)

    def get_true_bearing(self) -> float:
        return self.fields.float_field(BODField.TRUE_BEARING)

    def get_magnetic_bearing(self) -> float:
        return self.fields.float_field(BODField.MAGNETIC_BEARING)

    def get_destination_id(self) -> str:
        return self.fields.string_field(BODField.DESTINATION_ID)

    def get_origin_id(self) -> str:
        """Origin waypoint; empty while navigating from the present position."""
        return self.fields.string_field(BODField.ORIGIN_ID)

    def set_true_bearing(self, bearing: float) -> None:
        check_bearing(bearing)
        self._set_float(BODField.TRUE_BEARING, bearing)

    def set_magnetic_bearing(self, bearing: float) -> None:
        check_bearing(bearing)
        self._set_float(BODField.MAGNETIC_BEARING, bearing)

    def set_destination_id(self, destination_id: str) -> None:
        self.set_field(BODField.DESTINATION_ID, destination_id)

    def set_origin_id(self, origin_id: str) -> None:
        self.set_field(BODField.ORIGIN_ID, origin_id)
