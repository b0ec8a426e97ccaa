"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
current fix together with the dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                       |   |   |
           | | |                       |   |   +-- VDOP
           | | |                       |   +-- HDOP
           | | |                       +-- PDOP
           | | +-- IDs of satellites used in the fix, 12 fields
           | +-- Fix type (1=no fix, 2=2D, 3=3D)
           +-- Selection mode (A=automatic, M=manual)
"""

from enum import IntEnum

from marinenav.nmea.framing import check_field_value
from marinenav.nmea.sentence import Sentence, check_non_negative
from marinenav.nmea.types import GpsFixStatus, GpsMode, SentenceId

MAX_SATELLITES = 12


class GSAField(IntEnum):
    MODE = 1
    FIX_STATUS = 2
    FIRST_SATELLITE_ID = 3
    LAST_SATELLITE_ID = 14
    POSITION_DOP = 15
    HORIZONTAL_DOP = 16
    VERTICAL_DOP = 17


_SATELLITE_ID_INDEXES = range(GSAField.FIRST_SATELLITE_ID, GSAField.LAST_SATELLITE_ID + 1)


class GSASentence(Sentence):
    """Dilution of precision and the satellites used in the fix."""

    sentence_id = SentenceId.GSA
    layout = GSAField

    def get_mode(self) -> GpsMode:
        """Selection mode, AUTOMATIC or MANUAL."""
        return self.fields.enum_field(GSAField.MODE, GpsMode)

    def get_fix_status(self) -> GpsFixStatus:
        return self.fields.enum_field(GSAField.FIX_STATUS, GpsFixStatus)

    def get_satellite_ids(self) -> list[str]:
        """IDs of the satellites used in the fix; empty slots are skipped."""
        fields = self.fields
        return [
            fields.string_field(index)
            for index in _SATELLITE_ID_INDEXES
            if fields.has_value(index)
        ]

    def get_position_dop(self) -> float:
        return self.fields.float_field(GSAField.POSITION_DOP)

    def get_horizontal_dop(self) -> float:
        return self.fields.float_field(GSAField.HORIZONTAL_DOP)

    def get_vertical_dop(self) -> float:
        return self.fields.float_field(GSAField.VERTICAL_DOP)

    def set_mode(self, mode: GpsMode) -> None:
        if mode not in (GpsMode.AUTOMATIC, GpsMode.MANUAL):
            raise ValueError(f"selection mode must be AUTOMATIC or MANUAL, got {mode!r}")
        self.set_field(GSAField.MODE, mode.to_char())

    def set_fix_status(self, status: GpsFixStatus) -> None:
        self._set_enum(GSAField.FIX_STATUS, status, GpsFixStatus)

    def set_satellite_ids(self, ids: list[str]) -> None:
        """Write up to 12 satellite IDs, clearing the unused slots.

        Raises:
            ValueError: If more than 12 IDs are given or an ID is empty.
        """
        if len(ids) > MAX_SATELLITES:
            raise ValueError(f"at most {MAX_SATELLITES} satellite ids, got {len(ids)}")
        for satellite_id in ids:
            check_field_value(satellite_id)
            if not satellite_id:
                raise ValueError("satellite id must not be empty")
        padded = list(ids) + [""] * (MAX_SATELLITES - len(ids))
        for index, satellite_id in zip(_SATELLITE_ID_INDEXES, padded):
            self.set_field(index, satellite_id)

    def set_position_dop(self, dop: float) -> None:
        check_non_negative(dop, "dop")
        self._set_float(GSAField.POSITION_DOP, dop)

    def set_horizontal_dop(self, dop: float) -> None:
        check_non_negative(dop, "dop")
        self._set_float(GSAField.HORIZONTAL_DOP, dop)

    def set_vertical_dop(self, dop: float) -> None:
        check_non_negative(dop, "dop")
        self._set_float(GSAField.VERTICAL_DOP, dop)
