"""GSV sentence parser.

GSV (Satellites in View) reports up to four satellites per sentence; a
receiver sends as many sentences as needed to cover every satellite.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  +--+--+---+-- Satellite block: ID, elevation, azimuth, SNR
           | | |                (repeated up to four times)
           | | +-- Total satellites in view
           | +-- Sentence number (1-based)
           +-- Total number of sentences

SNR is empty while a satellite is in view but not tracked.
"""

from enum import IntEnum

from marinenav.nmea.errors import MalformedField
from marinenav.nmea.fields import format_integer
from marinenav.nmea.framing import check_field_value
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.types import SatelliteInfo, SentenceId

MAX_SATELLITES_PER_SENTENCE = 4

# Offsets inside one satellite block
_ID, _ELEVATION, _AZIMUTH, _NOISE = range(4)
_BLOCK_SIZE = 4


class GSVField(IntEnum):
    SENTENCE_COUNT = 1
    SENTENCE_INDEX = 2
    SATELLITE_COUNT = 3
    FIRST_SATELLITE = 4
    LAST_FIELD = FIRST_SATELLITE + MAX_SATELLITES_PER_SENTENCE * _BLOCK_SIZE - 1


def _block_start(slot: int) -> int:
    return GSVField.FIRST_SATELLITE + slot * _BLOCK_SIZE


class GSVSentence(Sentence):
    """Satellites in view, one part of a GSV sequence."""

    sentence_id = SentenceId.GSV
    layout = GSVField

    def get_sentence_count(self) -> int:
        return self.fields.int_field(GSVField.SENTENCE_COUNT)

    def get_sentence_index(self) -> int:
        return self.fields.int_field(GSVField.SENTENCE_INDEX)

    def is_first(self) -> bool:
        return self.get_sentence_index() == 1

    def is_last(self) -> bool:
        return self.get_sentence_index() == self.get_sentence_count()

    def get_satellite_count(self) -> int:
        """Total satellites in view across the whole sequence."""
        return self.fields.int_field(GSVField.SATELLITE_COUNT)

    def get_satellite_info(self) -> list[SatelliteInfo]:
        """Satellites reported in this sentence.

        Blocks whose ID field is empty are skipped; the last sentence of a
        sequence is often shorter or padded with empty blocks.

        Raises:
            FieldNotAvailable: If a block has an ID but no elevation or
                azimuth.
            MalformedField: If a block holds non-numeric or out-of-range
                values.
        """
        fields = self.fields
        satellites = []
        for slot in range(MAX_SATELLITES_PER_SENTENCE):
            start = _block_start(slot)
            if not fields.has_value(start + _ID):
                continue
            noise = None
            if fields.has_value(start + _NOISE):
                noise = fields.int_field(start + _NOISE)
            elevation = fields.int_field(start + _ELEVATION)
            azimuth = fields.int_field(start + _AZIMUTH)
            try:
                satellites.append(
                    SatelliteInfo(
                        id=fields.string_field(start + _ID),
                        elevation=elevation,
                        azimuth=azimuth,
                        noise=noise,
                    )
                )
            except ValueError as e:
                raise MalformedField(start, fields.string_field(start + _ID), str(e)) from None
        return satellites

    def set_sentence_count(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"sentence count must be at least 1, got {count}")
        self._set_integer(GSVField.SENTENCE_COUNT, count)

    def set_sentence_index(self, index: int) -> None:
        if index < 1:
            raise ValueError(f"sentence index must be at least 1, got {index}")
        self._set_integer(GSVField.SENTENCE_INDEX, index)

    def set_satellite_count(self, count: int) -> None:
        self._set_integer(GSVField.SATELLITE_COUNT, count, width=2)

    def set_satellite_info(self, satellites: list[SatelliteInfo]) -> None:
        """Write up to four satellite blocks, dropping any unused trailing blocks.

        Raises:
            ValueError: If more than four satellites are given.
        """
        if len(satellites) > MAX_SATELLITES_PER_SENTENCE:
            raise ValueError(
                f"at most {MAX_SATELLITES_PER_SENTENCE} satellites per sentence, "
                f"got {len(satellites)}"
            )
        fields = list(self.raw.fields[: GSVField.FIRST_SATELLITE - 1])
        fields.extend([""] * (GSVField.FIRST_SATELLITE - 1 - len(fields)))
        for satellite in satellites:
            if not isinstance(satellite, SatelliteInfo):
                raise ValueError(f"expected SatelliteInfo, got {satellite!r}")
            check_field_value(satellite.id)
            fields.extend(
                (
                    satellite.id,
                    format_integer(satellite.elevation, 2),
                    format_integer(satellite.azimuth, 3),
                    "" if satellite.noise is None else format_integer(satellite.noise, 2),
                )
            )
        self._raw = self._raw.with_fields(fields)
