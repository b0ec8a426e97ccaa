"""Marine navigation data: NMEA 0183 sentence decoding and encoding."""

from marinenav.nmea import (
    FieldNotAvailable,
    FramingError,
    MalformedField,
    NMEAError,
    Sentence,
    SentenceFactory,
    SentenceId,
    parse_sentence,
)

__all__ = [
    "FieldNotAvailable",
    "FramingError",
    "MalformedField",
    "NMEAError",
    "Sentence",
    "SentenceFactory",
    "SentenceId",
    "parse_sentence",
]
