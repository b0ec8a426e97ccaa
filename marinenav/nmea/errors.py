"""Exceptions raised while framing and decoding NMEA sentences.

Three failure classes are distinguished so that callers can pick a policy:

    FramingError:
        The line is not an NMEA sentence at all (no sentinel, unreadable
        address field) or, in strict mode, its checksum is absent or wrong.
        Fatal to that line.

    FieldNotAvailable:
        The field is empty or the sentence is too short to carry it.
        Talkers routinely leave fields blank when they have no data, so
        this means "this sentence does not carry the datum", not "corrupt".

    MalformedField:
        The field is present but cannot be converted (non-numeric text,
        unknown enum character, out-of-range coordinate).
"""

from enum import Enum


class NMEAError(Exception):
    """Base class of all NMEA decoding errors."""


class FramingErrorCode(Enum):
    """Reason a line could not be framed."""

    MISSING_SENTINEL = "missing_sentinel"
    INVALID_IDENTIFIER = "invalid_identifier"
    MISSING_CHECKSUM = "missing_checksum"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class FramingError(NMEAError, ValueError):
    """The line could not be framed into a sentence.

    Attributes:
        code: Machine-readable reason, see ``FramingErrorCode``.
        line: The offending line (trailing whitespace stripped).
    """

    def __init__(self, code: FramingErrorCode, line: str, detail: str = "") -> None:
        message = f"{code.value}: {line!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.code = code
        self.line = line


class FieldNotAvailable(NMEAError, LookupError):
    """The requested field is empty or beyond the end of the sentence."""

    def __init__(self, index: int) -> None:
        super().__init__(f"field {index} not available")
        self.index = index


class MalformedField(NMEAError, ValueError):
    """The requested field is present but holds an unusable value."""

    def __init__(self, index: int, value: str, reason: str) -> None:
        super().__init__(f"field {index} {value!r}: {reason}")
        self.index = index
        self.value = value
