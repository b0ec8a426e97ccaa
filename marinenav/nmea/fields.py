"""NMEA field access utilities.

This module provides typed access to the individual fields of a framed
sentence. NMEA fields are comma-separated and may be empty (consecutive
commas indicate missing data). Every accessor raises instead of returning a
sentinel value, so callers can tell three situations apart:

    FieldNotAvailable -> field is empty, or the sentence is too short
    MalformedField    -> field has text that does not convert
    a value           -> field converted

Numbers follow a fixed grammar, independent of locale: an optional sign,
digits, and for floats an optional '.' fraction. Exponents, underscores,
embedded whitespace and "nan"/"inf" are rejected.
"""

import re
from typing import TypeVar

from marinenav.nmea.errors import FieldNotAvailable, MalformedField
from marinenav.nmea.framing import RawSentence
from marinenav.nmea.types import CharEnum

E = TypeVar("E", bound=CharEnum)

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")
_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Upper bound on fraction digits tried when rendering a float exactly
_MAX_DECIMALS = 17


def is_digits(value: str) -> bool:
    """True if ``value`` is one or more ASCII digits, with nothing else.

    Unlike ``str.isdigit`` this refuses superscripts and non-Latin digits.
    """
    return _DIGITS_PATTERN.fullmatch(value) is not None


def parse_integer(value: str) -> int | None:
    """Parse integer text, returning None if it does not match the grammar.

    Example:
        >>> parse_integer("08")
        8
        >>> parse_integer("1.5") is None
        True
    """
    if not _INTEGER_PATTERN.match(value):
        return None
    return int(value)


def parse_decimal(value: str) -> float | None:
    """Parse decimal text, returning None if it does not match the grammar.

    Example:
        >>> parse_decimal("545.4")
        545.4
        >>> parse_decimal("1e3") is None
        True
    """
    if not _DECIMAL_PATTERN.match(value):
        return None
    return float(value)


def format_float(value: float, decimals: int = 1) -> str:
    """Render ``value`` in plain decimal notation.

    At least ``decimals`` fraction digits are written, and more when needed
    for the text to parse back to exactly ``value``.

    Example:
        >>> format_float(5.0)
        '5.0'
        >>> format_float(12.345)
        '12.345'
    """
    for places in range(decimals, _MAX_DECIMALS + 1):
        text = f"{value:.{places}f}"
        if float(text) == value:
            return text
    return f"{value:.{_MAX_DECIMALS}f}"


def format_integer(value: int, width: int = 0) -> str:
    """Render a non-negative integer zero-padded to ``width`` digits."""
    return f"{value:0{width}d}"


class FieldAccessor:
    """Typed read access to the fields of a ``RawSentence``.

    Indexes are 1-based, matching NMEA documentation: in
    ``$GPWPL,5536.200,N,01436.500,E,RUSKI`` field 1 is ``"5536.200"`` and
    field 5 is ``"RUSKI"``.

    The accessor holds no state besides the immutable sentence, so it may be
    shared freely.

    Example:
        >>> fields = FieldAccessor(frame("$GPWPL,5536.200,N,01436.500,E,RUSKI*1F"))
        >>> fields.float_field(1)
        5536.2
        >>> fields.string_field(5)
        'RUSKI'
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: RawSentence) -> None:
        self._raw = raw

    @property
    def raw(self) -> RawSentence:
        return self._raw

    def __len__(self) -> int:
        return self._raw.field_count

    def has_value(self, index: int) -> bool:
        """Tell whether field ``index`` exists and is non-empty."""
        return bool(self._raw.field(index))

    def string_field(self, index: int) -> str:
        """Return the raw text of a field.

        Raises:
            FieldNotAvailable: If the field is empty or past the end.
            IndexError: If ``index`` is smaller than 1.
        """
        value = self._raw.field(index)
        if not value:
            raise FieldNotAvailable(index)
        return value

    def int_field(self, index: int) -> int:
        """Parse a field as an integer.

        Raises:
            FieldNotAvailable: If the field is empty or past the end.
            MalformedField: If the text is not an integer.
        """
        value = self.string_field(index)
        parsed = parse_integer(value)
        if parsed is None:
            raise MalformedField(index, value, "not an integer")
        return parsed

    def float_field(self, index: int) -> float:
        """Parse a field as a decimal number.

        Raises:
            FieldNotAvailable: If the field is empty or past the end.
            MalformedField: If the text is not a decimal number.
        """
        value = self.string_field(index)
        parsed = parse_decimal(value)
        if parsed is None:
            raise MalformedField(index, value, "not a decimal number")
        return parsed

    def char_field(self, index: int) -> str:
        """Return the character of a single-character field.

        Raises:
            FieldNotAvailable: If the field is empty or past the end.
            MalformedField: If the field holds more than one character.
        """
        value = self.string_field(index)
        if len(value) != 1:
            raise MalformedField(index, value, "expected a single character")
        return value

    def enum_field(self, index: int, kind: type[E]) -> E:
        """Map a single-character field through an enumeration's char table.

        Raises:
            FieldNotAvailable: If the field is empty or past the end.
            MalformedField: If the field is not one character or the
                character has no member in ``kind``.
        """
        char = self.char_field(index)
        try:
            return kind.from_char(char)
        except ValueError:
            raise MalformedField(index, char, f"not a {kind.__name__}") from None
