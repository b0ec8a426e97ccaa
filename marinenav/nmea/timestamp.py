"""Time and date composition.

Time Format:
    hhmmss or hhmmss.sss  ("123519.00" -> 12:35:19.00 UTC)

Date Format (RMC):
    ddmmyy  ("230394" -> 23 March 1994)

NMEA dates carry a two-digit year. It is resolved against ``PIVOT_YEAR``:

    y <= PIVOT_YEAR      -> 2000 + y   ("05" -> 2005)
    PIVOT_YEAR < y < 100 -> 1900 + y   ("99" -> 1999)
    y >= 100             -> y          (already four digits, e.g. ZDA)

The pivot is a fixed constant for the whole package, never a per-call
argument.
"""

from marinenav.nmea.errors import MalformedField
from marinenav.nmea.fields import FieldAccessor, format_float, is_digits
from marinenav.nmea.types import UtcDate, UtcTime

PIVOT_YEAR = 80

_TIME_PREFIX_LENGTH = 6
_DATE_LENGTH = 6


def resolve_year(year: int) -> int:
    """Expand a two-digit year to four digits using ``PIVOT_YEAR``.

    Example:
        >>> resolve_year(99)
        1999
        >>> resolve_year(5)
        2005
        >>> resolve_year(2004)
        2004
    """
    if year <= PIVOT_YEAR:
        return year + 2000
    if year < 100:
        return year + 1900
    return year


def parse_time(fields: FieldAccessor, index: int) -> UtcTime:
    """Parse an ``hhmmss[.sss]`` field into a ``UtcTime``.

    Raises:
        FieldNotAvailable: If the field is empty.
        MalformedField: If the field is not in ``hhmmss[.sss]`` form or a
            component is out of range.
    """
    value = fields.string_field(index)
    clock = value[:_TIME_PREFIX_LENGTH]
    fraction = value[_TIME_PREFIX_LENGTH:]

    if len(clock) != _TIME_PREFIX_LENGTH or not is_digits(clock):
        raise MalformedField(index, value, "expected hhmmss")
    if fraction and (fraction[0] != "." or not is_digits(fraction[1:])):
        raise MalformedField(index, value, "invalid fractional seconds")

    try:
        return UtcTime(
            hour=int(clock[0:2]),
            minute=int(clock[2:4]),
            second=float(clock[4:6] + fraction),
        )
    except ValueError as e:
        raise MalformedField(index, value, str(e)) from None


def parse_date(fields: FieldAccessor, index: int) -> UtcDate:
    """Parse a ``ddmmyy`` field into a ``UtcDate``.

    Raises:
        FieldNotAvailable: If the field is empty.
        MalformedField: If the field is not six digits or is not a calendar
            date.
    """
    value = fields.string_field(index)
    if len(value) != _DATE_LENGTH or not is_digits(value):
        raise MalformedField(index, value, "expected ddmmyy")
    return make_date(index, value, int(value[4:6]), int(value[2:4]), int(value[0:2]))


def make_date(index: int, value: str, year: int, month: int, day: int) -> UtcDate:
    """Build a ``UtcDate`` from raw components, resolving a two-digit year.

    Raises:
        MalformedField: Reported against field ``index`` holding ``value``
            if the components do not form a calendar date.
    """
    try:
        return UtcDate(resolve_year(year), month, day)
    except ValueError as e:
        raise MalformedField(index, value, str(e)) from None


def format_time(time: UtcTime) -> str:
    """Render a ``UtcTime`` as ``hhmmss`` with fractional seconds if present.

    Example:
        >>> format_time(UtcTime(12, 35, 19.5))
        '123519.5'
        >>> format_time(UtcTime(12, 35, 19.0))
        '123519'
    """
    seconds = format_float(time.second, 0)
    whole, _, fraction = seconds.partition(".")
    text = f"{time.hour:02d}{time.minute:02d}{int(whole):02d}"
    if fraction:
        text = f"{text}.{fraction}"
    return text


def format_date(date: UtcDate) -> str:
    """Render a ``UtcDate`` as ``ddmmyy``.

    Raises:
        ValueError: If the year cannot be written with two digits and read
            back unchanged under ``PIVOT_YEAR``.
    """
    short_year = date.year % 100
    if resolve_year(short_year) != date.year:
        raise ValueError(
            f"year {date.year} cannot be written as two digits (pivot {PIVOT_YEAR})"
        )
    return f"{date.day:02d}{date.month:02d}{short_year:02d}"
