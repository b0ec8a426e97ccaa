"""ZDA sentence parser.

ZDA (Time & Date) gives UTC time, a full date with a four-digit year, and
the local time zone offset.

ZDA Sentence Format:
    $GPZDA,201530.00,04,07,2002,00,00*hh
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes (same sign as hours)
           |         |  |  |    +-- Local zone hours (-13..13)
           |         |  |  +-- Year (four digits)
           |         |  +-- Month (01-12)
           |         +-- Day (01-31)
           +-- UTC time (hhmmss.ss)
"""

import datetime
from enum import IntEnum

from marinenav.nmea.errors import MalformedField
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.timestamp import format_time, make_date, parse_time
from marinenav.nmea.types import SentenceId, UtcDate, UtcTime, combine

_MAX_ZONE_HOURS = 13


class ZDAField(IntEnum):
    UTC_TIME = 1
    DAY = 2
    MONTH = 3
    YEAR = 4
    LOCAL_ZONE_HOURS = 5
    LOCAL_ZONE_MINUTES = 6


class ZDASentence(Sentence):
    """UTC time and date with local zone description."""

    sentence_id = SentenceId.ZDA
    layout = ZDAField

    def get_time(self) -> UtcTime:
        return parse_time(self.fields, ZDAField.UTC_TIME)

    def get_date(self) -> UtcDate:
        """Return the date; a two-digit year is resolved with ``PIVOT_YEAR``."""
        fields = self.fields
        year = fields.int_field(ZDAField.YEAR)
        month = fields.int_field(ZDAField.MONTH)
        day = fields.int_field(ZDAField.DAY)
        return make_date(
            ZDAField.YEAR, fields.string_field(ZDAField.YEAR), year, month, day
        )

    def get_date_time(self) -> datetime.datetime:
        """Date and time as an aware UTC ``datetime``."""
        return combine(self.get_date(), self.get_time())

    def get_local_zone_hours(self) -> int:
        hours = self.fields.int_field(ZDAField.LOCAL_ZONE_HOURS)
        if abs(hours) > _MAX_ZONE_HOURS:
            raise MalformedField(
                ZDAField.LOCAL_ZONE_HOURS, str(hours), "zone hours out of range"
            )
        return hours

    def get_local_zone_minutes(self) -> int:
        minutes = self.fields.int_field(ZDAField.LOCAL_ZONE_MINUTES)
        if abs(minutes) > 59:
            raise MalformedField(
                ZDAField.LOCAL_ZONE_MINUTES, str(minutes), "zone minutes out of range"
            )
        return minutes

    def get_local_zone(self) -> datetime.timezone:
        """Local zone as a fixed offset from UTC (local = UTC + offset)."""
        hours = self.get_local_zone_hours()
        minutes = abs(self.get_local_zone_minutes())
        # "-00" carries the sign for zones such as -00:30
        if self.fields.string_field(ZDAField.LOCAL_ZONE_HOURS).startswith("-"):
            minutes = -minutes
        return datetime.timezone(datetime.timedelta(hours=hours, minutes=minutes))

    def get_local_date_time(self) -> datetime.datetime:
        """Date and time converted into the local zone."""
        return self.get_date_time().astimezone(self.get_local_zone())

    def set_time(self, time: UtcTime) -> None:
        self.set_field(ZDAField.UTC_TIME, format_time(time))

    def set_date(self, date: UtcDate) -> None:
        """Write the date with a four-digit year.

        Raises:
            ValueError: If the year is below 100, which would read back as a
                two-digit year.
        """
        if date.year < 100:
            raise ValueError(f"year {date.year} cannot be written as four digits")
        self.set_field(ZDAField.DAY, f"{date.day:02d}")
        self.set_field(ZDAField.MONTH, f"{date.month:02d}")
        self.set_field(ZDAField.YEAR, f"{date.year:04d}")

    def set_date_time(self, value: datetime.datetime) -> None:
        """Write date, time and local zone from an aware ``datetime``.

        Naive values are taken as UTC with a zero local zone.
        """
        offset = value.utcoffset() or datetime.timedelta(0)
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        second = value.second + value.microsecond / 1_000_000
        self.set_date(UtcDate(value.year, value.month, value.day))
        self.set_time(UtcTime(value.hour, value.minute, second))
        self.set_local_zone(offset)

    def set_local_zone(self, offset: datetime.timedelta) -> None:
        """Write the local zone offset.

        Raises:
            ValueError: If the offset is not a whole number of minutes or
                exceeds 13 hours 59 minutes.
        """
        total_minutes, remainder = divmod(offset, datetime.timedelta(minutes=1))
        if remainder:
            raise ValueError(f"zone offset {offset} is not a whole number of minutes")
        sign = "-" if total_minutes < 0 else ""
        hours, minutes = divmod(abs(total_minutes), 60)
        if hours > _MAX_ZONE_HOURS:
            raise ValueError(f"zone offset {offset} exceeds {_MAX_ZONE_HOURS} hours")
        self.set_field(ZDAField.LOCAL_ZONE_HOURS, f"{sign}{hours:02d}")
        self.set_field(ZDAField.LOCAL_ZONE_MINUTES, f"{minutes:02d}")
