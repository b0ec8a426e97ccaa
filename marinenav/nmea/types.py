"""NMEA value types.

This module defines the enumerations and immutable values produced by the
typed sentence parsers.

Design Decisions:
    1. Single-character enumerations use the wire character as the enum
       value, so the char table and its inverse live on the enum itself
       (``from_char`` / ``to_char``).

    2. Values are frozen dataclasses. A parsed sentence hands out fresh
       values on every call; they never refer back to the sentence.

    3. Position keeps the hemisphere next to the signed degrees. A latitude
       of 0.0 carries no sign, so the hemisphere is needed to re-emit the
       sentence exactly as received.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum


class CharEnum(Enum):
    """Enumeration parsed from and written as a single wire character."""

    @classmethod
    def from_char(cls, char: str) -> "CharEnum":
        """Return the member for ``char``.

        Raises:
            ValueError: If ``char`` has no mapping in this enumeration.
        """
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"{char!r} is not a valid {cls.__name__}") from None

    def to_char(self) -> str:
        return self.value


class DataStatus(CharEnum):
    """Validity of the data carried by a sentence."""

    ACTIVE = "A"
    VOID = "V"


class Direction(CharEnum):
    """Compass hemispheres and steering sides."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    LEFT = "L"
    RIGHT = "R"


# Reference indicators written after true and magnetic angles
TRUE_INDICATOR = "T"
MAGNETIC_INDICATOR = "M"

LATITUDE_HEMISPHERES = (Direction.NORTH, Direction.SOUTH)
LONGITUDE_HEMISPHERES = (Direction.EAST, Direction.WEST)
STEERING_DIRECTIONS = (Direction.LEFT, Direction.RIGHT)


class GpsMode(CharEnum):
    """FAA mode indicator (NMEA 2.3+), also the GSA selection mode."""

    AUTOMATIC = "A"
    DGPS = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    SIMULATED = "S"
    NONE = "N"
    PRECISE = "P"
    RTK = "R"
    FLOAT_RTK = "F"


class Units(CharEnum):
    """Measurement units used in unit indicator fields."""

    METER = "M"
    FEET = "f"
    KMH = "K"
    KNOT = "N"


class GpsFixQuality(CharEnum):
    """GGA fix quality indicator.

    0 = Invalid, 1 = GPS (SPS), 2 = DGPS, 3 = PPS, 4 = RTK fixed,
    5 = RTK float, 6 = dead reckoning, 7 = manual input, 8 = simulation.
    """

    INVALID = "0"
    NORMAL = "1"
    DGPS = "2"
    PPS = "3"
    RTK = "4"
    FLOAT_RTK = "5"
    ESTIMATED = "6"
    MANUAL = "7"
    SIMULATED = "8"

    @property
    def code(self) -> int:
        return int(self.value)


class GpsFixStatus(CharEnum):
    """GSA fix type."""

    NO_FIX = "1"
    FIX_2D = "2"
    FIX_3D = "3"


class RouteType(CharEnum):
    """RTE route kind: the complete active route or the working route."""

    ACTIVE = "c"
    WORKING = "w"


class SentenceId(Enum):
    """Sentence types with a typed parser, plus the generic fallback."""

    BOD = "BOD"
    GGA = "GGA"
    GLL = "GLL"
    GSA = "GSA"
    GSV = "GSV"
    RMB = "RMB"
    RMC = "RMC"
    RTE = "RTE"
    VTG = "VTG"
    WPL = "WPL"
    ZDA = "ZDA"
    UNKNOWN = ""

    @classmethod
    def from_code(cls, code: str) -> "SentenceId":
        """Map a sentence type code to its identifier; never fails."""
        if not code:
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


def _hemisphere_for(value: float, positive: Direction, negative: Direction) -> Direction:
    return negative if value < 0 else positive


@dataclass(frozen=True)
class Position:
    """Geographic position in signed decimal degrees.

    Attributes:
        latitude: Latitude in decimal degrees, positive=North.
            Range: -90.0 to +90.0.

        longitude: Longitude in decimal degrees, positive=East.
            Range: -180.0 to +180.0.

        lat_hemisphere: NORTH or SOUTH. Derived from the sign of
            ``latitude`` when omitted.

        lon_hemisphere: EAST or WEST. Derived from the sign of
            ``longitude`` when omitted.

    Raises:
        ValueError: If a coordinate is out of range, a hemisphere belongs to
            the wrong axis, or a non-zero coordinate's sign disagrees with
            its hemisphere.

    Example:
        >>> Position.from_magnitudes(55.6, Direction.NORTH, 14.6, Direction.WEST)
        Position(latitude=55.6, longitude=-14.6, ...)
    """

    latitude: float
    longitude: float
    lat_hemisphere: Direction | None = None
    lon_hemisphere: Direction | None = None

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude {self.latitude} out of range [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude {self.longitude} out of range [-180, 180]")

        if self.lat_hemisphere is None:
            object.__setattr__(
                self,
                "lat_hemisphere",
                _hemisphere_for(self.latitude, Direction.NORTH, Direction.SOUTH),
            )
        if self.lon_hemisphere is None:
            object.__setattr__(
                self,
                "lon_hemisphere",
                _hemisphere_for(self.longitude, Direction.EAST, Direction.WEST),
            )

        _check_hemisphere(self.latitude, self.lat_hemisphere, LATITUDE_HEMISPHERES)
        _check_hemisphere(self.longitude, self.lon_hemisphere, LONGITUDE_HEMISPHERES)

    @classmethod
    def from_magnitudes(
        cls,
        latitude: float,
        lat_hemisphere: Direction,
        longitude: float,
        lon_hemisphere: Direction,
    ) -> "Position":
        """Build a position from unsigned magnitudes and their hemispheres."""
        if latitude < 0 or longitude < 0:
            raise ValueError("magnitudes must not be negative")
        if lat_hemisphere is Direction.SOUTH:
            latitude = -latitude
        if lon_hemisphere is Direction.WEST:
            longitude = -longitude
        return cls(latitude, longitude, lat_hemisphere, lon_hemisphere)


def _check_hemisphere(
    value: float,
    hemisphere: Direction,
    allowed: tuple[Direction, Direction],
) -> None:
    positive, negative = allowed
    if hemisphere not in allowed:
        raise ValueError(f"{hemisphere} is not one of {positive.name}/{negative.name}")
    if value > 0 and hemisphere is negative:
        raise ValueError(f"positive value {value} in {negative.name} hemisphere")
    if value < 0 and hemisphere is positive:
        raise ValueError(f"negative value {value} in {positive.name} hemisphere")


@dataclass(frozen=True)
class Waypoint:
    """Named position; replace the whole value to change it."""

    id: str
    position: Position

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    @property
    def lat_hemisphere(self) -> Direction:
        return self.position.lat_hemisphere

    @property
    def lon_hemisphere(self) -> Direction:
        return self.position.lon_hemisphere


@dataclass(frozen=True)
class UtcTime:
    """Time of day in UTC; ``second`` keeps any fractional part."""

    hour: int
    minute: int
    second: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour {self.hour} out of range [0, 23]")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute {self.minute} out of range [0, 59]")
        # 60 is allowed for leap seconds
        if not 0 <= self.second < 61:
            raise ValueError(f"second {self.second} out of range [0, 61)")

    def to_time(self) -> datetime.time:
        """Convert to ``datetime.time`` (a leap second is clamped to 59.999999)."""
        whole = int(self.second)
        microsecond = round((self.second - whole) * 1_000_000)
        if microsecond == 1_000_000:
            whole, microsecond = whole + 1, 0
        if whole >= 60:
            whole, microsecond = 59, 999_999
        return datetime.time(
            self.hour, self.minute, whole, microsecond, tzinfo=datetime.timezone.utc
        )


@dataclass(frozen=True)
class UtcDate:
    """Calendar date with a four-digit year and a 1-based month."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # Delegates day-of-month validation to the calendar
        self.to_date()

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)


def combine(
    date: UtcDate,
    time: UtcTime,
    tz: datetime.tzinfo = datetime.timezone.utc,
) -> datetime.datetime:
    """Combine a date and a time into an aware ``datetime``."""
    return datetime.datetime.combine(date.to_date(), time.to_time()).replace(tzinfo=tz)


@dataclass(frozen=True)
class SatelliteInfo:
    """One satellite reported by a GSV sentence.

    Attributes:
        id: Satellite PRN number as sent, e.g. "07".
        elevation: Elevation in degrees, 0-90.
        azimuth: Azimuth in degrees from true north, 0-359.
        noise: Signal-to-noise ratio in dB-Hz, or None when the satellite
            is not being tracked.
    """

    id: str
    elevation: int
    azimuth: int
    noise: int | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("satellite id must not be empty")
        if not 0 <= self.elevation <= 90:
            raise ValueError(f"elevation {self.elevation} out of range [0, 90]")
        if not 0 <= self.azimuth <= 359:
            raise ValueError(f"azimuth {self.azimuth} out of range [0, 359]")
        if self.noise is not None and not 0 <= self.noise <= 99:
            raise ValueError(f"noise {self.noise} out of range [0, 99]")
