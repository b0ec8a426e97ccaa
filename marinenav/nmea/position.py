"""Position and waypoint composition.

NMEA coordinates use a degrees-minutes format with a fixed-width degree
part and a separate hemisphere field:

    latitude:  DDMM.MMMM  ("5536.200"  -> 55 deg 36.200 min)
    longitude: DDDMM.MMMM ("01436.500" -> 14 deg 36.500 min)

The conversion is:
    decimal_degrees = degrees + (minutes / 60)

and the hemisphere supplies the sign: North/East positive, South/West
negative.
"""

from marinenav.nmea.errors import MalformedField
from marinenav.nmea.fields import FieldAccessor, format_float, is_digits, parse_decimal
from marinenav.nmea.types import (
    LATITUDE_HEMISPHERES,
    LONGITUDE_HEMISPHERES,
    Direction,
    Position,
    Waypoint,
)

_LATITUDE_DEGREE_DIGITS = 2
_LONGITUDE_DEGREE_DIGITS = 3

# Digits written after the decimal point of the minutes part
_MINUTE_DECIMALS = 3
_MAX_MINUTE_DECIMALS = 15


def _parse_degrees_minutes(
    fields: FieldAccessor,
    index: int,
    degree_digits: int,
    limit: float,
) -> float:
    value = fields.string_field(index)
    degrees_text = value[:degree_digits]
    minutes_text = value[degree_digits:]

    if len(degrees_text) != degree_digits or not is_digits(degrees_text):
        raise MalformedField(index, value, f"expected {degree_digits} degree digits")

    minutes = parse_decimal(minutes_text)
    if minutes is None or minutes_text.startswith(("+", "-")):
        raise MalformedField(index, value, "invalid minutes")
    if minutes >= 60.0:
        raise MalformedField(index, value, "minutes must be below 60")

    decimal_degrees = int(degrees_text) + minutes / 60.0
    if decimal_degrees > limit:
        raise MalformedField(index, value, f"exceeds {limit} degrees")
    return decimal_degrees


def parse_latitude(fields: FieldAccessor, index: int) -> float:
    """Parse a ``DDMM.MMMM`` field into unsigned decimal degrees.

    Raises:
        FieldNotAvailable: If the field is empty.
        MalformedField: If the field is not in ``DDMM.MMMM`` form or the
            value exceeds 90 degrees.

    Example:
        ``"5536.200"`` -> 55.60333...
    """
    return _parse_degrees_minutes(fields, index, _LATITUDE_DEGREE_DIGITS, 90.0)


def parse_longitude(fields: FieldAccessor, index: int) -> float:
    """Parse a ``DDDMM.MMMM`` field into unsigned decimal degrees.

    Raises:
        FieldNotAvailable: If the field is empty.
        MalformedField: If the field is not in ``DDDMM.MMMM`` form or the
            value exceeds 180 degrees.

    Example:
        ``"01436.500"`` -> 14.60833...
    """
    return _parse_degrees_minutes(fields, index, _LONGITUDE_DEGREE_DIGITS, 180.0)


def parse_direction(
    fields: FieldAccessor,
    index: int,
    allowed: tuple[Direction, Direction],
) -> Direction:
    """Parse a direction field restricted to one pair of directions.

    Raises:
        FieldNotAvailable: If the field is empty.
        MalformedField: If the character is not a direction, or is a valid
            direction outside ``allowed`` ('E' where N/S is expected).
    """
    direction = fields.enum_field(index, Direction)
    if direction not in allowed:
        raise MalformedField(
            index,
            direction.to_char(),
            f"expected {allowed[0].to_char()} or {allowed[1].to_char()}",
        )
    return direction


def parse_lat_hemisphere(fields: FieldAccessor, index: int) -> Direction:
    """Parse a latitude hemisphere field; only NORTH or SOUTH is accepted."""
    return parse_direction(fields, index, LATITUDE_HEMISPHERES)


def parse_lon_hemisphere(fields: FieldAccessor, index: int) -> Direction:
    """Parse a longitude hemisphere field; only EAST or WEST is accepted."""
    return parse_direction(fields, index, LONGITUDE_HEMISPHERES)


def parse_position(
    fields: FieldAccessor,
    latitude: int,
    lat_hemisphere: int,
    longitude: int,
    lon_hemisphere: int,
) -> Position:
    """Compose a ``Position`` from four fields (coordinate, hemisphere each).

    Raises:
        FieldNotAvailable: If any of the four fields is empty.
        MalformedField: If any of them fails to convert.
    """
    return Position.from_magnitudes(
        parse_latitude(fields, latitude),
        parse_lat_hemisphere(fields, lat_hemisphere),
        parse_longitude(fields, longitude),
        parse_lon_hemisphere(fields, lon_hemisphere),
    )


def parse_waypoint(
    fields: FieldAccessor,
    waypoint_id: int,
    latitude: int,
    lat_hemisphere: int,
    longitude: int,
    lon_hemisphere: int,
) -> Waypoint:
    """Compose a ``Waypoint`` from an identifier field and four position fields."""
    position = parse_position(fields, latitude, lat_hemisphere, longitude, lon_hemisphere)
    return Waypoint(fields.string_field(waypoint_id), position)


def _format_degrees_minutes(value: float, degree_digits: int) -> str:
    magnitude = abs(value)
    degrees = int(magnitude)
    minutes = (magnitude - degrees) * 60.0

    # Shortest minutes text that parses back to exactly the same degrees
    for places in range(_MINUTE_DECIMALS, _MAX_MINUTE_DECIMALS + 1):
        minutes_text = f"{minutes:.{places}f}"
        if degrees + float(minutes_text) / 60.0 == magnitude:
            break
    else:
        minutes_text = format_float(minutes, _MINUTE_DECIMALS)

    # 59.99999... may round up to a full degree
    if float(minutes_text) >= 60.0:
        degrees += 1
        minutes_text = f"{0.0:.{_MINUTE_DECIMALS}f}"
    integer, _, fraction = minutes_text.partition(".")
    return f"{degrees:0{degree_digits}d}{int(integer):02d}.{fraction}"


def format_latitude(latitude: float) -> str:
    """Render a latitude's magnitude as ``DDMM.MMM``.

    At least three minute decimals are written, more when needed for the
    text to parse back to the same value.

    Example:
        >>> format_latitude(-(55 + 36.2 / 60))
        '5536.200'
    """
    return _format_degrees_minutes(latitude, _LATITUDE_DEGREE_DIGITS)


def format_longitude(longitude: float) -> str:
    """Render a longitude's magnitude as ``DDDMM.MMM``."""
    return _format_degrees_minutes(longitude, _LONGITUDE_DEGREE_DIGITS)


def position_fields(position: Position) -> tuple[str, str, str, str]:
    """Raw field strings for a position: latitude, N/S, longitude, E/W."""
    return (
        format_latitude(position.latitude),
        position.lat_hemisphere.to_char(),
        format_longitude(position.longitude),
        position.lon_hemisphere.to_char(),
    )
