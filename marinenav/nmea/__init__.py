"""NMEA 0183 sentence framing, parsing and building."""

from marinenav.nmea.bod import BODSentence
from marinenav.nmea.checksum import (
    ChecksumStatus,
    calculate_checksum,
    checksum_status,
    parse_checksum,
    validate_checksum,
)
from marinenav.nmea.errors import (
    FieldNotAvailable,
    FramingError,
    FramingErrorCode,
    MalformedField,
    NMEAError,
)
from marinenav.nmea.factory import SentenceFactory, parse_sentence
from marinenav.nmea.fields import FieldAccessor
from marinenav.nmea.framing import RawSentence, build, frame
from marinenav.nmea.gga import GGASentence
from marinenav.nmea.gll import GLLSentence
from marinenav.nmea.gsa import GSASentence
from marinenav.nmea.gsv import GSVSentence
from marinenav.nmea.rmb import RMBSentence
from marinenav.nmea.rmc import RMCSentence
from marinenav.nmea.rte import RTESentence
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.timestamp import PIVOT_YEAR, resolve_year
from marinenav.nmea.types import (
    DataStatus,
    Direction,
    GpsFixQuality,
    GpsFixStatus,
    GpsMode,
    Position,
    RouteType,
    SatelliteInfo,
    SentenceId,
    Units,
    UtcDate,
    UtcTime,
    Waypoint,
)
from marinenav.nmea.vtg import VTGSentence
from marinenav.nmea.wpl import WPLSentence
from marinenav.nmea.zda import ZDASentence

__all__ = [
    "BODSentence",
    "ChecksumStatus",
    "DataStatus",
    "Direction",
    "FieldAccessor",
    "FieldNotAvailable",
    "FramingError",
    "FramingErrorCode",
    "GGASentence",
    "GLLSentence",
    "GSASentence",
    "GSVSentence",
    "GpsFixQuality",
    "GpsFixStatus",
    "GpsMode",
    "MalformedField",
    "NMEAError",
    "PIVOT_YEAR",
    "Position",
    "RMBSentence",
    "RMCSentence",
    "RTESentence",
    "RawSentence",
    "RouteType",
    "SatelliteInfo",
    "Sentence",
    "SentenceFactory",
    "SentenceId",
    "Units",
    "UtcDate",
    "UtcTime",
    "VTGSentence",
    "WPLSentence",
    "Waypoint",
    "ZDASentence",
    "build",
    "calculate_checksum",
    "checksum_status",
    "frame",
    "parse_checksum",
    "parse_sentence",
    "resolve_year",
    "validate_checksum",
]
