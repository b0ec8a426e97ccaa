"""Sentence type registry.

Maps each ``SentenceId`` to its typed parser class and builds sentences
from raw lines. Types without a parser, including proprietary sentences
such as ``$PGRME``, come back as a generic ``Sentence`` with their raw
fields intact.
"""

import logging
from dataclasses import dataclass

from marinenav.nmea.bod import BODSentence
from marinenav.nmea.framing import RawSentence, frame
from marinenav.nmea.gga import GGASentence
from marinenav.nmea.gll import GLLSentence
from marinenav.nmea.gsa import GSASentence
from marinenav.nmea.gsv import GSVSentence
from marinenav.nmea.rmb import RMBSentence
from marinenav.nmea.rmc import RMCSentence
from marinenav.nmea.rte import RTESentence
from marinenav.nmea.sentence import Sentence
from marinenav.nmea.types import SentenceId
from marinenav.nmea.vtg import VTGSentence
from marinenav.nmea.wpl import WPLSentence
from marinenav.nmea.zda import ZDASentence

__all__ = ["SentenceFactory", "parse_sentence"]

logger = logging.getLogger(__name__)

# SentenceId -> typed parser
_PARSERS: dict[SentenceId, type[Sentence]] = {
    SentenceId.BOD: BODSentence,  # Bearing origin to destination
    SentenceId.GGA: GGASentence,  # Fix data
    SentenceId.GLL: GLLSentence,  # Geographic position
    SentenceId.GSA: GSASentence,  # DOP and active satellites
    SentenceId.GSV: GSVSentence,  # Satellites in view
    SentenceId.RMB: RMBSentence,  # Navigation to destination
    SentenceId.RMC: RMCSentence,  # Recommended minimum GNSS data
    SentenceId.RTE: RTESentence,  # Routes
    SentenceId.VTG: VTGSentence,  # Course and speed over ground
    SentenceId.WPL: WPLSentence,  # Waypoint location
    SentenceId.ZDA: ZDASentence,  # Time and date
}


@dataclass(frozen=True)
class SentenceFactory:
    """Creates typed sentences from lines or from scratch.

    The factory holds no state besides its checksum policy, so one instance
    can be shared between threads.

    Attributes:
        strict: Reject lines with a missing or wrong checksum instead of
            accepting them.

    Example:
        >>> factory = SentenceFactory()
        >>> sentence = factory.create_parser("$GPWPL,5536.200,N,01436.500,E,RUSKI*1F")
        >>> type(sentence).__name__
        'WPLSentence'
        >>> sentence.get_waypoint().id
        'RUSKI'
    """

    strict: bool = False

    def resolve_type(self, raw: RawSentence) -> SentenceId:
        """Identify the sentence type; UNKNOWN when no parser exists."""
        return raw.sentence_id

    def create_parser(self, line: str) -> Sentence:
        """Frame ``line`` and wrap it in the parser for its type.

        Raises:
            FramingError: If the line cannot be framed, or fails the
                checksum in strict mode.
        """
        raw = frame(line, strict=self.strict)
        sentence_id = self.resolve_type(raw)
        parser = _PARSERS.get(sentence_id)
        if parser is None:
            logger.debug("No parser for %s, using generic sentence", raw.address)
            return Sentence(raw)
        return parser(raw)

    def create_empty(self, sentence_id: SentenceId, talker: str = "GP") -> Sentence:
        """Create a blank sentence of a supported type for building.

        Raises:
            ValueError: If ``sentence_id`` has no parser.
        """
        parser = _PARSERS.get(sentence_id)
        if parser is None:
            raise ValueError(f"cannot build sentences of type {sentence_id!r}")
        return parser.empty(talker)

    def has_parser(self, sentence_id: SentenceId) -> bool:
        return sentence_id in _PARSERS

    def supported_types(self) -> list[SentenceId]:
        return list(_PARSERS)


def parse_sentence(line: str, *, strict: bool = False) -> Sentence:
    """Parse one line into a typed sentence.

    Shorthand for ``SentenceFactory(strict=strict).create_parser(line)``.
    """
    return SentenceFactory(strict=strict).create_parser(line)
