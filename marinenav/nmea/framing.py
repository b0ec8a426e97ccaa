"""Sentence framing.

Turns one raw line into a ``RawSentence``: the address field split into
talker and sentence type, and the payload split into raw field strings.

Sentence Format:
    $GPWPL,5536.200,N,01436.500,E,RUSKI*1F
    ||    |                           ||
    ||    |                           |+-- checksum (optional)
    ||    +-- fields, 1-based          +-- checksum delimiter
    |+-- address field: talker (GP) + sentence type (WPL)
    +-- sentinel ('$' or '!' for encapsulated sentences such as AIS)

Fields are never trimmed and empty fields are kept as empty strings, so
that field indexes stay stable and "empty" can be told apart from
"beyond the end of the sentence".
"""

import logging
import re
from dataclasses import dataclass, replace

from marinenav.nmea.checksum import (
    CHECKSUM_DELIMITER,
    SENTINELS,
    ChecksumStatus,
    calculate_checksum,
    checksum_status,
    format_checksum,
    parse_checksum,
)
from marinenav.nmea.errors import FramingError, FramingErrorCode
from marinenav.nmea.types import SentenceId

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","

# Two talker characters followed by a three or four character type code
_ADDRESS_PATTERN = re.compile(r"^([A-Z0-9]{2})([A-Z0-9]{3,4})$")

# Characters that would break framing if written into a field
_RESERVED_CHARACTERS = frozenset("$!*,\r\n")


@dataclass(frozen=True)
class RawSentence:
    """A framed sentence: address, raw fields and checksum bookkeeping.

    Attributes:
        begin_char: Sentinel the sentence started with, '$' or '!'.
        talker: Two-character talker identifier, e.g. "GP".
        sentence_type: Sentence type code, e.g. "RMC".
        fields: Raw field strings, exclusive of address and checksum.
            Field ``i`` (1-based) is ``fields[i - 1]``.
        checksum: Checksum supplied on the wire, or None if absent or
            unreadable.
        checksum_status: Whether the supplied checksum was valid, wrong or
            missing. Sentences built in code are ``VALID``.
        line: The line the sentence was framed from; empty for built
            sentences.
    """

    begin_char: str
    talker: str
    sentence_type: str
    fields: tuple[str, ...]
    checksum: int | None = None
    checksum_status: ChecksumStatus = ChecksumStatus.VALID
    line: str = ""

    @property
    def sentence_id(self) -> SentenceId:
        return SentenceId.from_code(self.sentence_type)

    @property
    def address(self) -> str:
        return self.talker + self.sentence_type

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def field(self, index: int) -> str | None:
        """Return the raw field at 1-based ``index``, or None past the end.

        Raises:
            IndexError: If ``index`` is smaller than 1.
        """
        if index < 1:
            raise IndexError(f"field indexes are 1-based, got {index}")
        if index > len(self.fields):
            return None
        return self.fields[index - 1]

    def with_field(self, index: int, value: str) -> "RawSentence":
        """Return a copy with one field replaced.

        The copy is padded with empty fields when ``index`` lies past the
        end. No other field changes.

        Raises:
            IndexError: If ``index`` is smaller than 1.
            ValueError: If ``value`` contains a delimiter or sentinel.
        """
        if index < 1:
            raise IndexError(f"field indexes are 1-based, got {index}")
        check_field_value(value)
        fields = list(self.fields)
        if index > len(fields):
            fields.extend([""] * (index - len(fields)))
        fields[index - 1] = value
        return self._rebuilt(fields)

    def with_fields(self, fields: list[str] | tuple[str, ...]) -> "RawSentence":
        """Return a copy carrying ``fields`` in place of the current ones."""
        for value in fields:
            check_field_value(value)
        return self._rebuilt(fields)

    def _rebuilt(self, fields: list[str] | tuple[str, ...]) -> "RawSentence":
        return replace(
            self,
            fields=tuple(fields),
            checksum=None,
            checksum_status=ChecksumStatus.VALID,
            line="",
        )

    def to_sentence(self, include_checksum: bool = True) -> str:
        """Serialize the sentence, computing a fresh checksum.

        Example:
            >>> raw.to_sentence()
            '$GPWPL,5536.200,N,01436.500,E,RUSKI*1F'
        """
        content = FIELD_DELIMITER.join((self.address, *self.fields))
        if not include_checksum:
            return self.begin_char + content
        checksum = format_checksum(calculate_checksum(content))
        return f"{self.begin_char}{content}{CHECKSUM_DELIMITER}{checksum}"

    def __str__(self) -> str:
        return self.to_sentence()


def check_field_value(value: str) -> None:
    """Reject field text that cannot be written into a sentence.

    Raises:
        ValueError: If ``value`` is not a string or contains a delimiter,
            sentinel or line terminator.
    """
    if not isinstance(value, str):
        raise ValueError(f"field value must be a string, got {type(value).__name__}")
    reserved = _RESERVED_CHARACTERS.intersection(value)
    if reserved:
        raise ValueError(f"field value {value!r} contains {''.join(sorted(reserved))!r}")


def parse_address(address: str) -> tuple[str, str] | None:
    """Split an address field into ``(talker, sentence_type)``.

    Returns:
        The two parts, or None if the address is not two talker characters
        followed by a three or four character type code.

    Example:
        >>> parse_address("GPRMC")
        ('GP', 'RMC')
        >>> parse_address("GP") is None
        True
    """
    match = _ADDRESS_PATTERN.match(address)
    if match is None:
        return None
    return match.group(1), match.group(2)


def frame(line: str, *, strict: bool = False) -> RawSentence:
    """Frame a raw line into a ``RawSentence``.

    This performs:
    1. Trailing whitespace stripping (handles \\r\\n line endings)
    2. Sentinel check
    3. Address parsing into talker and sentence type
    4. Splitting of the payload into raw fields
    5. Checksum classification

    Args:
        line: One NMEA line, e.g. ``"$GPRMC,...*7C\\r\\n"``
        strict: Require a present and correct checksum. In lenient mode
            (the default) a missing checksum is accepted silently and a
            mismatching one is accepted with a warning; the outcome is kept
            in ``RawSentence.checksum_status`` either way.

    Returns:
        The framed sentence.

    Raises:
        FramingError: With code ``MISSING_SENTINEL``, ``INVALID_IDENTIFIER``,
            or, in strict mode, ``MISSING_CHECKSUM`` / ``CHECKSUM_MISMATCH``.
    """
    text = line.rstrip()

    if not text or text[0] not in SENTINELS:
        raise FramingError(FramingErrorCode.MISSING_SENTINEL, text)

    content, delimiter, suffix = text[1:].partition(CHECKSUM_DELIMITER)
    address, *fields = content.split(FIELD_DELIMITER)
    parts = parse_address(address)
    if parts is None:
        raise FramingError(FramingErrorCode.INVALID_IDENTIFIER, text, f"address {address!r}")
    talker, sentence_type = parts

    status = checksum_status(text)
    checksum = parse_checksum(suffix) if delimiter else None
    if status is ChecksumStatus.MISSING:
        logger.debug("Sentence has no checksum: %s", text)
    if strict and status is ChecksumStatus.MISSING:
        raise FramingError(FramingErrorCode.MISSING_CHECKSUM, text)
    if strict and status is ChecksumStatus.MISMATCH:
        raise FramingError(
            FramingErrorCode.CHECKSUM_MISMATCH,
            text,
            f"expected {format_checksum(calculate_checksum(content))}",
        )
    if status is ChecksumStatus.MISMATCH:
        logger.warning("Accepting sentence with bad checksum: %s", text)

    return RawSentence(
        begin_char=text[0],
        talker=talker,
        sentence_type=sentence_type,
        fields=tuple(fields),
        checksum=checksum,
        checksum_status=status,
        line=text,
    )


def build(
    talker: str,
    sentence_type: str,
    fields: list[str] | tuple[str, ...] = (),
    begin_char: str = "$",
) -> RawSentence:
    """Build a ``RawSentence`` from parts instead of a line.

    Raises:
        ValueError: If the address or begin character is invalid, or a field
            contains reserved characters.
    """
    if begin_char not in SENTINELS:
        raise ValueError(f"begin character must be one of {SENTINELS}, got {begin_char!r}")
    if parse_address(talker + sentence_type) is None or len(talker) != 2:
        raise ValueError(f"invalid address {talker + sentence_type!r}")
    for value in fields:
        check_field_value(value)
    return RawSentence(
        begin_char=begin_char,
        talker=talker,
        sentence_type=sentence_type,
        fields=tuple(fields),
    )
