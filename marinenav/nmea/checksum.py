"""NMEA checksum computation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the sentinel ('$' or
'!') and '*' (exclusive), then represented as a two-digit hexadecimal number
after the '*'.

Example sentence structure:
    $GPWPL,5536.200,N,01436.500,E,RUSKI*1F
    ^      checksum content          ^^
    start                            checksum (0x1F = 31)

The checksum suffix is optional on the wire. A missing suffix is reported
separately from a wrong one because some talkers never send it.
"""

from enum import Enum

SENTINELS = ("$", "!")
CHECKSUM_DELIMITER = "*"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ChecksumStatus(Enum):
    """Outcome of checking the ``*hh`` suffix of a sentence."""

    VALID = "valid"
    MISMATCH = "mismatch"
    MISSING = "missing"


def calculate_checksum(content: str | bytes) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the value of each byte in the content.

    Args:
        content: The characters between the sentinel and '*' (exclusive)

    Returns:
        Integer checksum value (0-255 for ASCII content)

    Example:
        >>> calculate_checksum("GPWPL,5536.200,N,01436.500,E,RUSKI")
        31
    """
    result = 0
    if isinstance(content, bytes):
        for byte in content:
            result ^= byte
        return result
    for character in content:
        result ^= ord(character)
    return result


def format_checksum(value: int) -> str:
    """Render a checksum as two uppercase hexadecimal digits."""
    return f"{value:02X}"


def parse_checksum(suffix: str) -> int | None:
    """Read a checksum suffix, returning None unless it is exactly two hex digits.

    Example:
        >>> parse_checksum("1f")
        31
        >>> parse_checksum("1") is None
        True
    """
    if len(suffix) != 2 or not _HEX_DIGITS.issuperset(suffix):
        return None
    return int(suffix, 16)


def _split_sentence(sentence: str) -> tuple[str, str | None]:
    """Split a sentence into its checksum content and suffix.

    Returns:
        ``(content, suffix)`` where ``suffix`` is ``None`` when the
        sentence carries no '*'. A leading sentinel, if any, is dropped.
    """
    if sentence[:1] in SENTINELS:
        sentence = sentence[1:]
    content, delimiter, suffix = sentence.partition(CHECKSUM_DELIMITER)
    if not delimiter:
        return content, None
    return content, suffix


def sentence_checksum(sentence: str) -> int:
    """Compute the checksum a complete sentence should carry.

    Any existing suffix is ignored, so this works on sentences with or
    without a checksum.
    """
    content, _ = _split_sentence(sentence.strip())
    return calculate_checksum(content)


def checksum_status(sentence: str) -> ChecksumStatus:
    """Classify the checksum suffix of a sentence.

    Returns:
        ``MISSING`` if there is no '*', ``VALID`` if the two hex digits after
        '*' equal the computed checksum (case-insensitive), ``MISMATCH``
        otherwise, including a suffix that is not exactly two hex digits.
    """
    content, suffix = _split_sentence(sentence.strip())
    if suffix is None:
        return ChecksumStatus.MISSING
    provided = parse_checksum(suffix)
    if provided is not None and calculate_checksum(content) == provided:
        return ChecksumStatus.VALID
    return ChecksumStatus.MISMATCH


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including sentinel, '*' and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is present and valid, False if:
        - Sentence is malformed (missing sentinel or '*')
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPWPL,5536.200,N,01436.500,E,RUSKI*1F")
        True
        >>> validate_checksum("$GPWPL,5536.200,N,01436.500,E,RUSKI*FF")
        False
    """
    sentence = sentence.strip()
    if sentence[:1] not in SENTINELS:
        return False
    return checksum_status(sentence) is ChecksumStatus.VALID
