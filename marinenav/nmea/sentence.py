"""Generic sentence: raw fields, typed field access and building.

``Sentence`` wraps exactly one ``RawSentence``. Getters read from it on
every call; nothing is cached. Setters replace the owned ``RawSentence``
with a copy in which only the written field differs, so a ``Sentence`` can
also be used to build a sentence field by field before emitting it with
``to_sentence()``.

A ``Sentence`` used as a builder is mutable and belongs to one owner at a
time; the ``RawSentence`` and every value it hands out are immutable.

Typed sentences subclass ``Sentence`` and declare:

    sentence_id: which ``SentenceId`` they accept
    layout:      an ``IntEnum`` mapping field names to 1-based indexes
"""

import math
from enum import IntEnum
from typing import ClassVar

from marinenav.nmea.fields import FieldAccessor, format_float, format_integer
from marinenav.nmea.framing import RawSentence, build, frame
from marinenav.nmea.position import position_fields
from marinenav.nmea.types import CharEnum, Position, SentenceId


class Sentence:
    """An NMEA sentence with typed access to its raw fields.

    Used directly for sentence types without a dedicated parser; the raw
    fields stay reachable through ``fields`` and ``get_field``.

    Example:
        >>> s = Sentence.parse("$GPXTE,A,A,0.67,L,N*6F")
        >>> s.sentence_type
        'XTE'
        >>> s.fields.float_field(3)
        0.67
    """

    sentence_id: ClassVar[SentenceId] = SentenceId.UNKNOWN
    layout: ClassVar[type[IntEnum] | None] = None

    def __init__(self, raw: RawSentence) -> None:
        if self.sentence_id is not SentenceId.UNKNOWN and raw.sentence_id is not self.sentence_id:
            raise ValueError(
                f"{type(self).__name__} cannot hold a {raw.sentence_type} sentence"
            )
        self._raw = raw

    @classmethod
    def parse(cls, line: str, *, strict: bool = False) -> "Sentence":
        """Frame ``line`` and wrap it in this sentence class.

        Raises:
            FramingError: If the line cannot be framed.
            ValueError: If the line is of another sentence type.
        """
        return cls(frame(line, strict=strict))

    @classmethod
    def empty(cls, talker: str = "GP") -> "Sentence":
        """Create a blank sentence of this type, ready to be filled in.

        Raises:
            ValueError: On the generic class, which has no type code.
        """
        if cls.sentence_id is SentenceId.UNKNOWN:
            raise ValueError("a generic sentence has no type to build")
        field_count = max(cls.layout) if cls.layout is not None else 0
        sentence = cls(build(talker, cls.sentence_id.value, [""] * field_count))
        sentence._initialize()
        return sentence

    def _initialize(self) -> None:
        """Write the constant fields of a freshly built sentence."""

    @property
    def raw(self) -> RawSentence:
        return self._raw

    @property
    def fields(self) -> FieldAccessor:
        return FieldAccessor(self._raw)

    @property
    def talker(self) -> str:
        return self._raw.talker

    @property
    def sentence_type(self) -> str:
        return self._raw.sentence_type

    @property
    def field_count(self) -> int:
        return self._raw.field_count

    def get_field(self, index: int) -> str | None:
        """Raw text of field ``index``; None when past the end."""
        return self._raw.field(index)

    def set_field(self, index: int, value: str) -> None:
        """Replace the raw text of field ``index``.

        Raises:
            ValueError: If ``value`` contains a delimiter or sentinel.
        """
        self._raw = self._raw.with_field(index, value)

    def set_talker(self, talker: str) -> None:
        """Change the talker identifier, e.g. from "GP" to "GN"."""
        self._raw = build(
            talker, self._raw.sentence_type, self._raw.fields, self._raw.begin_char
        )

    def to_sentence(self) -> str:
        """Serialize with a freshly computed checksum."""
        return self._raw.to_sentence()

    def __str__(self) -> str:
        return self.to_sentence()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_sentence()!r})"

    # --- setter helpers ------------------------------------------------------

    def _set_float(self, index: int, value: float, decimals: int = 1) -> None:
        if not math.isfinite(value):
            raise ValueError(f"value {value} is not a finite number")
        self.set_field(index, format_float(value, decimals))

    def _set_integer(self, index: int, value: int, width: int = 0) -> None:
        if value < 0:
            raise ValueError(f"value {value} must not be negative")
        self.set_field(index, format_integer(value, width))

    def _set_enum(self, index: int, value: CharEnum, kind: type[CharEnum]) -> None:
        if not isinstance(value, kind):
            raise ValueError(f"expected {kind.__name__}, got {value!r}")
        self.set_field(index, value.to_char())

    def _set_position(
        self,
        position: Position,
        latitude: int,
        lat_hemisphere: int,
        longitude: int,
        lon_hemisphere: int,
    ) -> None:
        if not isinstance(position, Position):
            raise ValueError(f"expected Position, got {position!r}")
        for index, value in zip(
            (latitude, lat_hemisphere, longitude, lon_hemisphere),
            position_fields(position),
        ):
            self.set_field(index, value)


def check_bearing(value: float, name: str = "bearing") -> None:
    """Reject angles outside [0, 360).

    Raises:
        ValueError: If ``value`` is out of range.
    """
    if not 0.0 <= value < 360.0:
        raise ValueError(f"{name} {value} out of range [0, 360)")


def check_non_negative(value: float, name: str) -> None:
    """Reject negative quantities such as speeds and distances.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if not value >= 0:
        raise ValueError(f"{name} {value} must not be negative")
