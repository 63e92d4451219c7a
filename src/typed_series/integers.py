"""Fixed-width integer elements."""

from __future__ import annotations

from typing import ClassVar

from typed_series.element import Element
from typed_series.errors import BooleanEncodingError
from typed_series.numeric import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatKind,
    IntegerKind,
)
from typed_series.parsing.numbers import parse_int, parse_uint


class IntegerElement(Element):
    """Integer element parameterised by its width.

    Text is parsed at the native width and rejected when out of range;
    ints are wrapped; floats are truncated toward zero and wrapped, with
    NaN and +/-Inf becoming missing.
    """

    __slots__ = ()

    kind: ClassVar[IntegerKind]
    zero = 0

    def _from_text(self, text: str) -> int:
        if self.kind.signed:
            return parse_int(text, self.kind.bits)
        return parse_uint(text, self.kind.bits)

    def _from_bool(self, value: bool) -> int:
        return 1 if value else 0

    def _from_int(self, value: int) -> int:
        return self.kind.wrap(value)

    def _from_float(self, value: float) -> int:
        return self.kind.truncate(value)

    def _to_integer(self, kind: IntegerKind) -> int:
        return kind.wrap(self._value)

    def _to_float(self, kind: FloatKind) -> float:
        return kind.narrow(float(self._value))

    def _to_bool(self) -> bool:
        if self._value == 1:
            return True
        if self._value == 0:
            return False
        raise BooleanEncodingError(self._value, self.kind.name)

    def _render(self) -> str:
        return str(self._value)


class Int8Element(IntegerElement):
    __slots__ = ()
    primitive = INT8.primitive
    kind = INT8


class Int16Element(IntegerElement):
    __slots__ = ()
    primitive = INT16.primitive
    kind = INT16


class Int32Element(IntegerElement):
    __slots__ = ()
    primitive = INT32.primitive
    kind = INT32


class Int64Element(IntegerElement):
    __slots__ = ()
    primitive = INT64.primitive
    kind = INT64


class Uint8Element(IntegerElement):
    __slots__ = ()
    primitive = UINT8.primitive
    kind = UINT8


class Uint16Element(IntegerElement):
    __slots__ = ()
    primitive = UINT16.primitive
    kind = UINT16


class Uint32Element(IntegerElement):
    __slots__ = ()
    primitive = UINT32.primitive
    kind = UINT32


class Uint64Element(IntegerElement):
    __slots__ = ()
    primitive = UINT64.primitive
    kind = UINT64
