"""Text element."""

from __future__ import annotations

import math

from typed_series.element import Element
from typed_series.errors import NonFiniteValueError
from typed_series.numeric import FloatKind, IntegerKind, format_float
from typed_series.parsing.numbers import parse_bool, parse_float, parse_int, parse_uint
from typed_series.types import PrimitiveType


class StringElement(Element):
    """Element holding a text payload.

    Floats are stored with six decimals, so reading the text back into a
    float element is not guaranteed to reproduce the original bits.
    Comparisons are lexicographic against the other element's text.
    """

    __slots__ = ()

    primitive = PrimitiveType.STRING
    zero = ""

    def _from_text(self, text: str) -> str:
        return text

    def _from_bool(self, value: bool) -> str:
        return "true" if value else "false"

    def _from_int(self, value: int) -> str:
        return str(value)

    def _from_float(self, value: float) -> str:
        if not math.isfinite(value):
            raise NonFiniteValueError(value, self.primitive.value)
        return format_float(value)

    def _to_integer(self, kind: IntegerKind) -> int:
        if kind.signed:
            return parse_int(self._value, kind.bits)
        return parse_uint(self._value, kind.bits)

    def _to_float(self, kind: FloatKind) -> float:
        return parse_float(self._value, kind.bits)

    def _to_bool(self) -> bool:
        return parse_bool(self._value)

    def _render(self) -> str:
        return self._value
