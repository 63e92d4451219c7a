"""Floating point elements."""

from __future__ import annotations

import math
from typing import ClassVar

from typed_series.element import Element
from typed_series.errors import BooleanEncodingError, NonFiniteValueError, NumberRangeError
from typed_series.numeric import FLOAT32, FLOAT64, FloatKind, IntegerKind, format_float
from typed_series.parsing.numbers import parse_float


class FloatElement(Element):
    """Float element parameterised by its width.

    A float source that is NaN or infinite becomes missing, but an infinite
    payload can still arrive through text ("inf"), another element, or
    float32 overflow. A NaN payload reads as missing. Conversions to integer
    widths reject infinities.
    """

    __slots__ = ()

    kind: ClassVar[FloatKind]
    zero = 0.0

    def _from_text(self, text: str) -> float:
        return parse_float(text, self.kind.bits)

    def _from_bool(self, value: bool) -> float:
        return 1.0 if value else 0.0

    def _from_int(self, value: int) -> float:
        try:
            return self.kind.narrow(float(value))
        except OverflowError:
            raise NumberRangeError(str(value), self.kind.name) from None

    def _from_float(self, value: float) -> float:
        if not math.isfinite(value):
            raise NonFiniteValueError(value, self.kind.name)
        return self.kind.narrow(value)

    def _to_integer(self, kind: IntegerKind) -> int:
        return kind.truncate(self._value)

    def _to_float(self, kind: FloatKind) -> float:
        return kind.narrow(self._value)

    def _to_bool(self) -> bool:
        if self._value == 1.0:
            return True
        if self._value == 0.0:
            return False
        raise BooleanEncodingError(self._value, self.kind.name)

    def _render(self) -> str:
        return format_float(self._value)


class Float32Element(FloatElement):
    __slots__ = ()
    primitive = FLOAT32.primitive
    kind = FLOAT32


class Float64Element(FloatElement):
    __slots__ = ()
    primitive = FLOAT64.primitive
    kind = FLOAT64
