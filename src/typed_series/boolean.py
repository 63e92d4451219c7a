"""Boolean element."""

from __future__ import annotations

import math

from typed_series.element import Element
from typed_series.errors import BooleanEncodingError, NonFiniteValueError
from typed_series.numeric import FloatKind, IntegerKind
from typed_series.parsing.numbers import parse_bool
from typed_series.types import PrimitiveType


class BoolElement(Element):
    """Element holding a bool.

    Numbers are accepted only when exactly 1 or 0, text only as one of the
    boolean tokens; everything else becomes missing.
    """

    __slots__ = ()

    primitive = PrimitiveType.BOOLEAN
    zero = False

    def _from_text(self, text: str) -> bool:
        return parse_bool(text)

    def _from_bool(self, value: bool) -> bool:
        return value

    def _from_int(self, value: int) -> bool:
        if value == 1:
            return True
        if value == 0:
            return False
        raise BooleanEncodingError(value, "int")

    def _from_float(self, value: float) -> bool:
        if not math.isfinite(value):
            raise NonFiniteValueError(value, self.primitive.value)
        if value == 1.0:
            return True
        if value == 0.0:
            return False
        raise BooleanEncodingError(value, "float")

    def _to_integer(self, kind: IntegerKind) -> int:
        return 1 if self._value else 0

    def _to_float(self, kind: FloatKind) -> float:
        return 1.0 if self._value else 0.0

    def _to_bool(self) -> bool:
        return self._value

    def _render(self) -> str:
        return "true" if self._value else "false"
