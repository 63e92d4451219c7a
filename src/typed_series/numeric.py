"""Width capabilities shared by the numeric element variants.

Each integer width is described once by an ``IntegerKind`` and each float
width by a ``FloatKind``; the element classes only carry a reference to
their kind.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Any

from typed_series.errors import NonFiniteValueError, NumberRangeError
from typed_series.types import FLOAT_TEXT_PRECISION, PrimitiveType, type_range


def to_float32(value: float, strict: bool = False) -> float:
    """Round a float to IEEE 754 single precision.

    Finite values beyond the float32 range become +/-Inf, unless ``strict``
    is set, in which case NumberRangeError is raised.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        if strict:
            raise NumberRangeError(repr(value), "float32") from None
        return math.copysign(math.inf, value)


def format_float(value: float) -> str:
    """Render a float with the fixed text precision; infinities as +Inf/-Inf."""
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.{FLOAT_TEXT_PRECISION}f}"


@dataclass(frozen=True)
class IntegerKind:
    """A fixed-width integer representation."""

    primitive: PrimitiveType
    bits: int
    signed: bool

    @property
    def name(self) -> str:
        return self.primitive.value

    @property
    def min_value(self) -> int:
        return type_range(self.primitive)[0]

    @property
    def max_value(self) -> int:
        return type_range(self.primitive)[1]

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce an integer into this width with two's-complement wraparound.

        Overflow is neither detected nor saturated: 200 becomes -56 in int8,
        -1 becomes 255 in uint8.
        """
        value &= (1 << self.bits) - 1
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    def truncate(self, value: float) -> int:
        """Convert a float by truncating toward zero, then wrapping.

        Raises NonFiniteValueError for NaN and +/-Inf.
        """
        if not math.isfinite(value):
            raise NonFiniteValueError(value, self.name)
        return self.wrap(math.trunc(value))


@dataclass(frozen=True)
class FloatKind:
    """An IEEE 754 float representation."""

    primitive: PrimitiveType
    bits: int

    @property
    def name(self) -> str:
        return self.primitive.value

    def narrow(self, value: float) -> float:
        if self.bits == 32:
            return to_float32(value)
        return float(value)


INT8 = IntegerKind(PrimitiveType.INT8, 8, True)
INT16 = IntegerKind(PrimitiveType.INT16, 16, True)
INT32 = IntegerKind(PrimitiveType.INT32, 32, True)
INT64 = IntegerKind(PrimitiveType.INT64, 64, True)
UINT8 = IntegerKind(PrimitiveType.UINT8, 8, False)
UINT16 = IntegerKind(PrimitiveType.UINT16, 16, False)
UINT32 = IntegerKind(PrimitiveType.UINT32, 32, False)
UINT64 = IntegerKind(PrimitiveType.UINT64, 64, False)

FLOAT32 = FloatKind(PrimitiveType.FLOAT32, 32)
FLOAT64 = FloatKind(PrimitiveType.FLOAT64, 64)

# The platform integer returned by as_int()
MACHINE_INT = INT64

INTEGER_KINDS: dict[PrimitiveType, IntegerKind] = {
    kind.primitive: kind
    for kind in (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)
}

FLOAT_KINDS: dict[PrimitiveType, FloatKind] = {
    FLOAT32.primitive: FLOAT32,
    FLOAT64.primitive: FLOAT64,
}


@dataclass(frozen=True)
class TypedValue:
    """A source value carrying an explicit native width.

    Python has a single int and a single float type, so a value that must be
    offered as, say, a uint16 or a float32 is wrapped in a TypedValue. The
    value is normalised to its width on construction: integers wrap, float32
    values are rounded to single precision.
    """

    value: Any
    primitive: PrimitiveType

    def __post_init__(self) -> None:
        if self.primitive.is_integer:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(
                    f"TypedValue of type '{self.primitive.value}' requires an int, "
                    f"got {type(self.value).__name__}")
            object.__setattr__(self, "value", INTEGER_KINDS[self.primitive].wrap(self.value))
        elif self.primitive.is_float:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise ValueError(
                    f"TypedValue of type '{self.primitive.value}' requires a number, "
                    f"got {type(self.value).__name__}")
            try:
                value = float(self.value)
            except OverflowError as exc:
                raise ValueError(f"{self.value} is too large for '{self.primitive.value}'") from exc
            object.__setattr__(self, "value", FLOAT_KINDS[self.primitive].narrow(value))
        else:
            raise ValueError(f"TypedValue requires a numeric type, not '{self.primitive.value}'")
