"""Type tags and shared constants for typed_series elements."""

from __future__ import annotations

from enum import Enum
from typing import Union


class ElementType(Enum):
    """Logical family of an element, independent of its storage width."""

    INT = "int"
    FLOAT32 = "float32"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"


class PrimitiveType(Enum):
    """Physical representations backing the element variants."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BOOLEAN = "boolean"

    @property
    def bits(self) -> int | None:
        """Return the storage width in bits, or None for variable-width text."""
        widths = {
            PrimitiveType.INT8: 8,
            PrimitiveType.INT16: 16,
            PrimitiveType.INT32: 32,
            PrimitiveType.INT64: 64,
            PrimitiveType.UINT8: 8,
            PrimitiveType.UINT16: 16,
            PrimitiveType.UINT32: 32,
            PrimitiveType.UINT64: 64,
            PrimitiveType.FLOAT32: 32,
            PrimitiveType.FLOAT64: 64,
            PrimitiveType.STRING: None,
            PrimitiveType.BOOLEAN: 1,
        }
        return widths[self]

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_PRIMITIVES

    @property
    def is_signed(self) -> bool:
        """Return whether this is a signed integer or a float representation."""
        return self in _SIGNED_PRIMITIVES

    @property
    def is_float(self) -> bool:
        return self in (PrimitiveType.FLOAT32, PrimitiveType.FLOAT64)

    @property
    def logical_type(self) -> ElementType:
        """Return the logical family reported by elements of this representation.

        Every integer width reports ElementType.INT; the width is only
        observable through the typed accessors.
        """
        if self.is_integer:
            return ElementType.INT
        families = {
            PrimitiveType.FLOAT32: ElementType.FLOAT32,
            PrimitiveType.FLOAT64: ElementType.FLOAT,
            PrimitiveType.STRING: ElementType.STRING,
            PrimitiveType.BOOLEAN: ElementType.BOOL,
        }
        return families[self]


_INTEGER_PRIMITIVES = frozenset({
    PrimitiveType.INT8, PrimitiveType.INT16, PrimitiveType.INT32, PrimitiveType.INT64,
    PrimitiveType.UINT8, PrimitiveType.UINT16, PrimitiveType.UINT32, PrimitiveType.UINT64,
})

_SIGNED_PRIMITIVES = frozenset({
    PrimitiveType.INT8, PrimitiveType.INT16, PrimitiveType.INT32, PrimitiveType.INT64,
    PrimitiveType.FLOAT32, PrimitiveType.FLOAT64,
})


# Mapping from type name strings to enum values
PRIMITIVE_TYPE_NAMES: dict[str, PrimitiveType] = {pt.value: pt for pt in PrimitiveType}
ELEMENT_TYPE_NAMES: dict[str, ElementType] = {et.value: et for et in ElementType}


# Rendering of the missing sentinel; the same token always coerces to missing
MISSING_TEXT = "NaN"

# Digits after the decimal point when a float is rendered as text
FLOAT_TEXT_PRECISION = 6

# Case-insensitive text encodings accepted as booleans
TRUE_TOKENS = frozenset({"true", "t", "1"})
FALSE_TOKENS = frozenset({"false", "f", "0"})


ElementValue = Union[int, float, str, bool, None]


def type_range(primitive: PrimitiveType) -> tuple[int, int]:
    """Return the inclusive (min, max) range of an integer primitive."""
    if not primitive.is_integer:
        raise ValueError(f"Type '{primitive.value}' has no integer range")
    bits = primitive.bits
    assert bits is not None
    if primitive.is_signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1

