"""Selection of element variants from type tags."""

from __future__ import annotations

from typing import Any, Union

from typed_series.boolean import BoolElement
from typed_series.element import NO_VALUE, Element
from typed_series.floats import Float32Element, Float64Element
from typed_series.integers import (
    Int8Element,
    Int16Element,
    Int32Element,
    Int64Element,
    Uint8Element,
    Uint16Element,
    Uint32Element,
    Uint64Element,
)
from typed_series.text import StringElement
from typed_series.types import (
    ELEMENT_TYPE_NAMES,
    PRIMITIVE_TYPE_NAMES,
    ElementType,
    PrimitiveType,
)

TypeTag = Union[PrimitiveType, ElementType, str]

ELEMENT_CLASSES: dict[PrimitiveType, type[Element]] = {
    cls.primitive: cls
    for cls in (
        Int8Element,
        Int16Element,
        Int32Element,
        Int64Element,
        Uint8Element,
        Uint16Element,
        Uint32Element,
        Uint64Element,
        Float32Element,
        Float64Element,
        StringElement,
        BoolElement,
    )
}

# Representation chosen when a column is declared by logical family only
DEFAULT_PRIMITIVES: dict[ElementType, PrimitiveType] = {
    ElementType.INT: PrimitiveType.INT64,
    ElementType.FLOAT32: PrimitiveType.FLOAT32,
    ElementType.FLOAT: PrimitiveType.FLOAT64,
    ElementType.STRING: PrimitiveType.STRING,
    ElementType.BOOL: PrimitiveType.BOOLEAN,
}


def resolve_primitive(tag: TypeTag) -> PrimitiveType:
    """Resolve a type tag or type name to a physical representation.

    Names are looked up as primitive names first ("int8", "float64",
    "boolean"), then as logical family names ("int", "float", "bool").
    """
    if isinstance(tag, PrimitiveType):
        return tag
    if isinstance(tag, ElementType):
        return DEFAULT_PRIMITIVES[tag]
    if isinstance(tag, str):
        primitive = PRIMITIVE_TYPE_NAMES.get(tag)
        if primitive is not None:
            return primitive
        family = ELEMENT_TYPE_NAMES.get(tag)
        if family is not None:
            return DEFAULT_PRIMITIVES[family]
    raise KeyError(f"Type '{tag}' not found")


def element_class(tag: TypeTag) -> type[Element]:
    """Return the element class backing ``tag``."""
    return ELEMENT_CLASSES[resolve_primitive(tag)]


def new_element(tag: TypeTag, value: Any = NO_VALUE) -> Element:
    """Create an element for ``tag``.

    Without a value the element is default-constructed (a present zero);
    otherwise ``value`` is coerced into it and may leave it missing.
    """
    return element_class(tag)(value)
