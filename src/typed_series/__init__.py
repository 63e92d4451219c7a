"""Typed Series - scalar elements with missing values for columnar data."""

import logging

from typed_series.boolean import BoolElement
from typed_series.element import Element, SourceKind
from typed_series.errors import (
    BooleanEncodingError,
    ConversionError,
    ElementError,
    MissingValueError,
    NonFiniteValueError,
    NumberFormatError,
    NumberRangeError,
    NumberSyntaxError,
    UnsupportedSourceError,
)
from typed_series.factory import (
    DEFAULT_PRIMITIVES,
    ELEMENT_CLASSES,
    element_class,
    new_element,
    resolve_primitive,
)
from typed_series.floats import Float32Element, Float64Element, FloatElement
from typed_series.integers import (
    Int8Element,
    Int16Element,
    Int32Element,
    Int64Element,
    IntegerElement,
    Uint8Element,
    Uint16Element,
    Uint32Element,
    Uint64Element,
)
from typed_series.numeric import TypedValue
from typed_series.text import StringElement
from typed_series.types import ElementType, PrimitiveType, type_range

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Contract
    "Element",
    "SourceKind",
    "TypedValue",
    # Type tags
    "ElementType",
    "PrimitiveType",
    "type_range",
    # Variants
    "IntegerElement",
    "Int8Element",
    "Int16Element",
    "Int32Element",
    "Int64Element",
    "Uint8Element",
    "Uint16Element",
    "Uint32Element",
    "Uint64Element",
    "FloatElement",
    "Float32Element",
    "Float64Element",
    "StringElement",
    "BoolElement",
    # Variant selection
    "DEFAULT_PRIMITIVES",
    "ELEMENT_CLASSES",
    "element_class",
    "new_element",
    "resolve_primitive",
    # Errors
    "ElementError",
    "ConversionError",
    "MissingValueError",
    "NonFiniteValueError",
    "BooleanEncodingError",
    "NumberFormatError",
    "NumberSyntaxError",
    "NumberRangeError",
    "UnsupportedSourceError",
]

__version__ = "0.1.0"
