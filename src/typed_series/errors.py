"""Exceptions raised by typed accessors and strict parsers.

Coercion (``Element.set_from``) never raises: it absorbs every
``ConversionError`` into the missing sentinel. The typed accessors raise
these exceptions to the caller.
"""

from __future__ import annotations

from typing import Any


class ElementError(Exception):
    """Base exception for typed_series."""

    pass


class ConversionError(ElementError, ValueError):
    """A value cannot be converted to the requested representation."""

    pass


class MissingValueError(ConversionError):
    """A typed accessor was called on a missing element."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"can't convert NaN to {target}")


class NonFiniteValueError(ConversionError):
    """A NaN or infinite float cannot be represented by the target."""

    def __init__(self, value: float, target: str) -> None:
        self.value = value
        self.target = target
        label = "NaN" if value != value else "Inf"
        super().__init__(f"can't convert {label} to {target}")


class BooleanEncodingError(ConversionError):
    """A payload is not one of the recognised boolean encodings."""

    def __init__(self, value: Any, source: str) -> None:
        self.value = value
        self.source = source
        super().__init__(f"can't convert {source} \"{value}\" to bool")


class NumberFormatError(ConversionError):
    """Text cannot be read as a number of the requested width."""

    reason = "invalid number"

    def __init__(self, text: str, target: str) -> None:
        self.text = text
        self.target = target
        super().__init__(f"parsing {text!r} as {target}: {self.reason}")


class NumberSyntaxError(NumberFormatError):
    reason = "invalid syntax"


class NumberRangeError(NumberFormatError):
    reason = "value out of range"


class UnsupportedSourceError(ConversionError):
    """A coercion source is not one of the accepted kinds."""

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(f"unsupported source {type(value).__name__} for {target}")
