"""The element contract shared by every typed_series variant.

An element holds one payload of its variant's native kind plus a missing
flag. Coercion into an element never raises; reading an element back
through a typed accessor may.
"""

from __future__ import annotations

import logging
import operator
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar

from typed_series.errors import ConversionError, MissingValueError, UnsupportedSourceError
from typed_series.numeric import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    MACHINE_INT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatKind,
    IntegerKind,
    TypedValue,
)
from typed_series.types import MISSING_TEXT, ElementType, ElementValue, PrimitiveType

logger = logging.getLogger(__name__)


class SourceKind(Enum):
    """The closed set of source kinds accepted by ``Element.set_from``."""

    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    ELEMENT = "element"
    UNSUPPORTED = "unsupported"

    @classmethod
    def of(cls, value: Any) -> SourceKind:
        """Classify a source value."""
        if isinstance(value, Element):
            return cls.ELEMENT
        if isinstance(value, TypedValue):
            return cls.INTEGER if value.primitive.is_integer else cls.FLOAT
        if isinstance(value, str):
            return cls.TEXT
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        return cls.UNSUPPORTED


# Typed accessor used to read another element as each primitive
_ACCESSORS: dict[PrimitiveType, str] = {
    PrimitiveType.INT8: "as_int8",
    PrimitiveType.INT16: "as_int16",
    PrimitiveType.INT32: "as_int32",
    PrimitiveType.INT64: "as_int64",
    PrimitiveType.UINT8: "as_uint8",
    PrimitiveType.UINT16: "as_uint16",
    PrimitiveType.UINT32: "as_uint32",
    PrimitiveType.UINT64: "as_uint64",
    PrimitiveType.FLOAT32: "as_float32",
    PrimitiveType.FLOAT64: "as_float",
    PrimitiveType.STRING: "as_text",
    PrimitiveType.BOOLEAN: "as_bool",
}

NO_VALUE: Any = object()


class Element(ABC):
    """Base class of the element variants.

    Subclasses set ``primitive`` and ``zero`` and implement the ``_from_*``
    coercion hooks, the ``_to_*`` conversion hooks and ``_render``.
    Everything else (missing handling, copying, accessor dispatch and the
    comparison protocol) lives here.
    """

    __slots__ = ("_value", "_missing")

    primitive: ClassVar[PrimitiveType]
    # Payload of a default-constructed element, also stored while missing
    zero: ClassVar[Any] = 0

    def __init__(self, value: Any = NO_VALUE) -> None:
        self._value: Any = self.zero
        self._missing = False
        if value is not NO_VALUE:
            self.set_from(value)

    @classmethod
    def missing(cls) -> Element:
        """Return a new element holding the missing sentinel."""
        elem = cls()
        elem._set_missing()
        return elem

    def _set_missing(self) -> None:
        self._value = self.zero
        self._missing = True

    # --- Coercion ---

    def set_from(self, source: Any) -> None:
        """Overwrite this element with a coerced copy of ``source``.

        Never raises. Unparseable text, the text ``"NaN"``, NaN or
        infinite float sources, elements whose matching accessor fails, and
        unsupported source kinds all leave the element missing. Integer
        narrowing wraps silently.
        """
        kind = SourceKind.of(source)
        raw = source.value if isinstance(source, TypedValue) else source
        try:
            value = self._coerce(kind, raw)
        except ConversionError as exc:
            logger.debug("%s: %r stored as missing (%s)", type(self).__name__, source, exc)
            self._set_missing()
            return
        self._value = value
        self._missing = False

    def _coerce(self, kind: SourceKind, source: Any) -> Any:
        if kind is SourceKind.TEXT:
            if source == MISSING_TEXT:
                raise MissingValueError(self.primitive.value)
            return self._from_text(source)
        if kind is SourceKind.BOOLEAN:
            return self._from_bool(source)
        if kind is SourceKind.INTEGER:
            return self._from_int(source)
        if kind is SourceKind.FLOAT:
            return self._from_float(source)
        if kind is SourceKind.ELEMENT:
            return source.as_primitive(self.primitive)
        raise UnsupportedSourceError(source, self.primitive.value)

    @abstractmethod
    def _from_text(self, text: str) -> Any: ...

    @abstractmethod
    def _from_bool(self, value: bool) -> Any: ...

    @abstractmethod
    def _from_int(self, value: int) -> Any: ...

    @abstractmethod
    def _from_float(self, value: float) -> Any: ...

    # --- Queries ---

    @property
    def is_missing(self) -> bool:
        """Return whether this element is the missing sentinel.

        A NaN payload counts as missing even when the flag is clear.
        """
        return self._missing or self._value != self._value

    @property
    def logical_type(self) -> ElementType:
        return self.primitive.logical_type

    @property
    def value(self) -> ElementValue:
        """Return the payload as a plain Python value, or None when missing."""
        if self.is_missing:
            return None
        return self._value

    def copy(self) -> Element:
        """Return an independent element of the same variant."""
        duplicate = type(self)()
        if self.is_missing:
            duplicate._set_missing()
        else:
            duplicate._value = self._value
        return duplicate

    def __copy__(self) -> Element:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Element:
        return self.copy()

    # --- Rendering ---

    def text(self) -> str:
        """Return the canonical text of this element; ``"NaN"`` when missing."""
        if self.is_missing:
            return MISSING_TEXT
        return self._render()

    @abstractmethod
    def _render(self) -> str: ...

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        if self.is_missing:
            return f"{type(self).__name__}(missing)"
        return f"{type(self).__name__}({self._value!r})"

    # --- Typed accessors ---

    def _require_present(self, target: str) -> None:
        if self.is_missing:
            raise MissingValueError(target)

    @abstractmethod
    def _to_integer(self, kind: IntegerKind) -> int: ...

    @abstractmethod
    def _to_float(self, kind: FloatKind) -> float: ...

    @abstractmethod
    def _to_bool(self) -> bool: ...

    def _integer(self, kind: IntegerKind, target: str | None = None) -> int:
        self._require_present(target or kind.name)
        return self._to_integer(kind)

    def _float(self, kind: FloatKind) -> float:
        self._require_present(kind.name)
        return self._to_float(kind)

    def as_int(self) -> int:
        """Return the value as a machine (64-bit signed) integer."""
        return self._integer(MACHINE_INT, "int")

    def as_int8(self) -> int:
        return self._integer(INT8)

    def as_int16(self) -> int:
        return self._integer(INT16)

    def as_int32(self) -> int:
        return self._integer(INT32)

    def as_int64(self) -> int:
        return self._integer(INT64)

    def as_uint8(self) -> int:
        return self._integer(UINT8)

    def as_uint16(self) -> int:
        return self._integer(UINT16)

    def as_uint32(self) -> int:
        return self._integer(UINT32)

    def as_uint64(self) -> int:
        return self._integer(UINT64)

    def as_float32(self) -> float:
        return self._float(FLOAT32)

    def as_float(self) -> float:
        return self._float(FLOAT64)

    def as_bool(self) -> bool:
        """Return the value as a bool.

        Only numeric 1/0 and the text tokens true/t/1/false/f/0 (any case)
        are accepted; anything else raises BooleanEncodingError.
        """
        self._require_present("bool")
        return self._to_bool()

    def as_text(self) -> str:
        """Return the rendered text, raising MissingValueError when missing."""
        self._require_present("string")
        return self._render()

    def as_primitive(self, primitive: PrimitiveType) -> Any:
        """Read this element through the accessor for ``primitive``."""
        return getattr(self, _ACCESSORS[primitive])()

    # --- Comparison ---

    def _compare(self, other: Element, op: Callable[[Any, Any], bool]) -> bool:
        # Missing on either side is false for every operator, even against itself
        if self.is_missing:
            return False
        try:
            theirs = other.as_primitive(self.primitive)
        except ConversionError:
            return False
        if theirs != theirs:
            return False
        return op(self._value, theirs)

    def eq(self, other: Element) -> bool:
        return self._compare(other, operator.eq)

    def neq(self, other: Element) -> bool:
        return self._compare(other, operator.ne)

    def less(self, other: Element) -> bool:
        return self._compare(other, operator.lt)

    def less_eq(self, other: Element) -> bool:
        return self._compare(other, operator.le)

    def greater(self, other: Element) -> bool:
        return self._compare(other, operator.gt)

    def greater_eq(self, other: Element) -> bool:
        return self._compare(other, operator.ge)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.eq(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.neq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.less(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.less_eq(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.greater(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.greater_eq(other)

    __hash__ = None  # type: ignore[assignment]
