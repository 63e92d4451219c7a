"""Tests for the type tags."""

import pytest

from typed_series.numeric import TypedValue, to_float32
from typed_series.types import (
    ELEMENT_TYPE_NAMES,
    PRIMITIVE_TYPE_NAMES,
    ElementType,
    PrimitiveType,
    type_range,
)


class TestPrimitiveType:
    """Tests for PrimitiveType enum."""

    def test_bits(self):
        """Test bits for all primitive types."""
        assert PrimitiveType.INT8.bits == 8
        assert PrimitiveType.INT16.bits == 16
        assert PrimitiveType.INT32.bits == 32
        assert PrimitiveType.INT64.bits == 64
        assert PrimitiveType.UINT8.bits == 8
        assert PrimitiveType.UINT16.bits == 16
        assert PrimitiveType.UINT32.bits == 32
        assert PrimitiveType.UINT64.bits == 64
        assert PrimitiveType.FLOAT32.bits == 32
        assert PrimitiveType.FLOAT64.bits == 64
        assert PrimitiveType.BOOLEAN.bits == 1
        assert PrimitiveType.STRING.bits is None

    def test_classification(self):
        assert PrimitiveType.UINT32.is_integer is True
        assert PrimitiveType.UINT32.is_signed is False
        assert PrimitiveType.INT16.is_signed is True
        assert PrimitiveType.FLOAT32.is_integer is False
        assert PrimitiveType.FLOAT32.is_float is True
        assert PrimitiveType.STRING.is_float is False
        assert PrimitiveType.BOOLEAN.is_integer is False

    def test_all_integer_widths_share_logical_type(self):
        """Integer widths are only distinguishable through typed accessors."""
        for pt in PrimitiveType:
            if pt.is_integer:
                assert pt.logical_type is ElementType.INT

    def test_other_logical_types(self):
        assert PrimitiveType.FLOAT32.logical_type is ElementType.FLOAT32
        assert PrimitiveType.FLOAT64.logical_type is ElementType.FLOAT
        assert PrimitiveType.STRING.logical_type is ElementType.STRING
        assert PrimitiveType.BOOLEAN.logical_type is ElementType.BOOL

    def test_name_lookup(self):
        assert PRIMITIVE_TYPE_NAMES["uint16"] is PrimitiveType.UINT16
        assert ELEMENT_TYPE_NAMES["float"] is ElementType.FLOAT
        assert "int" not in PRIMITIVE_TYPE_NAMES


class TestTypeRange:
    """Tests for type_range."""

    def test_signed_ranges(self):
        assert type_range(PrimitiveType.INT8) == (-128, 127)
        assert type_range(PrimitiveType.INT16) == (-32768, 32767)
        assert type_range(PrimitiveType.INT64) == (-(2**63), 2**63 - 1)

    def test_unsigned_ranges(self):
        assert type_range(PrimitiveType.UINT8) == (0, 255)
        assert type_range(PrimitiveType.UINT32) == (0, 2**32 - 1)
        assert type_range(PrimitiveType.UINT64) == (0, 2**64 - 1)

    def test_non_integer_raises(self):
        with pytest.raises(ValueError, match="no integer range"):
            type_range(PrimitiveType.FLOAT64)


class TestTypedValue:
    """Tests for width-carrying source values."""

    def test_integer_wraps_to_width(self):
        assert TypedValue(300, PrimitiveType.UINT8).value == 44
        assert TypedValue(-1, PrimitiveType.UINT16).value == 65535
        assert TypedValue(128, PrimitiveType.INT8).value == -128

    def test_float32_rounds(self):
        assert TypedValue(0.1, PrimitiveType.FLOAT32).value == to_float32(0.1)
        assert TypedValue(0.1, PrimitiveType.FLOAT64).value == 0.1

    def test_int_accepted_for_float(self):
        assert TypedValue(3, PrimitiveType.FLOAT64).value == 3.0

    def test_rejects_non_numeric_type(self):
        with pytest.raises(ValueError):
            TypedValue("x", PrimitiveType.STRING)
        with pytest.raises(ValueError):
            TypedValue(True, PrimitiveType.BOOLEAN)

    def test_rejects_wrong_payload(self):
        with pytest.raises(ValueError):
            TypedValue(1.5, PrimitiveType.INT32)
        with pytest.raises(ValueError):
            TypedValue(True, PrimitiveType.INT8)
        with pytest.raises(ValueError):
            TypedValue("1.5", PrimitiveType.FLOAT32)
