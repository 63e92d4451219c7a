"""Tests for float32 and float64 elements."""

from __future__ import annotations

import math

import pytest

from typed_series import (
    BooleanEncodingError,
    ElementType,
    Float32Element,
    Float64Element,
    Int8Element,
    MissingValueError,
    NonFiniteValueError,
    PrimitiveType,
    StringElement,
    TypedValue,
    Uint64Element,
)
from typed_series.numeric import to_float32


class TestFloat32:
    """Tests for Float32Element."""

    def test_logical_type(self):
        assert Float32Element().logical_type is ElementType.FLOAT32

    def test_default_is_present_zero(self):
        elem = Float32Element()
        assert elem.is_missing is False
        assert elem.value == 0.0
        assert elem.text() == "0.000000"

    def test_rounds_to_single_precision(self):
        elem = Float32Element(0.1)
        assert elem.value == to_float32(0.1)
        assert elem.value != 0.1

    def test_from_text(self):
        assert Float32Element("2.5").value == 2.5
        assert Float32Element("0.1").value == to_float32(0.1)

    def test_text_out_of_range_is_missing(self):
        assert Float32Element("1e39").is_missing is True

    def test_finite_overflow_becomes_infinite(self):
        elem = Float32Element(1e300)
        assert elem.is_missing is False
        assert elem.value == math.inf
        assert elem.text() == "+Inf"

    def test_from_ints(self):
        assert Float32Element(3).value == 3.0
        assert Float32Element(2**64 - 1).value == float(2**64)
        assert Float32Element(TypedValue(2**64 - 1, PrimitiveType.UINT64)).value == float(2**64)

    def test_nan_text_is_missing(self):
        elem = Float32Element("NaN")
        assert elem.is_missing is True
        assert elem.text() == "NaN"

    def test_missing_compares_false_against_zero(self):
        missing = Float32Element("NaN")
        zero = Float32Element()
        assert missing.eq(zero) is False
        assert missing.neq(zero) is False
        assert (missing == zero) is False
        assert (missing != zero) is False


class TestFloat64:
    """Tests for Float64Element."""

    def test_logical_type(self):
        assert Float64Element().logical_type is ElementType.FLOAT

    def test_keeps_double_precision(self):
        assert Float64Element(0.1).value == 0.1

    def test_render_six_decimals(self):
        assert Float64Element(2.5).text() == "2.500000"
        assert Float64Element(-1.0 / 3).text() == "-0.333333"
        assert Float64Element(1e20).text() == "100000000000000000000.000000"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_float_source_is_missing(self, value):
        assert Float64Element(value).is_missing is True
        assert Float32Element(value).is_missing is True

    def test_infinite_text_is_kept(self):
        assert Float64Element("inf").value == math.inf
        assert Float64Element("-Infinity").text() == "-Inf"

    def test_nan_payload_reads_as_missing(self):
        """A NaN payload is missing even though the flag was never set."""
        elem = Float64Element("nan")
        assert elem._missing is False
        assert elem.is_missing is True
        assert elem.value is None
        assert elem.text() == "NaN"

    def test_copy_of_nan_payload_is_missing(self):
        dup = Float64Element("nan").copy()
        assert dup.is_missing is True
        assert dup._missing is True

    def test_huge_int_is_missing(self):
        assert Float64Element(2**1100).is_missing is True

    def test_text_overflow_is_missing(self):
        assert Float64Element("1e400").is_missing is True

    def test_from_bool(self):
        assert Float64Element(True).value == 1.0
        assert Float64Element(False).value == 0.0

    def test_from_elements(self):
        assert Float64Element(Int8Element(-3)).value == -3.0
        assert Float64Element(StringElement("2.25")).value == 2.25
        assert Float64Element(StringElement("x")).is_missing is True
        assert Float64Element(Float32Element(0.1)).value == to_float32(0.1)

    def test_float32_from_float64_element(self):
        assert Float32Element(Float64Element(0.1)).value == to_float32(0.1)


class TestFloatAccessors:
    def test_integer_accessors_truncate(self):
        assert Float64Element(3.7).as_int32() == 3
        assert Float64Element(-3.7).as_int() == -3
        assert Float32Element(2.5).as_uint16() == 2

    def test_integer_accessors_wrap(self):
        assert Float64Element(300.0).as_uint8() == 44
        assert Float64Element(200.0).as_int8() == -56

    def test_infinite_to_integer_raises(self):
        elem = Float64Element("inf")
        with pytest.raises(NonFiniteValueError, match="can't convert Inf to int"):
            elem.as_int()
        with pytest.raises(NonFiniteValueError):
            elem.as_uint64()
        assert elem.value == math.inf

    def test_float_accessors(self):
        assert Float64Element(1.5).as_float32() == 1.5
        assert Float64Element(0.1).as_float32() == to_float32(0.1)
        assert Float32Element(0.1).as_float() == to_float32(0.1)

    def test_as_bool(self):
        assert Float64Element(1.0).as_bool() is True
        assert Float32Element(0.0).as_bool() is False
        with pytest.raises(BooleanEncodingError):
            Float64Element(0.5).as_bool()

    def test_missing_raises(self):
        with pytest.raises(MissingValueError):
            Float32Element.missing().as_float32()
        with pytest.raises(MissingValueError):
            Float64Element("nan").as_float()

    def test_uint64_large_value_to_float(self):
        assert Uint64Element(2**64 - 1).as_float() == float(2**64)


class TestFloatComparison:
    def test_cross_width(self):
        assert Float32Element(1.5).eq(Float64Element(1.5)) is True
        # The other side is rounded to the receiver's width before comparing
        assert Float32Element(0.1).eq(Float64Element(0.1)) is True
        assert Float64Element(0.1).eq(Float32Element(0.1)) is False

    def test_ordering(self):
        assert Float64Element(1.0) < Float64Element(2.0)
        assert Float64Element(2.0) >= Float64Element(2.0)
        assert Float64Element("-inf") < Float64Element(-1e308)

    def test_nan_text_never_compares(self):
        """Text that reads back as NaN behaves like a missing operand."""
        other = StringElement("nan")
        assert Float64Element(1.0).eq(other) is False
        assert Float64Element(1.0).neq(other) is False
