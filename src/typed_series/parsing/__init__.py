"""Parsing module for numeric and boolean text."""

from typed_series.parsing.number_lexer import NumberLexer
from typed_series.parsing.numbers import (
    parse_bool,
    parse_float,
    parse_int,
    parse_uint,
    scan_number,
)

__all__ = [
    "NumberLexer",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_uint",
    "scan_number",
]
