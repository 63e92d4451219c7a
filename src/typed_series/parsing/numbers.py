"""Strict base-10 parsing of numeric and boolean text.

These helpers back the text coercion of every element variant and the
typed accessors of the string variant. Failures raise the hard-error
exceptions from ``typed_series.errors``.
"""

from __future__ import annotations

import math

import ply.lex as lex

from typed_series.errors import BooleanEncodingError, NumberRangeError, NumberSyntaxError
from typed_series.numeric import to_float32
from typed_series.parsing.number_lexer import NumberLexer
from typed_series.types import FALSE_TOKENS, TRUE_TOKENS

_LEXER: NumberLexer | None = None


def _number_lexer() -> NumberLexer:
    """Return the shared lexer, building it on first use."""
    global _LEXER
    if _LEXER is None:
        lexer = NumberLexer()
        lexer.build()
        _LEXER = lexer
    return _LEXER


def scan_number(text: str, target: str = "number") -> lex.LexToken:
    """Return the single token spanning ``text``.

    Raises NumberSyntaxError if the text is empty, contains an illegal
    character, or holds more than one literal.
    """
    try:
        tokens = _number_lexer().tokenize(text)
    except SyntaxError:
        raise NumberSyntaxError(text, target) from None
    if len(tokens) != 1:
        raise NumberSyntaxError(text, target)
    return tokens[0]


def parse_int(text: str, bits: int = 64) -> int:
    """Parse a signed base-10 integer that must fit in ``bits`` bits."""
    target = f"int{bits}"
    tok = scan_number(text, target)
    if tok.type != "INTEGER":
        raise NumberSyntaxError(text, target)
    value = tok.value
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise NumberRangeError(text, target)
    return value


def parse_uint(text: str, bits: int = 64) -> int:
    """Parse an unsigned base-10 integer; no sign is accepted."""
    target = f"uint{bits}"
    if text[:1] in ("+", "-"):
        raise NumberSyntaxError(text, target)
    tok = scan_number(text, target)
    if tok.type != "INTEGER":
        raise NumberSyntaxError(text, target)
    value = tok.value
    if value >= 1 << bits:
        raise NumberRangeError(text, target)
    return value


def parse_float(text: str, bits: int = 64) -> float:
    """Parse a float of the given width (32 or 64).

    Accepts integers, decimals with optional exponent, ``inf``/``infinity``
    and ``nan`` in any case. A finite literal that does not fit the width
    raises NumberRangeError rather than becoming infinite.
    """
    target = f"float{bits}"
    tok = scan_number(text, target)
    if tok.type in ("INFINITY", "NAN"):
        return tok.value
    if tok.type == "INTEGER":
        try:
            value = float(tok.value)
        except OverflowError:
            raise NumberRangeError(text, target) from None
    else:
        value = tok.value
    if math.isinf(value):
        raise NumberRangeError(text, target)
    if bits == 32:
        try:
            return to_float32(value, strict=True)
        except NumberRangeError:
            raise NumberRangeError(text, target) from None
    return value


def parse_bool(text: str) -> bool:
    """Parse one of the case-insensitive boolean tokens."""
    token = text.lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise BooleanEncodingError(text, "string")
