"""Lexer for numeric text offered to elements."""

import ply.lex as lex


class NumberLexer:
    """Lexer for tokenizing a single numeric literal.

    Nothing is ignored, so surrounding whitespace or any trailing character
    is reported as an illegal character.
    """

    # Token list
    tokens = [
        "INFINITY",
        "NAN",
        "FLOAT",
        "INTEGER",
    ]

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    # Rules are tried in definition order, so FLOAT must precede INTEGER.

    def t_INFINITY(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?(?i:inf(?:inity)?)"
        t.value = float(t.value)
        return t

    def t_NAN(self, t: lex.LexToken) -> lex.LexToken:
        r"(?i:nan)"
        t.value = float(t.value)
        return t

    def t_FLOAT(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?[0-9]+[eE][+-]?[0-9]+"
        # Literals beyond the float64 range come out as +/-Inf here
        t.value = float(t.value)
        return t

    def t_INTEGER(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?[0-9]+"
        t.value = int(t.value)
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at position {t.lexpos}")

    # --- Lexer methods ---

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens.

        Works on a clone of the built lexer, so one NumberLexer can serve
        callers on several threads.
        """
        lexer = self.lexer.clone()
        lexer.input(data)
        tokens = []
        while True:
            tok = lexer.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
