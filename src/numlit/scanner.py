"""Numeric literal scanner: finds literal candidates in script source.

Only numbers are tokenized.  Identifiers, strings, and comments are stepped
over so that digits inside them are not mistaken for literals; everything
else is skipped without interpretation.
"""

from __future__ import annotations

import re

from numlit.errors import IntegerOverflow, LiteralError, ScriptError
from numlit.literals import DEFAULT_OPTIONS, LiteralOptions, parse_integer
from numlit.radix import Radix, classify
from numlit.tokens import (
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_ident_start,
    is_literal_char,
)

_EXPONENT_RE = re.compile(r"[0-9_]+[eE]_*[0-9][0-9_]*")
_SIGNED_EXPONENT_RE = re.compile(r"[0-9_]+[eE]")
_QUOTES = "\"'`"


class Scanner:
    """Collect INTEGER and FLOAT tokens from script source."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        while self._pos < len(self._source):
            ch = self._peek()
            if ch == "/" and self._peek(1) == "/":
                self._skip_line_comment()
            elif ch == "/" and self._peek(1) == "*":
                self._skip_block_comment()
            elif ch in _QUOTES:
                self._skip_string(ch)
            elif is_ident_start(ch):
                self._skip_identifier()
            elif is_digit(ch):
                self._scan_number()
            else:
                self._advance()

        end = self._current_pos()
        self._tokens.append(Token(TokenType.EOF, "", Span(end, end)))
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    # ------------------------------------------------------------------
    # Skipped regions
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        self._advance()
        self._advance()
        depth = 1
        while self._pos < len(self._source) and depth:
            if self._peek() == "/" and self._peek(1) == "*":
                self._advance()
                depth += 1
            elif self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                depth -= 1
            self._advance()

    def _skip_string(self, quote: str) -> None:
        self._advance()
        while self._pos < len(self._source):
            ch = self._advance()
            if ch == "\\" and self._pos < len(self._source):
                self._advance()
            elif ch == quote:
                return

    def _skip_identifier(self) -> None:
        while is_literal_char(self._peek()):
            self._advance()

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _scan_number(self) -> None:
        start = self._current_pos()
        while is_literal_char(self._peek()):
            self._advance()
        raw = self._source[start.offset : self._pos]

        tt = TokenType.INTEGER
        if classify(raw)[0] is not Radix.DECIMAL:
            # "0x10.5" is one malformed candidate, not "0x10" then "5"
            if self._peek() == "." and is_digit(self._peek(1)):
                self._advance()
                while is_literal_char(self._peek()):
                    self._advance()
        elif self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_literal_char(self._peek()):
                self._advance()
            self._scan_exponent_sign()
            tt = TokenType.FLOAT
        elif _EXPONENT_RE.fullmatch(raw):
            tt = TokenType.FLOAT
        elif _SIGNED_EXPONENT_RE.fullmatch(raw) and self._scan_exponent_sign():
            tt = TokenType.FLOAT

        raw = self._source[start.offset : self._pos]
        self._tokens.append(Token(tt, raw, Span(start, self._current_pos())))

    def _scan_exponent_sign(self) -> bool:
        # "1e" or "1.5e" followed by a signed exponent
        last = self._source[self._pos - 1]
        if last not in "eE" or self._peek() not in ("+", "-") or not is_digit(self._peek(1)):
            return False
        self._advance()
        while is_literal_char(self._peek()):
            self._advance()
        return True


def scan(source: str) -> list[Token]:
    """Convenience function: scan source and return tokens."""
    return Scanner(source).scan()


def _locate(token: Token, error: LiteralError) -> Span:
    if isinstance(error, IntegerOverflow):
        return token.span
    start = token.span.start
    return Span(start.shifted(error.offset), start.shifted(error.offset + 1))


def convert_all(
    source: str, options: LiteralOptions = DEFAULT_OPTIONS
) -> tuple[list[tuple[Token, int]], list[ScriptError]]:
    """Convert every integer literal in source.

    Returns the converted literals with their values, and an error for each
    literal that could not be converted, both in source order.
    """
    values: list[tuple[Token, int]] = []
    errors: list[ScriptError] = []
    for token in scan(source):
        if token.type != TokenType.INTEGER:
            continue
        try:
            values.append((token, parse_integer(token.raw, options)))
        except LiteralError as exc:
            errors.append(ScriptError(exc, _locate(token, exc), source))
    return values, errors


def literals(source: str, options: LiteralOptions = DEFAULT_OPTIONS) -> list[tuple[Token, int]]:
    """Return every integer literal in source with its value.

    Raises ScriptError for the first literal that cannot be converted.
    """
    values, errors = convert_all(source, options)
    if errors:
        raise errors[0]
    return values


def check_source(source: str, options: LiteralOptions = DEFAULT_OPTIONS) -> list[ScriptError]:
    """Return an error for every integer literal in source that cannot be converted."""
    return convert_all(source, options)[1]
