"""Token types, source positions, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    INTEGER = auto()  # digit [A-Za-z0-9_]*, prefix included
    FLOAT = auto()  # decimal with fraction or exponent, never converted
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based byte offset."""

    line: int
    column: int
    offset: int

    def shifted(self, count: int) -> Position:
        """Return the position `count` characters further along the same line."""
        return Position(self.line, self.column + count, self.offset + count)


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A numeric literal candidate and where it came from."""

    type: TokenType
    raw: str
    span: Span


SEPARATOR = "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_literal_char(ch: str) -> bool:
    """Return True if ch may continue a numeric literal candidate."""
    return ch != "" and (is_digit(ch) or is_ident_start(ch))
