"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from numlit.errors import LiteralError
from numlit.literals import LiteralOptions, parse_integer
from numlit.scanner import scan
from numlit.tokens import Token, TokenType


@pytest.fixture
def convert():
    """Return a helper that converts a literal with the given option overrides."""

    def _convert(text: str, **overrides) -> int:
        return parse_integer(text, LiteralOptions(**overrides))

    return _convert


@pytest.fixture
def tokens():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _tokens(source: str) -> list[Token]:
        return [t for t in scan(source) if t.type != TokenType.EOF]

    return _tokens


def assert_error(
    exc: LiteralError,
    error_type: type[LiteralError],
    offset: int,
    fragment: str | None = None,
) -> None:
    """Assert the class, offset, and (optionally) message text of a literal error."""
    assert type(exc) is error_type, f"Expected {error_type.__name__}, got {type(exc).__name__}"
    assert exc.offset == offset, f"Expected offset {offset}, got {exc.offset}"
    if fragment is not None:
        assert fragment in exc.message, f"Expected {fragment!r} in {exc.message!r}"


def assert_raws(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token raw texts match the expected list."""
    actual = [t.raw for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
