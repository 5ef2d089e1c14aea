"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from numlit.tokens import Span, Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        file.write(f"{tok.type.name} {_span(tok.span)} {tok.raw!r}\n")


def _span(span: Span) -> str:
    return f"{span.start.line}:{span.start.column}-{span.end.line}:{span.end.column}"
