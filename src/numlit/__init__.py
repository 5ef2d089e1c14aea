"""Integer literal front end for a small scripting language."""

from __future__ import annotations

from numlit.errors import IntegerOverflow, LiteralError, MalformedLiteral, ScriptError
from numlit.literals import LiteralOptions, parse_integer
from numlit.radix import Radix

__version__ = "0.1.0"

parse = parse_integer

__all__ = [
    "IntegerOverflow",
    "LiteralError",
    "LiteralOptions",
    "MalformedLiteral",
    "Radix",
    "ScriptError",
    "parse",
    "parse_integer",
]
