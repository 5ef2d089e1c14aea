"""Radix classification and per-radix digit decoding."""

from __future__ import annotations

from enum import IntEnum

_DIGIT_VALUES = {c: i for i, c in enumerate("0123456789")}
_DIGIT_VALUES.update({c: 10 + i for i, c in enumerate("abcdef")})
_DIGIT_VALUES.update({c: 10 + i for i, c in enumerate("ABCDEF")})


class Radix(IntEnum):
    """The fixed set of literal bases.  The member value is the base."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    def digit_value(self, ch: str) -> int | None:
        """Decode ch as a digit of this radix, or None if it is not one."""
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= self.value:
            return None
        return value


_PREFIXES = {
    Radix.BINARY: "0b",
    Radix.OCTAL: "0o",
    Radix.DECIMAL: "",
    Radix.HEX: "0x",
}

_LABELS = {
    Radix.BINARY: "binary",
    Radix.OCTAL: "octal",
    Radix.DECIMAL: "decimal",
    Radix.HEX: "hexadecimal",
}

# Keyed by the lowercased marker letter after the leading zero
_PREFIX_LETTERS = {"x": Radix.HEX, "o": Radix.OCTAL, "b": Radix.BINARY}


def classify(text: str) -> tuple[Radix, int]:
    """Return the radix of a literal and the offset where its digits begin.

    A prefix is recognised before a leading ``0`` is taken as a decimal
    digit, so ``0x10`` is hexadecimal.
    """
    if len(text) >= 2 and text[0] == "0":
        radix = _PREFIX_LETTERS.get(text[1].lower())
        if radix is not None:
            return radix, 2
    return Radix.DECIMAL, 0
