"""Integer literal conversion with overflow detection."""

from __future__ import annotations

from dataclasses import dataclass

from numlit.errors import IntegerOverflow, MalformedLiteral
from numlit.radix import Radix, classify
from numlit.tokens import SEPARATOR

WIDTHS = (8, 16, 32, 64)
SEPARATOR_POLICIES = ("lenient", "strict")


@dataclass(frozen=True, slots=True)
class LiteralOptions:
    """How strictly literals are read and how wide the target integer is.

    separators: "lenient" skips `_` anywhere in the digit region; "strict"
    only accepts a `_` that sits between two digits.
    leading_zeros: whether a decimal literal such as ``007`` is accepted.
    """

    width: int = 64
    separators: str = "lenient"
    leading_zeros: bool = True

    def __post_init__(self) -> None:
        if self.width not in WIDTHS:
            raise ValueError(f"width must be one of {', '.join(map(str, WIDTHS))}")
        if self.separators not in SEPARATOR_POLICIES:
            raise ValueError(
                f"separators must be one of {', '.join(SEPARATOR_POLICIES)}, got {self.separators!r}"
            )


DEFAULT_OPTIONS = LiteralOptions()


def int_range(width: int) -> tuple[int, int]:
    """Return the inclusive signed range for an integer of `width` bits."""
    if width not in WIDTHS:
        raise ValueError(f"width must be one of {', '.join(map(str, WIDTHS))}")
    return -(1 << (width - 1)), (1 << (width - 1)) - 1


def max_literal(width: int) -> int:
    """Return the largest value a literal may produce at `width` bits."""
    return int_range(width)[1]


def checked_mul_add(value: int, base: int, digit: int, limit: int) -> int | None:
    """Return ``value * base + digit``, or None if it would exceed `limit`."""
    if value > limit // base:
        return None
    value *= base
    if value > limit - digit:
        return None
    return value + digit


def parse_integer(text: str, options: LiteralOptions = DEFAULT_OPTIONS) -> int:
    """Convert a literal such as ``0b0011_1100`` to its non-negative value.

    Raises MalformedLiteral for a bad digit, a misplaced separator (strict
    policy only) or an empty digit region, and IntegerOverflow as soon as the
    value stops fitting `options.width`.
    """
    radix, start = classify(text)
    limit = max_literal(options.width)
    strict = options.separators == "strict"

    value = 0
    first_digit: int | None = None
    prev_separator = False
    for i in range(start, len(text)):
        ch = text[i]
        if ch == SEPARATOR:
            if strict and (first_digit is None or prev_separator or i == len(text) - 1):
                raise MalformedLiteral(text, i, radix, ch)
            prev_separator = True
            continue
        prev_separator = False

        digit = radix.digit_value(ch)
        if digit is None:
            raise MalformedLiteral(text, i, radix, ch)

        if first_digit is None:
            first_digit = i
        elif (
            not options.leading_zeros
            and radix is Radix.DECIMAL
            and value == 0
            and text[first_digit] == "0"
        ):
            raise MalformedLiteral(
                text, first_digit, radix, "0", f"leading zero in decimal literal '{text}'"
            )

        result = checked_mul_add(value, radix.value, digit, limit)
        if result is None:
            raise IntegerOverflow(text, i, radix, options.width)
        value = result

    if first_digit is None:
        raise MalformedLiteral(text, len(text), radix, None)
    return value
