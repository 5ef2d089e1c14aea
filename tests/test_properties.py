"""Property-based tests for literal conversion.

Digit strings are generated per radix and checked against Python's own
positional conversion, with separators and case variations layered on top.
"""

from __future__ import annotations

from hypothesis import event, example, given
from hypothesis import strategies as st

from numlit.errors import IntegerOverflow, LiteralError
from numlit.literals import WIDTHS, LiteralOptions, max_literal, parse_integer
from numlit.radix import Radix

# ============================================================================
# Hypothesis Strategies
# ============================================================================

_ALPHABETS = {
    Radix.BINARY: "01",
    Radix.OCTAL: "01234567",
    Radix.DECIMAL: "0123456789",
    Radix.HEX: "0123456789abcdefABCDEF",
}


@st.composite
def digit_strings(draw, max_size: int = 24) -> tuple[Radix, str]:
    radix = draw(st.sampled_from(list(Radix)))
    digits = draw(st.text(alphabet=_ALPHABETS[radix], min_size=1, max_size=max_size))
    return radix, digits


@st.composite
def separated(draw, digits: str) -> str:
    """Insert zero or more separators between the digits of `digits`."""
    parts = [digits[0]]
    for ch in digits[1:]:
        parts.append("_" * draw(st.integers(min_value=0, max_value=2)))
        parts.append(ch)
    return "".join(parts)


def _outcome(text: str, options: LiteralOptions = LiteralOptions()) -> int | type[LiteralError]:
    try:
        return parse_integer(text, options)
    except LiteralError as exc:
        return type(exc)


# ============================================================================
# TestPositionalValue
# ============================================================================


class TestPositionalValue:
    @given(case=digit_strings(), width=st.sampled_from(WIDTHS))
    @example(case=(Radix.HEX, "7fffffffffffffff"), width=64)
    @example(case=(Radix.HEX, "8000000000000000"), width=64)
    @example(case=(Radix.BINARY, "1111111"), width=8)
    def test_value_or_overflow(self, case: tuple[Radix, str], width: int) -> None:
        radix, digits = case
        expected = int(digits, radix.value)
        result = _outcome(radix.prefix + digits, LiteralOptions(width=width))
        if expected <= max_literal(width):
            event("fits")
            assert result == expected
        else:
            event("overflow")
            assert result is IntegerOverflow

    @given(case=digit_strings())
    def test_value_is_non_negative(self, case: tuple[Radix, str]) -> None:
        radix, digits = case
        result = _outcome(radix.prefix + digits)
        assert result is IntegerOverflow or result >= 0


# ============================================================================
# TestSeparatorInsertion
# ============================================================================


class TestSeparatorInsertion:
    @given(data=st.data(), case=digit_strings())
    def test_separators_do_not_change_outcome(self, data, case: tuple[Radix, str]) -> None:
        radix, digits = case
        text = radix.prefix + data.draw(separated(digits))
        event(f"separators={text.count('_') > 0}")
        assert _outcome(text) == _outcome(radix.prefix + digits)

    @given(case=digit_strings())
    def test_single_separators_pass_strict_policy(self, case: tuple[Radix, str]) -> None:
        radix, digits = case
        grouped = "_".join(digits)
        strict = LiteralOptions(separators="strict")
        assert _outcome(radix.prefix + grouped, strict) == _outcome(radix.prefix + digits)


# ============================================================================
# TestCaseInsensitivity
# ============================================================================


class TestCaseInsensitivity:
    @given(case=digit_strings())
    def test_upper_and_lower_case_agree(self, case: tuple[Radix, str]) -> None:
        radix, digits = case
        text = radix.prefix + digits
        assert _outcome(text.upper()) == _outcome(text.lower())
