"""Error types for literal conversion, with formatted source context."""

from __future__ import annotations

from numlit.radix import Radix
from numlit.tokens import Span


class LiteralError(Exception):
    """Base class for a literal that cannot be converted.

    `offset` is 0-based within `text`, the literal as written.
    """

    def __init__(self, message: str, text: str, offset: int) -> None:
        self.message = message
        self.text = text
        self.offset = offset
        super().__init__(message)


class MalformedLiteral(LiteralError):
    """A character is not a digit of the radix, or there are no digits at all."""

    def __init__(
        self,
        text: str,
        offset: int,
        radix: Radix,
        character: str | None,
        message: str | None = None,
    ) -> None:
        self.radix = radix
        self.character = character
        if message is None:
            message = _malformed_message(text, radix, character)
        super().__init__(message, text, offset)


def _malformed_message(text: str, radix: Radix, character: str | None) -> str:
    if character is None:
        return f"{radix.label} literal '{text}' has no digits"
    if character == "_":
        return f"misplaced digit separator in {radix.label} literal '{text}'"
    return f"invalid digit '{character}' in {radix.label} literal '{text}'"


class IntegerOverflow(LiteralError):
    """The literal's magnitude does not fit the target integer width."""

    def __init__(self, text: str, offset: int, radix: Radix, width: int) -> None:
        self.radix = radix
        self.width = width
        message = f"integer literal '{text}' does not fit in {width} signed bits"
        super().__init__(message, text, offset)


class ScriptError(Exception):
    """A literal error attributed to its location in script source."""

    def __init__(self, error: LiteralError, span: Span, source: str) -> None:
        self.error = error
        self.message = error.message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<script>") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Literals never span lines
        underline_len = max(1, self.span.end.column - col)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
