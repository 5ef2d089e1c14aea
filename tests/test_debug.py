"""--debug token dump."""

from __future__ import annotations

import io

from numlit.debug import dump_tokens
from numlit.scanner import scan


def test_dump_lines() -> None:
    buf = io.StringIO()
    dump_tokens(scan("a = 0x1f;\nb = 2.5;"), file=buf)
    assert buf.getvalue().splitlines() == [
        "INTEGER 1:5-1:9 '0x1f'",
        "FLOAT 2:5-2:8 '2.5'",
        "EOF 2:9-2:9 ''",
    ]


def test_dump_empty_source() -> None:
    buf = io.StringIO()
    dump_tokens(scan(""), file=buf)
    assert buf.getvalue() == "EOF 1:1-1:1 ''\n"
