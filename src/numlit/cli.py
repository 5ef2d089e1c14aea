"""Command-line interface for numlit."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from numlit.errors import LiteralError
from numlit.literals import LiteralOptions, parse_integer


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    literals: list[str]
    literal_options: LiteralOptions
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="numlit",
        description="Convert and check integer literals in scripts",
    )
    p.add_argument("input", nargs="?", help="Script file to check ('-' for stdin)")
    p.add_argument(
        "-l",
        "--literal",
        action="append",
        default=[],
        metavar="TEXT",
        help="Literal to convert (repeatable)",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--width",
        type=int,
        default=None,
        metavar="BITS",
        help="Target integer width: 8, 16, 32 or 64 (default: 64)",
    )
    p.add_argument(
        "--strict-separators",
        action="store_true",
        default=None,
        help="Only accept '_' between two digits",
    )
    p.add_argument(
        "--no-leading-zeros",
        action="store_true",
        default=None,
        help="Reject decimal literals such as 007",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover numlit.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and recheck")
    p.add_argument("--debug", action="store_true", help="Dump scanned tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "numlit.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.  Raises ValueError for
    settings LiteralOptions rejects.
    """
    if args.input is None and not args.literal:
        raise ValueError("nothing to do: give an input file or --literal")
    if args.watch and args.input in (None, "-"):
        raise ValueError("--watch needs an input file")

    input_file = Path(args.input) if args.input and args.input != "-" else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    width = 64
    separators = "lenient"
    leading_zeros = True
    cfg_literals = config.get("literals")
    if isinstance(cfg_literals, dict):
        cfg_width = cfg_literals.get("width")
        if isinstance(cfg_width, int):
            width = cfg_width
        cfg_separators = cfg_literals.get("separators")
        if isinstance(cfg_separators, str):
            separators = cfg_separators
        cfg_leading = cfg_literals.get("leading_zeros")
        if isinstance(cfg_leading, bool):
            leading_zeros = cfg_leading

    if args.width is not None:
        width = args.width
    if args.strict_separators:
        separators = "strict"
    if args.no_leading_zeros:
        leading_zeros = False

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        literals=list(args.literal),
        literal_options=LiteralOptions(
            width=width, separators=separators, leading_zeros=leading_zeros
        ),
        watch=args.watch,
        debug=args.debug,
    )


def check(options: CliOptions, source: str | None = None) -> tuple[str, list[str]]:
    """Convert the requested literals and script.

    Returns the report text and the formatted errors.  `source` replaces
    reading the input (used for stdin).
    """
    from numlit.debug import dump_tokens
    from numlit.scanner import convert_all, scan

    lines: list[str] = []
    errors: list[str] = []

    for text in options.literals:
        try:
            value = parse_integer(text, options.literal_options)
        except LiteralError as exc:
            errors.append(f"error: {exc.message}")
        else:
            lines.append(f"{text}\t{value}\n")

    if source is None and options.input_file is not None:
        source = options.input_file.read_text(encoding="utf-8")
    if source is not None:
        filename = str(options.input_file) if options.input_file else "<stdin>"
        if options.debug:
            dump_tokens(scan(source), file=sys.stderr)
        values, script_errors = convert_all(source, options.literal_options)
        for token, value in values:
            start = token.span.start
            lines.append(f"{start.line}:{start.column}\t{token.raw}\t{value}\n")
        errors.extend(err.format(filename) for err in script_errors)

    return "".join(lines), errors


def _emit(options: CliOptions, report: str) -> None:
    if options.output_file:
        options.output_file.write_text(report, encoding="utf-8")
    else:
        sys.stdout.write(report)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, recheck on each modification."""
    if options.input_file is None:
        raise ValueError("--watch needs an input file")
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    report, errors = check(options)
                    _emit(options, report)
                    for err in errors:
                        print(err, file=sys.stderr)
                    print(f"Checked {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (ValueError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    source = sys.stdin.read() if args.input == "-" else None
    try:
        report, errors = check(options, source)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _emit(options, report)
    for err in errors:
        print(err, file=sys.stderr)
    return 1 if errors else 0
