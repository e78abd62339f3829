#!/usr/bin/env python3
"""
Roman Numeral Validator — Command Line
======================================

Usage:
    python main.py                      # Interactive: one numeral per line, blank line exits
    python main.py XIV "MCMLIX, mmxxi"  # Batch: parse every numeral given
    python main.py --format 1994        # Integer → Roman numeral
    python main.py --permissive IIII    # Allow up to nine repeats at every place

Exits with status 1 if any numeral was rejected (batch or interactive).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from pydantic import ValidationError

from roman_validator import __version__
from roman_validator.batch import parse_batch, split_numerals
from roman_validator.config import ParserSettings
from roman_validator.exceptions import RomanNumeralError
from roman_validator.formatter import format_roman
from roman_validator.models import BatchReport, ParseResult
from roman_validator.parser import RomanNumeralParser

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Printers ────────────────────────────────────────────────────────


def format_result(result: ParseResult, color: bool = False) -> str:
    """One report line: '<input> is <value>' or '<input> returned error: <message>'."""
    error = result.error
    if error is None:
        if color:
            return f"{result.text} is {_GREEN}{_BOLD}{result.value}{_RESET}"
        return f"{result.text} is {result.value}"

    if color:
        return (
            f"{result.text} returned error: {_RED}{error.message}{_RESET} "
            f"{_DIM}[{error.code}]{_RESET}"
        )
    return f"{result.text} returned error: {error.message}"


def print_error_total(errors: int, color: bool = False, out: Optional[TextIO] = None) -> None:
    """Print 'N error(s) detected!' when N > 0."""
    if errors:
        noun = "error" if errors == 1 else "errors"
        line = f"{errors} {noun} detected!"
        print(f"{_RED}{_BOLD}{line}{_RESET}" if color else line, file=out or sys.stdout)


def print_report(report: BatchReport, color: bool = False, out: Optional[TextIO] = None) -> int:
    """Print every result and the error total.

    Returns:
        0 if every numeral parsed, 1 otherwise.
    """
    out = out or sys.stdout
    for result in report.results:
        print(format_result(result, color), file=out)

    print_error_total(report.error_count, color, out)
    return 0 if report.is_valid else 1


# ─── Modes ───────────────────────────────────────────────────────────


def run_batch(parser: RomanNumeralParser, args: list[str], color: bool = False) -> int:
    """Parse every numeral found in ``args`` and print the report."""
    report = parse_batch(split_numerals(args), parser)
    return print_report(report, color)


def run_interactive(
    parser: RomanNumeralParser,
    read: Optional[Callable[[str], str]] = None,
    color: bool = False,
) -> int:
    """Prompt for numerals until a blank line (or EOF) and print each value.

    Returns:
        The number of numerals rejected during the session.
    """
    read = read or input
    print(f"{_BOLD}{_CYAN}Welcome to the Roman Number Translator{_RESET}" if color
          else "Welcome to the Roman Number Translator")
    print("Enter an empty line to exit")

    errors = 0
    prompt = "Please enter a Roman Numeral: "
    while True:
        try:
            line = read(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line.strip():
            break
        result = parser.parse(line)
        errors += 0 if result.is_valid else 1
        print(format_result(result, color))
        prompt = "Please enter another Roman Numeral: "
    return errors


def run_format(value: int, lowercase: bool = False) -> int:
    """Print the Roman numeral for ``value``."""
    try:
        print(f"{value} is {format_roman(value, lowercase=lowercase)}")
    except RomanNumeralError as e:
        print(f"{value} returned error: {e}")
        return 1
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        description="Convert Roman numerals to integers, strictly validated."
    )
    arg_parser.add_argument(
        "numerals", nargs="*",
        help="Numerals to parse (separated by spaces, commas or semicolons)",
    )
    arg_parser.add_argument("--format", type=int, metavar="N", dest="format_value",
                            help="Print the Roman numeral for N (1-3999)")
    arg_parser.add_argument("--lower", action="store_true",
                            help="With --format, print lowercase numerals")
    arg_parser.add_argument("--permissive", action="store_true",
                            help="Allow up to nine repeated unit symbols at every place")
    arg_parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    arg_parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return arg_parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.format_value is not None and args.numerals:
        arg_parser.error("--format cannot be combined with numerals to parse")

    try:
        settings = ParserSettings.from_env()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 2

    if args.permissive:
        settings = settings.model_copy(update={"max_repeats": 9})

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    color = not args.no_color and sys.stdout.isatty()

    if args.format_value is not None:
        return run_format(args.format_value, args.lower)

    parser = RomanNumeralParser(settings)
    if args.numerals:
        return run_batch(parser, args.numerals, color)

    errors = run_interactive(parser, color=color)
    print_error_total(errors, color)
    return 0 if errors == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
