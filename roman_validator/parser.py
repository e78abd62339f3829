"""
Roman numeral parser: the entry point over classifier and state machine.

Flow:
  ┌──────────────┐
  │  Raw text    │
  └──────┬───────┘
         │  trim
  ┌──────▼───────┐
  │  Classifier  │   ← one character at a time
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ State machine│   ← grammar, first failure is kept
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Range check  │   ← [min_value, max_value]
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ ParseResult  │   ← value or error, never an exception
  └──────────────┘

Callers that prefer exceptions use ``to_int`` / ``roman_to_int``, which raise
the RomanNumeralError subclass matching the failure.
"""

from __future__ import annotations

import logging
import string

from .classifier import classify
from .config import ParserSettings
from .exceptions import InvalidCharacterError
from .models import ErrorKind, ParseAccumulator, ParseError, ParseResult
from .state_machine import advance, fail, finalize, new_accumulator

logger = logging.getLogger(__name__)

# Length-preserving upper-casing, so positions match the stripped input
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class RomanNumeralParser:
    """Parses Roman numerals into integers with precise error reporting.

    Usage:
        parser = RomanNumeralParser()
        result = parser.parse("MCMLIX")
        if result.is_valid:
            print(result.value)            # 1959
        else:
            print(result.error.message)
    """

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or ParserSettings()

    def parse(self, text: str) -> ParseResult:
        """Parse one numeral.

        Args:
            text: The numeral, in any case, optionally surrounded by whitespace.

        Returns:
            ParseResult holding either the value or the first error found.
        """
        stripped = text.strip()
        normalized = stripped.translate(_ASCII_UPPER)

        if not normalized:
            error = ParseError(
                kind=ErrorKind.EMPTY_INPUT,
                message="Can't have an empty Roman numeral",
            )
            return ParseResult(text=text, normalized=normalized, error=error)

        acc = self._consume(stripped)
        if acc.error is not None:
            logger.debug("Rejected %r: %s", text, acc.error.message)
            return ParseResult(text=text, normalized=normalized, error=acc.error)

        value = finalize(acc)
        if not self.settings.min_value <= value <= self.settings.max_value:
            error = ParseError(
                kind=ErrorKind.OUT_OF_RANGE,
                message=(
                    f"Value of {normalized!r} is {value} but this is out of range "
                    f"[{self.settings.min_value}, {self.settings.max_value}]"
                ),
                consumed=acc.consumed,
            )
            logger.debug("Rejected %r: %s", text, error.message)
            return ParseResult(text=text, normalized=normalized, error=error)

        logger.debug("Parsed %r as %d", text, value)
        return ParseResult(text=text, normalized=normalized, value=value)

    def to_int(self, text: str) -> int:
        """Parse one numeral and return its value.

        Raises:
            RomanNumeralError: The subclass matching the failure kind.
        """
        return self.parse(text).unwrap()

    def _consume(self, stripped: str) -> ParseAccumulator:
        """Feed every character, as typed, through the classifier and the state machine."""
        acc = new_accumulator()
        for position, char in enumerate(stripped):
            try:
                symbol = classify(char)
            except InvalidCharacterError as e:
                return fail(acc, ErrorKind.INVALID_CHARACTER, char, position, e.message)
            acc = advance(acc, symbol, position, max_repeats=self.settings.max_repeats)
            if acc.failed:
                break
        return acc


# ─── Module-level Conveniences ───────────────────────────────────────

_default_parser = RomanNumeralParser()


def parse_roman(text: str) -> ParseResult:
    """Parse ``text`` with default settings. Never raises on bad input."""
    return _default_parser.parse(text)


def roman_to_int(text: str) -> int:
    """Convert a Roman numeral to an integer.

    Args:
        text: e.g. "MCMLIX", " xiv ", "mmxxi"

    Returns:
        1959, 14, 2021

    Raises:
        RomanNumeralError: If the text is empty, contains a non-numeral
            character, breaks the numeral grammar, or is out of range.
    """
    return _default_parser.to_int(text)
