"""
Custom exception hierarchy for Roman numeral parsing.

Each exception type maps to one category of grammar failure, so callers that
prefer exceptions over result objects can still tell the failures apart.
The root subclasses ValueError, matching what int() raises on bad text.
"""

from __future__ import annotations


class RomanNumeralError(ValueError):
    """Base exception for all Roman numeral failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidCharacterError(RomanNumeralError):
    """A character outside I, V, X, L, C, D, M was found."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CHARACTER", message, details)


class OutOfSequenceError(RomanNumeralError):
    """A symbol cannot legally follow what came before it."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_SEQUENCE", message, details)


class RepeatsTooOftenError(RomanNumeralError):
    """A unit symbol was repeated too many times at one place."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("REPEATS_TOO_OFTEN", message, details)


class EmptyInputError(RomanNumeralError):
    """Nothing but whitespace was supplied."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details)


class OutOfRangeError(RomanNumeralError):
    """The value lies outside the supported range."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)
