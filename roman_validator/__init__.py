"""
Roman Numeral Validator — strict Roman numeral parsing with precise errors.

Architecture: Classifier → State machine → Range check → Typed result
Philosophy:  Reject anything malformed, and say exactly where and why.
"""

__version__ = "1.0.0"

from .batch import parse_batch, split_numerals
from .config import ParserSettings
from .exceptions import (
    EmptyInputError,
    InvalidCharacterError,
    OutOfRangeError,
    OutOfSequenceError,
    RepeatsTooOftenError,
    RomanNumeralError,
)
from .formatter import format_roman
from .models import BatchReport, ErrorKind, ParseError, ParseResult
from .parser import RomanNumeralParser, parse_roman, roman_to_int

__all__ = [
    "BatchReport",
    "EmptyInputError",
    "ErrorKind",
    "InvalidCharacterError",
    "OutOfRangeError",
    "OutOfSequenceError",
    "ParseError",
    "ParseResult",
    "ParserSettings",
    "RepeatsTooOftenError",
    "RomanNumeralError",
    "RomanNumeralParser",
    "format_roman",
    "parse_batch",
    "parse_roman",
    "roman_to_int",
    "split_numerals",
]
