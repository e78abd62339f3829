"""
Pydantic models for Roman numeral parsing, strict typing end to end.

Parsing never mutates anything in place: every model here is frozen, and the
state machine produces a fresh accumulator for each symbol it consumes. A
failed parse is a value (``ParseError``), not a crash.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .exceptions import (
    EmptyInputError,
    InvalidCharacterError,
    OutOfRangeError,
    OutOfSequenceError,
    RepeatsTooOftenError,
    RomanNumeralError,
)

# ─── Places ──────────────────────────────────────────────────────────

UNITS = 0
THOUSANDS = 3
PLACES = THOUSANDS + 1


# ─── Enumerations ────────────────────────────────────────────────────


class Expected(str, Enum):
    """What may legally follow at the place currently being written."""

    ONE_OR_FIVE = "ONE_OR_FIVE"  # Fresh place
    ONE_FIVE_TEN = "ONE_FIVE_TEN"  # A single "one" is pending (may become 2, 4 or 9)
    ONE_ONLY = "ONE_ONLY"  # After a five or two ones
    NOTHING = "NOTHING"  # Closed by a subtractive pair


class ErrorKind(str, Enum):
    """Machine-readable category of a parse failure."""

    INVALID_CHARACTER = "INVALID_CHARACTER"
    OUT_OF_SEQUENCE = "OUT_OF_SEQUENCE"
    REPEATS_TOO_OFTEN = "REPEATS_TOO_OFTEN"
    EMPTY_INPUT = "EMPTY_INPUT"
    OUT_OF_RANGE = "OUT_OF_RANGE"


_EXCEPTIONS: dict[ErrorKind, type[RomanNumeralError]] = {
    ErrorKind.INVALID_CHARACTER: InvalidCharacterError,
    ErrorKind.OUT_OF_SEQUENCE: OutOfSequenceError,
    ErrorKind.REPEATS_TOO_OFTEN: RepeatsTooOftenError,
    ErrorKind.EMPTY_INPUT: EmptyInputError,
    ErrorKind.OUT_OF_RANGE: OutOfRangeError,
}


# ─── Symbol ──────────────────────────────────────────────────────────


class Symbol(BaseModel):
    """One canonical numeral character and its fixed magnitude."""

    model_config = ConfigDict(frozen=True)

    char: str = Field(min_length=1, max_length=1)
    magnitude: int
    is_five: bool = False  # V, L and D

    @property
    def order(self) -> int:
        """The place this symbol belongs to: 0 for I/V up to 3 for M."""
        return len(str(self.magnitude)) - 1


# ─── Parse Error ─────────────────────────────────────────────────────


class ParseError(BaseModel):
    """The first grammar violation found in a numeral."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str  # Human-readable, e.g. "'L' is out of sequence after 'XX'"
    character: Optional[str] = None  # Offending character, if there is one
    position: Optional[int] = None  # 0-based index into the normalized text
    consumed: str = ""  # Numerals accepted before the failure

    @computed_field  # type: ignore[prop-decorator]
    @property
    def code(self) -> str:
        return self.kind.value

    def to_exception(self) -> RomanNumeralError:
        """Build the exception matching this failure's kind."""
        details: dict = {"consumed": self.consumed}
        if self.character is not None:
            details["character"] = self.character
        if self.position is not None:
            details["position"] = self.position
        return _EXCEPTIONS[self.kind](self.message, details)


# ─── Parse Accumulator ───────────────────────────────────────────────


class ParseAccumulator(BaseModel):
    """Everything the state machine knows after consuming a prefix.

    ``digits`` is indexed by place (units first). ``order`` is the place
    being written and only ever decreases; places above it are final.
    """

    model_config = ConfigDict(frozen=True)

    digits: tuple[int, int, int, int] = (0, 0, 0, 0)
    order: int = THOUSANDS
    expected: Expected = Expected.ONE_OR_FIVE
    repeats: int = 0  # Consecutive "one" symbols at the open place
    consumed: str = ""
    error: Optional[ParseError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


# ─── Results ─────────────────────────────────────────────────────────


class ParseResult(BaseModel):
    """Outcome of parsing one numeral: a value or an error, never both."""

    text: str
    normalized: str
    value: Optional[int] = None
    error: Optional[ParseError] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the value, or raise the exception describing the failure."""
        if self.error is not None:
            raise self.error.to_exception()
        if self.value is None:
            raise ValueError(f"No value or error recorded for {self.text!r}")
        return self.value


class BatchReport(BaseModel):
    """Per-item results of a batch parse."""

    results: list[ParseResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.is_valid)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return self.error_count == 0
