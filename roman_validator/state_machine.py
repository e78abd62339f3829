"""
The numeral grammar as a per-symbol state machine.

Each decimal place (thousands down to units) is written by exactly one of
these shapes:

    one, ten                  → 9
    one, five                 → 4
    five, then up to 3 ones   → 5..8
    one, then up to 2 ones    → 1..3

and every place must be followed only by symbols of strictly lower places.
The accumulator tracks which place is open (``order``) and what may come
next there (``expected``):

    state          one              five             ten              smaller
    ONE_OR_FIVE    1 → ONE_FIVE_TEN 5 → ONE_ONLY     fail             descend
    ONE_FIVE_TEN   2 → ONE_ONLY     4 → NOTHING      9 → NOTHING      descend
    ONE_ONLY       +1 (capped)      fail             fail             descend
    NOTHING        fail             fail             fail             descend

"Descend" finalizes the open place and moves to the next lower one until the
symbol's own place is reached. It is a bounded loop over the four places,
not recursion.

The thousands place has no five, so M may repeat up to nine times there;
this is what makes 9999 (MMMMMMMMMCMXCIX) the largest value.
"""

from __future__ import annotations

from .models import (
    THOUSANDS,
    ErrorKind,
    Expected,
    ParseAccumulator,
    ParseError,
    Symbol,
)

# Classical limit on consecutive unit symbols at one place (III, XXX, CCC)
DEFAULT_MAX_REPEATS = 3

# A place holds a single decimal digit
_DIGIT_LIMIT = 10


# ─── Construction & Termination ──────────────────────────────────────


def new_accumulator() -> ParseAccumulator:
    """Fresh state: thousands open, expecting a one or a five, no digits."""
    return ParseAccumulator()


def fail(
    acc: ParseAccumulator,
    kind: ErrorKind,
    character: str | None,
    position: int | None,
    message: str,
) -> ParseAccumulator:
    """Record a failure. The first failure wins; later ones are ignored."""
    if acc.failed:
        return acc
    if acc.consumed and character is not None:
        message = f"{message} after {acc.consumed!r}"
    error = ParseError(
        kind=kind,
        message=message,
        character=character,
        position=position,
        consumed=acc.consumed,
    )
    return acc.model_copy(update={"error": error})


def finalize(acc: ParseAccumulator) -> int:
    """Sum the place digits into an integer (failures are the caller's concern)."""
    return sum(digit * 10**place for place, digit in enumerate(acc.digits))


# ─── Transitions ─────────────────────────────────────────────────────


def advance(
    acc: ParseAccumulator,
    symbol: Symbol,
    position: int | None = None,
    *,
    max_repeats: int = DEFAULT_MAX_REPEATS,
) -> ParseAccumulator:
    """Consume one symbol and return the resulting accumulator.

    Args:
        acc: State after the previous symbols.
        symbol: The classified symbol to consume.
        position: Index of the symbol in the input, carried into errors.
        max_repeats: Most consecutive unit symbols allowed below thousands.

    Returns:
        The next accumulator. If ``acc`` already failed it is returned as is;
        if this symbol breaks the grammar the result carries the error.
    """
    if acc.failed:
        return acc

    order, expected = acc.order, acc.expected

    # Finalize open places until the symbol's own place is reached
    while symbol.order < order:
        order -= 1
        expected = Expected.ONE_OR_FIVE

    if order != acc.order:
        acc = acc.model_copy(update={"order": order, "expected": expected, "repeats": 0})

    one = 10**order
    if symbol.magnitude == one:
        return _one(acc, symbol, position, max_repeats)
    if symbol.magnitude == 5 * one:
        return _five(acc, symbol, position)
    if symbol.magnitude == 10 * one and expected is Expected.ONE_FIVE_TEN:
        return _place(acc, symbol, 9, Expected.NOTHING, repeats=0)
    return _out_of_sequence(acc, symbol, position)


def _one(
    acc: ParseAccumulator, symbol: Symbol, position: int | None, max_repeats: int
) -> ParseAccumulator:
    if acc.expected is Expected.ONE_OR_FIVE:
        return _place(acc, symbol, 1, Expected.ONE_FIVE_TEN, repeats=1)
    if acc.expected is Expected.NOTHING:
        return _out_of_sequence(acc, symbol, position)

    digit = acc.digits[acc.order] + 1
    repeats = acc.repeats + 1
    if digit >= _DIGIT_LIMIT or (acc.order < THOUSANDS and repeats > max_repeats):
        return fail(
            acc,
            ErrorKind.REPEATS_TOO_OFTEN,
            symbol.char,
            position,
            f"{symbol.char!r} repeats too often",
        )
    return _place(acc, symbol, digit, Expected.ONE_ONLY, repeats=repeats)


def _five(acc: ParseAccumulator, symbol: Symbol, position: int | None) -> ParseAccumulator:
    if acc.expected is Expected.ONE_OR_FIVE:
        return _place(acc, symbol, 5, Expected.ONE_ONLY, repeats=0)
    if acc.expected is Expected.ONE_FIVE_TEN:
        return _place(acc, symbol, 4, Expected.NOTHING, repeats=0)
    return _out_of_sequence(acc, symbol, position)


def _place(
    acc: ParseAccumulator,
    symbol: Symbol,
    digit: int,
    expected: Expected,
    *,
    repeats: int,
) -> ParseAccumulator:
    digits = list(acc.digits)
    digits[acc.order] = digit
    return acc.model_copy(update={
        "digits": tuple(digits),
        "expected": expected,
        "repeats": repeats,
        "consumed": acc.consumed + symbol.char,
    })


def _out_of_sequence(
    acc: ParseAccumulator, symbol: Symbol, position: int | None
) -> ParseAccumulator:
    return fail(
        acc,
        ErrorKind.OUT_OF_SEQUENCE,
        symbol.char,
        position,
        f"{symbol.char!r} is out of sequence",
    )
