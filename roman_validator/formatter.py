"""Integer to Roman numeral conversion (classical subtractive form)."""

from __future__ import annotations

from .exceptions import OutOfRangeError

# There is no classical symbol for 5000, so 3999 is the largest classical form
MIN_CLASSICAL = 1
MAX_CLASSICAL = 3999

# Values in descending order, subtractive pairs included
_NUMERALS: tuple[tuple[str, int], ...] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


def format_roman(value: int, *, lowercase: bool = False) -> str:
    """Convert an integer to its Roman numeral.

    Args:
        value: Integer in [1, 3999].
        lowercase: Return "xiv" rather than "XIV".

    Raises:
        OutOfRangeError: If ``value`` is not an int in [1, 3999].

    Examples:
        >>> format_roman(1994)
        'MCMXCIV'
        >>> format_roman(4, lowercase=True)
        'iv'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(
            f"Expected an integer, got {type(value).__name__}",
            {"value": repr(value)},
        )
    if not MIN_CLASSICAL <= value <= MAX_CLASSICAL:
        raise OutOfRangeError(
            f"{value} is out of range for Roman numerals "
            f"[{MIN_CLASSICAL}, {MAX_CLASSICAL}]",
            {"value": value},
        )

    parts = []
    remaining = value
    for numeral, magnitude in _NUMERALS:
        count, remaining = divmod(remaining, magnitude)
        parts.append(numeral * count)

    result = "".join(parts)
    return result.lower() if lowercase else result
