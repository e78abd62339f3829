"""
Map single characters to canonical Roman numeral symbols.

The table below is the only place the seven symbols are defined. It is built
once at import time and exposed read-only; nothing at runtime can change it.
"""

from __future__ import annotations

from types import MappingProxyType

from .exceptions import InvalidCharacterError
from .models import Symbol

# ─── Symbol Table ────────────────────────────────────────────────────

SYMBOLS: MappingProxyType[str, Symbol] = MappingProxyType({
    "I": Symbol(char="I", magnitude=1),
    "V": Symbol(char="V", magnitude=5, is_five=True),
    "X": Symbol(char="X", magnitude=10),
    "L": Symbol(char="L", magnitude=50, is_five=True),
    "C": Symbol(char="C", magnitude=100),
    "D": Symbol(char="D", magnitude=500, is_five=True),
    "M": Symbol(char="M", magnitude=1000),
})

# Accepted spellings, ASCII case only ("\u0131".upper() is "I")
_NUMERAL_CHARS = frozenset("IVXLCDMivxlcdm")


# ─── Classifier ──────────────────────────────────────────────────────


def is_numeral(char: str) -> bool:
    """True if ``char`` is one of the seven numerals, in either ASCII case."""
    return char in _NUMERAL_CHARS


def classify(char: str) -> Symbol:
    """Classify a single character as a Roman numeral symbol.

    Args:
        char: One character, upper or lower case.

    Returns:
        The canonical Symbol for that character.

    Raises:
        InvalidCharacterError: If ``char`` is not exactly one of
            I, V, X, L, C, D, M in ASCII upper or lower case.
    """
    symbol = SYMBOLS.get(char.upper()) if char in _NUMERAL_CHARS else None
    if symbol is None:
        raise InvalidCharacterError(
            f"{char!r} is an invalid character for a Roman numeral",
            {"character": char},
        )
    return symbol
