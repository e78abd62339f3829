"""
Batch parsing: many numerals in, one report out.

Every item is parsed independently, so one bad numeral never stops the rest.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .models import BatchReport
from .parser import RomanNumeralParser

logger = logging.getLogger(__name__)

# Separators between numerals on a command line or in a pasted list
_SEPARATORS = re.compile(r"[\s,;]+")


def split_numerals(args: Iterable[str]) -> list[str]:
    """Split raw arguments into individual numerals.

    Example:
        ["XIV, MCMLIX", "iv;ix"] → ["XIV", "MCMLIX", "iv", "ix"]
    """
    numerals: list[str] = []
    for arg in args:
        numerals.extend(piece for piece in _SEPARATORS.split(arg) if piece)
    return numerals


def parse_batch(
    items: Iterable[str], parser: RomanNumeralParser | None = None
) -> BatchReport:
    """Parse each item and collect the results in order."""
    parser = parser or RomanNumeralParser()
    report = BatchReport(results=[parser.parse(item) for item in items])
    logger.info(
        "Parsed %d numeral(s), %d error(s)", len(report.results), report.error_count
    )
    return report
