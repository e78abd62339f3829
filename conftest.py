"""Pytest configuration: makes the project root importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_roman_env(monkeypatch):
    """Keep ROMAN_* settings from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("ROMAN_"):
            monkeypatch.delenv(name)
    yield
