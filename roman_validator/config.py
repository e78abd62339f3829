"""
Parser configuration, read from the environment.

Environment Variables:
    ROMAN_MAX_REPEATS: Consecutive unit symbols allowed below thousands
        (default 3; 9 accepts forms such as IIII and VIIII)
    ROMAN_MIN_VALUE:   Smallest accepted value (default 1)
    ROMAN_MAX_VALUE:   Largest accepted value (default 9999)
    ROMAN_LOG_LEVEL:   Logging level used by the CLI and API (default WARNING)

A ``.env`` file in the working directory is loaded first, if present.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from .state_machine import DEFAULT_MAX_REPEATS

# Four places of at most 9 each
ABSOLUTE_MAX_VALUE = 9999

_ENV_PREFIX = "ROMAN_"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ParserSettings(BaseModel):
    """Tunable limits for RomanNumeralParser."""

    max_repeats: int = Field(default=DEFAULT_MAX_REPEATS, ge=1, le=9)
    min_value: int = Field(default=1, ge=1, le=ABSOLUTE_MAX_VALUE)
    max_value: int = Field(default=ABSOLUTE_MAX_VALUE, ge=1, le=ABSOLUTE_MAX_VALUE)
    log_level: str = "WARNING"

    @model_validator(mode="after")
    def _check_range(self) -> ParserSettings:
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) exceeds max_value ({self.max_value})"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        return self

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> ParserSettings:
        """Build settings from ROMAN_* environment variables.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if load_dotenv_file:
            load_dotenv()

        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls.model_validate(values)
