"""
Roman Numeral Validator — FastAPI Server
========================================

RESTful API for parsing and formatting Roman numerals.

Endpoints:
    POST /parse             Parse one numeral
    POST /parse/batch       Parse many numerals, with an error count
    POST /format            Integer → Roman numeral
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from roman_validator import __version__
from roman_validator.batch import parse_batch
from roman_validator.config import ParserSettings
from roman_validator.exceptions import RomanNumeralError
from roman_validator.formatter import MAX_CLASSICAL, MIN_CLASSICAL, format_roman
from roman_validator.models import ParseError, ParseResult
from roman_validator.parser import RomanNumeralParser

logger = logging.getLogger(__name__)


# ─── Application Lifespan ────────────────────────────────────────────

_parser: RomanNumeralParser | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the parser from environment settings on startup."""
    global _parser  # noqa: PLW0603
    settings = ParserSettings.from_env()
    logging.getLogger("roman_validator").setLevel(settings.log_level)
    _parser = RomanNumeralParser(settings)
    yield
    _parser = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Roman Numeral Validator API",
    description=(
        "Strict Roman numeral parsing. Every rejection names the offending "
        "character, its position and the numerals accepted before it."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    numeral: str = Field(
        ...,
        max_length=64,
        description="The Roman numeral to parse (case-insensitive).",
        json_schema_extra={"example": "MCMLIX"},
    )


class BatchRequest(BaseModel):
    """Request body for the /parse/batch endpoint."""

    numerals: list[str] = Field(
        ...,
        min_length=1,
        max_length=1000,
        json_schema_extra={"example": ["XIV", "MMXXI", "XXL"]},
    )


class FormatRequest(BaseModel):
    """Request body for the /format endpoint."""

    value: int = Field(..., ge=MIN_CLASSICAL, le=MAX_CLASSICAL, json_schema_extra={"example": 1994})
    lowercase: bool = False


class ParseResponse(BaseModel):
    """One parse outcome."""

    text: str
    normalized: str
    is_valid: bool
    value: Optional[int] = None
    error: Optional[ParseError] = None

    model_config = {"json_schema_extra": {"example": {
        "text": "XXL",
        "normalized": "XXL",
        "is_valid": False,
        "value": None,
        "error": {
            "kind": "OUT_OF_SEQUENCE",
            "code": "OUT_OF_SEQUENCE",
            "message": "'L' is out of sequence after 'XX'",
            "character": "L",
            "position": 2,
            "consumed": "XX",
        },
    }}}


class BatchResponse(BaseModel):
    """Outcomes for every numeral in a batch."""

    is_valid: bool
    error_count: int
    results: list[ParseResponse]


class FormatResponse(BaseModel):
    value: int
    numeral: str


class HealthResponse(BaseModel):
    status: str
    version: str
    max_value: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_parser() -> RomanNumeralParser:
    if _parser is None:
        raise HTTPException(status_code=503, detail="Parser not initialised")
    return _parser


def _build_response(result: ParseResult) -> ParseResponse:
    """Convert the internal ParseResult to the API response schema."""
    return ParseResponse(
        text=result.text,
        normalized=result.normalized,
        is_valid=result.is_valid,
        value=result.value,
        error=result.error,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse a Roman numeral",
    tags=["Parsing"],
    responses={503: {"description": "Parser not yet initialised"}},
)
def parse_numeral(request: ParseRequest) -> ParseResponse:
    """Parse one numeral.

    Malformed numerals are not HTTP errors: the response has
    **is_valid** `false` and an **error** describing the first violation.
    """
    parser = _get_parser()
    return _build_response(parser.parse(request.numeral))


@app.post(
    "/parse/batch",
    summary="Parse many Roman numerals",
    tags=["Parsing"],
    responses={503: {"description": "Parser not yet initialised"}},
)
async def parse_numerals(request: BatchRequest) -> BatchResponse:
    """Parse every numeral independently and report how many failed."""
    parser = _get_parser()
    report = await asyncio.to_thread(parse_batch, request.numerals, parser)
    logger.info("Batch of %d numeral(s): %d error(s)", len(report.results), report.error_count)
    return BatchResponse(
        is_valid=report.is_valid,
        error_count=report.error_count,
        results=[_build_response(r) for r in report.results],
    )


@app.post(
    "/format",
    summary="Format an integer as a Roman numeral",
    tags=["Formatting"],
    responses={422: {"description": "Value outside 1-3999"}},
)
def format_numeral(request: FormatRequest) -> FormatResponse:
    """Return the classical Roman numeral for a value in 1-3999."""
    try:
        numeral = format_roman(request.value, lowercase=request.lowercase)
    except RomanNumeralError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message})
    return FormatResponse(value=request.value, numeral=numeral)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Parser not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    parser = _get_parser()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_value=parser.settings.max_value,
    )
