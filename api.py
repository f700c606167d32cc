"""
Numeral Converter — FastAPI Server
===================================

RESTful API for converting written Portuguese numerals to integers.

Endpoints:
    POST /convert           Convert one phrase
    POST /convert/batch     Convert many phrases in one call
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numeral_converter import __version__
from numeral_converter.config import Settings, configure_logging, load_settings
from numeral_converter.converter import NumeralConverter
from numeral_converter.models import ConversionError, ConversionResult, ScaleMode


# ─── Application Lifespan (pre-warm converter) ──────────────────────

_converter: NumeralConverter | None = None
_settings: Settings = Settings.model_construct()  # Defaults until lifespan loads the env


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build the shared converter on startup."""
    global _converter, _settings  # noqa: PLW0603
    _settings = load_settings()
    configure_logging(_settings)
    _converter = NumeralConverter(short_scale=_settings.short_scale)
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Converter API",
    description=(
        "Converts written Portuguese cardinal numerals to decimal integers. "
        "Supports short-scale and long-scale readings of milhão / bilião / trilião."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    phrase: str = Field(
        ...,
        description="The numeral phrase to convert.",
        json_schema_extra={"example": "cento e vinte e dois"},
    )
    short_scale: Optional[bool] = Field(
        default=None,
        description="Use short scale (bilião = 10^9). Defaults to the server setting.",
    )


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    phrases: list[str] = Field(..., min_length=1, max_length=1000)
    short_scale: Optional[bool] = None


class ConvertResponse(BaseModel):
    """One conversion outcome. Malformed phrases are a normal 200 response."""

    phrase: str
    normalized: str
    scale: ScaleMode
    result: str = Field(description='Decimal string, or "InvalidNumber"')
    value: Optional[int] = None
    is_valid: bool
    error: Optional[ConversionError] = None

    model_config = {"json_schema_extra": {"example": {
        "phrase": "cento e e dois",
        "normalized": "Cento E E Dois",
        "scale": "long",
        "result": "InvalidNumber",
        "value": None,
        "is_valid": False,
        "error": {
            "code": "DOUBLED_SEPARATOR",
            "message": "'E' is repeated",
            "position": 2,
            "token": "E",
        },
    }}}


class BatchConvertResponse(BaseModel):
    results: list[ConvertResponse]
    valid_count: int
    invalid_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    default_scale: ScaleMode
    vocabulary_size: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumeralConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _check_length(phrase: str) -> None:
    if len(phrase) > _settings.max_phrase_length:
        raise HTTPException(
            status_code=422,
            detail=f"Phrase too long (max {_settings.max_phrase_length} characters)",
        )


def _build_response(result: ConversionResult) -> ConvertResponse:
    """Convert the internal ConversionResult to the API response schema."""
    return ConvertResponse(
        phrase=result.phrase,
        normalized=result.normalized,
        scale=result.scale,
        result=result.text,
        value=result.value,
        is_valid=result.is_valid,
        error=result.error,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a numeral phrase",
    tags=["Conversion"],
    responses={
        422: {"description": "Missing phrase or phrase too long"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_phrase(request: ConvertRequest) -> ConvertResponse:
    """Convert one written numeral to its decimal value.

    Returns:
    - **result**: the decimal string, or `InvalidNumber`
    - **error**: which rule rejected the phrase (separator placement, unknown word, ...)
    """
    converter = _get_converter()
    _check_length(request.phrase)
    return _build_response(converter.run(request.phrase, request.short_scale))


@app.post(
    "/convert/batch",
    summary="Convert several numeral phrases",
    tags=["Conversion"],
    responses={
        422: {"description": "Empty batch or a phrase too long"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    """Convert every phrase independently; one bad phrase never fails the batch."""
    converter = _get_converter()
    for phrase in request.phrases:
        _check_length(phrase)

    results = [
        _build_response(converter.run(phrase, request.short_scale))
        for phrase in request.phrases
    ]
    valid_count = sum(1 for r in results if r.is_valid)
    return BatchConvertResponse(
        results=results,
        valid_count=valid_count,
        invalid_count=len(results) - valid_count,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converter = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_scale=ScaleMode.from_flag(converter.short_scale),
        vocabulary_size=len(converter.vocabulary),
    )
