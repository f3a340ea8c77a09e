"""
Numeral Converter — FastAPI Server
===================================

RESTful API for turning numbers written in words into digits.

Endpoints:
    POST /parse             Strictly parse a text that is exactly one number
    POST /replace           Replace numerals inside free text
    POST /find              List the numerals /replace would convert
    GET  /languages         Supported language codes
    GET  /health            Health and readiness check

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numeral_converter import __version__
from numeral_converter.config import Settings
from numeral_converter.exceptions import NotANumber, UnknownLanguageError
from numeral_converter.languages import available_languages, get_language
from numeral_converter.lexicon import Language
from numeral_converter.models import Occurrence
from numeral_converter.pipeline import find_numbers, parse_number, replace_and_count

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm languages) ───────────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build every language table once on startup."""
    global _settings  # noqa: PLW0603
    _settings = Settings.from_env()
    for code in available_languages():
        get_language(code)
    logger.info("Languages ready: %s", ", ".join(available_languages()))
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Converter API",
    description=(
        "Recognizes cardinal, ordinal and decimal numbers written in words "
        "(English, French, Spanish, German, Italian, Dutch, Portuguese) and "
        "converts them to digits."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        description="Text that should be exactly one number.",
        json_schema_extra={"example": "three point one four one five"},
    )
    language: Optional[str] = Field(
        None, description="Language code; defaults to NUMERAL_LANGUAGE.", examples=["en"]
    )


class ParseResponse(BaseModel):
    text: str
    language: str
    value: Union[int, str] = Field(
        description="Integer for plain cardinals, digit string otherwise"
    )


class ReplaceRequest(BaseModel):
    """Request body for the /replace and /find endpoints."""

    text: str = Field(
        ...,
        description="Free text that may contain numbers written in words.",
        json_schema_extra={
            "example": (
                "twenty-five cows, twelve chickens and one hundred "
                "twenty five kg of potatoes."
            )
        },
    )
    language: Optional[str] = Field(None, examples=["en"])
    threshold: Optional[float] = Field(
        None,
        ge=0,
        description="Isolated single-word numbers below this stay in words.",
    )


class ReplaceResponse(BaseModel):
    text: str
    language: str
    replaced: int


class OccurrenceOut(Occurrence):
    """API-facing occurrence (inherits all fields from Occurrence)."""


class FindResponse(BaseModel):
    language: str
    occurrences: list[OccurrenceOut]


class LanguagesResponse(BaseModel):
    default: str
    available: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _settings


def _resolve(code: str | None) -> tuple[str, Language]:
    settings = _get_settings()
    code = code or settings.language
    try:
        return code, get_language(code)
    except UnknownLanguageError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _threshold(value: float | None) -> float:
    return _get_settings().threshold if value is None else value


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse a text that is exactly one number",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown language code"},
        422: {"description": "The text is not a number"},
        503: {"description": "Service not yet initialised"},
    },
)
def parse(request: ParseRequest) -> ParseResponse:
    """Strict parse: "ochenta y cinco" (es) -> 85, "third" -> "3rd"."""
    code, language = _resolve(request.language)
    result = parse_number(request.text, language)
    if isinstance(result, NotANumber):
        raise HTTPException(
            status_code=422,
            detail={"code": result.code, "message": result.reason, "text": result.text},
        )
    return ParseResponse(text=request.text, language=code, value=result)


@app.post(
    "/replace",
    summary="Replace numbers written in words inside free text",
    tags=["Conversion"],
    responses={404: {"description": "Unknown language code"}},
)
def replace(request: ReplaceRequest) -> ReplaceResponse:
    """Convert numeral phrases to digits, keeping all other text verbatim.

    Multi-word numbers and lists ("one, two, three") are always converted;
    an isolated single word only when its value reaches **threshold**.
    """
    code, language = _resolve(request.language)
    threshold = _threshold(request.threshold)
    text, replaced = replace_and_count(request.text, language, threshold)
    logger.info("Replaced %d numerals (%s, threshold=%s)", replaced, code, threshold)
    return ReplaceResponse(text=text, language=code, replaced=replaced)


@app.post(
    "/find",
    summary="List the numbers /replace would convert",
    tags=["Conversion"],
    responses={404: {"description": "Unknown language code"}},
)
def find(request: ReplaceRequest) -> FindResponse:
    code, language = _resolve(request.language)
    occurrences = find_numbers(request.text, language, _threshold(request.threshold))
    return FindResponse(
        language=code,
        occurrences=[OccurrenceOut.model_validate(o, from_attributes=True) for o in occurrences],
    )


@app.get("/languages", summary="Supported languages", tags=["System"])
def languages() -> LanguagesResponse:
    return LanguagesResponse(default=_get_settings().language, available=available_languages())


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(available_languages()),
    )
