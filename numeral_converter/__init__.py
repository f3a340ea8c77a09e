"""Numeral Converter — turn numbers written in words into digits, in seven languages."""

__version__ = "1.0.0"

from .exceptions import (  # noqa: E402
    ConfigurationError,
    LexiconError,
    NotANumber,
    NumeralError,
    UnknownLanguageError,
)
from .languages import available_languages, get_language  # noqa: E402
from .lexicon import Language  # noqa: E402
from .models import DigitToken, Kind, Occurrence  # noqa: E402
from .pipeline import (  # noqa: E402
    find_numbers,
    parse_number,
    replace_and_count,
    replace_numbers,
    transform_tokens,
)

__all__ = [
    "ConfigurationError",
    "DigitToken",
    "Kind",
    "Language",
    "LexiconError",
    "NotANumber",
    "NumeralError",
    "Occurrence",
    "UnknownLanguageError",
    "available_languages",
    "find_numbers",
    "get_language",
    "parse_number",
    "replace_and_count",
    "replace_numbers",
    "transform_tokens",
]
