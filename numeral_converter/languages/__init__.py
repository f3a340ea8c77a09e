"""
Supported languages and lookup by ISO code.

    get_language("en")      -> English
    get_language("fr_ch")   -> French (Switzerland)
"""

from __future__ import annotations

import logging
from typing import Callable

from ..exceptions import UnknownLanguageError
from ..lexicon import Language
from .dutch import dutch
from .english import english
from .french import french, french_belgian, french_swiss
from .german import german
from .italian import italian
from .portuguese import portuguese, portuguese_european
from .spanish import spanish

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, Callable[[], Language]] = {
    "en": english,
    "fr": french,
    "fr-BE": french_belgian,
    "fr-CH": french_swiss,
    "es": spanish,
    "de": german,
    "it": italian,
    "nl": dutch,
    "pt": portuguese,
    "pt-BR": portuguese,
    "pt-PT": portuguese_european,
}


def _canonical(code: str) -> str:
    language, _, region = code.strip().replace("_", "-").partition("-")
    return f"{language.lower()}-{region.upper()}" if region else language.lower()


def available_languages() -> list[str]:
    return list(_REGISTRY)


def get_language(code: str) -> Language:
    """Return the (shared, immutable) language registered under ``code``.

    Raises:
        UnknownLanguageError: if no language matches.
    """
    builder = _REGISTRY.get(_canonical(code))
    if builder is None:
        raise UnknownLanguageError(
            f"Unsupported language code: {code!r}",
            {"code": code, "available": available_languages()},
        )
    return builder()


__all__ = [
    "available_languages",
    "dutch",
    "english",
    "french",
    "french_belgian",
    "french_swiss",
    "get_language",
    "german",
    "italian",
    "portuguese",
    "portuguese_european",
    "spanish",
]
