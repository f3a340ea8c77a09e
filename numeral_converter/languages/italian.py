"""
Italian numerals.

Cardinals are written as one word and split into morphemes
("duemilacentoventicinque" -> due mila cento venti cinque). Tens drop their
final vowel before "uno" and "otto" ("ventuno", "trentotto"); the elided
forms are only valid inside a compound. "mille" is a bare thousand while
"mila" needs a multiplier ("tremila"); likewise "milione"/"milioni".

"secondo" right after a cardinal is the unit of time ("un secondo"), not an
ordinal.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Sequence

from ..lexicon import Language, Link, OrdinalRule, gendered, is_numeral, words
from ..models import Category, Lexeme

_DIGITS = {
    "zero": 0,
    "uno": 1,
    "un": 1,
    "una": 1,
    "due": 2,
    "tre": 3,
    "tré": 3,
    "quattro": 4,
    "cinque": 5,
    "sei": 6,
    "sette": 7,
    "otto": 8,
    "nove": 9,
}

_TEENS = {
    "dieci": 10,
    "undici": 11,
    "dodici": 12,
    "tredici": 13,
    "quattordici": 14,
    "quindici": 15,
    "sedici": 16,
    "diciassette": 17,
    "diciotto": 18,
    "diciannove": 19,
}

_TENS = {
    "venti": 20,
    "trenta": 30,
    "quaranta": 40,
    "cinquanta": 50,
    "sessanta": 60,
    "settanta": 70,
    "ottanta": 80,
    "novanta": 90,
}

_ORDINAL_STEMS = {
    "prim": (Category.DIGIT, 1),
    "terz": (Category.DIGIT, 3),
    "quart": (Category.DIGIT, 4),
    "quint": (Category.DIGIT, 5),
    "sest": (Category.DIGIT, 6),
    "settim": (Category.DIGIT, 7),
    "ottav": (Category.DIGIT, 8),
    "non": (Category.DIGIT, 9),
    "decim": (Category.TEEN, 10),
}

_SUFFIXES = {"o": "º", "i": "º", "a": "ª", "e": "ª"}

# "secondi" is only ever the unit of time
_SECOND_SUFFIXES = {"o": "º", "a": "ª", "e": "ª"}

_ESIMO_STEMS = (("", "i"), ("", "e"), ("", "o"), ("", "a"), ("", ""))

_LINKING = frozenset({"e", "più", "meno", "ehm", "poi", "ancora", "è", "ben", "a", "o"})


def _second_is_ordinal(before: Sequence[Any], after: Optional[Any]) -> bool:
    previous = before[-1] if before else None
    if not is_numeral(previous):
        return True
    return any(part.lexeme.is_ordinal for part in previous.parts)  # "quinto secondo"


@lru_cache(maxsize=None)
def italian() -> Language:
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, _TENS),
        **words(Category.TENS, {word[:-1]: value for word, value in _TENS.items()}, bound=True),
        "cento": (Lexeme(Category.SCALE, 100),),
        "cent": (Lexeme(Category.SCALE, 100, bound=True),),
        "mille": (Lexeme(Category.SCALE, 1_000, plural=False, explicit_one=False),),
        "mila": (Lexeme(Category.SCALE, 1_000, plural=True),),
        "milione": (Lexeme(Category.SCALE, 10**6, plural=False),),
        "milioni": (Lexeme(Category.SCALE, 10**6, plural=True),),
        "miliardo": (Lexeme(Category.SCALE, 10**9, plural=False),),
        "miliardi": (Lexeme(Category.SCALE, 10**9, plural=True),),
        **gendered(_ORDINAL_STEMS, _SUFFIXES),
        **gendered({"second": (Category.DIGIT, 2)}, _SECOND_SUFFIXES, initial=True),
    }

    return Language(
        code="it",
        name="Italian",
        lexicon=lexicon,
        ladder=(100, 1_000, 10**6, 10**9),
        decimal_words=frozenset({"virgola"}),
        decimal_separator=",",
        conjunction_words=frozenset({"e"}),
        sign_words=frozenset({"meno"}),
        linking_words=_LINKING,
        ordinal_rules=tuple(
            OrdinalRule("esim" + vowel, suffix, _ESIMO_STEMS)
            for vowel, suffix in _SUFFIXES.items()
        ),
        hundred_multipliers=(2, 9),
        hundred_multiplier_joined=True,
        hundred_link=Link.NONE,
        scale_link=Link.OPTIONAL,
        tens_link=Link.NONE,
        agglutinative=True,
        guards={word: _second_is_ordinal for word in ("secondo", "seconda", "seconde")},
    )
