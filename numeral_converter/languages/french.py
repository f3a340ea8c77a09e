"""
French numerals, with the Belgian and Swiss regional variants.

Standard French composes 70–99 on a base of twenty: "soixante-dix" (60+10),
"quatre-vingts" (4×20), "quatre-vingt-dix-neuf" (4×20+10+9). "et" is
required before "un"/"onze" after a plain tens word ("vingt et un",
"soixante et onze") and forbidden elsewhere ("vingt-deux",
"quatre-vingt-un"). Belgium and Switzerland add septante / nonante
(and huitante in Switzerland).

"neuf" also means "new": after a determiner ("un logement neuf") it stays a
word unless a numeral, or "numéro", stands next to it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Sequence

from ..classifier import normalize
from ..lexicon import Composition, Language, Link, OrdinalRule, is_numeral, words
from ..models import Category, Lexeme

_DIGITS = {
    "zéro": 0,
    "zero": 0,
    "un": 1,
    "une": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
}

_TEENS = {
    "dix": 10,
    "onze": 11,
    "douze": 12,
    "treize": 13,
    "quatorze": 14,
    "quinze": 15,
    "seize": 16,
}

_TENS = {
    "vingt": 20,
    "trente": 30,
    "quarante": 40,
    "cinquante": 50,
    "soixante": 60,
}

_LINKING = frozenset(
    {
        "alors", "bien", "c'est", "encore", "ensuite", "et", "euh", "heu",
        "ha", "ah", "hu", "hum", "moins", "ok", "oui", "plus", "puis",
        "voilà", "à", "ou",
    }
)

_ORDINAL_STEMS = (("", ""), ("", "e"), ("qu", "q"), ("v", "f"))

_DETERMINERS = frozenset({"un", "le", "du", "l'"})


def _context_words(units: Sequence[Any]) -> list[str]:
    """Normalized words, an elided "l'" counting as a word of its own."""
    result: list[str] = []
    for unit in units:
        word = normalize(unit.text)
        if word.startswith("l'") and len(word) > 2:
            result += ["l'", word[2:]]
        else:
            result.append(word)
    return result


def _neuf_is_nine(before: Sequence[Any], after: Optional[Any]) -> bool:
    # the determiner sits two or three words back: "un logement (très) neuf"
    if not _DETERMINERS.intersection(_context_words(before)[-3:-1]):
        return True
    previous = before[-1]
    return normalize(previous.text) == "numéro" or is_numeral(previous) or is_numeral(after)


def _lexicon(extra_tens: dict[str, int]) -> dict[str, tuple[Lexeme, ...]]:
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, {**_TENS, **extra_tens}),
        # plural only right after its multiplier: "quatre-vingts", "quatre vingts"
        "vingts": (Lexeme(Category.TENS, 20, plural=True, closes_group=True),),
        "cent": (Lexeme(Category.SCALE, 100),),
        "cents": (Lexeme(Category.SCALE, 100, plural=True),),
        "mille": (Lexeme(Category.SCALE, 1_000, explicit_one=False),),
        "mil": (Lexeme(Category.SCALE, 1_000, explicit_one=False),),
        "million": (Lexeme(Category.SCALE, 10**6, plural=False),),
        "millions": (Lexeme(Category.SCALE, 10**6, plural=True),),
        "milliard": (Lexeme(Category.SCALE, 10**9, plural=False),),
        "milliards": (Lexeme(Category.SCALE, 10**9, plural=True),),
    }
    for word, suffix in (
        ("premier", "er"),
        ("première", "ère"),
        ("premiers", "ers"),
        ("premières", "ères"),
    ):
        lexicon[word] = (Lexeme(Category.DIGIT, 1, ordinal=suffix, initial=True),)
    lexicon["second"] = (Lexeme(Category.DIGIT, 2, ordinal="nd", initial=True),)
    lexicon["seconde"] = (Lexeme(Category.DIGIT, 2, ordinal="nde", initial=True),)
    return lexicon


def _build(code: str, name: str, extra_tens: dict[str, int]) -> Language:
    return Language(
        code=code,
        name=name,
        lexicon=_lexicon(extra_tens),
        ladder=(100, 1_000, 10**6, 10**9),
        decimal_words=frozenset({"virgule"}),
        decimal_separator=",",
        conjunction_words=frozenset({"et"}),
        sign_words=frozenset({"moins"}),
        linking_words=_LINKING,
        ordinal_rules=(
            OrdinalRule("ièmes", "èmes", _ORDINAL_STEMS),
            OrdinalRule("ième", "ème", _ORDINAL_STEMS),
        ),
        composition=Composition.VIGESIMAL,
        vigesimal_multipliers=frozenset({4}),
        vigesimal_teen_bases=frozenset({60, 80}),
        ten_unit_compounds=frozenset({7, 8, 9}),
        hundred_multipliers=(2, 19),
        hundred_link=Link.NONE,
        scale_link=Link.NONE,
        tens_link=Link.BEFORE_ONE,
        guards={"neuf": _neuf_is_nine},
    )


@lru_cache(maxsize=None)
def french() -> Language:
    return _build("fr", "French", {})


@lru_cache(maxsize=None)
def french_belgian() -> Language:
    return _build("fr-BE", "French (Belgium)", {"septante": 70, "nonante": 90})


@lru_cache(maxsize=None)
def french_swiss() -> Language:
    return _build(
        "fr-CH",
        "French (Switzerland)",
        {"septante": 70, "huitante": 80, "octante": 80, "nonante": 90},
    )
