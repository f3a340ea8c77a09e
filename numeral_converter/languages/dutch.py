"""
Dutch numerals.

Like German, numbers are written as one word with units before tens
("vijfentwintig" -> vijf en twintig, "tweeëntwintig"); the "en" is never
left out ("eentwintig" is not a number). "honderd" never takes an explicit
"een". Ordinals end in -de/-ste and are written "21e".
"""

from __future__ import annotations

from functools import lru_cache

from ..lexicon import Language, Link, OrdinalRule, words
from ..models import Category, Lexeme

_DIGITS = {
    "nul": 0,
    "een": 1,
    "één": 1,
    "twee": 2,
    "drie": 3,
    "vier": 4,
    "vijf": 5,
    "zes": 6,
    "zeven": 7,
    "acht": 8,
    "negen": 9,
}

_TEENS = {
    "tien": 10,
    "elf": 11,
    "twaalf": 12,
    "dertien": 13,
    "veertien": 14,
    "vijftien": 15,
    "zestien": 16,
    "zeventien": 17,
    "achttien": 18,
    "negentien": 19,
}

_TENS = {
    "twintig": 20,
    "dertig": 30,
    "veertig": 40,
    "vijftig": 50,
    "zestig": 60,
    "zeventig": 70,
    "tachtig": 80,
    "negentig": 90,
}

_SCALES = {
    "honderd": 100,
    "duizend": 1_000,
    "miljoen": 10**6,
    "miljard": 10**9,
    "biljoen": 10**12,
}

_LINKING = frozenset({"en", "plus", "uh", "dan", "nog", "eens", "min", "dat", "is", "of", "tot"})


@lru_cache(maxsize=None)
def dutch() -> Language:
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, _TENS),
        **words(Category.SCALE, _SCALES),
        "eerste": (Lexeme(Category.DIGIT, 1, ordinal="e"),),
        "derde": (Lexeme(Category.DIGIT, 3, ordinal="e"),),
    }

    return Language(
        code="nl",
        name="Dutch",
        lexicon=lexicon,
        ladder=tuple(sorted(_SCALES.values())),
        decimal_words=frozenset({"komma"}),
        decimal_separator=",",
        conjunction_words=frozenset({"en", "ën"}),
        sign_words=frozenset({"min"}),
        linking_words=_LINKING,
        ordinal_rules=(OrdinalRule("ste", "e"), OrdinalRule("de", "e")),
        units_before_tens=True,
        hundred_multipliers=(2, 99),
        hundred_link=Link.OPTIONAL,
        scale_link=Link.OPTIONAL,
        tens_link=Link.REQUIRED,
        agglutinative=True,
    )
