"""
German numerals.

Numbers below a million are written as one word and split into morphemes
before accumulation: "einhundertfünfundzwanzig" -> ein hundert fünf und
zwanzig. Units precede tens and are joined by "und". "eins" only ends a
number ("hunderteins"). "hundert" takes at most nineteen ("neunzehnhundert",
not "sechzighundert"). Ordinals end in -te/-ste and are written "3.".
"""

from __future__ import annotations

from functools import lru_cache

from ..lexicon import Language, Link, OrdinalRule, words
from ..models import Category, Lexeme

_DIGITS = {
    "null": 0,
    "ein": 1,
    "zwei": 2,
    "zwo": 2,
    "drei": 3,
    "vier": 4,
    "fünf": 5,
    "fuenf": 5,
    "sechs": 6,
    "sieben": 7,
    "acht": 8,
    "neun": 9,
}

# Declined "ein" stands alone or before a larger scale ("eine Million"),
# never as the unit of a tens word ("eine und zwanzig").
_DECLINED_ONE = ("eine", "einen", "einem", "einer", "eines")

_TEENS = {
    "zehn": 10,
    "elf": 11,
    "zwölf": 12,
    "zwoelf": 12,
    "dreizehn": 13,
    "vierzehn": 14,
    "fünfzehn": 15,
    "sechzehn": 16,
    "siebzehn": 17,
    "achtzehn": 18,
    "neunzehn": 19,
}

_TENS = {
    "zwanzig": 20,
    "dreißig": 30,
    "dreissig": 30,
    "vierzig": 40,
    "fünfzig": 50,
    "sechzig": 60,
    "siebzig": 70,
    "achtzig": 80,
    "neunzig": 90,
}

_SCALES = {
    "million": (10**6, False),
    "millionen": (10**6, True),
    "milliarde": (10**9, False),
    "milliarden": (10**9, True),
    "billion": (10**12, False),
    "billionen": (10**12, True),
}

# Ordinal stems the -te rule cannot derive ("erste", not "einte").
_IRREGULAR_ORDINALS = {"erst": 1, "dritt": 3, "siebt": 7, "acht": 8}
_DECLENSION = ("e", "er", "es", "en", "em")

_LINKING = frozenset(
    {
        "aber", "ah", "äh", "ähm", "also", "gut", "auch", "denn", "doch",
        "dort", "eben", "eh", "halt", "ja", "mal", "sehen", "naja", "nun",
        "ok", "schon", "so", "genau", "und", "noch", "bis", "oder",
    }
)


@lru_cache(maxsize=None)
def german() -> Language:
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        "eins": (Lexeme(Category.DIGIT, 1, final=True),),
        **{word: (Lexeme(Category.DIGIT, 1, closes_group=True),) for word in _DECLINED_ONE},
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, _TENS),
        "hundert": (Lexeme(Category.SCALE, 100),),
        "tausend": (Lexeme(Category.SCALE, 1_000),),
    }
    for word, (magnitude, plural) in _SCALES.items():
        lexicon[word] = (Lexeme(Category.SCALE, magnitude, plural=plural),)
    for stem, value in _IRREGULAR_ORDINALS.items():
        for ending in _DECLENSION:
            lexicon[stem + ending] = (Lexeme(Category.DIGIT, value, ordinal="."),)

    endings = [f"st{e}" for e in _DECLENSION] + [f"t{e}" for e in _DECLENSION]
    return Language(
        code="de",
        name="German",
        lexicon=lexicon,
        ladder=(100, 1_000, 10**6, 10**9, 10**12),
        decimal_words=frozenset({"komma"}),
        decimal_separator=",",
        conjunction_words=frozenset({"und"}),
        sign_words=frozenset({"minus"}),
        linking_words=_LINKING,
        ordinal_rules=tuple(OrdinalRule(ending, ".") for ending in endings),
        units_before_tens=True,
        hundred_multipliers=(1, 19),
        hundred_link=Link.OPTIONAL,
        scale_link=Link.OPTIONAL,
        tens_link=Link.REQUIRED,
        agglutinative=True,
    )
