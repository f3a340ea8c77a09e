"""English numerals: additive, "and" optional after hundred and scales.

"o" reads as zero only next to another numeral word ("o eight", "nine o
five"), never on its own ("my name is o s c a r").
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Sequence

from ..lexicon import Language, Link, OrdinalRule, is_numeral, words
from ..models import Category, Lexeme

# ─── Word Lookup Tables ──────────────────────────────────────────────

_DIGITS = {
    "zero": 0,
    "nought": 0,
    "o": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_TEENS = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

_TENS = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fourty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

_SCALES = {
    "hundred": 100,
    "thousand": 1_000,
    "million": 1_000_000,
    "billion": 1_000_000_000,
    "trillion": 1_000_000_000_000,
}

# Ordinals the "-th" rule cannot derive.
_IRREGULAR_ORDINALS = {
    "first": (Category.DIGIT, 1, "st"),
    "second": (Category.DIGIT, 2, "nd"),
    "third": (Category.DIGIT, 3, "rd"),
    "fifth": (Category.DIGIT, 5, "th"),
    "eighth": (Category.DIGIT, 8, "th"),
    "ninth": (Category.DIGIT, 9, "th"),
    "twelfth": (Category.TEEN, 12, "th"),
}

# Fillers and list words that keep neighbouring numerals in one list.
_LINKING = frozenset(
    {
        "and", "ha", "ah", "hu", "hum", "minus", "more", "ok", "plus", "so",
        "that's", "then", "uh", "well", "yeah", "yes", "is", "or", "to",
    }
)


def _zero_letter(before: Sequence[Any], after: Optional[Any]) -> bool:
    return is_numeral(before[-1] if before else None) or is_numeral(after)


@lru_cache(maxsize=None)
def english() -> Language:
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, _TENS),
        **words(Category.SCALE, _SCALES),
    }
    for word, (category, value, suffix) in _IRREGULAR_ORDINALS.items():
        lexicon[word] = (Lexeme(category, value, ordinal=suffix),)

    return Language(
        code="en",
        name="English",
        lexicon=lexicon,
        ladder=tuple(sorted(_SCALES.values())),
        decimal_words=frozenset({"point"}),
        decimal_separator=".",
        conjunction_words=frozenset({"and"}),
        sign_words=frozenset({"minus", "negative"}),
        linking_words=_LINKING,
        ordinal_rules=(
            OrdinalRule("ieth", "th", (("", "y"),)),
            OrdinalRule("th", "th"),
        ),
        hundred_multipliers=(1, 99),
        hundred_link=Link.OPTIONAL,
        scale_link=Link.OPTIONAL,
        tens_link=Link.NONE,
        plural_suffix="s",
        plural_exceptions=frozenset({"seconds"}),
        guards={"o": _zero_letter},
    )
