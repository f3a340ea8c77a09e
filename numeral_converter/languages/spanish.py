"""
Spanish numerals.

"y" is required between tens and units ("ochenta y cinco") except inside
the written compounds 21–29 ("veintiuno"). Hundreds are single words
("doscientos", "quinientos") that expand to a digit and the hundred.
"cien" only stands alone or before a larger scale ("cien mil"); "ciento"
takes the rest ("ciento uno"). A billion is "mil millones". Multi-word
ordinals chain ("vigésimo primero"); 11th to 19th also come fused
("decimosexto").
"""

from __future__ import annotations

from functools import lru_cache

from ..lexicon import Language, Link, gendered, with_plain_spellings, words
from ..models import Category, Lexeme

_DIGITS = {
    "cero": 0,
    "uno": 1,
    "un": 1,
    "una": 1,
    "dos": 2,
    "tres": 3,
    "cuatro": 4,
    "cinco": 5,
    "seis": 6,
    "siete": 7,
    "ocho": 8,
    "nueve": 9,
}

_TEENS = {
    "diez": 10,
    "once": 11,
    "doce": 12,
    "trece": 13,
    "catorce": 14,
    "quince": 15,
    "dieciséis": 16,
    "diecisiete": 17,
    "dieciocho": 18,
    "diecinueve": 19,
}

_TENS = {
    "veinte": 20,
    "treinta": 30,
    "cuarenta": 40,
    "cincuenta": 50,
    "sesenta": 60,
    "setenta": 70,
    "ochenta": 80,
    "noventa": 90,
}

_TWENTIES = {
    "veintiuno": 1,
    "veintiún": 1,
    "veintiuna": 1,
    "veintidós": 2,
    "veintitrés": 3,
    "veinticuatro": 4,
    "veinticinco": 5,
    "veintiséis": 6,
    "veintisiete": 7,
    "veintiocho": 8,
    "veintinueve": 9,
}

_HUNDREDS = {
    "doscient": 2,
    "trescient": 3,
    "cuatrocient": 4,
    "quinient": 5,
    "seiscient": 6,
    "setecient": 7,
    "ochocient": 8,
    "novecient": 9,
}

_SUFFIXES = {"o": "º", "a": "ª", "os": "ᵒˢ", "as": "ᵃˢ"}

_ORDINAL_STEMS = {
    "primer": (Category.DIGIT, 1),
    "tercer": (Category.DIGIT, 3),
    "cuart": (Category.DIGIT, 4),
    "quint": (Category.DIGIT, 5),
    "sext": (Category.DIGIT, 6),
    "séptim": (Category.DIGIT, 7),
    "octav": (Category.DIGIT, 8),
    "noven": (Category.DIGIT, 9),
    "décim": (Category.TEEN, 10),
    "undécim": (Category.TEEN, 11),
    "duodécim": (Category.TEEN, 12),
    "decimoprimer": (Category.TEEN, 11),
    "decimosegund": (Category.TEEN, 12),
    "decimotercer": (Category.TEEN, 13),
    "decimocuart": (Category.TEEN, 14),
    "decimoquint": (Category.TEEN, 15),
    "decimosext": (Category.TEEN, 16),
    "decimoséptim": (Category.TEEN, 17),
    "decimoctav": (Category.TEEN, 18),
    "decimooctav": (Category.TEEN, 18),
    "decimonoven": (Category.TEEN, 19),
    "vigésim": (Category.TENS, 20),
    "trigésim": (Category.TENS, 30),
    "cuadragésim": (Category.TENS, 40),
    "quincuagésim": (Category.TENS, 50),
    "sexagésim": (Category.TENS, 60),
    "septuagésim": (Category.TENS, 70),
    "octogésim": (Category.TENS, 80),
    "nonagésim": (Category.TENS, 90),
    "centésim": (Category.SCALE, 100),
    "milésim": (Category.SCALE, 1_000),
    "millonésim": (Category.SCALE, 10**6),
}

_HUNDRED_ORDINALS = {
    "ducentésim": 2,
    "tricentésim": 3,
    "cuadringentésim": 4,
    "quingentésim": 5,
    "sexcentésim": 6,
    "septingentésim": 7,
    "octingentésim": 8,
    "noningentésim": 9,
}

_LINKING = frozenset({"y", "con", "mas", "más", "menos", "son", "a", "o", "u", "e"})


@lru_cache(maxsize=None)
def spanish() -> Language:
    hundred = Lexeme(Category.SCALE, 100)
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, _TEENS),
        **words(Category.TENS, _TENS),
        "cien": (Lexeme(Category.SCALE, 100, closes_group=True),),
        "ciento": (hundred,),
        "mil": (Lexeme(Category.SCALE, 1_000, explicit_one=False),),
        "millón": (Lexeme(Category.SCALE, 10**6, plural=False),),
        "millones": (Lexeme(Category.SCALE, 10**6, plural=True),),
        "billón": (Lexeme(Category.SCALE, 10**12, plural=False),),
        "billones": (Lexeme(Category.SCALE, 10**12, plural=True),),
        **gendered(_ORDINAL_STEMS, _SUFFIXES),
        **gendered({"segund": (Category.DIGIT, 2)}, _SUFFIXES, chained=True),
        # apocopated forms before a noun: "primer día", "tercer piso"
        "primer": (Lexeme(Category.DIGIT, 1, ordinal=".ᵉʳ"),),
        "tercer": (Lexeme(Category.DIGIT, 3, ordinal=".ᵉʳ"),),
    }
    for word, unit in _TWENTIES.items():
        lexicon[word] = (Lexeme(Category.TENS, 20), Lexeme(Category.DIGIT, unit, linked=True))
    for stem, digit in _HUNDREDS.items():
        for ending in ("os", "as"):
            lexicon[stem + ending] = (Lexeme(Category.DIGIT, digit), hundred)
    for stem, digit in _HUNDRED_ORDINALS.items():
        for ending, suffix in _SUFFIXES.items():
            lexicon[stem + ending] = (
                Lexeme(Category.DIGIT, digit),
                Lexeme(Category.SCALE, 100, ordinal=suffix),
            )

    return Language(
        code="es",
        name="Spanish",
        lexicon=with_plain_spellings(lexicon),
        ladder=(100, 1_000, 10**6, 10**12),
        decimal_words=frozenset({"coma"}),
        decimal_separator=",",
        conjunction_words=frozenset({"y"}),
        sign_words=frozenset({"menos"}),
        linking_words=_LINKING,
        hundred_multipliers=(2, 9),
        hundred_multiplier_joined=True,
        hundred_link=Link.NONE,
        scale_link=Link.NONE,
        tens_link=Link.REQUIRED,
        thousand_scales=True,
        ordinal_chain=True,
    )
