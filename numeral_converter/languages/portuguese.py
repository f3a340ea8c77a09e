"""
Portuguese numerals, Brazilian and European spellings.

"e" joins every part below the thousand ("cento e vinte e cinco"); without
it the words are separate numbers ("trinta quatro" -> "30 4"). "cem" is the
bare hundred ("cem", "cem mil"); "cento" carries what follows. Brazil
writes dezesseis/dezessete/dezenove and uses the short scale (bilhão =
10^9); Portugal writes dezasseis/dezassete/dezanove and uses the long
scale (bilião = 10^12). Both say "mil milhões" for 10^9.
"""

from __future__ import annotations

from functools import lru_cache

from ..lexicon import Language, Link, gendered, with_plain_spellings, words
from ..models import Category, Lexeme

_DIGITS = {
    "zero": 0,
    "um": 1,
    "uma": 1,
    "dois": 2,
    "duas": 2,
    "três": 3,
    "quatro": 4,
    "cinco": 5,
    "seis": 6,
    "sete": 7,
    "oito": 8,
    "nove": 9,
}

_TEENS = {
    "dez": 10,
    "onze": 11,
    "doze": 12,
    "treze": 13,
    "catorze": 14,
    "quatorze": 14,
    "quinze": 15,
    "dezoito": 18,
}

_TEENS_BR = {"dezesseis": 16, "dezessete": 17, "dezenove": 19}
_TEENS_PT = {"dezasseis": 16, "dezassete": 17, "dezanove": 19}

_TENS = {
    "vinte": 20,
    "trinta": 30,
    "quarenta": 40,
    "cinquenta": 50,
    "cinqüenta": 50,
    "sessenta": 60,
    "setenta": 70,
    "oitenta": 80,
    "noventa": 90,
}

_HUNDREDS = {
    "duzent": 2,
    "trezent": 3,
    "quatrocent": 4,
    "quinhent": 5,
    "seiscent": 6,
    "setecent": 7,
    "oitocent": 8,
    "novecent": 9,
}

_SUFFIXES = {"o": "º", "a": "ª", "os": "ᵒˢ", "as": "ᵃˢ"}

_ORDINAL_STEMS = {
    "primeir": (Category.DIGIT, 1),
    "terceir": (Category.DIGIT, 3),
    "quart": (Category.DIGIT, 4),
    "quint": (Category.DIGIT, 5),
    "sext": (Category.DIGIT, 6),
    "sétim": (Category.DIGIT, 7),
    "oitav": (Category.DIGIT, 8),
    "non": (Category.DIGIT, 9),
    "décim": (Category.TEEN, 10),
    "vigésim": (Category.TENS, 20),
    "trigésim": (Category.TENS, 30),
    "quadragésim": (Category.TENS, 40),
    "quinquagésim": (Category.TENS, 50),
    "sexagésim": (Category.TENS, 60),
    "septuagésim": (Category.TENS, 70),
    "setuagésim": (Category.TENS, 70),
    "octogésim": (Category.TENS, 80),
    "nonagésim": (Category.TENS, 90),
    "centésim": (Category.SCALE, 100),
    "milésim": (Category.SCALE, 1_000),
    "milionésim": (Category.SCALE, 10**6),
}

_HUNDRED_ORDINALS = {
    "ducentésim": 2,
    "trecentésim": 3,
    "tricentésim": 3,
    "quadringentésim": 4,
    "quingentésim": 5,
    "sexcentésim": 6,
    "seiscentésim": 6,
    "septingentésim": 7,
    "setingentésim": 7,
    "octingentésim": 8,
    "noningentésim": 9,
    "nongentésim": 9,
}

_LINKING = frozenset(
    {
        "eh", "então", "bem", "isso", "e", "uh", "ha", "ah", "hu", "um",
        "menos", "ok", "sim", "mais", "digo", "ou", "seja", "aquele", "é",
        "aquilo", "em", "fim", "mas", "ei", "agora", "hum", "não", "com",
        "são", "novamente", "a",
    }
)


def _lexicon(teens: dict[str, int], scales: dict[str, tuple[int, bool]]) -> dict:
    hundred = Lexeme(Category.SCALE, 100)
    lexicon = {
        **words(Category.DIGIT, _DIGITS),
        **words(Category.TEEN, {**_TEENS, **teens}),
        **words(Category.TENS, _TENS),
        "cem": (Lexeme(Category.SCALE, 100, closes_group=True),),
        "cento": (hundred,),
        "mil": (Lexeme(Category.SCALE, 1_000, explicit_one=False),),
        **gendered(_ORDINAL_STEMS, _SUFFIXES),
        **gendered({"segund": (Category.DIGIT, 2)}, _SUFFIXES, chained=True),
    }
    for word, (magnitude, plural) in scales.items():
        lexicon[word] = (Lexeme(Category.SCALE, magnitude, plural=plural),)
    for stem, digit in _HUNDREDS.items():
        for ending in ("os", "as"):
            lexicon[stem + ending] = (Lexeme(Category.DIGIT, digit), hundred)
    for stem, digit in _HUNDRED_ORDINALS.items():
        for ending, suffix in _SUFFIXES.items():
            lexicon[stem + ending] = (
                Lexeme(Category.DIGIT, digit),
                Lexeme(Category.SCALE, 100, ordinal=suffix),
            )
    return with_plain_spellings(lexicon)


def _build(code: str, name: str, teens: dict[str, int], scales: dict) -> Language:
    return Language(
        code=code,
        name=name,
        lexicon=_lexicon(teens, scales),
        ladder=tuple(sorted({100, 1_000, *(m for m, _ in scales.values())})),
        decimal_words=frozenset({"vírgula", "virgula"}),
        decimal_separator=",",
        conjunction_words=frozenset({"e"}),
        sign_words=frozenset({"menos"}),
        linking_words=_LINKING,
        hundred_multipliers=(2, 9),
        hundred_multiplier_joined=True,
        hundred_link=Link.REQUIRED,
        scale_link=Link.OPTIONAL,
        tens_link=Link.REQUIRED,
        thousand_scales=True,
        ordinal_chain=True,
    )


@lru_cache(maxsize=None)
def portuguese() -> Language:
    return _build(
        "pt-BR",
        "Portuguese (Brazil)",
        _TEENS_BR,
        {
            "milhão": (10**6, False),
            "milhões": (10**6, True),
            "bilhão": (10**9, False),
            "bilhões": (10**9, True),
            "trilhão": (10**12, False),
            "trilhões": (10**12, True),
        },
    )


@lru_cache(maxsize=None)
def portuguese_european() -> Language:
    return _build(
        "pt-PT",
        "Portuguese (Portugal)",
        _TEENS_PT,
        {
            "milhão": (10**6, False),
            "milhões": (10**6, True),
            "bilião": (10**12, False),
            "biliões": (10**12, True),
        },
    )
