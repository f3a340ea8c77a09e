"""
Language definitions: lexicon tables plus the composition rules that drive
the shared accumulator.

A ``Language`` is pure data. Grammar differences between languages
(vigesimal French tens, units-before-tens in German and Dutch, mandatory
conjunctions in Spanish and Portuguese, …) are expressed as flags the
accumulator branches on, never as subclasses.

Every language is checked once, when it is built. A table that breaks the
category contract or the magnitude ladder raises ``LexiconError`` right
there instead of producing odd parses later.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from .exceptions import LexiconError
from .models import NUMERIC, Category, Lexeme

logger = logging.getLogger(__name__)

HUNDRED = 100
THOUSAND = 1_000

# guard(before, after) -> whether an ambiguous word reads as a numeral here.
# ``before`` holds the preceding words, nearest last; ``after`` is the next
# word or None. Both are scanned units exposing ``text`` and ``parts``.
Guard = Callable[[Sequence[Any], Optional[Any]], bool]


# ─── Composition Flags ───────────────────────────────────────────────


class Composition(str, Enum):
    ADDITIVE = "additive"
    VIGESIMAL = "vigesimal"  # "quatre-vingt(s)" = 4 × 20


class Link(str, Enum):
    """Whether a conjunction may or must sit between two numeral words."""

    NONE = "none"  # juxtaposition only: "twenty five"
    OPTIONAL = "optional"  # "five hundred (and) six"
    REQUIRED = "required"  # "ochenta y cinco"; waived for words with a built-in link
    BEFORE_ONE = "before-one"  # "vingt et un", "soixante et onze", but "vingt-deux"


@dataclass(frozen=True)
class OrdinalRule:
    """Maps an ordinal word back to its cardinal stem.

    ``stems`` are (strip, add) rewrites tried in order on what is left once
    ``ending`` is removed: ("qu", "q") turns "cinqu" into "cinq".
    """

    ending: str
    suffix: str
    stems: tuple[tuple[str, str], ...] = (("", ""),)


# ─── Table Builders (used by the language data modules) ──────────────


def plain(word: str) -> str:
    """Strip diacritics: "dieciséis" -> "dieciseis"."""
    decomposed = unicodedata.normalize("NFD", word)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", stripped)


def words(
    category: Category, table: Mapping[str, int], **flags: object
) -> dict[str, tuple[Lexeme, ...]]:
    """One single-lexeme entry per word, all sharing ``flags``."""
    return {word: (Lexeme(category, value, **flags),) for word, value in table.items()}


def gendered(
    stems: Mapping[str, tuple[Category, int]],
    suffixes: Mapping[str, str],
    **flags: object,
) -> dict[str, tuple[Lexeme, ...]]:
    """Ordinal entries for every gender/number ending of each stem.

    ``gendered({"quint": (DIGIT, 5)}, {"o": "º", "a": "ª"})`` yields
    "quinto" -> 5º and "quinta" -> 5ª.
    """
    entries: dict[str, tuple[Lexeme, ...]] = {}
    for stem, (category, value) in stems.items():
        for ending, suffix in suffixes.items():
            entries[stem + ending] = (Lexeme(category, value, ordinal=suffix, **flags),)
    return entries


def with_plain_spellings(
    entries: Mapping[str, tuple[Lexeme, ...]],
) -> dict[str, tuple[Lexeme, ...]]:
    """Add an accent-free key for every accented one."""
    result = dict(entries)
    for word, lexemes in entries.items():
        result.setdefault(plain(word), lexemes)
    return result


def is_numeral(word: Any) -> bool:
    """Whether a scanned word (None allowed) holds a numeral morpheme."""
    if word is None:
        return False
    return any(part.lexeme.category in NUMERIC for part in word.parts)


# ─── Language ────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False)
class Language:
    """Immutable, shareable description of one language's numerals."""

    code: str
    name: str
    lexicon: Mapping[str, tuple[Lexeme, ...]]
    ladder: tuple[int, ...]
    decimal_words: frozenset[str]
    decimal_separator: str
    conjunction_words: frozenset[str]
    sign_words: frozenset[str]
    linking_words: frozenset[str] = frozenset()
    ordinal_rules: tuple[OrdinalRule, ...] = ()
    composition: Composition = Composition.ADDITIVE
    vigesimal_multipliers: frozenset[int] = frozenset()
    vigesimal_teen_bases: frozenset[int] = frozenset()
    ten_unit_compounds: frozenset[int] = frozenset()
    units_before_tens: bool = False
    hundred_multipliers: tuple[int, int] = (1, 99)
    hundred_multiplier_joined: bool = False
    hundred_link: Link = Link.NONE
    scale_link: Link = Link.NONE
    tens_link: Link = Link.NONE
    thousand_scales: bool = False  # "mil millones" = 10^9
    agglutinative: bool = False
    ordinal_chain: bool = False
    plural_suffix: str | None = None
    plural_exceptions: frozenset[str] = frozenset()
    guards: Mapping[str, Guard] = field(default_factory=dict)
    table: dict[str, tuple[Lexeme, ...]] = field(init=False, repr=False)
    longest_word: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _validate(self)
        table = dict(self.lexicon)
        for words_, category in (
            (self.conjunction_words, Category.CONJUNCTION),
            (self.decimal_words, Category.DECIMAL_MARKER),
            (self.sign_words, Category.SIGN),
        ):
            for word in words_:
                table[word] = (Lexeme(category),)
        object.__setattr__(self, "table", table)
        object.__setattr__(self, "longest_word", max(len(w) for w in table))
        logger.debug("Built language %s (%d words)", self.code, len(table))

    @property
    def list_words(self) -> frozenset[str]:
        """Words that keep two numerals in the same list group."""
        return self.linking_words | self.conjunction_words

    def lookup(self, word: str) -> tuple[Lexeme, ...]:
        return self.table.get(word, ())


# ─── Construction-time Checks ────────────────────────────────────────

_RANGES = {
    Category.DIGIT: range(0, 10),
    Category.TEEN: range(10, 20),
    Category.TENS: range(20, 100, 10),
}


def _validate(language: Language) -> None:
    """Raise LexiconError on the first inconsistency found."""
    code = language.code

    def fail(message: str, **details: object) -> None:
        raise LexiconError(f"{code}: {message}", {"language": code, **details})

    if not language.lexicon:
        fail("empty lexicon")

    ladder = language.ladder
    if not ladder or ladder[0] != HUNDRED:
        fail("magnitude ladder must start at the hundred", ladder=ladder)
    if any(b <= a for a, b in zip(ladder, ladder[1:])):
        fail("magnitude ladder must be strictly increasing", ladder=ladder)
    if any(str(m).rstrip("0") != "1" for m in ladder):
        fail("magnitude ladder must hold powers of ten", ladder=ladder)

    for word, lexemes in language.lexicon.items():
        if not word or word != word.lower():
            fail("lexicon keys must be non-empty lowercase words", word=word)
        if not lexemes:
            fail("lexicon entry without lexemes", word=word)
        for lexeme in lexemes:
            if lexeme.category not in NUMERIC:
                fail("lexicon entries must be numeral words", word=word)
            allowed = _RANGES.get(lexeme.category)
            if allowed is not None and lexeme.value not in allowed:
                fail(
                    f"{lexeme.category.value} value out of range",
                    word=word,
                    value=lexeme.value,
                )
            if lexeme.category is Category.SCALE and lexeme.value not in ladder:
                fail("scale word not on the magnitude ladder", word=word, value=lexeme.value)
            if lexeme.ordinal is not None and not lexeme.ordinal:
                fail("ordinal lexeme with an empty suffix", word=word)
        if any(lexeme.is_ordinal for lexeme in lexemes[:-1]):
            fail("an ordinal form may only close a compound entry", word=word)

    function_words = (
        ("conjunction", language.conjunction_words),
        ("decimal marker", language.decimal_words),
        ("sign", language.sign_words),
    )
    seen: dict[str, str] = {}
    for label, group in function_words:
        for word in group:
            if word in language.lexicon:
                fail(f"{label} word is also a numeral word", word=word)
            if word in seen:
                fail(f"{label} word is also a {seen[word]} word", word=word)
            seen[word] = label

    if not language.decimal_words or not language.decimal_separator:
        fail("a decimal marker word and a separator are required")

    vigesimal = language.composition is Composition.VIGESIMAL
    if vigesimal and not language.vigesimal_multipliers:
        fail("vigesimal composition needs at least one multiplier")
    if not vigesimal and (language.vigesimal_multipliers or language.vigesimal_teen_bases):
        fail("vigesimal settings on an additive language")

    low, high = language.hundred_multipliers
    if not 1 <= low <= high <= 99:
        fail("hundred multipliers must satisfy 1 <= low <= high <= 99")

    for rule in language.ordinal_rules:
        if not rule.ending or not rule.suffix:
            fail("ordinal rule needs an ending and a suffix", ending=rule.ending)

    if language.thousand_scales and THOUSAND not in ladder:
        fail("thousand multipliers need the thousand on the ladder")

    for word in language.guards:
        if word not in language.lexicon:
            fail("guarded word is not a numeral word", word=word)
