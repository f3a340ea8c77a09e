"""
Tag words with their numeral role.

``classify`` turns one written word into the sequence of logical tokens
(``Part``) it stands for. Most words map to a single part; compounds expand
to several, all carrying the span of the original word:

    "twenty-five"       -> TENS 20, DIGIT 5
    "einundzwanzig"     -> DIGIT 1, CONJUNCTION, TENS 20
    "doscientos"        -> DIGIT 2, SCALE 100
    "vingt-et-unième"   -> TENS 20, CONJUNCTION, DIGIT 1 (ordinal "ème")

An empty tuple means "not a numeral".
"""

from __future__ import annotations

import unicodedata
from dataclasses import replace

from .lexicon import Language
from .models import NUMERIC, Category, Lexeme, Part


def normalize(word: str) -> str:
    return unicodedata.normalize("NFC", word).replace("’", "'").lower()


def classify(word: str, language: Language) -> tuple[Part, ...]:
    """Return the logical tokens of ``word`` in ``language``."""
    normalized = normalize(word)
    pieces = [piece for piece in normalized.split("-") if piece]
    if not pieces:
        return ()

    lexemes: list[Lexeme] = []
    compound = len(pieces) > 1
    for piece in pieces:
        found = _classify_piece(piece, language, compound)
        if not found:
            # Hyphenated words are numeral as a whole or not at all.
            return ()
        lexemes.extend(found)

    if compound and not _well_formed(lexemes):
        return ()
    return tuple(Part(lexeme, joined=i > 0) for i, lexeme in enumerate(lexemes))


# ─── Lookup Strategies ───────────────────────────────────────────────


def _classify_piece(word: str, language: Language, compound: bool) -> tuple[Lexeme, ...]:
    """Exact entry, then plural, then ordinal ending, then compound split."""
    entry = language.lookup(word)
    if entry:
        if not compound and all(lexeme.bound for lexeme in entry):
            return ()
        return entry

    plural = _plural(word, language)
    if plural:
        return plural

    ordinal = _ordinal(word, language)
    if ordinal:
        return ordinal

    if language.agglutinative:
        return _split(word, language)
    return ()


def _cardinal(word: str, language: Language) -> tuple[Lexeme, ...]:
    entry = language.lookup(word)
    if entry and not all(lexeme.bound for lexeme in entry):
        return entry
    if language.agglutinative:
        return _split(word, language)
    return ()


def _plural(word: str, language: Language) -> tuple[Lexeme, ...]:
    """English-style plurals: "hundreds" needs a multiplier, "thirds" keeps its s."""
    suffix = language.plural_suffix
    if not suffix or not word.endswith(suffix) or word in language.plural_exceptions:
        return ()
    stem = word[: -len(suffix)]
    entry = language.lookup(stem) or _ordinal(stem, language)
    if not entry:
        return ()
    last = entry[-1]
    if last.is_ordinal:
        return entry[:-1] + (replace(last, ordinal=last.ordinal + suffix),)
    if last.category is Category.SCALE:
        return entry[:-1] + (replace(last, plural=True),)
    return ()


def _ordinal(word: str, language: Language) -> tuple[Lexeme, ...]:
    for rule in language.ordinal_rules:
        if not word.endswith(rule.ending) or len(word) <= len(rule.ending):
            continue
        base = word[: -len(rule.ending)]
        for strip, add in rule.stems:
            if strip and not base.endswith(strip):
                continue
            stem = (base[: -len(strip)] if strip else base) + add
            found = _cardinal(stem, language)
            if not found:
                continue
            last = found[-1]
            if last.category in NUMERIC and not last.is_ordinal:
                return found[:-1] + (replace(last, ordinal=rule.suffix),)
    return ()


def _split(word: str, language: Language) -> tuple[Lexeme, ...]:
    """Decompose an agglutinated word into the fewest lexicon morphemes."""
    size = len(word)
    # best[i]: (pieces, lexemes) covering word[:i]
    best: list[tuple[int, tuple[Lexeme, ...]] | None] = [None] * (size + 1)
    best[0] = (0, ())
    for end in range(1, size + 1):
        for start in range(max(0, end - language.longest_word), end):
            prefix = best[start]
            if prefix is None:
                continue
            entry = language.lookup(word[start:end])
            if not entry:
                continue
            candidate = (prefix[0] + 1, prefix[1] + entry)
            if best[end] is None or candidate[0] < best[end][0]:
                best[end] = candidate
    result = best[size]
    if result is None or result[0] < 2 or not _well_formed(list(result[1])):
        return ()
    return result[1]


def _well_formed(lexemes: list[Lexeme]) -> bool:
    """A compound may hold inner conjunctions but no signs or decimal markers."""
    if lexemes[0].category is Category.CONJUNCTION:
        return False
    if lexemes[-1].category is Category.CONJUNCTION:
        return False
    for i, lexeme in enumerate(lexemes):
        if lexeme.category in (Category.SIGN, Category.DECIMAL_MARKER):
            return False
        if lexeme.is_ordinal and i != len(lexemes) - 1:
            return False
    return True
