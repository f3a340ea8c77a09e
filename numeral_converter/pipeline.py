"""
Public operations: strict parse, scan-and-replace and the lazy token transform.

Flow:
  ┌───────────┐
  │ Raw text  │──► tokenize ──┐
  └───────────┘               │
  ┌───────────┐               ▼
  │  Tokens   │──► units ─► Classifier ─► Scanner ─► Selector ─► output
  └───────────┘                            │
                                           └─► (strict parse: one run
                                                must cover everything)

Design principles:
  - Replacement is total: any input yields an output string.
  - Strict parsing returns ``NotANumber`` instead of raising.
  - Everything is pull-based; nothing is materialized that a streaming
    caller did not ask for.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from .exceptions import NotANumber
from .lexicon import Language
from .models import DigitToken, Kind, NumeralRun, Occurrence
from .scanner import BreakHook, Unit, make_unit, scan
from .selector import select
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 10.0


def _text_units(text: str, language: Language) -> Iterator[Unit]:
    for index, token in enumerate(tokenize(text)):
        yield make_unit(token, token.text, index, language, token.span)


# ── Strict parse ────────────────────────────────────────────────────


def parse_number(text: str, language: Language) -> int | str | NotANumber:
    """Parse a string that must be exactly one number.

    Returns:
        An ``int`` for plain cardinals ("forty two" -> 42); the digit string
        for ordinals, decimals and numbers with leading zeros ("3rd",
        "3.1415", "08"); ``NotANumber`` otherwise.
    """
    stripped = text.strip()
    if not stripped:
        return NotANumber(text, "empty text")

    items = list(scan(_text_units(stripped, language), language))
    runs = [item for item in items if isinstance(item, NumeralRun)]
    if not runs:
        return NotANumber(text, "no numeral words")
    if len(items) != 1:
        return NotANumber(text, "text continues past the number")

    run = runs[0]
    if run.kind is Kind.CARDINAL and run.text == str(run.value):
        return run.value
    return run.text


# ── Scan and replace ────────────────────────────────────────────────


def replace_numbers(
    text: str, language: Language, threshold: float = DEFAULT_THRESHOLD
) -> str:
    """Replace selected numeral phrases in ``text`` by digits.

    Everything that is not replaced, whitespace and punctuation included, is
    reproduced verbatim.
    """
    return replace_and_count(text, language, threshold)[0]


def replace_and_count(
    text: str, language: Language, threshold: float = DEFAULT_THRESHOLD
) -> tuple[str, int]:
    """``replace_numbers`` plus how many numerals it replaced, in one pass."""
    pieces: list[str] = []
    replaced = 0
    for item in select(scan(_text_units(text, language), language), language, threshold):
        if isinstance(item, NumeralRun):
            replaced += 1
        pieces.append(item.text)
    return "".join(pieces), replaced


def find_numbers(
    text: str, language: Language, threshold: float = DEFAULT_THRESHOLD
) -> list[Occurrence]:
    """The numerals ``replace_numbers`` would replace, with their spans."""
    occurrences: list[Occurrence] = []
    units = _text_units(text, language)
    for item in select(scan(units, language), language, threshold):
        if isinstance(item, NumeralRun):
            start, end = item.span  # type: ignore[misc]  # text units always carry spans
            occurrences.append(
                Occurrence(start=start, end=end, text=item.text, value=item.value, kind=item.kind)
            )
    logger.debug("Found %d numerals in %d characters", len(occurrences), len(text))
    return occurrences


# ── Token stream ────────────────────────────────────────────────────


def _default_text(unit: Any) -> str:
    return unit if isinstance(unit, str) else unit.text


def transform_tokens(
    tokens: Iterable[Any],
    language: Language,
    threshold: float = DEFAULT_THRESHOLD,
    *,
    text_of: Callable[[Any], str] | None = None,
    breaks: BreakHook | None = None,
) -> Iterator[Any]:
    """Lazily replace numerals in an already tokenized stream.

    Args:
        tokens: strings, or objects exposing ``text`` (see ``text_of``).
        language: language of the stream.
        threshold: isolated numerals below this value stay untouched.
        text_of: how to read a token's text; defaults to the string itself
            or its ``text`` attribute.
        breaks: ``breaks(previous, current)`` returns True when two words
            must not belong to the same number (e.g. a pause in speech).

    Yields:
        Each input token unchanged, or a ``DigitToken`` standing for the
        tokens of one replaced numeral (listed in ``DigitToken.source``).
    """
    read = text_of or _default_text
    units = (
        make_unit(token, read(token), index, language)
        for index, token in enumerate(tokens)
    )
    for item in select(scan(units, language, breaks=breaks), language, threshold):
        if isinstance(item, NumeralRun):
            yield DigitToken(
                text=item.text,
                value=item.value,
                kind=item.kind,
                source=tuple(unit.source for unit in item.units),
            )
        else:
            yield item.source
