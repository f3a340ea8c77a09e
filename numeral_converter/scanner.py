"""
Find numeral runs in a stream of units.

The scanner walks units left to right. At each word that could start a
numeral it runs an ``Accumulator`` as far as the grammar allows, then
emits the committed run and resumes right after it: runs never overlap and
a later, larger alignment is never reconsidered. Units that are not part
of any run are passed through unchanged.

Whitespace and lone hyphens between two words are transparent inside a
run; any other separator ends it. Only as many units are pulled from the
source as the current run needs, so unbounded streams work.

A few words are numerals only in some contexts (French "neuf", English
"o"). Their language guards settle them from the neighbouring words before
the run search sees them.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Iterator, Optional

from .accumulator import Accumulator
from .classifier import classify, normalize
from .formatter import render
from .lexicon import Language
from .models import NumeralRun, Part

logger = logging.getLogger(__name__)

BreakHook = Callable[[Any, Any], bool]

# Words a guard may look back on.
CONTEXT_WORDS = 3


@dataclass(frozen=True)
class Unit:
    """One scanned unit: a word or a separator, with its classification."""

    source: Any
    text: str
    index: int
    is_word: bool
    parts: tuple[Part, ...] = ()
    span: Optional[tuple[int, int]] = None

    @property
    def transparent(self) -> bool:
        return not self.is_word and self.text.strip() in ("", "-")

    @property
    def numeral(self) -> bool:
        return bool(self.parts)


def make_unit(source: Any, text: str, index: int, language: Language, span=None) -> Unit:
    is_word = any(ch.isalnum() for ch in text)
    parts = classify(text, language) if is_word else ()
    return Unit(source, text, index, is_word, parts, span)


def disambiguate(units: Iterable[Unit], language: Language) -> Iterator[Unit]:
    """Drop the numeral reading of guarded words their neighbours rule out.

    French "neuf" is also "new" and English "o" is also a letter. A guarded
    word is held back until the next word arrives, then its guard decides;
    everything else streams through untouched.
    """
    guards = language.guards
    if not guards:
        yield from units
        return

    before: deque[Unit] = deque(maxlen=CONTEXT_WORDS)
    held: list[Unit] = []

    def settle(after: Unit | None) -> list[Unit]:
        word = held[0]
        if not guards[normalize(word.text)](tuple(before), after):
            logger.debug("Reading %r as a plain word", word.text)
            word = replace(word, parts=())
        before.append(word)
        return [word, *held[1:]]

    for unit in units:
        if held and unit.is_word:
            yield from settle(unit)
            held.clear()
        if held:
            held.append(unit)
            continue
        if unit.numeral and normalize(unit.text) in guards:
            held.append(unit)
            continue
        if unit.is_word:
            before.append(unit)
        yield unit
    if held:
        yield from settle(None)


def scan(
    units: Iterable[Unit],
    language: Language,
    *,
    breaks: BreakHook | None = None,
) -> Iterator[NumeralRun | Unit]:
    """Yield every unit, with the ones forming numeral runs grouped as runs.

    Args:
        units: classified units, in order.
        language: the language the units are written in.
        breaks: optional ``breaks(previous, current)`` hook on unit sources;
            True keeps the two words out of the same run.
    """
    source = disambiguate(units, language)
    buffer: deque[Unit] = deque()
    after_run = False

    def pull() -> bool:
        unit = next(source, None)
        if unit is None:
            return False
        buffer.append(unit)
        return True

    while buffer or pull():
        head = buffer[0]
        if not head.numeral:
            buffer.popleft()
            if not head.transparent:
                after_run = False
            yield head
            continue

        accumulator = Accumulator(language, allow_sign=not after_run)
        ends: list[int] = []  # buffer offset after each accepted word
        previous: Unit | None = None
        offset = 0
        while offset < len(buffer) or pull():
            unit = buffer[offset]
            if unit.transparent and previous is not None:
                offset += 1
                continue
            if not unit.is_word:
                break
            if previous is not None and breaks is not None and breaks(previous.source, unit.source):
                break
            if not accumulator.push(unit.parts):
                break
            offset += 1
            ends.append(offset)
            previous = unit

        state = accumulator.finish()
        if state is None:
            buffer.popleft()
            after_run = False
            yield head
            continue

        consumed = [buffer.popleft() for _ in range(ends[state.tokens - 1])]
        run = NumeralRun(
            start=consumed[0].index,
            end=consumed[-1].index + 1,
            value=state.value,
            kind=state.kind,
            text=render(state, language),
            tokens=state.parts,
            units=tuple(consumed),
        )
        logger.debug("Run %r -> %s (%s)", run.source_text, run.text, run.kind.value)
        after_run = True
        yield run
