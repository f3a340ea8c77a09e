"""
Decide which numeral runs get replaced by digits.

A run is replaced when any of these holds:
  - it spans more than one logical token ("twenty five", "zero eight");
  - its value reaches the threshold;
  - it belongs to a list of two or more runs separated only by
    punctuation or linking words ("one, two and three").

Isolated small numerals ("the one I want") stay in words. The selector is
streaming: a run that only the list rule could rescue is held back until
the next significant unit shows whether a list continues.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .lexicon import Language
from .models import NumeralRun
from .scanner import Unit

# A separator holding one of these ends a list.
SENTENCE_BREAKS = frozenset(".!?;")


class ReplacementSelector:
    """Stateful filter over scanner output.

    ``feed`` returns the items that can be released so far: pass-through
    units, and runs that must be replaced. A run left in words comes back
    as its original units.
    """

    def __init__(self, language: Language, threshold: float):
        self.language = language
        self.threshold = threshold
        self._held: NumeralRun | None = None
        self._gap: list[Unit] = []  # units seen since the last run
        self._listed = False  # only list separators since the last run

    def feed(self, item: NumeralRun | Unit) -> list[NumeralRun | Unit]:
        if isinstance(item, NumeralRun):
            return self._on_run(item)
        return self._on_unit(item)

    def flush(self) -> list[NumeralRun | Unit]:
        released = self._release_held()
        self._listed = False
        return released

    # ─── Internals ───────────────────────────────────────────────────

    def _on_run(self, run: NumeralRun) -> list[NumeralRun | Unit]:
        released: list[NumeralRun | Unit] = []
        if self._listed:
            # Second member of a list: both are replaced.
            if self._held is not None:
                released.append(self._held)
                self._held = None
            released.extend(self._gap)
            released.append(run)
        elif self.stands_alone(run):
            released.extend(self._release_held())
            released.append(run)
        else:
            released.extend(self._release_held())
            self._held = run
        self._gap = []
        self._listed = True
        return released

    def _on_unit(self, unit: Unit) -> list[NumeralRun | Unit]:
        if self._listed and self.is_list_separator(unit):
            if self._held is None:
                return [unit]
            self._gap.append(unit)
            return []
        self._listed = False
        return self._release_held() + [unit]

    def _release_held(self) -> list[NumeralRun | Unit]:
        released: list[NumeralRun | Unit] = []
        if self._held is not None:
            released.extend(self._held.units)
            self._held = None
        released.extend(self._gap)
        self._gap = []
        return released

    def stands_alone(self, run: NumeralRun) -> bool:
        return run.tokens > 1 or run.value >= self.threshold

    def is_list_separator(self, unit: Unit) -> bool:
        if unit.is_word:
            return unit.text.lower() in self.language.list_words
        return not SENTENCE_BREAKS.intersection(unit.text)


def select(
    items: Iterable[NumeralRun | Unit], language: Language, threshold: float
) -> Iterator[NumeralRun | Unit]:
    """Stream scanner output through a ``ReplacementSelector``."""
    selector = ReplacementSelector(language, threshold)
    for item in items:
        yield from selector.feed(item)
    yield from selector.flush()
