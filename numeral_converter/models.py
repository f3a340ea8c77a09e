"""
Data types shared by every stage of the engine.

Engine internals (lexemes, runs, digit tokens) are frozen dataclasses:
they are created and thrown away inside a single call. Results that leave
the library through ``find_numbers`` or the HTTP API are pydantic models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# ─── Categories ──────────────────────────────────────────────────────


class Category(str, Enum):
    """Numeral role of a word (or of one morpheme of a compound word)."""

    NOT_NUMERAL = "not-numeral"
    DIGIT = "digit-word"  # 0–9
    TEEN = "teen-word"  # 10–19
    TENS = "tens-word"  # 20, 30, … 90
    SCALE = "scale-word"  # 100, 1000, 10^6, …
    CONJUNCTION = "conjunction"
    DECIMAL_MARKER = "decimal-marker"
    SIGN = "sign"


NUMERIC = frozenset({Category.DIGIT, Category.TEEN, Category.TENS, Category.SCALE})


class Kind(str, Enum):
    """What a committed run represents."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    DECIMAL = "decimal"


# ─── Lexicon Entries ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Lexeme:
    """One logical numeral token as stored in a language lexicon.

    ``ordinal`` holds the digit-form suffix when the word is an ordinal
    form of its cardinal value ("third" -> value 3, ordinal "rd").
    """

    category: Category
    value: int = 0
    ordinal: Optional[str] = None
    plural: Optional[bool] = None  # True needs a multiplier >= 2; False one ending in "one"
    explicit_one: bool = True  # scale words: accepts an explicit "one" multiplier
    closes_group: bool = False  # only a larger scale may follow ("cien", "cem")
    final: bool = False  # nothing may follow ("eins")
    bound: bool = False  # only valid inside a compound word ("vent", "sessant")
    initial: bool = False  # only valid as the first word of a run ("premier")
    chained: bool = False  # only valid after another ordinal ("segundo")
    linked: bool = False  # the conjunction is built into the word ("veintiuno")

    @property
    def is_ordinal(self) -> bool:
        return self.ordinal is not None


@dataclass(frozen=True)
class Part:
    """A lexeme as it occurs in the text.

    ``joined`` is set for every morpheme after the first one of the same
    written word ("veinti|uno", "twenty-|five").
    """

    lexeme: Lexeme
    joined: bool = False


# ─── Engine Output ───────────────────────────────────────────────────


@dataclass(frozen=True)
class NumeralRun:
    """A committed numeral expression found by the scanner.

    ``start``/``end`` index the scanned units (end exclusive). ``units``
    are the consumed source units, interior separators included.
    """

    start: int
    end: int
    value: int
    kind: Kind
    text: str  # canonical digit form
    tokens: int  # logical tokens consumed, after compound expansion
    units: tuple = ()

    @property
    def span(self) -> tuple[int, int] | None:
        first, last = self.units[0].span, self.units[-1].span
        if first is None or last is None:
            return None
        return first[0], last[1]

    @property
    def source_text(self) -> str:
        return "".join(unit.text for unit in self.units)


@dataclass(frozen=True)
class DigitToken:
    """Synthesized output unit of the token-stream transform."""

    text: str
    value: int
    kind: Kind
    source: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_ordinal(self) -> bool:
        return self.kind == Kind.ORDINAL


class Occurrence(BaseModel):
    """A replaced numeral inside a text, with its character span."""

    start: int = Field(description="Offset of the first character of the numeral words")
    end: int = Field(description="Offset one past the last character")
    text: str = Field(description="Canonical digit form")
    value: int = Field(description="Integer value (integer part for decimals)")
    kind: Kind

    @property
    def is_ordinal(self) -> bool:
        return self.kind == Kind.ORDINAL
