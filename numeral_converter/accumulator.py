"""
The accumulation state machine shared by all languages.

    Idle ──► InInteger ──► InDecimal
               │               │
               └──► Committed ◄┘      (or Aborted when nothing committed)

Words are pushed one at a time. Every part of a word is applied to a copy
of the state; if any part is illegal the copy is dropped and the push is
refused, so a compound word is consumed whole or not at all. After each
accepted word the state is snapshotted when it could end a run there. The
caller stops pushing at the first refusal and takes ``last_commit``: the
longest valid prefix, without backtracking or exceptions.

Value bookkeeping per group: ``high`` holds the hundreds (``nineteen
hundred`` -> 1900), ``low`` the tens and units. Scales above the hundred
fold the group into ``total`` and must appear in strictly decreasing
order. Where the language allows it, a larger scale may take the thousand
group as part of its multiplier ("dos mil millones" -> 2000 × 10^6).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from .lexicon import HUNDRED, THOUSAND, Composition, Language, Link
from .models import Category, Kind, Lexeme, Part


class Phase(str, Enum):
    IDLE = "idle"
    INTEGER = "in-integer"
    DECIMAL = "in-decimal"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass
class AccumulatorState:
    phase: Phase = Phase.IDLE
    total: int = 0
    high: int = 0
    low: int = 0
    hundred: bool = False  # current group already took its hundred
    last_scale: Optional[int] = None  # smallest scale folded so far
    thousands: int = 0  # multiplier of the last thousand, open to a larger scale
    thousand_ceiling: Optional[int] = None  # last_scale before that thousand
    previous: Optional[Lexeme] = None  # last numeric lexeme applied
    vigesimal: bool = False  # ``low`` came from "quatre-vingt"
    closed: bool = False  # only a larger scale may follow
    terminal: bool = False  # nothing may follow
    conjunction: bool = False  # a conjunction is waiting for its right side
    zeros: int = 0  # leading zeros
    decimals: str = ""
    sign: int = 1
    kind: Kind = Kind.CARDINAL
    suffix: str = ""
    chain_limit: Optional[int] = None  # next chained ordinal must stay below
    tokens: int = 0  # words consumed
    parts: int = 0  # logical tokens consumed

    @property
    def magnitude(self) -> int:
        return self.total + self.high + self.low

    @property
    def value(self) -> int:
        return self.sign * self.magnitude

    @property
    def has_value(self) -> bool:
        return self.magnitude > 0

    @property
    def committable(self) -> bool:
        if self.phase is Phase.DECIMAL:
            return bool(self.decimals)
        if self.phase is not Phase.INTEGER or self.conjunction:
            return False
        return self.has_value or self.zeros > 0 or self.kind is Kind.ORDINAL


class Accumulator:
    """Finds the longest valid numeral phrase starting at one position.

    Usage:
        acc = Accumulator(language)
        for word in words:
            if not acc.push(classify(word, language)):
                break
        state = acc.finish()  # None when no run starts here
    """

    def __init__(self, language: Language, *, allow_sign: bool = True):
        self.language = language
        self.allow_sign = allow_sign
        self.state = AccumulatorState()
        self.last_commit: AccumulatorState | None = None

    # ─── Public API ──────────────────────────────────────────────────

    def push(self, parts: Sequence[Part]) -> bool:
        """Try to extend the run with one word. Returns False if it cannot."""
        state = self.state
        if not parts or state.terminal or state.phase in (Phase.COMMITTED, Phase.ABORTED):
            return False

        candidate = replace(state)
        if candidate.kind is Kind.ORDINAL:
            accepted = self._chain(candidate, parts)
        else:
            accepted = all(self._apply(candidate, part) for part in parts)
            if accepted and candidate.kind is Kind.ORDINAL and self.language.ordinal_chain:
                accepted = self._open_chain(candidate, parts)
        if not accepted:
            return False

        candidate.tokens += 1
        self.state = candidate
        if candidate.committable:
            self.last_commit = replace(candidate)
        return True

    def finish(self) -> AccumulatorState | None:
        """Close the run: the last valid snapshot, or None (aborted)."""
        if self.last_commit is None:
            self.state.phase = Phase.ABORTED
            return None
        committed = replace(self.last_commit)
        if committed.phase is Phase.DECIMAL:
            committed.kind = Kind.DECIMAL
        committed.phase = Phase.COMMITTED
        self.state.phase = Phase.COMMITTED
        return committed

    # ─── Dispatch ────────────────────────────────────────────────────

    def _apply(self, state: AccumulatorState, part: Part) -> bool:
        lexeme = part.lexeme
        category = lexeme.category

        if state.terminal:
            return False
        if state.phase is Phase.DECIMAL:
            return self._decimal_digit(state, lexeme)
        if category is Category.SIGN:
            return self._sign(state)
        if category is Category.CONJUNCTION:
            return self._conjunction(state)
        if category is Category.DECIMAL_MARKER:
            return self._decimal_marker(state)

        if lexeme.is_ordinal and not self._ordinal_allowed(state, lexeme):
            return False
        if state.closed and not (category is Category.SCALE and lexeme.value > HUNDRED):
            return False

        if category is Category.DIGIT:
            ok = self._digit(state, part)
        elif category is Category.TEEN:
            ok = self._teen(state, part)
        elif category is Category.TENS:
            ok = self._tens(state, part)
        else:
            ok = self._scale(state, part)
        if not ok:
            return False

        state.phase = Phase.INTEGER
        state.previous = lexeme
        state.conjunction = False
        state.parts += 1
        if lexeme.closes_group:
            state.closed = True
        if lexeme.final:
            state.terminal = True
        if lexeme.is_ordinal:
            state.kind = Kind.ORDINAL
            state.suffix = lexeme.ordinal or ""
            if not self.language.ordinal_chain:
                state.terminal = True
        return True

    # ─── Function Words ──────────────────────────────────────────────

    def _sign(self, state: AccumulatorState) -> bool:
        if not self.allow_sign or state.phase is not Phase.IDLE or state.sign < 0:
            return False
        state.sign = -1
        state.phase = Phase.INTEGER
        state.parts += 1
        return True

    def _conjunction(self, state: AccumulatorState) -> bool:
        if state.conjunction or state.closed or not state.has_value:
            return False
        state.conjunction = True
        state.parts += 1
        return True

    def _decimal_marker(self, state: AccumulatorState) -> bool:
        if state.conjunction or state.kind is Kind.ORDINAL:
            return False
        if not state.has_value and not state.zeros:
            return False
        state.phase = Phase.DECIMAL
        state.parts += 1
        return True

    def _decimal_digit(self, state: AccumulatorState, lexeme: Lexeme) -> bool:
        # Only bare digit words; each one adds exactly one decimal digit.
        if lexeme.category is not Category.DIGIT or lexeme.is_ordinal:
            return False
        state.decimals += str(lexeme.value)
        state.parts += 1
        return True

    # ─── Ordinals ────────────────────────────────────────────────────

    def _ordinal_allowed(self, state: AccumulatorState, lexeme: Lexeme) -> bool:
        if state.sign < 0:
            return False
        if lexeme.initial and state.tokens > 0:
            return False
        if lexeme.chained:
            return False  # only inside a chain, see _chain
        return True

    def _open_chain(self, state: AccumulatorState, parts: Sequence[Part]) -> bool:
        value = self._word_value(parts)
        if value is None:
            return False
        state.chain_limit = _order_below(value)
        return True

    def _chain(self, state: AccumulatorState, parts: Sequence[Part]) -> bool:
        """Multi-word ordinals: "vigésimo primero", "centésimo vigésimo"."""
        if not self.language.ordinal_chain or not parts[-1].lexeme.is_ordinal:
            return False
        value = self._word_value(parts, chained=True)
        if value is None or state.chain_limit is None or value >= state.chain_limit:
            return False
        state.total += value
        state.chain_limit = _order_below(value)
        state.suffix = parts[-1].lexeme.ordinal or ""
        state.previous = parts[-1].lexeme
        state.parts += len(parts)
        return True

    def _word_value(self, parts: Sequence[Part], chained: bool = False) -> int | None:
        """Value of a single ordinal word evaluated on its own."""
        if chained:
            parts = [Part(replace(p.lexeme, chained=False), p.joined) for p in parts]
        scratch = Accumulator(self.language, allow_sign=False)
        scratch_state = scratch.state
        if not all(scratch._apply(scratch_state, part) for part in parts):
            return None
        return scratch_state.magnitude

    # ─── Numeric Words ───────────────────────────────────────────────

    def _digit(self, state: AccumulatorState, part: Part) -> bool:
        digit = part.lexeme.value
        if digit == 0:
            # Leading zeros only: "zero eight" -> "08".
            if state.has_value or state.last_scale is not None or state.hundred:
                return False
            if state.conjunction:
                return False
            state.zeros += 1
            return True

        previous = state.previous
        if state.low == 0:
            if not self._linked(state, part):
                return False
        elif self.language.units_before_tens:
            return False
        elif previous is not None and previous.category is Category.TENS and state.low % 10 == 0:
            if not self._linked(state, part):
                return False
        elif (
            previous is not None
            and previous.category is Category.TEEN
            and previous.value == 10
            and digit in self.language.ten_unit_compounds
            and not state.conjunction
        ):
            pass  # "dix-sept", "soixante-dix-neuf"
        else:
            return False
        state.low += digit
        return True

    def _teen(self, state: AccumulatorState, part: Part) -> bool:
        language = self.language
        if state.low == 0:
            if not self._linked(state, part):
                return False
        elif (
            language.composition is Composition.VIGESIMAL
            and state.previous is not None
            and state.previous.category is Category.TENS
            and state.low in language.vigesimal_teen_bases
        ):
            # "soixante-dix", "quatre-vingt-onze"
            if not self._linked(state, part):
                return False
        else:
            return False
        state.low += part.lexeme.value
        return True

    def _tens(self, state: AccumulatorState, part: Part) -> bool:
        language = self.language
        tens = part.lexeme.value
        previous = state.previous
        vigesimal = (
            language.composition is Composition.VIGESIMAL
            and tens == 20
            and previous is not None
            and previous.category is Category.DIGIT
            and state.low in language.vigesimal_multipliers
            and not state.conjunction
        )
        if part.lexeme.plural and not vigesimal:
            return False  # "vingts" only closes "quatre-vingts"
        if state.low == 0:
            if not self._linked(state, part):
                return False
            state.low = tens
            return True
        if previous is None or previous.category is not Category.DIGIT:
            return False
        if language.units_before_tens and state.low < 10:
            # "einundzwanzig", "vijfentwintig"
            if not self._linked(state, part):
                return False
            state.low += tens
            return True
        if vigesimal:
            state.low *= 20
            state.vigesimal = True
            return True
        return False

    def _scale(self, state: AccumulatorState, part: Part) -> bool:
        lexeme = part.lexeme
        magnitude = lexeme.value
        multiplier = state.high + state.low
        previous = state.previous

        if magnitude == HUNDRED:
            if state.hundred:
                return False
            if multiplier:
                if state.conjunction:
                    return False
                low, high = self.language.hundred_multipliers
                if not low <= multiplier <= high:
                    return False
                if self.language.hundred_multiplier_joined and not part.joined:
                    return False
            elif state.conjunction and not self._linked(state, part):
                # "mil e cem"
                return False
            if not _multiplier_fits(lexeme, multiplier, previous):
                return False
            state.high = (multiplier or 1) * HUNDRED
            state.low = 0
            state.hundred = True
            state.vigesimal = False
            return True

        if state.conjunction:
            return False
        ceiling = state.last_scale
        if self._takes_thousands(state, magnitude):
            # "cincuenta y tres mil veinte millones": 53020 × 10^6
            folded = state.thousands * THOUSAND
            multiplier += folded
            tier = magnitude * THOUSAND
            ceiling = state.thousand_ceiling
            state.total -= folded
        else:
            tier = magnitude
        if ceiling is not None and tier >= ceiling:
            return False
        if not _multiplier_fits(lexeme, multiplier, previous):
            return False
        multiplier = multiplier or 1
        state.thousands = multiplier if magnitude == THOUSAND else 0
        state.thousand_ceiling = state.last_scale
        state.total += multiplier * magnitude
        state.high = state.low = 0
        state.hundred = state.vigesimal = state.closed = False
        state.last_scale = tier
        return True

    def _takes_thousands(self, state: AccumulatorState, magnitude: int) -> bool:
        return (
            self.language.thousand_scales
            and magnitude > THOUSAND
            and state.last_scale == THOUSAND
            and state.thousands > 0
        )

    # ─── Conjunction Placement ───────────────────────────────────────

    def _linked(self, state: AccumulatorState, part: Part) -> bool:
        """Check the conjunction (or its absence) before ``part``."""
        rule = self._link_rule(state)
        conjunction = state.conjunction
        if rule is None or rule is Link.NONE:
            return not conjunction
        if rule is Link.OPTIONAL:
            return True
        if rule is Link.REQUIRED:
            return conjunction or part.lexeme.linked
        # Link.BEFORE_ONE
        needed = part.lexeme.value in (1, 11) and not state.vigesimal
        needed = needed and state.previous is not None and state.previous.category is Category.TENS
        return conjunction == needed

    def _link_rule(self, state: AccumulatorState) -> Link | None:
        previous = state.previous
        if previous is None or (previous.category is Category.DIGIT and previous.value == 0):
            return None
        if previous.category is Category.SCALE:
            if previous.value == HUNDRED:
                return self.language.hundred_link
            return self.language.scale_link
        return self.language.tens_link


def _multiplier_fits(lexeme: Lexeme, multiplier: int, previous: Lexeme | None) -> bool:
    if lexeme.plural is True and multiplier < 2:
        return False
    # A singular scale agrees with the last unit word: "vingt et un million".
    if lexeme.plural is False and multiplier > 1 and not _is_one(previous):
        return False
    if not lexeme.explicit_one and multiplier == 1:
        return False
    return True


def _is_one(lexeme: Lexeme | None) -> bool:
    return lexeme is not None and lexeme.category is Category.DIGIT and lexeme.value == 1


def _order_below(value: int) -> int:
    """Largest value a following chained ordinal may reach (exclusive)."""
    return 10 ** (len(str(value)) - 1)
