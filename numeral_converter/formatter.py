"""Render a committed accumulator state as its canonical digit string."""

from __future__ import annotations

from .accumulator import AccumulatorState
from .lexicon import Language
from .models import Kind


def integer_digits(state: AccumulatorState) -> str:
    """Integer part with every spoken leading zero kept ("zero eight" -> "08")."""
    zeros = "0" * state.zeros
    if state.magnitude == 0:
        return zeros or "0"
    return zeros + str(state.magnitude)


def render(state: AccumulatorState, language: Language) -> str:
    """Cardinal: "-12". Ordinal: "21st", "3.", "5º". Decimal: "3.1415" / "3,1415"."""
    sign = "-" if state.sign < 0 else ""
    digits = integer_digits(state)
    if state.kind is Kind.DECIMAL:
        return f"{sign}{digits}{language.decimal_separator}{state.decimals}"
    if state.kind is Kind.ORDINAL:
        return f"{digits}{state.suffix}"
    return f"{sign}{digits}"
