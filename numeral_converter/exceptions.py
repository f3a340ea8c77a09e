"""
Exception hierarchy for numeral conversion.

Configuration problems (a broken lexicon, an unknown language code, bad
settings) are raised. A string that simply is not a number is not an
error: strict parsing returns a falsy ``NotANumber`` result instead.
"""

from __future__ import annotations

from dataclasses import dataclass


class NumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class LexiconError(NumeralError):
    """A language definition violates the ladder or category contract."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LEXICON_INCONSISTENT", message, details)


class UnknownLanguageError(NumeralError):
    """No language is registered under the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LANGUAGE", message, details)


class ConfigurationError(NumeralError):
    """Settings from the environment could not be validated."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CONFIGURATION", message, details)


# ─── Parse Outcome ───────────────────────────────────────────────────


@dataclass(frozen=True)
class NotANumber:
    """Outcome of a strict parse that found no full-string numeral.

    Falsy, so callers can write ``if not result: ...``.
    """

    text: str
    reason: str

    code = "NOT_A_NUMBER"

    def __bool__(self) -> bool:
        return False
