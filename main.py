#!/usr/bin/env python3
"""
Numeral Converter — Entry Point
================================

Demonstrates scan-and-replace and strict parsing on sample sentences in
every supported language, or converts the text given on the command line.

Usage:
    python main.py                                   # Demo, all languages
    python main.py --lang fr "vingt et un moutons"   # Replace in one text
    python main.py --parse "three point one four"    # Strict parse
    NUMERAL_THRESHOLD=0 python main.py               # Replace every numeral
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from numeral_converter.config import Settings
from numeral_converter.exceptions import NotANumber, NumeralError
from numeral_converter.languages import get_language
from numeral_converter.pipeline import find_numbers, parse_number, replace_numbers

load_dotenv()


# ─── Sample Sentences ────────────────────────────────────────────────

SAMPLES = {
    "en": (
        "Let me show you two things: first, isolated numbers are treated "
        "differently than groups like one, two, three. And then, that decimal "
        "numbers like three point one four one five are well understood."
    ),
    "fr": "Vingt-cinq vaches, douze poulets et cent vingt-cinq kg de pommes de terre.",
    "es": "ochenta y cinco vacas, doce pollos y ciento veinticinco kg de patatas.",
    "de": "fünfundzwanzig Kühe, zwölf Hühner und einhundertfünfundzwanzig kg Kartoffeln.",
    "it": "venticinque mucche, dodici polli e centoventicinque kg di patate.",
    "nl": "vijfentwintig koeien, twaalf kippen en honderdvijfentwintig kg aardappelen.",
    "pt": "vinte e cinco vacas, doze galinhas e cento e vinte e cinco kg de batatas.",
}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_replacement(code: str, text: str, threshold: float) -> int:
    """Print one text before/after replacement.

    Returns:
        Number of numerals replaced.
    """
    language = get_language(code)
    converted = replace_numbers(text, language, threshold)
    occurrences = find_numbers(text, language, threshold)

    print(f"  {_BOLD}{_CYAN}[{code}] {language.name}{_RESET}")
    print(f"    {_DIM}in:{_RESET}  {text}")
    print(f"    {_DIM}out:{_RESET} {_GREEN}{converted}{_RESET}")
    for occ in occurrences:
        print(f"      {_DIM}{text[occ.start:occ.end]!r} -> {occ.text} ({occ.kind.value}){_RESET}")
    print()
    return len(occurrences)


def print_parse(code: str, text: str) -> int:
    """Print a strict parse result. Returns 0 on success, 1 if not a number."""
    result = parse_number(text, get_language(code))
    if isinstance(result, NotANumber):
        print(f"  {_RED}NOT A NUMBER{_RESET}  {text!r} ({result.reason})")
        return 1
    print(f"  {_GREEN}{result}{_RESET}")
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the demo (no text) or convert the given text."""
    try:
        settings = Settings.from_env()
    except NumeralError as exc:
        print(f"{_RED}[{exc.code}] {exc}{_RESET}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Convert numbers written in words to digits.")
    parser.add_argument("text", nargs="*", help="text to convert (demo when omitted)")
    parser.add_argument("--lang", default=settings.language, help="language code")
    parser.add_argument("--threshold", type=float, default=settings.threshold)
    parser.add_argument("--parse", action="store_true", help="strict single-number parse")
    args = parser.parse_args(argv)

    try:
        if args.text:
            text = " ".join(args.text)
            if args.parse:
                return print_parse(args.lang, text)
            print_replacement(args.lang, text, args.threshold)
            return 0

        print(f"\n{'=' * _WIDTH}")
        print(f"{_BOLD}{_CYAN}  NUMERAL CONVERTER DEMO  (threshold={args.threshold:g}){_RESET}")
        print(f"{'=' * _WIDTH}\n")
        total = sum(
            print_replacement(code, text, args.threshold) for code, text in SAMPLES.items()
        )
        print(f"{'─' * _WIDTH}")
        print(f"  {total} numerals converted across {len(SAMPLES)} languages")
        print(f"{'=' * _WIDTH}\n")
        return 0
    except NumeralError as exc:
        print(f"{_RED}[{exc.code}] {exc}{_RESET}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
