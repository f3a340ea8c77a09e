"""
Test suite for the numeral engine: tokenizer, classifier, accumulator,
scanner, selector and the three public operations.

Everything runs on the English tables unless a test says otherwise.

Run: pytest tests/ -v
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass

import pytest

from numeral_converter.accumulator import Accumulator, Phase
from numeral_converter.classifier import classify
from numeral_converter.exceptions import NotANumber
from numeral_converter.languages import english, french, spanish
from numeral_converter.models import Category, DigitToken, Kind, NumeralRun
from numeral_converter.pipeline import (
    find_numbers,
    parse_number,
    replace_and_count,
    replace_numbers,
    transform_tokens,
)
from numeral_converter.scanner import Unit, disambiguate, make_unit, scan
from numeral_converter.tokenizer import tokenize

EN = english()


# ─── Test Data ───────────────────────────────────────────────────────

SHOWCASE = (
    "Let me show you two things: first, isolated numbers are treated "
    "differently than groups like one, two, three. And then, that decimal "
    "numbers like three point one four one five are well understood."
)

SHOWCASE_DEFAULT = (
    "Let me show you two things: first, isolated numbers are treated "
    "differently than groups like 1, 2, 3. And then, that decimal "
    "numbers like 3.1415 are well understood."
)

SHOWCASE_ZERO = (
    "Let me show you 2 things: 1st, isolated numbers are treated "
    "differently than groups like 1, 2, 3. And then, that decimal "
    "numbers like 3.1415 are well understood."
)

MIXED = [
    SHOWCASE,
    "twenty-five cows, twelve chickens and one hundred twenty five kg of potatoes.",
    "This is the one I was waiting for",
    "four plus five so eleven then three uh six uh well seven",
    "I want five hundred and sixty six rupees",
    "ten minus five",
]


def _categories(word: str, language=EN) -> list[Category]:
    return [part.lexeme.category for part in classify(word, language)]


def _accumulate(*words: str, language=EN) -> Accumulator:
    acc = Accumulator(language)
    for word in words:
        if not acc.push(classify(word, language)):
            break
    return acc


# ═══════════════════════════════════════════════════════════════════════
# TOKENIZER
# ═══════════════════════════════════════════════════════════════════════


class TestTokenizer:
    def test_words_and_separators(self) -> None:
        tokens = tokenize("Here, some phrase: hello!")
        assert [t.text for t in tokens] == [
            "Here", ", ", "some", " ", "phrase", ": ", "hello", "!",
        ]

    def test_flags_words(self) -> None:
        tokens = tokenize("one, two")
        assert [t.is_word for t in tokens] == [True, False, True]

    def test_hyphen_and_apostrophe_stay_inside_words(self) -> None:
        tokens = tokenize("twenty-five c'est")
        assert [t.text for t in tokens if t.is_word] == ["twenty-five", "c'est"]

    def test_lossless(self) -> None:
        text = "  Ninety-nine bottles -- of beer!\n"
        assert "".join(t.text for t in tokenize(text)) == text

    def test_spans_index_the_source(self) -> None:
        text = "call me at nine"
        for token in tokenize(text):
            assert text[token.start : token.end] == token.text

    def test_empty_text(self) -> None:
        assert tokenize("") == []


# ═══════════════════════════════════════════════════════════════════════
# CLASSIFIER
# ═══════════════════════════════════════════════════════════════════════


class TestClassifier:
    def test_plain_words(self) -> None:
        assert _categories("seven") == [Category.DIGIT]
        assert _categories("Thirteen") == [Category.TEEN]
        assert _categories("forty") == [Category.TENS]
        assert _categories("million") == [Category.SCALE]

    def test_function_words(self) -> None:
        assert _categories("and") == [Category.CONJUNCTION]
        assert _categories("point") == [Category.DECIMAL_MARKER]
        assert _categories("minus") == [Category.SIGN]

    def test_not_a_numeral(self) -> None:
        assert classify("banana", EN) == ()

    def test_hyphenated_compound_expands(self) -> None:
        parts = classify("twenty-five", EN)
        assert [p.lexeme.value for p in parts] == [20, 5]
        assert [p.joined for p in parts] == [False, True]

    def test_hyphenated_compound_is_all_or_nothing(self) -> None:
        assert classify("twenty-something", EN) == ()

    def test_ordinal_irregular(self) -> None:
        (part,) = classify("third", EN)
        assert part.lexeme.value == 3
        assert part.lexeme.ordinal == "rd"

    def test_ordinal_by_rule(self) -> None:
        (part,) = classify("thirtieth", EN)
        assert part.lexeme.category is Category.TENS
        assert part.lexeme.ordinal == "th"

    def test_plural_scale_needs_multiplier(self) -> None:
        (part,) = classify("hundreds", EN)
        assert part.lexeme.plural is True

    def test_plural_ordinal_keeps_suffix(self) -> None:
        (part,) = classify("fourths", EN)
        assert part.lexeme.ordinal == "ths"

    def test_seconds_is_not_an_ordinal(self) -> None:
        assert classify("seconds", EN) == ()

    def test_french_compound_with_conjunction(self) -> None:
        parts = classify("vingt-et-unième", french())
        assert [p.lexeme.category for p in parts] == [
            Category.TENS,
            Category.CONJUNCTION,
            Category.DIGIT,
        ]
        assert parts[-1].lexeme.ordinal == "ème"

    def test_compound_cannot_end_in_conjunction(self) -> None:
        assert classify("vingt-et", french()) == ()


# ═══════════════════════════════════════════════════════════════════════
# ACCUMULATOR
# ═══════════════════════════════════════════════════════════════════════


class TestAccumulator:
    def test_simple_value(self) -> None:
        state = _accumulate("twenty", "five").finish()
        assert state is not None
        assert state.value == 25
        assert state.phase is Phase.COMMITTED

    def test_refuses_second_unit(self) -> None:
        acc = Accumulator(EN)
        assert acc.push(classify("twenty", EN))
        assert acc.push(classify("five", EN))
        assert not acc.push(classify("three", EN))
        assert acc.finish().value == 25

    def test_refused_compound_leaves_state_untouched(self) -> None:
        acc = Accumulator(EN)
        acc.push(classify("twenty", EN))
        assert not acc.push(classify("thirty-five", EN))
        assert acc.state.low == 20
        assert acc.state.tokens == 1

    def test_dangling_conjunction_falls_back(self) -> None:
        acc = _accumulate("five", "hundred", "and")
        state = acc.finish()
        assert state.value == 500
        assert state.tokens == 2

    def test_scales_fold_in_decreasing_order(self) -> None:
        state = _accumulate("two", "million", "three", "thousand", "four").finish()
        assert state.value == 2_003_004

    def test_scale_cannot_repeat_or_grow(self) -> None:
        state = _accumulate("two", "thousand", "three", "million").finish()
        assert state.value == 2_003

    def test_hundred_multiplier_above_ten(self) -> None:
        assert _accumulate("nineteen", "hundred").finish().value == 1_900

    def test_plural_scale_rejects_bare_use(self) -> None:
        assert _accumulate("hundreds").finish() is None
        assert _accumulate("five", "hundreds").finish().value == 500

    def test_leading_zeros(self) -> None:
        state = _accumulate("zero", "zero", "seven").finish()
        assert state.zeros == 2
        assert state.value == 7

    def test_zero_after_value_is_refused(self) -> None:
        acc = _accumulate("five", "zero")
        assert acc.finish().tokens == 1

    def test_decimal_digits(self) -> None:
        state = _accumulate("three", "point", "one", "four").finish()
        assert state.kind is Kind.DECIMAL
        assert state.decimals == "14"

    def test_decimal_marker_needs_integer_part(self) -> None:
        assert _accumulate("point", "five").finish() is None

    def test_decimal_accepts_only_digit_words(self) -> None:
        state = _accumulate("one", "point", "twenty").finish()
        assert state.value == 1
        assert state.kind is Kind.CARDINAL

    def test_sign_only_at_start(self) -> None:
        assert _accumulate("minus", "twelve").finish().value == -12
        assert _accumulate("twelve", "minus").finish().tokens == 1

    def test_sign_alone_never_commits(self) -> None:
        assert _accumulate("minus").finish() is None

    def test_sign_disabled(self) -> None:
        acc = Accumulator(EN, allow_sign=False)
        assert not acc.push(classify("minus", EN))

    def test_ordinal_ends_the_run(self) -> None:
        acc = _accumulate("twenty", "first", "one")
        state = acc.finish()
        assert state.kind is Kind.ORDINAL
        assert state.value == 21
        assert state.tokens == 2

    def test_aborted_when_nothing_commits(self) -> None:
        acc = _accumulate("and")
        assert acc.finish() is None
        assert acc.state.phase is Phase.ABORTED

    def test_push_after_finish_is_refused(self) -> None:
        acc = _accumulate("seven")
        acc.finish()
        assert not acc.push(classify("hundred", EN))

    def test_singular_scale_agrees_with_last_unit(self) -> None:
        fr = french()
        assert _accumulate("vingt", "et", "un", "million", language=fr).finish().value == 21_000_000
        assert _accumulate("deux", "million", language=fr).finish().value == 2

    def test_thousand_multiplies_a_larger_scale(self) -> None:
        state = _accumulate("dos", "mil", "millones", language=spanish()).finish()
        assert state.value == 2_000_000_000
        assert state.last_scale == 10**9

    def test_bare_thousand_before_a_larger_scale(self) -> None:
        assert _accumulate("mil", "millones", language=spanish()).finish().value == 10**9

    def test_thousand_tier_stays_below_the_previous_scale(self) -> None:
        acc = _accumulate("un", "millón", "dos", "mil", "millones", language=spanish())
        assert acc.finish().value == 1_002_000

    def test_thousand_tier_off_in_english(self) -> None:
        assert _accumulate("two", "thousand", "million").finish().value == 2_000

    def test_vigesimal_plural_needs_its_multiplier(self) -> None:
        fr = french()
        assert _accumulate("quatre", "vingts", language=fr).finish().value == 80
        assert _accumulate("trois", "vingts", language=fr).finish().value == 3


# ═══════════════════════════════════════════════════════════════════════
# SCANNER
# ═══════════════════════════════════════════════════════════════════════


def _scan(text: str, language=EN) -> list[NumeralRun | Unit]:
    units = (
        make_unit(t, t.text, i, language, t.span) for i, t in enumerate(tokenize(text))
    )
    return list(scan(units, language))


def _runs(text: str, language=EN) -> list[NumeralRun]:
    return [item for item in _scan(text, language) if isinstance(item, NumeralRun)]


class TestScanner:
    def test_passes_everything_through(self) -> None:
        text = "I want five hundred and sixty six rupees"
        items = _scan(text)
        assert "".join(
            item.source_text if isinstance(item, NumeralRun) else item.text for item in items
        ) == text

    def test_run_span_and_units(self) -> None:
        text = "I want five hundred and sixty six rupees"
        (run,) = _runs(text)
        assert run.value == 566
        assert run.span == (text.index("five"), text.index(" rupees"))
        assert run.source_text == "five hundred and sixty six"

    def test_logical_token_count(self) -> None:
        (run,) = _runs("twenty-five")
        assert run.tokens == 2

    def test_leftmost_longest_split(self) -> None:
        assert [r.value for r in _runs("fifty sixty thirty and eleven")] == [50, 60, 30, 11]

    def test_punctuation_ends_a_run(self) -> None:
        assert [r.value for r in _runs("twenty, five")] == [20, 5]

    def test_trailing_conjunction_not_consumed(self) -> None:
        runs = _runs("thirty and eleven")
        assert runs[0].source_text == "thirty"

    def test_no_sign_right_after_a_run(self) -> None:
        assert [r.value for r in _runs("ten minus five")] == [10, 5]

    def test_sign_after_other_words(self) -> None:
        assert [r.value for r in _runs("it was minus five")] == [-5]

    def test_leading_zeros_split_from_previous_run(self) -> None:
        assert [r.text for r in _runs("thirteen thousand zero ninety")] == ["13000", "090"]

    def test_break_hook(self) -> None:
        units = [make_unit(w, w, i, EN) for i, w in enumerate(["twenty", "five"])]
        runs = [
            item
            for item in scan(units, EN, breaks=lambda prev, cur: True)
            if isinstance(item, NumeralRun)
        ]
        assert [r.value for r in runs] == [20, 5]

    def test_guarded_word_read_from_its_neighbours(self) -> None:
        assert [r.text for r in _runs("o eight")] == ["08"]
        assert _runs("my name is o s c a r") == []

    def test_guard_drops_only_the_numeral_reading(self) -> None:
        units = [make_unit(w, w, i, EN) for i, w in enumerate(["is", " ", "o", " ", "s"])]
        settled = list(disambiguate(units, EN))
        assert [u.text for u in settled] == ["is", " ", "o", " ", "s"]
        assert not settled[2].numeral
        assert settled[2].is_word

    def test_guard_at_end_of_stream(self) -> None:
        units = [make_unit(w, w, i, EN) for i, w in enumerate(["seven", " ", "o"])]
        assert list(disambiguate(units, EN))[-1].numeral

    def test_language_without_guards_streams_through(self) -> None:
        units = [make_unit(w, w, i, spanish()) for i, w in enumerate(["nueve", " ", "o"])]
        assert list(disambiguate(units, spanish())) == units

    def test_guard_waits_for_one_word_only(self) -> None:
        words = itertools.chain(["o", " ", "eight", " "], itertools.repeat("banana"))
        units = (make_unit(w, w, i, EN) for i, w in enumerate(words))
        (run,) = itertools.islice(scan(units, EN), 1)
        assert run.text == "08"


# ═══════════════════════════════════════════════════════════════════════
# STRICT PARSE
# ═══════════════════════════════════════════════════════════════════════


class TestParseNumber:
    def test_spanish_cardinal(self) -> None:
        assert parse_number("ochenta y cinco", spanish()) == 85

    def test_decimal(self) -> None:
        assert parse_number("three point one four one five", EN) == "3.1415"

    def test_trailing_words_fail(self) -> None:
        result = parse_number("twelve apples", EN)
        assert isinstance(result, NotANumber)
        assert not result

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("forty two", 42),
            ("Twenty-One", 21),
            ("one hundred and five", 105),
            ("One Million Two Hundred Fifty Thousand", 1_250_000),
            ("Two Billion Three Hundred Million", 2_300_000_000),
            ("zero", 0),
            ("minus twelve", -12),
            ("negative three thousand", -3_000),
        ],
    )
    def test_integers(self, text: str, expected: int) -> None:
        assert parse_number(text, EN) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("third", "3rd"),
            ("twenty-first", "21st"),
            ("one hundred twelfth", "112th"),
            ("zero eight", "08"),
            ("zero point five", "0.5"),
            ("minus one point two", "-1.2"),
            ("three point zero one", "3.01"),
        ],
    )
    def test_digit_strings(self, text: str, expected: str) -> None:
        assert parse_number(text, EN) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "banana", "minus", "one hundred and", "two three", "point five"],
    )
    def test_not_a_number(self, text: str) -> None:
        assert isinstance(parse_number(text, EN), NotANumber)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_number("  seven \n", EN) == 7

    def test_not_a_number_carries_reason(self) -> None:
        result = parse_number("", EN)
        assert result.code == "NOT_A_NUMBER"
        assert result.reason == "empty text"


# ═══════════════════════════════════════════════════════════════════════
# SCAN AND REPLACE
# ═══════════════════════════════════════════════════════════════════════


class TestReplaceNumbers:
    def test_showcase_default_threshold(self) -> None:
        assert replace_numbers(SHOWCASE, EN, 10.0) == SHOWCASE_DEFAULT

    def test_showcase_zero_threshold(self) -> None:
        assert replace_numbers(SHOWCASE, EN, 0.0) == SHOWCASE_ZERO

    @pytest.mark.parametrize(
        "text, expected",
        [
            (
                "twenty-five cows, twelve chickens and one hundred twenty five kg of potatoes.",
                "25 cows, 12 chickens and 125 kg of potatoes.",
            ),
            ("I want five hundred and sixty six rupees", "I want 566 rupees"),
            ("fifty sixty thirty and eleven", "50 60 30 and 11"),
            ("one two three four twenty five", "1 2 3 4 25"),
            (
                "four plus five so eleven then three uh six uh well seven",
                "4 plus 5 so 11 then 3 uh 6 uh well 7",
            ),
            (
                "Fifth third second twenty-first hundredth one thousand two hundred thirtieth.",
                "5th 3rd 2nd 21st 100th 1230th.",
            ),
            ("FIFTEEN ONE TEN ONE", "15 1 10 1"),
            ("five zero zero", "5 00"),
            ("thirteen thousand zero ninety", "13000 090"),
            ("ten minus five", "10 minus 5"),
            ("from one to three", "from 1 to 3"),
        ],
    )
    def test_scenarios(self, text: str, expected: str) -> None:
        assert replace_numbers(text, EN) == expected

    def test_isolated_small_number_stays(self) -> None:
        text = "This is the one I was waiting for"
        assert replace_numbers(text, EN, 10.0) == text

    def test_isolated_small_number_replaced_at_zero(self) -> None:
        text = "This is the one I was waiting for"
        assert replace_numbers(text, EN, 0.0) == "This is the 1 I was waiting for"

    def test_sentence_break_ends_a_list(self) -> None:
        assert replace_numbers("I saw one. Two left.", EN) == "I saw one. Two left."

    def test_list_needs_only_separators_between(self) -> None:
        assert replace_numbers("one cat, two dogs", EN) == "one cat, two dogs"

    def test_text_without_numerals_is_untouched(self) -> None:
        text = "Nothing to see here, move along!"
        assert replace_numbers(text, EN) == text

    def test_empty_text(self) -> None:
        assert replace_numbers("", EN) == ""

    def test_whitespace_is_preserved(self) -> None:
        assert replace_numbers("a\ttwenty  five\nb", EN) == "a\t25\nb"

    def test_replace_and_count(self) -> None:
        assert replace_and_count(SHOWCASE, EN) == (SHOWCASE_DEFAULT, 4)
        assert replace_and_count("no numbers here", EN) == ("no numbers here", 0)

    @pytest.mark.parametrize("text", MIXED)
    def test_count_matches_find_numbers(self, text: str) -> None:
        replaced, count = replace_and_count(text, EN)
        assert replaced == replace_numbers(text, EN)
        assert count == len(find_numbers(text, EN))


# ═══════════════════════════════════════════════════════════════════════
# FIND NUMBERS
# ═══════════════════════════════════════════════════════════════════════


class TestFindNumbers:
    def test_spans_and_values(self) -> None:
        text = "I want five hundred and sixty six rupees"
        (occ,) = find_numbers(text, EN)
        assert text[occ.start : occ.end] == "five hundred and sixty six"
        assert occ.text == "566"
        assert occ.value == 566
        assert occ.kind is Kind.CARDINAL

    def test_matches_replacement(self) -> None:
        occurrences = find_numbers(SHOWCASE, EN)
        assert [o.text for o in occurrences] == ["1", "2", "3", "3.1415"]

    def test_ordinal_flag(self) -> None:
        (occ,) = find_numbers("the third time", EN, 0.0)
        assert occ.is_ordinal
        assert occ.text == "3rd"

    def test_decimal_value_is_integer_part(self) -> None:
        (occ,) = find_numbers("pi is three point one four", EN)
        assert occ.kind is Kind.DECIMAL
        assert occ.value == 3

    def test_nothing_found(self) -> None:
        assert find_numbers("no numbers here", EN) == []


# ═══════════════════════════════════════════════════════════════════════
# TOKEN STREAM TRANSFORM
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SpokenWord:
    """A recognizer word with its start time in seconds."""

    text: str
    time: float


class TestTransformTokens:
    def test_replaces_runs_with_digit_tokens(self) -> None:
        out = list(transform_tokens(["I", "have", "twenty", "five", "apples"], EN))
        assert out[:2] == ["I", "have"]
        assert isinstance(out[2], DigitToken)
        assert out[2].text == "25"
        assert out[2].source == ("twenty", "five")
        assert out[3] == "apples"

    def test_small_isolated_token_passes_through(self) -> None:
        out = list(transform_tokens(["the", "one", "thing"], EN))
        assert out == ["the", "one", "thing"]

    def test_list_in_stream(self) -> None:
        out = list(transform_tokens(["one", ",", "two"], EN))
        assert [t.text if isinstance(t, DigitToken) else t for t in out] == ["1", ",", "2"]

    def test_objects_with_text_attribute(self) -> None:
        words = [SpokenWord("twenty", 0.0), SpokenWord("first", 0.4)]
        (token,) = transform_tokens(words, EN)
        assert token.is_ordinal
        assert token.text == "21st"
        assert token.source == tuple(words)

    def test_custom_text_reader(self) -> None:
        tokens = [("w1", "ninety"), ("w2", "nine")]
        (token,) = transform_tokens(tokens, EN, text_of=lambda t: t[1])
        assert token.value == 99

    def test_breaks_hook_splits_on_pauses(self) -> None:
        words = [SpokenWord("twenty", 0.0), SpokenWord("five", 3.0)]
        out = list(
            transform_tokens(words, EN, breaks=lambda prev, cur: cur.time - prev.time > 1.0)
        )
        assert [t.value for t in out] == [20, 5]

    def test_is_lazy_on_unbounded_streams(self) -> None:
        stream = itertools.chain(
            ["one", "hundred", "and", "two", "cats"], itertools.repeat("meow")
        )
        first = list(itertools.islice(transform_tokens(stream, EN), 3))
        assert first[0].value == 102
        assert first[1:] == ["cats", "meow"]


# ═══════════════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:
    @pytest.mark.parametrize("text", MIXED)
    @pytest.mark.parametrize("threshold", [0.0, 10.0, 1000.0])
    def test_idempotent(self, text: str, threshold: float) -> None:
        once = replace_numbers(text, EN, threshold)
        assert replace_numbers(once, EN, threshold) == once

    @pytest.mark.parametrize("text", MIXED)
    def test_threshold_monotonic(self, text: str) -> None:
        previous = None
        for threshold in (0.0, 1.0, 5.0, 10.0, 12.0, 100.0, 1e9):
            spans = {(o.start, o.end) for o in find_numbers(text, EN, threshold)}
            if previous is not None:
                assert spans <= previous
            previous = spans

    def test_multi_token_runs_replaced_at_any_threshold(self) -> None:
        text = "twenty five and three point one"
        assert replace_numbers(text, EN, 1e12) == "25 and 3.1"

    def test_grouping_overrides_threshold(self) -> None:
        assert replace_numbers("one, two and three", EN, 1e12) == "1, 2 and 3"
