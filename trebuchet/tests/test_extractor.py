"""Tests for first/last digit extraction.

Covers numerals, spelled-out words, overlapping words, the tie-break between
numerals and words, and the no-digit failure.
"""

import pytest

from trebuchet.extractor import (
    extract,
    find_first_numeric_digit,
    find_first_word_digit,
    find_last_numeric_digit,
    find_last_word_digit,
    first_digit,
    last_digit,
    locate,
    word_to_numeral,
)
from trebuchet.models import CalibrationError, DigitOccurrence, DigitSource


# --- Numerals only ---

def test_numerals_first_and_last():
    assert extract("1abc2") == 12


def test_numerals_middle_digits_ignored():
    assert extract("a1b2c3d4e5f") == 15


def test_single_numeral_doubles():
    assert extract("7") == 77
    assert extract("treb7uchet") == 77


def test_zero_numeral_counts():
    assert extract("0abc5") == 5
    assert extract("x0") == 0


# --- Spelled-out words ---

@pytest.mark.parametrize(
    "line, expected",
    [
        ("two1nine", 29),
        ("eightwothree", 83),
        ("abcone2threexyz", 13),
        ("xtwone3four", 24),
        ("4nineeightseven2", 42),
        ("zoneight234", 14),
        ("7pqrstsixteen", 76),
    ],
)
def test_sample_lines(line, expected):
    assert extract(line) == expected


def test_single_word_doubles():
    assert extract("xxfivexx") == 55


def test_zero_word_not_recognized():
    assert extract("zero3zero") == 33
    with pytest.raises(CalibrationError):
        extract("zero")


def test_words_are_case_sensitive():
    assert extract("ONE2Three") == 22


# --- Overlapping words ---

def test_twone_reads_both_words():
    assert extract("twone") == 21


def test_eightwo_reads_both_words():
    assert extract("eightwo") == 82


def test_oneight_inside_other_text():
    assert extract("abconeightxyz") == 18


# --- Scan helpers ---

def test_first_word_picks_leftmost_across_words():
    occ = find_first_word_digit("xxninexone")
    assert occ == DigitOccurrence("9", 2, DigitSource.WORD)


def test_last_word_uses_rightmost_occurrence_of_each_word():
    # "one" appears twice; only its rightmost position competes
    occ = find_last_word_digit("one two one")
    assert occ == DigitOccurrence("1", 8, DigitSource.WORD)


def test_word_helpers_return_none_without_words():
    assert find_first_word_digit("abc123") is None
    assert find_last_word_digit("abc123") is None


def test_numeric_helpers():
    assert find_first_numeric_digit("ab3cd4") == DigitOccurrence("3", 2)
    assert find_last_numeric_digit("ab3cd4") == DigitOccurrence("4", 5)
    assert find_first_numeric_digit("abc") is None
    assert find_last_numeric_digit("") is None


def test_non_ascii_digits_are_not_numerals():
    assert find_first_numeric_digit("٣²") is None


def test_word_to_numeral():
    assert word_to_numeral("one") == "1"
    assert word_to_numeral("nine") == "9"
    with pytest.raises(ValueError):
        word_to_numeral("zero")


# --- Numeral vs word precedence ---

def test_numeral_wins_when_strictly_first():
    occ = first_digit("3two")
    assert occ.source == DigitSource.NUMERAL
    assert occ.digit == "3"


def test_word_wins_when_first():
    occ = first_digit("two3")
    assert occ.source == DigitSource.WORD
    assert occ.digit == "2"


def test_numeral_wins_when_strictly_last():
    occ = last_digit("two3")
    assert occ == DigitOccurrence("3", 3)


def test_word_wins_when_last():
    occ = last_digit("3two")
    assert occ == DigitOccurrence("2", 1, DigitSource.WORD)


def test_first_and_last_absent_without_digits():
    assert first_digit("abc") is None
    assert last_digit("abc") is None


def test_locate_returns_both_occurrences():
    first, last = locate("xtwone3four")
    assert first == DigitOccurrence("2", 1, DigitSource.WORD)
    assert last == DigitOccurrence("4", 7, DigitSource.WORD)


# --- Properties ---

def test_extract_is_pure():
    line = "4nineeightseven2"
    assert extract(line) == extract(line)


def test_single_occurrence_has_equal_tens_and_units():
    for line in ("q8q", "qsixq", "seven"):
        value = extract(line)
        assert value // 10 == value % 10


# --- Failure ---

def test_no_digit_raises():
    with pytest.raises(CalibrationError):
        extract("pqrstuvwxyz")


def test_empty_line_raises():
    with pytest.raises(CalibrationError):
        extract("")


def test_error_carries_line_and_number():
    with pytest.raises(CalibrationError) as exc_info:
        extract("nothing here", line_no=4)
    assert exc_info.value.line == "nothing here"
    assert exc_info.value.line_no == 4
    assert "line 4" in str(exc_info.value)


def test_error_is_an_assertion_error():
    with pytest.raises(AssertionError):
        extract("---")
