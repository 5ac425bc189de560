"""First/last digit extraction for calibration lines.

A digit is either an ASCII numeral or one of the words "one".."nine". Words
are matched as raw substrings, so overlapping words are both visible: in
"twone" the first digit is "two" and the last is "one". The first and last
scans are independent for exactly that reason.
"""

from __future__ import annotations

import string
from typing import Optional

from trebuchet.models import DIGIT_WORDS, CalibrationError, DigitOccurrence, DigitSource


def word_to_numeral(word: str) -> str:
    """Map a digit word to its numeral character ('one' → '1').

    Raises:
        ValueError: If ``word`` is not one of the nine digit words.
    """
    return str(DIGIT_WORDS.index(word) + 1)


def find_first_word_digit(line: str) -> Optional[DigitOccurrence]:
    """Leftmost digit word in ``line``, or None."""
    best: Optional[DigitOccurrence] = None
    for word in DIGIT_WORDS:
        index = line.find(word)
        if index == -1:
            continue
        if best is None or index < best.index:
            best = DigitOccurrence(word_to_numeral(word), index, DigitSource.WORD)
    return best


def find_last_word_digit(line: str) -> Optional[DigitOccurrence]:
    """Rightmost digit word in ``line``, or None.

    Each word contributes only its own rightmost occurrence; words then
    compete on those positions.
    """
    best: Optional[DigitOccurrence] = None
    for word in DIGIT_WORDS:
        index = line.rfind(word)
        if index == -1:
            continue
        if best is None or index > best.index:
            best = DigitOccurrence(word_to_numeral(word), index, DigitSource.WORD)
    return best


def find_first_numeric_digit(line: str) -> Optional[DigitOccurrence]:
    """Leftmost ASCII numeral in ``line``, or None."""
    for index, char in enumerate(line):
        if char in string.digits:
            return DigitOccurrence(char, index)
    return None


def find_last_numeric_digit(line: str) -> Optional[DigitOccurrence]:
    """Rightmost ASCII numeral in ``line``, or None."""
    for index in range(len(line) - 1, -1, -1):
        if line[index] in string.digits:
            return DigitOccurrence(line[index], index)
    return None


def first_digit(line: str) -> Optional[DigitOccurrence]:
    """First digit of ``line``; a numeral only wins if strictly earlier."""
    numeric = find_first_numeric_digit(line)
    word = find_first_word_digit(line)
    if numeric and word:
        return numeric if numeric.index < word.index else word
    return numeric or word


def last_digit(line: str) -> Optional[DigitOccurrence]:
    """Last digit of ``line``; a numeral only wins if strictly later."""
    numeric = find_last_numeric_digit(line)
    word = find_last_word_digit(line)
    if numeric and word:
        return numeric if numeric.index > word.index else word
    return numeric or word


def locate(line: str, line_no: Optional[int] = None) -> tuple[DigitOccurrence, DigitOccurrence]:
    """Return the (first, last) digit occurrences of ``line``.

    Raises:
        CalibrationError: If the line holds no digit of either kind.
    """
    first = first_digit(line)
    last = last_digit(line)
    if first is None or last is None:
        raise CalibrationError(line, line_no)
    return first, last


def extract(line: str, line_no: Optional[int] = None) -> int:
    """Calibration value of ``line``: its first and last digit as a two-digit int.

    Args:
        line: A single line of the calibration document.
        line_no: 1-based position in the document, only used in the error.

    Returns:
        Integer in [0, 99].

    Raises:
        CalibrationError: If the line holds no digit of either kind.
    """
    first, last = locate(line, line_no)
    coord = first.digit + last.digit
    if len(coord) != 2:
        raise CalibrationError(line, line_no)
    return int(coord)
