"""Data models for trebuchet.

DigitSource enum, DigitOccurrence, LineCalibration, CalibrationReport and the
error types that flow through reader → extractor → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Spelled-out digits in value order; position + 1 is the digit value.
DIGIT_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


class TrebuchetError(Exception):
    """Base class for fatal trebuchet errors."""


class InputError(TrebuchetError):
    """The calibration document could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't read input {path}: {reason}")


class CalibrationError(TrebuchetError, AssertionError):
    """A line did not yield a first and a last digit."""

    def __init__(self, line: str, line_no: Optional[int] = None) -> None:
        self.line = line
        self.line_no = line_no
        where = f"line {line_no}" if line_no is not None else "line"
        super().__init__(f"No digit found on {where}: {line!r}")


class DigitSource(str, Enum):
    """Where a digit occurrence came from."""

    NUMERAL = "numeral"
    WORD = "word"


@dataclass(frozen=True)
class DigitOccurrence:
    """A digit found in a line.

    ``digit`` is always the numeral character ('0'-'9'), even when the
    occurrence was a spelled-out word; ``index`` is the character offset
    where the numeral or word starts.
    """

    digit: str
    index: int
    source: DigitSource = DigitSource.NUMERAL


@dataclass
class LineCalibration:
    """Calibration value for a single line, with the digits that formed it."""

    line_no: int
    text: str
    first: DigitOccurrence
    last: DigitOccurrence

    @property
    def value(self) -> int:
        return int(self.first.digit + self.last.digit)

    def to_dict(self) -> dict:
        return {
            "line_no": self.line_no,
            "text": self.text,
            "first": {"digit": self.first.digit, "index": self.first.index, "source": self.first.source.value},
            "last": {"digit": self.last.digit, "index": self.last.index, "source": self.last.source.value},
            "value": self.value,
        }


@dataclass
class CalibrationReport:
    """All per-line calibrations of one document."""

    path: str
    lines: list[LineCalibration] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(entry.value for entry in self.lines)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "path": self.path,
            "total": self.total,
            "lines": [entry.to_dict() for entry in self.lines],
        }
