"""Trebuchet report — sums calibration values and renders the per-line table.

`calibrate` is the plain accumulator behind the one-line `Sum is N` output.
`build_report` keeps every line's digits for the Rich breakdown table and the
JSON dump.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trebuchet.extractor import extract, locate
from trebuchet.models import CalibrationReport, DigitOccurrence, DigitSource, LineCalibration
from trebuchet.reader import DEFAULT_INPUT, read_lines


def calibrate(lines: Iterable[str]) -> int:
    """Sum the calibration values of ``lines``.

    Stops at the first line without a digit; no partial sum is returned.
    """
    total = 0
    for line_no, line in enumerate(lines, 1):
        total += extract(line, line_no)
    return total


def calibrate_file(path: Path = DEFAULT_INPUT) -> int:
    """Read ``path`` and sum its calibration values."""
    return calibrate(read_lines(path))


def build_report(path: Path = DEFAULT_INPUT) -> CalibrationReport:
    """Read ``path`` and record the first/last digit of every line."""
    report = CalibrationReport(path=str(path))
    for line_no, line in enumerate(read_lines(path), 1):
        first, last = locate(line, line_no)
        report.lines.append(LineCalibration(line_no=line_no, text=line, first=first, last=last))
    return report


def _fmt_digit(occ: DigitOccurrence) -> str:
    """Digit with its position, words highlighted."""
    if occ.source == DigitSource.WORD:
        return f"[cyan]{occ.digit}[/cyan] [dim]word@{occ.index}[/dim]"
    return f"{occ.digit} [dim]@{occ.index}[/dim]"


def render_report(report: CalibrationReport, console: Console) -> None:
    """Render a Rich table with one row per line and the total underneath."""
    if not report.lines:
        console.print(f"[yellow]No lines in {escape(report.path)}[/yellow]")
        return

    table = Table(
        title=f"Calibration: {escape(report.path)}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Line", min_width=16, overflow="fold")
    table.add_column("First", justify="right")
    table.add_column("Last", justify="right")
    table.add_column("Value", style="green", justify="right")

    for entry in report.lines:
        table.add_row(
            str(entry.line_no),
            escape(entry.text),
            _fmt_digit(entry.first),
            _fmt_digit(entry.last),
            str(entry.value),
        )

    console.print()
    console.print(table)
    console.print(f"[bold]Total:[/bold] {report.total}")
    console.print()
