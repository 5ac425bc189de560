"""CLI for trebuchet.

Usage:
    python -m trebuchet                          # Sum res/data.txt
    python -m trebuchet -i other.txt             # Sum another document
    python -m trebuchet -i other.txt breakdown   # Same, for any subcommand
    python -m trebuchet breakdown                # Per-line table
    python -m trebuchet breakdown --json         # Per-line values as JSON
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from trebuchet.models import CalibrationError, InputError
from trebuchet.reader import DEFAULT_INPUT
from trebuchet.report import build_report, calibrate_file, render_report

app = typer.Typer(
    name="trebuchet",
    help="Sum the calibration values of a document",
    no_args_is_help=False,
)
console = Console(stderr=True)

_INPUT_HELP = "Calibration document (one record per line)"
_INPUT_ENVVAR = "TREBUCHET_INPUT"


def _fail(e: Exception) -> NoReturn:
    """Print a fatal error and exit non-zero."""
    label = "Calibration error" if isinstance(e, CalibrationError) else "Error"
    console.print(f"[red]{label}:[/red] {escape(str(e))}", highlight=False)
    raise typer.Exit(1)


def _resolve_input(ctx: typer.Context, input_path: Optional[Path]) -> Path:
    """Subcommand --input if given, else the one passed before the subcommand."""
    if input_path is not None:
        return input_path
    return ctx.obj or DEFAULT_INPUT


def _print_sum(path: Path) -> None:
    try:
        total = calibrate_file(path)
    except (InputError, CalibrationError) as e:
        _fail(e)
    typer.echo(f"Sum is {total}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    input_path: Path = typer.Option(DEFAULT_INPUT, "--input", "-i", envvar=_INPUT_ENVVAR, help=_INPUT_HELP),
) -> None:
    """Sum the calibration values of a document (default command)."""
    ctx.obj = input_path
    if ctx.invoked_subcommand is None:
        _print_sum(input_path)


@app.command("sum")
def cmd_sum(
    ctx: typer.Context,
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help=_INPUT_HELP),
) -> None:
    """Print the sum of all calibration values."""
    _print_sum(_resolve_input(ctx, input_path))


@app.command("breakdown")
def cmd_breakdown(
    ctx: typer.Context,
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help=_INPUT_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON on stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show status lines"),
) -> None:
    """Show the first digit, last digit and value of every line."""
    path = _resolve_input(ctx, input_path)
    if verbose:
        console.print(f"[dim]Reading {escape(str(path))}[/dim]")
    try:
        report = build_report(path)
    except (InputError, CalibrationError) as e:
        _fail(e)
    if verbose:
        console.print(f"[dim]{len(report.lines)} lines calibrated[/dim]")

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return
    render_report(report, console)


if __name__ == "__main__":
    app()
