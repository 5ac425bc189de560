"""Loading of calibration documents."""

from __future__ import annotations

from pathlib import Path

from trebuchet.models import InputError

DEFAULT_INPUT = Path("res") / "data.txt"


def read_lines(path: Path = DEFAULT_INPUT) -> list[str]:
    """Read a UTF-8 document and return its lines with surrounding whitespace trimmed.

    The whole file is read at once. Blank lines are kept so that they fail
    extraction instead of being silently dropped.

    Raises:
        InputError: If the file is missing, unreadable or not valid UTF-8.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(str(path), "no such file") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(str(path), str(e)) from e
    return [line.strip() for line in content.splitlines()]
