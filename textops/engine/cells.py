"""Row/cell splitting and number parsing shared by the line transforms."""

from __future__ import annotations

import math

from .models import WHITESPACE


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def split_row(line: str, separator: str = WHITESPACE) -> list[str]:
    """Split a line into cells.

    A single-space separator splits on whitespace runs and never yields empty
    cells. Any other separator is split on literally, so repeated delimiters
    produce empty cells.
    """
    if separator == WHITESPACE:
        return line.split()
    return line.split(separator)


def cell_at(row: list[str], column: int) -> str:
    """Return the cell at ``column`` or an empty string for short rows."""
    return row[column] if column < len(row) else ""


def parse_number(value: str) -> float | None:
    """Parse ``value`` as a finite float, or return None.

    Digit-group underscores are Python literal syntax, not number text.
    """
    if "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def is_numeric(value: str) -> bool:
    return parse_number(value) is not None
