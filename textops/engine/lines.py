"""Line-oriented transforms: dedupe, align, quote, trim, empty-line removal."""

from __future__ import annotations

from .cells import join_lines, split_lines, split_row
from .models import TransformResult


def remove_duplicate_lines(text: str) -> TransformResult:
    """Drop repeated lines, keeping the first occurrence of each."""
    unique = dict.fromkeys(split_lines(text))
    return TransformResult(text=join_lines(list(unique)))


def align_columns(text: str) -> TransformResult:
    """Pad whitespace-separated cells so that columns line up.

    Rows may be ragged: column ``i`` is as wide as the widest cell ``i`` of
    any row that has one, and the last cell of each row is never padded.
    """
    rows = [split_row(line) for line in split_lines(text)]

    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            if index == len(widths):
                widths.append(len(cell))
            else:
                widths[index] = max(widths[index], len(cell))

    aligned = []
    for row in rows:
        last = len(row) - 1
        aligned.append(
            " ".join(cell if i == last else cell.ljust(widths[i]) for i, cell in enumerate(row))
        )
    return TransformResult(text=join_lines(aligned))


def to_quoted_lines(text: str) -> TransformResult:
    """Turn every line into a double-quoted list entry with a trailing comma."""
    quoted = []
    for line in split_lines(text):
        escaped = line.strip().replace('"', '\\"')
        quoted.append(f'"{escaped}",')
    return TransformResult(text=join_lines(quoted))


def trim_lines(text: str) -> TransformResult:
    return TransformResult(text=join_lines([line.strip() for line in split_lines(text)]))


def remove_empty_lines(text: str) -> TransformResult:
    """Drop lines that are empty or whitespace-only."""
    return TransformResult(text=join_lines([line for line in split_lines(text) if line.strip()]))
