"""Quick numeric summary of a selection."""

from __future__ import annotations

from .cells import parse_number, split_lines
from .models import SelectionStats


def selection_stats(text: str) -> SelectionStats:
    """Count lines, and sum/max/min/mean them when every non-blank line is a number."""
    lines = split_lines(text)
    numbers: list[float] = []
    for line in lines:
        value = line.strip()
        if not value:
            continue
        number = parse_number(value)
        if number is None:
            return SelectionStats(line_count=len(lines))
        numbers.append(number)

    if not numbers:
        return SelectionStats(line_count=len(lines))

    total = sum(numbers)
    return SelectionStats(
        line_count=len(lines),
        count=len(numbers),
        total=total,
        maximum=max(numbers),
        minimum=min(numbers),
        mean=total / len(numbers),
    )
