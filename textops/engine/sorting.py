"""Line sorting by a column, with numeric/lexicographic type detection."""

from __future__ import annotations

import logging

from textops.config.models import SortConfig

from .cells import cell_at, is_numeric, join_lines, parse_number, split_lines, split_row
from .models import WHITESPACE, ColumnType, SortOptions, SortOrder, TransformResult

logger = logging.getLogger(__name__)


def detect_column_type(
    lines: list[str],
    column: int,
    separator: str = WHITESPACE,
    sample_size: int = 10,
) -> ColumnType:
    """Classify a column by majority vote over the first ``sample_size`` lines.

    The column is numeric only if strictly more than half of the sampled
    cells are non-empty finite numbers.
    """
    sample = lines[:sample_size]
    numeric_count = 0
    for line in sample:
        value = cell_at(split_row(line, separator), column).strip()
        if value and is_numeric(value):
            numeric_count += 1

    if numeric_count > len(sample) / 2:
        return ColumnType.NUMERIC
    return ColumnType.LEXICOGRAPHIC


def sort_by_column(
    text: str,
    options: SortOptions,
    config: SortConfig | None = None,
) -> TransformResult:
    """Sort whole lines by the cell at ``options.column``."""
    config = config or SortConfig()
    lines = split_lines(text)
    column_type = detect_column_type(lines, options.column, options.separator, config.sample_size)
    logger.debug(
        "Sorting %d lines on column %d (%s, %s)",
        len(lines),
        options.column,
        column_type.value,
        options.order.value,
    )

    def _key(line: str) -> float | str:
        value = cell_at(split_row(line, options.separator), options.column)
        if column_type is ColumnType.NUMERIC:
            number = parse_number(value)
            return config.numeric_fallback if number is None else number
        return value

    ordered = sorted(lines, key=_key, reverse=options.order is SortOrder.DESC)
    return TransformResult(text=join_lines(ordered))


def sort_quick(
    text: str,
    order: SortOrder | str = SortOrder.ASC,
    config: SortConfig | None = None,
) -> TransformResult:
    """Sort on the first whitespace-separated cell of each line."""
    options = SortOptions(column=0, separator=WHITESPACE, order=SortOrder(order))
    return sort_by_column(text, options, config)
