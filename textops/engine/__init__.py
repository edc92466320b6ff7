"""Transform engine: pure ``(text, params) -> TransformResult`` operations."""

from .formatter import detect_format, format_structured
from .k8s import clean_k8s_yaml, strip_fields
from .lines import (
    align_columns,
    remove_duplicate_lines,
    remove_empty_lines,
    to_quoted_lines,
    trim_lines,
)
from .models import (
    ColumnType,
    Diagnostic,
    SelectionStats,
    SortOptions,
    SortOrder,
    TransformResult,
)
from .pipeline import Step, TransformPipeline
from .registry import OPERATIONS, run_operation
from .sorting import detect_column_type, sort_by_column, sort_quick
from .stats import selection_stats

__all__ = [
    "ColumnType",
    "Diagnostic",
    "OPERATIONS",
    "SelectionStats",
    "SortOptions",
    "SortOrder",
    "Step",
    "TransformPipeline",
    "TransformResult",
    "align_columns",
    "clean_k8s_yaml",
    "detect_column_type",
    "detect_format",
    "format_structured",
    "remove_duplicate_lines",
    "remove_empty_lines",
    "run_operation",
    "selection_stats",
    "sort_by_column",
    "sort_quick",
    "strip_fields",
    "to_quoted_lines",
    "trim_lines",
]
