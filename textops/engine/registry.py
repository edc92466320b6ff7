"""Named operations and the single call boundary that guards them."""

from __future__ import annotations

import logging
from typing import Any, Callable

from textops.config.models import TextOpsConfig
from textops.errors import OperationFailedError, TextOpsError, UnknownOperationError

from .formatter import format_structured
from .k8s import clean_k8s_yaml
from .lines import (
    align_columns,
    remove_duplicate_lines,
    remove_empty_lines,
    to_quoted_lines,
    trim_lines,
)
from .models import SortOptions, SortOrder, TransformResult
from .sorting import sort_by_column, sort_quick

logger = logging.getLogger(__name__)

Operation = Callable[..., TransformResult]


def _sort_column(
    text: str,
    cfg: TextOpsConfig,
    column: str | int = 1,
    separator: str | None = None,
    order: str = "asc",
) -> TransformResult:
    if separator is None:
        separator = cfg.sort.default_separator
    options = SortOptions.from_user_input(column, separator, order)
    return sort_by_column(text, options, cfg.sort)


OPERATIONS: dict[str, Operation] = {
    "remove-duplicates": lambda text, cfg: remove_duplicate_lines(text),
    "align-columns": lambda text, cfg: align_columns(text),
    "sort-asc": lambda text, cfg: sort_quick(text, SortOrder.ASC, cfg.sort),
    "sort-desc": lambda text, cfg: sort_quick(text, SortOrder.DESC, cfg.sort),
    "sort-by-column": _sort_column,
    "quote-lines": lambda text, cfg: to_quoted_lines(text),
    "format": lambda text, cfg: format_structured(text, cfg.format),
    "trim": lambda text, cfg: trim_lines(text),
    "remove-empty": lambda text, cfg: remove_empty_lines(text),
    "clean-k8s": lambda text, cfg: clean_k8s_yaml(text, cfg.k8s),
}


def run_operation(
    name: str,
    text: str,
    config: TextOpsConfig | None = None,
    **params: Any,
) -> TransformResult:
    """Run one operation by name.

    TextOpsError subclasses propagate unchanged; anything else is wrapped in
    OperationFailedError so callers only ever see the package's own errors.
    """
    operation = OPERATIONS.get(name)
    if operation is None:
        raise UnknownOperationError(name)

    config = config or TextOpsConfig()
    try:
        result = operation(text, config, **params)
    except TextOpsError:
        raise
    except Exception as e:
        logger.exception("Operation %s failed", name)
        raise OperationFailedError(name, e) from e

    logger.debug(
        "%s: %d -> %d lines%s",
        name,
        text.count("\n") + 1,
        result.text.count("\n") + 1,
        " (diagnostic)" if result.diagnostic else "",
    )
    return result
