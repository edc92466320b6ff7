"""Pydantic models for the transform engine."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from textops.errors import InvalidColumnError, UserInputError

WHITESPACE = " "
TAB_TOKEN = "\\t"


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    LEXICOGRAPHIC = "lexicographic"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Diagnostic(BaseModel):
    """Where structured-format parsing failed, relative to the input text."""

    line: int = Field(ge=1)
    message: str
    format: Literal["json", "yaml"]
    # Set when earlier chain steps rewrote the text: ``line`` then points into
    # ``source``, the input of the failing step ``step``.
    step: str | None = None
    source: str | None = None

    def absolute_line(self, start_line: int = 1) -> int:
        """Translate ``line`` into document coordinates for a range starting at ``start_line``."""
        if self.source is not None:
            return self.line
        return start_line + self.line - 1

    def describe(self, start_line: int = 1) -> str:
        where = f"line {self.absolute_line(start_line)}"
        if self.source is not None:
            where += f" of the input to step '{self.step}'"
        return f"{self.format.upper()} format error, syntax error at {where}: {self.message}"


class TransformResult(BaseModel):
    """Output of a single operation.

    On a parse failure ``text`` is the untouched input and ``diagnostic``
    locates the error.
    """

    text: str
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


class SortOptions(BaseModel):
    """Resolved parameters for a column sort."""

    column: int = Field(default=0, ge=0)
    separator: str = WHITESPACE
    order: SortOrder = SortOrder.ASC

    @classmethod
    def from_user_input(
        cls,
        column: str | int,
        separator: str | None = None,
        order: SortOrder | str = SortOrder.ASC,
    ) -> SortOptions:
        """Build options from raw host input.

        ``column`` is 1-based. The two-character token ``\\t`` becomes a tab
        and an empty separator falls back to whitespace splitting.
        """
        try:
            index = int(str(column).strip()) - 1
        except ValueError:
            raise InvalidColumnError(column) from None
        if index < 0:
            raise InvalidColumnError(column)

        try:
            order = SortOrder(order)
        except ValueError:
            raise UserInputError(f"Sort order must be 'asc' or 'desc' (got {order!r})") from None

        if separator == TAB_TOKEN:
            separator = "\t"
        return cls(column=index, separator=separator or WHITESPACE, order=order)


class SelectionStats(BaseModel):
    """Line count plus numeric aggregates when every non-blank line is a number."""

    line_count: int
    count: int = 0
    total: float | None = None
    maximum: float | None = None
    minimum: float | None = None
    mean: float | None = None

    @property
    def numeric(self) -> bool:
        return self.total is not None

    def summary(self) -> str:
        if not self.numeric:
            return f"Selected {self.line_count} lines"
        return (
            f"Selected {self.count} | Sum {_fmt(self.total)} | Max {_fmt(self.maximum)}"
            f" | Min {_fmt(self.minimum)} | Avg {self.mean:.2f}"
        )


def _fmt(value: float | None) -> str:
    if value is not None and value.is_integer():
        return str(int(value))
    return str(value)
