"""Resolve the range an operation works on and splice results back."""

from __future__ import annotations

from pydantic import BaseModel, Field

from textops.errors import UserInputError


def parse_line_range(spec: str) -> tuple[int, int | None]:
    """Parse ``A:B`` (1-based, inclusive). Either side may be omitted."""
    start_text, sep, end_text = spec.partition(":")
    try:
        start = int(start_text) if start_text.strip() else 1
        end = int(end_text) if sep and end_text.strip() else None
    except ValueError:
        raise UserInputError(f"Invalid line range '{spec}': expected START:END") from None
    if not sep:
        end = start
    if start < 1 or (end is not None and end < start):
        raise UserInputError(f"Invalid line range '{spec}': expected 1 <= START <= END")
    return start, end


class Selection(BaseModel):
    """A run of lines inside a document.

    A document's final newline is treated as a terminator rather than an
    empty last line, and is restored by ``replace``.
    """

    lines: list[str]
    start_line: int = Field(default=1, ge=1)
    end_line: int
    trailing_newline: bool = False

    @classmethod
    def from_document(cls, document: str, line_range: str | None = None) -> Selection:
        trailing_newline = document.endswith("\n")
        if trailing_newline:
            document = document[:-1]
        lines = document.split("\n")

        if line_range is None:
            return cls(lines=lines, end_line=len(lines), trailing_newline=trailing_newline)

        start, end = parse_line_range(line_range)
        if start > len(lines):
            raise UserInputError(
                f"Line range starts at {start} but the document has {len(lines)} lines"
            )
        end = min(end or len(lines), len(lines))
        return cls(lines=lines, start_line=start, end_line=end, trailing_newline=trailing_newline)

    @property
    def text(self) -> str:
        return "\n".join(self.lines[self.start_line - 1 : self.end_line])

    def replace(self, result: str) -> str:
        """Return the whole document with the selected lines replaced by ``result``.

        A final newline on ``result`` terminates its last line, the same way
        ``from_document`` reads the document, so it never adds a blank line.
        """
        if result.endswith("\n"):
            result = result[:-1]
        head = self.lines[: self.start_line - 1]
        tail = self.lines[self.end_line :]
        document = "\n".join(head + [result] + tail)
        return document + "\n" if self.trailing_newline else document
