"""JSON/YAML pretty-printer that localizes parse errors instead of raising."""

from __future__ import annotations

import json
import logging
import re
from typing import Literal

import yaml

from textops.config.models import FormatConfig
from textops.errors import UnrecognizedFormatError

from .models import Diagnostic, TransformResult
from .yaml_io import dump_yaml

logger = logging.getLogger(__name__)

StructuredFormat = Literal["json", "yaml"]

_LINE_RE = re.compile(r"line (\d+)", re.IGNORECASE)
_POSITION_RE = re.compile(r"position (\d+)")


def detect_format(text: str) -> StructuredFormat | None:
    """Guess the format from the first character, or None if neither fits."""
    stripped = text.strip()
    if stripped.startswith(("{", "[")):
        return "json"
    if ":" in stripped:
        return "yaml"
    return None


def json_error_line(text: str, message: str) -> int:
    """Pull a 1-based line number out of a JSON parser error message.

    Prefers an explicit ``line N``; otherwise converts ``position N`` to a
    line by counting newlines before that offset. Defaults to 1.
    """
    match = _LINE_RE.search(message)
    if match:
        return int(match.group(1))
    match = _POSITION_RE.search(message)
    if match:
        return text[: int(match.group(1))].count("\n") + 1
    return 1


def yaml_error_line(error: yaml.YAMLError) -> int:
    mark = getattr(error, "problem_mark", None) or getattr(error, "context_mark", None)
    if mark is None:
        return 1
    return mark.line + 1


def format_structured(text: str, config: FormatConfig | None = None) -> TransformResult:
    """Re-serialize JSON or YAML with consistent indentation.

    Raises UnrecognizedFormatError if the text looks like neither. A parse
    failure returns the input untouched with a Diagnostic pointing at the
    offending line.
    """
    config = config or FormatConfig()
    fmt = detect_format(text)
    if fmt is None:
        raise UnrecognizedFormatError()

    stripped = text.strip()
    # Parser line numbers count from the first non-blank line.
    offset = text[: len(text) - len(text.lstrip())].count("\n")

    if fmt == "json":
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            line = json_error_line(stripped, str(e)) + offset
            return _failed(text, fmt, line, e.msg)
        return TransformResult(
            text=json.dumps(data, indent=config.indent, ensure_ascii=config.ensure_ascii)
        )

    try:
        data = yaml.safe_load(stripped)
    except yaml.YAMLError as e:
        line = yaml_error_line(e) + offset
        return _failed(text, fmt, line, getattr(e, "problem", None) or str(e))
    return TransformResult(
        text=dump_yaml(data, indent=config.indent, width=config.yaml_line_width)
    )


def _failed(text: str, fmt: StructuredFormat, line: int, detail: str) -> TransformResult:
    logger.info("%s parse failed at line %d: %s", fmt.upper(), line, detail)
    return TransformResult(
        text=text,
        diagnostic=Diagnostic(line=line, message=detail, format=fmt),
    )
