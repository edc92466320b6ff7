"""Strip server-populated fields from multi-document Kubernetes YAML."""

from __future__ import annotations

import logging
import re
from collections.abc import Collection
from functools import singledispatch
from typing import Any

import yaml

from textops.config.models import K8sConfig

from .models import TransformResult
from .yaml_io import dump_yaml

logger = logging.getLogger(__name__)

# A line holding only "---" (CR allowed) plus the blank lines around it. The
# capture group keeps separators in the re.split() output at odd indices.
_SEPARATOR_RE = re.compile(r"(\n*^[ \t\r]*---[ \t\r]*$\n*)", re.MULTILINE)


@singledispatch
def strip_fields(node: Any, fields: Collection[str]) -> Any:
    """Return ``node`` with every key in ``fields`` removed at any depth."""
    return node


@strip_fields.register
def _(node: dict, fields: Collection[str]) -> dict:
    return {key: strip_fields(value, fields) for key, value in node.items() if key not in fields}


@strip_fields.register
def _(node: list, fields: Collection[str]) -> list:
    return [strip_fields(item, fields) for item in node]


def clean_k8s_yaml(text: str, config: K8sConfig | None = None) -> TransformResult:
    """Clean every document in a ``---``-separated manifest stream.

    Separators and the whitespace around each document are kept byte for
    byte. A document that fails to parse, or is not a mapping or sequence,
    is passed through unchanged.
    """
    config = config or K8sConfig()
    fields = frozenset(config.strip_fields)
    parts = _SEPARATOR_RE.split(text)

    cleaned = []
    for index, part in enumerate(parts):
        if index % 2 or not part.strip():
            cleaned.append(part)
        else:
            cleaned.append(_clean_document(part, fields, config.indent, index // 2))
    return TransformResult(text="".join(cleaned))


def _clean_document(part: str, fields: frozenset[str], indent: int, position: int) -> str:
    body = part.strip()
    leading = part[: len(part) - len(part.lstrip())]
    trailing = part[len(part.rstrip()) :]

    try:
        data = yaml.safe_load(body)
    except yaml.YAMLError as e:
        logger.debug("Document %d left as-is, YAML parse failed: %s", position, e)
        return part

    if not isinstance(data, (dict, list)):
        logger.debug("Document %d left as-is, not a mapping or sequence", position)
        return part

    dumped = dump_yaml(strip_fields(data, fields), indent=indent, width=float("inf"))
    return leading + dumped.strip() + trailing
