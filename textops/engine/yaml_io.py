"""YAML serialization in block style with indented sequences."""

from __future__ import annotations

from typing import Any

import yaml


class IndentedSafeDumper(yaml.SafeDumper):
    """SafeDumper that indents sequences nested under a mapping key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def dump_yaml(data: Any, indent: int = 2, width: float | None = None) -> str:
    """Dump ``data`` as block-style YAML, keeping key insertion order.

    ``width=None`` keeps PyYAML's default wrapping; pass ``float("inf")`` to
    disable line wrapping.
    """
    return yaml.dump(
        data,
        Dumper=IndentedSafeDumper,
        indent=indent,
        width=width,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
