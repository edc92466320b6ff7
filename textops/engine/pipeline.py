"""TransformPipeline: runs ordered operations over one text block."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from textops.config.models import TextOpsConfig

from .models import TransformResult
from .registry import run_operation


class Step(BaseModel):
    name: str
    params: dict[str, Any] = Field(default_factory=dict)


class TransformPipeline:
    def __init__(self, steps: list[Step]):
        self.steps = steps

    def apply(self, text: str, config: TextOpsConfig | None = None) -> TransformResult:
        """Apply each step in order.

        Stops at the first step that reports a diagnostic and returns the
        original text with it, so a failed chain never half-applies. If earlier
        steps changed the text, the diagnostic carries the failing step's
        input, since its line number refers to that text.
        """
        current = text
        for step in self.steps:
            result = run_operation(step.name, current, config, **step.params)
            if not result.ok:
                diagnostic = result.diagnostic
                if current != text:
                    diagnostic = diagnostic.model_copy(update={"step": step.name, "source": current})
                return TransformResult(text=text, diagnostic=diagnostic)
            current = result.text
        return TransformResult(text=current)
