from pydantic import BaseModel, Field
from typing import Literal

DEFAULT_K8S_STRIP_FIELDS = [
    "status",
    "managedFields",
    "uid",
    "resourceVersion",
    "generation",
    "creationTimestamp",
    "selfLink",
    "finalizers",
    "ownerReferences",
]


class SortConfig(BaseModel):
    sample_size: int = Field(default=10, gt=0)
    default_separator: str = " "
    numeric_fallback: float = 0.0


class FormatConfig(BaseModel):
    indent: int = Field(default=2, gt=0)
    yaml_line_width: int = Field(default=80, gt=0)
    ensure_ascii: bool = False


class K8sConfig(BaseModel):
    strip_fields: list[str] = Field(default_factory=lambda: list(DEFAULT_K8S_STRIP_FIELDS))
    indent: int = Field(default=2, gt=0)


class TextOpsConfig(BaseModel):
    sort: SortConfig = Field(default_factory=SortConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)
    k8s: K8sConfig = Field(default_factory=K8sConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
