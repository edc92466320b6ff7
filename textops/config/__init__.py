from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    FormatConfig,
    K8sConfig,
    SortConfig,
    TextOpsConfig,
)

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "FormatConfig",
    "K8sConfig",
    "SortConfig",
    "TextOpsConfig",
    "load_config",
]
