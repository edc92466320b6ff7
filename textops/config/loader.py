"""Locate textops.yaml and validate it into a ``TextOpsConfig``."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TextOpsConfig

CONFIG_FILENAME = "textops.yaml"


def config_search_paths() -> list[Path]:
    """Implicit config locations, project-local first."""
    return [Path.cwd() / CONFIG_FILENAME, Path.home() / ".textops" / "config.yaml"]


def load_config(cli_path: str | None = None) -> TextOpsConfig:
    """Load the first config found: ``--config`` path, ./textops.yaml, ~/.textops/config.yaml.

    An explicit path must exist. Empty files are skipped; with nothing found
    the defaults apply.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        candidates = [path]
    else:
        candidates = [p for p in config_search_paths() if p.is_file()]

    for path in candidates:
        settings = _read_settings(path)
        if settings is None:
            continue
        try:
            return TextOpsConfig.model_validate(settings)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return TextOpsConfig()


def _read_settings(path: Path) -> dict | None:
    try:
        settings = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if settings is not None and not isinstance(settings, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping of settings")
    return settings


# Default YAML template for `textops config init`
DEFAULT_CONFIG_TEMPLATE = """\
# textops.yaml

# Sorting
sort:
  sample_size: 10              # lines inspected to pick numeric vs text ordering
  default_separator: " "       # " " splits on whitespace runs, anything else is literal
  numeric_fallback: 0.0        # sort key for cells that are not numbers

# JSON / YAML formatting
format:
  indent: 2
  yaml_line_width: 80
  ensure_ascii: false

# Kubernetes manifest cleaning
k8s:
  indent: 2
  strip_fields:
    - status
    - managedFields
    - uid
    - resourceVersion
    - generation
    - creationTimestamp
    - selfLink
    - finalizers
    - ownerReferences

# Logging
log_level: "warn"              # debug | info | warn | error
log_format: "text"             # text | json
"""
