"""Shared test fixtures for textops."""

import pytest

from textops.config.models import TextOpsConfig


SAMPLE_MANIFEST = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: demo
  namespace: default
  uid: 0b7c5f1e-8d0a-4d7b-9a53-2f6a1c9e4b10
  resourceVersion: "4821"
  creationTimestamp: "2024-03-01T10:00:00Z"
  managedFields:
    - manager: kubectl
      operation: Update
data:
  key: value
status:
  phase: Active
"""

CLEANED_MANIFEST = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: demo
  namespace: default
data:
  key: value
"""


@pytest.fixture
def sample_config():
    return TextOpsConfig()


@pytest.fixture
def sample_manifest():
    return SAMPLE_MANIFEST


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Run from an empty directory with no user-global config."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cleaned_manifest():
    return CLEANED_MANIFEST
