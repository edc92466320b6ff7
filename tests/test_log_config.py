"""Tests for textops.log_config."""

import json
import logging

import pytest
from rich.logging import RichHandler

from textops.log_config import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_text_format_uses_rich_handler():
    configure_logging("info", "text")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.level == logging.INFO


def test_json_format():
    configure_logging("debug", "json")
    root = logging.getLogger()
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG


def test_warn_maps_to_warning():
    configure_logging("warn")
    assert logging.getLogger().level == logging.WARNING


def test_json_formatter_output():
    record = logging.LogRecord("textops.engine", logging.INFO, __file__, 1, "sorted %d lines", (3,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "info"
    assert payload["logger"] == "textops.engine"
    assert payload["message"] == "sorted 3 lines"
