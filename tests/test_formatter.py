"""Tests for textops.engine.formatter: JSON/YAML pretty-printing and error lines."""

import json

import pytest
import yaml

from textops.config.models import FormatConfig
from textops.engine.formatter import (
    detect_format,
    format_structured,
    json_error_line,
    yaml_error_line,
)
from textops.engine.models import Diagnostic
from textops.errors import UnrecognizedFormatError


# ── detect_format ───────────────────────────────────────────────────


class TestDetectFormat:
    @pytest.mark.parametrize("text", ['{"a": 1}', "  [1, 2]", "\n\n{"])
    def test_json(self, text):
        assert detect_format(text) == "json"

    @pytest.mark.parametrize("text", ["a: 1", "  - x: 1", "url: http://example.com"])
    def test_yaml(self, text):
        assert detect_format(text) == "yaml"

    @pytest.mark.parametrize("text", ["hello", "", "   \n"])
    def test_unknown(self, text):
        assert detect_format(text) is None


# ── JSON ────────────────────────────────────────────────────────────


class TestFormatJson:
    def test_pretty_prints_with_two_spaces(self):
        result = format_structured('{"a":1}')
        assert result.text == '{\n  "a": 1\n}'
        assert result.diagnostic is None

    def test_keeps_key_order_and_unicode(self):
        result = format_structured('{"z": "é", "a": [1, {"b": null}]}')
        assert result.text == (
            '{\n  "z": "é",\n  "a": [\n    1,\n    {\n      "b": null\n    }\n  ]\n}'
        )

    def test_custom_indent(self):
        result = format_structured("[1]", FormatConfig(indent=4))
        assert result.text == "[\n    1\n]"

    def test_truncated_input_left_unchanged(self):
        text = '{"a":1'
        result = format_structured(text)
        assert result.text == text
        assert result.diagnostic.line == 1
        assert result.diagnostic.format == "json"
        assert "delimiter" in result.diagnostic.message

    def test_error_line_from_parser_message(self):
        text = '{\n  "a": 1,\n  "b": \n}'
        result = format_structured(text)
        assert result.text == text
        assert result.diagnostic.line == 4

    def test_error_line_counts_stripped_leading_lines(self):
        text = '\n\n{\n  "a": 1,\n  "b": \n}\n'
        assert format_structured(text).diagnostic.line == 6

    def test_round_trip(self):
        text = '{"name": "svc", "ports": [80, 443], "meta": {"on": true, "ratio": 0.5}}'
        assert json.loads(format_structured(text).text) == json.loads(text)


class TestJsonErrorLine:
    def test_explicit_line(self):
        assert json_error_line("", "Expecting value: line 7 column 1 (char 40)") == 7

    def test_line_is_case_insensitive(self):
        assert json_error_line("", "Unexpected end at Line 5") == 5

    def test_position_converted_to_line(self):
        assert json_error_line("ab\ncd\nef", "Unexpected token in JSON at position 7") == 3

    def test_defaults_to_first_line(self):
        assert json_error_line("whatever", "Unexpected end of input") == 1


# ── YAML ────────────────────────────────────────────────────────────


class TestFormatYaml:
    def test_block_style_with_indented_sequences(self):
        result = format_structured("b: 1\na: [x, y]\nc: {d: 2}")
        assert result.text == "b: 1\na:\n  - x\n  - y\nc:\n  d: 2\n"
        assert result.ok

    def test_error_leaves_text_and_reports_mark_line(self):
        text = "a: 1\nb: 2\n  c: 3"
        result = format_structured(text)
        assert result.text == text
        assert result.diagnostic.format == "yaml"
        assert result.diagnostic.line == 3

    def test_error_line_counts_stripped_leading_lines(self):
        assert format_structured("\n\na: 1\nb: 2\n  c: 3").diagnostic.line == 5

    def test_round_trip(self):
        text = "name: svc\nports:\n- 80\n- 443\nmeta:\n  enabled: true\n  note: 'a: b'\n"
        assert yaml.safe_load(format_structured(text).text) == yaml.safe_load(text)

    def test_yaml_error_line_without_mark(self):
        assert yaml_error_line(yaml.YAMLError("no mark")) == 1


# ── unrecognized / diagnostics ──────────────────────────────────────


class TestUnrecognized:
    def test_raises(self):
        with pytest.raises(UnrecognizedFormatError):
            format_structured("just some words")


class TestDiagnostic:
    def test_absolute_line(self):
        diag = Diagnostic(line=3, message="boom", format="json")
        assert diag.absolute_line(10) == 12

    def test_describe(self):
        diag = Diagnostic(line=2, message="mapping values are not allowed here", format="yaml")
        assert diag.describe() == (
            "YAML format error, syntax error at line 2: mapping values are not allowed here"
        )

    def test_line_must_be_positive(self):
        with pytest.raises(ValueError):
            Diagnostic(line=0, message="x", format="json")
