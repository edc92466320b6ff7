"""Tests for textops.host: line-range selection and splicing."""

import pytest

from textops.errors import UserInputError
from textops.host import Selection, parse_line_range


class TestParseLineRange:
    @pytest.mark.parametrize(
        "spec,expected",
        [("2:4", (2, 4)), ("3", (3, 3)), (":5", (1, 5)), ("2:", (2, None)), (" 1 : 2 ", (1, 2))],
    )
    def test_valid(self, spec, expected):
        assert parse_line_range(spec) == expected

    @pytest.mark.parametrize("spec", ["5:2", "0:3", "x", "1:y", "-1"])
    def test_invalid(self, spec):
        with pytest.raises(UserInputError):
            parse_line_range(spec)


class TestSelection:
    def test_whole_document(self):
        sel = Selection.from_document("a\nb\n")
        assert sel.text == "a\nb"
        assert sel.start_line == 1
        assert sel.replace("B\nA") == "B\nA\n"

    def test_no_trailing_newline_kept_that_way(self):
        sel = Selection.from_document("a\nb")
        assert sel.replace("x") == "x"

    def test_range_splices_only_selected_lines(self):
        sel = Selection.from_document("one\nc\na\nb\nlast\n", "2:4")
        assert sel.text == "c\na\nb"
        assert sel.replace("a\nb\nc") == "one\na\nb\nc\nlast\n"

    def test_result_with_fewer_lines(self):
        sel = Selection.from_document("h\nx\nx\nt", "2:3")
        assert sel.replace("x") == "h\nx\nt"

    def test_open_end_clamped_to_document(self):
        sel = Selection.from_document("a\nb\nc", "2:99")
        assert sel.end_line == 3
        assert sel.text == "b\nc"

    def test_start_past_end_rejected(self):
        with pytest.raises(UserInputError):
            Selection.from_document("a\nb", "5:6")

    def test_empty_document(self):
        sel = Selection.from_document("")
        assert sel.text == ""
        assert sel.replace("") == ""

    def test_result_final_newline_not_doubled(self):
        sel = Selection.from_document("a: 1\nb: [x]\n")
        assert sel.replace("a: 1\nb:\n  - x\n") == "a: 1\nb:\n  - x\n"

    def test_result_final_newline_inside_range(self):
        sel = Selection.from_document("top\nb: [x]\nend\n", "2:2")
        assert sel.replace("b:\n  - x\n") == "top\nb:\n  - x\nend\n"
