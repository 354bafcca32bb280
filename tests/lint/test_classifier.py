"""Tests for lint/classifier.py module.

Covers:
- Noise rules (blank lines, walk banner, walk file lines)
- Diagnostic grammar field extraction
- Column selection and defaulting
- Malformed lines
- severity_from_token()
"""

from __future__ import annotations

import pytest

from pclint.core.errors import InternalError
from pclint.lint.classifier import (
    DiagnosticLine,
    Malformed,
    Noise,
    classify,
    is_noise,
    severity_from_token,
)
from pclint.lint.models import Severity


class TestNoise:
    """Tests for the noise rules."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "During Specific Walk:",
            "During Specific Walk:  ",
            "  During Specific Walk:",
            "  File foo.c",
            "  File",
            "  File   ",
            "  File src/main.c line 42: process(0)",
        ],
    )
    def test_noise_lines(self, line: str) -> None:
        """Banner, walk file and blank lines are noise."""
        assert is_noise(line)
        assert classify(line) == Noise(line)

    @pytest.mark.parametrize(
        "line", ["File foo.c", " File foo.c", "\tFile foo.c", "   File foo.c", "  Filex"]
    )
    def test_walk_file_needs_two_space_indent(self, line: str) -> None:
        """Walk file lines are indented by exactly two spaces."""
        assert not is_noise(line)
        assert classify(line) == Malformed(line)

    def test_banner_prefix_is_not_noise(self) -> None:
        """Only the exact banner text is noise."""
        assert not is_noise("During Specific Walk: extra")


class TestDiagnosticGrammar:
    """Tests for diagnostic line parsing."""

    def test_without_column(self) -> None:
        """Column defaults to 0 when only a line number is given."""
        result = classify("a.c  10  Error 5: msg")
        assert result == DiagnosticLine(
            file_name="a.c",
            line=10,
            column=0,
            severity=Severity.ERROR,
            code="5",
            message="msg",
        )

    def test_with_column(self) -> None:
        """A single digit group after the line is the column."""
        result = classify("src/main.c  42 7  Warning 534: Ignoring return value of function 'printf'")
        assert isinstance(result, DiagnosticLine)
        assert result.file_name == "src/main.c"
        assert result.line == 42
        assert result.column == 7
        assert result.severity == Severity.WARNING
        assert result.code == "534"
        assert result.message == "Ignoring return value of function 'printf'"

    def test_last_column_group_wins(self) -> None:
        """With several digit groups the last one is the column."""
        result = classify("a.c  3 4 9  Info 715: Symbol 'x' not referenced")
        assert isinstance(result, DiagnosticLine)
        assert result.line == 3
        assert result.column == 9

    def test_note_maps_to_info(self) -> None:
        """Note severity becomes Info."""
        result = classify("a.c  1  Note 970: Use of modifier or type 'int' outside of a typedef")
        assert isinstance(result, DiagnosticLine)
        assert result.severity == Severity.INFO

    def test_code_keeps_leading_zeros(self) -> None:
        """Codes stay strings."""
        result = classify("a.c  1  Info 0715: x")
        assert isinstance(result, DiagnosticLine)
        assert result.code == "0715"

    def test_message_keeps_special_characters(self) -> None:
        """Message is the verbatim remainder of the line."""
        message = "Symbol 'p' (line 3) [Reference: file b.c: line 9]:  ok"
        result = classify(f"C:\\work\\a.c  3  Warning 613: {message}")
        assert isinstance(result, DiagnosticLine)
        assert result.file_name == "C:\\work\\a.c"
        assert result.message == message

    def test_empty_message(self) -> None:
        """Message may be empty."""
        result = classify("a.c  1  Error 1: ")
        assert isinstance(result, DiagnosticLine)
        assert result.message == ""

    def test_trailing_carriage_return_stripped(self) -> None:
        """A leftover CR is not part of the message."""
        result = classify("a.c  1  Error 1: msg\r")
        assert isinstance(result, DiagnosticLine)
        assert result.message == "msg"


class TestMalformed:
    """Tests for lines matching neither rule."""

    @pytest.mark.parametrize(
        "line",
        [
            "not a valid line",
            "a.c 10  Error 5: msg",  # one space before line
            "a.c  10 Error 5: msg",  # one space before severity
            "a.c  10  Fatal 5: msg",  # unknown severity
            "a.c  10  Error x5: msg",  # non-digit code
            "a.c  10  Error 5 msg",  # missing ': '
            "a.c  ten  Error 5: msg",
        ],
    )
    def test_malformed_lines(self, line: str) -> None:
        """Malformed lines carry their original text."""
        assert classify(line) == Malformed(line)


class TestSeverityFromToken:
    """Tests for severity_from_token."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Info", Severity.INFO),
            ("Note", Severity.INFO),
            ("Warning", Severity.WARNING),
            ("Error", Severity.ERROR),
        ],
    )
    def test_mapping(self, token: str, expected: Severity) -> None:
        """Each token maps per the severity table."""
        assert severity_from_token(token) == expected

    def test_unknown_token(self) -> None:
        """Unknown tokens are an internal error."""
        with pytest.raises(InternalError) as exc_info:
            severity_from_token("Fatal")
        assert exc_info.value.details == {"token": "Fatal"}
