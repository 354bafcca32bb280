"""Tests for error types and codes."""

import pytest

from pclint.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    MalformedLineError,
    PcLintError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.PARSE_MALFORMED_LINE, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestPcLintError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = PcLintError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_name(self) -> None:
        """String form carries code, name and message."""
        error = PcLintError(code=ErrorCode.INTERNAL_ERROR, message="boom")
        assert str(error) == "[9001] INTERNAL_ERROR: boom"


class TestConfigError:
    """ConfigError factory tests."""

    def test_given_parse_error_when_created_then_has_path(self) -> None:
        """parse_error records path and reason."""
        error = ConfigError.parse_error("/x/.pclint.yaml", "bad indent")
        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/x/.pclint.yaml", "reason": "bad indent"}

    def test_given_invalid_value_when_created_then_has_field(self) -> None:
        """invalid_value records field and stringified value."""
        error = ConfigError.invalid_value("parser.location_only_codes", ["a"], "not digits")
        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["field"] == "parser.location_only_codes"
        assert error.details["value"] == "['a']"


class TestMalformedLineError:
    """MalformedLineError tests."""

    def test_given_line_when_created_then_line_preserved(self) -> None:
        """The offending line is kept verbatim."""
        error = MalformedLineError.from_line("not a valid line")
        assert error.line == "not a valid line"
        assert error.code == ErrorCode.PARSE_MALFORMED_LINE
        assert "not a valid line" in error.message

    def test_given_error_when_raised_then_catchable_as_base(self) -> None:
        """Subclasses are caught as PcLintError."""
        with pytest.raises(PcLintError):
            raise MalformedLineError.from_line("x")


class TestInternalError:
    """InternalError tests."""

    def test_given_details_when_unexpected_then_kept(self) -> None:
        """Keyword details are stored."""
        error = InternalError.unexpected("odd", token="Fatal")
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {"token": "Fatal"}
