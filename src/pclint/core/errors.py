"""pclint error types.

Every error carries an ErrorCode so reports and exit paths can branch on
it without matching message text. Ranges: 2xxx config, 3xxx parse,
9xxx internal.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    PARSE_MALFORMED_LINE = 3001
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class PcLintError(Exception):
    """Base error: a code, a readable message and structured details."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the CLI's JSON error output."""
        return {
            "code": self.code.value,
            "error": self.code.name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.code.name}: {self.message}"


class ConfigError(PcLintError):
    """A config file or override could not be turned into PcLintConfig."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"{path} is not valid YAML: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class MalformedLineError(PcLintError):
    """Lint output contained a line that is neither noise nor a diagnostic."""

    @property
    def line(self) -> str:
        """The offending line, verbatim."""
        return str(self.details.get("line", ""))

    @classmethod
    def from_line(cls, line: str) -> "MalformedLineError":
        return cls(
            code=ErrorCode.PARSE_MALFORMED_LINE,
            message=f"Unrecognized line in lint output: {line!r}",
            details={"line": line},
        )


class InternalError(PcLintError):
    """A state the parser's grammar should have made impossible."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
