"""Lint models - diagnostics and parse results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pclint.core.errors import MalformedLineError


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class Diagnostic:
    """A single diagnostic reported by the lint tool."""

    file_name: str
    line: int
    severity: Severity
    code: str  # digits, kept as text: "830", "0715"
    message: str
    column: int = 0  # 0 when the tool gave no column
    source: str = "pclint"  # tool that produced this

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "source": self.source,
        }


@dataclass
class ParseResult:
    """Result from parsing tool output.

    A failed parse carries the offending line and no diagnostics.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    malformed_line: str | None = None

    @property
    def success(self) -> bool:
        return self.malformed_line is None

    @classmethod
    def ok(cls, diagnostics: list[Diagnostic]) -> ParseResult:
        return cls(diagnostics=diagnostics)

    @classmethod
    def error(cls, line: str) -> ParseResult:
        return cls(malformed_line=line)

    def raise_for_error(self) -> list[Diagnostic]:
        """Return the diagnostics, or raise MalformedLineError for a failed parse."""
        if self.malformed_line is not None:
            raise MalformedLineError.from_line(self.malformed_line)
        return self.diagnostics
