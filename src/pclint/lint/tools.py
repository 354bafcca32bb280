"""Lint tool registry - definitions for supported tools."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import PurePath

from pclint.config.constants import HEADER_EXTENSIONS
from pclint.lint.models import ParseResult


def is_header(path: str | PurePath) -> bool:
    """True if the file is analyzed with the header argument set."""
    return PurePath(path).suffix.lower() in HEADER_EXTENSIONS


@dataclass
class LintTool:
    """Definition of a lint tool and its command-line template."""

    tool_id: str
    name: str
    languages: frozenset[str]
    executable: str

    # Command arguments
    common_args: list[str] = field(default_factory=list)
    header_args: list[str] = field(default_factory=list)  # Appended for header files
    source_args: list[str] = field(default_factory=list)  # Appended for everything else

    # Parser function (set by register)
    _parser: Callable[[str, str], ParseResult] | None = None

    def build_command(self, path: str | PurePath) -> list[str]:
        """Build the argv used to analyze a single file."""
        extra = self.header_args if is_header(path) else self.source_args
        return [self.executable, *self.common_args, *extra, str(path)]

    def parse_output(self, stdout: str, stderr: str) -> ParseResult:
        """Parse tool output into diagnostics."""
        if self._parser is None:
            return ParseResult.ok([])
        return self._parser(stdout, stderr)


class ToolRegistry:
    """Registry of lint tools."""

    def __init__(self) -> None:
        self._tools: dict[str, LintTool] = {}

    def register(
        self,
        tool: LintTool,
        parser: Callable[[str, str], ParseResult] | None = None,
    ) -> None:
        """Register a tool."""
        if parser is not None:
            tool._parser = parser
        self._tools[tool.tool_id] = tool

    def get(self, tool_id: str) -> LintTool | None:
        """Get tool by ID."""
        return self._tools.get(tool_id)

    def all(self) -> list[LintTool]:
        """Get all registered tools."""
        return list(self._tools.values())

    def for_language(self, language: str) -> list[LintTool]:
        """Get tools that support a language."""
        return [t for t in self._tools.values() if language in t.languages]

    def clear(self) -> None:
        """Clear all registered tools."""
        self._tools.clear()


# Global registry
registry = ToolRegistry()
