"""Lint module - PC-lint output classification and parsing."""

# Import definitions to register all tools
from pclint.lint import definitions as _definitions  # noqa: F401
from pclint.lint.classifier import DiagnosticLine, Malformed, Noise, classify
from pclint.lint.models import Diagnostic, ParseResult, Severity
from pclint.lint.parsers import merge, parse_output, parse_pclint, split_lines
from pclint.lint.tools import LintTool, is_header, registry

__all__ = [
    "Diagnostic",
    "DiagnosticLine",
    "LintTool",
    "Malformed",
    "Noise",
    "ParseResult",
    "Severity",
    "classify",
    "is_header",
    "merge",
    "parse_output",
    "parse_pclint",
    "registry",
    "split_lines",
]
