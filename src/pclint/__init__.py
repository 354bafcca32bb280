"""pclint - structured diagnostics from PC-lint / FlexeLint output."""

from pclint.core.errors import ConfigError, MalformedLineError, PcLintError
from pclint.lint import Diagnostic, ParseResult, Severity, merge, parse_output

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "merge",
    "parse_output",
    # Models
    "Diagnostic",
    "ParseResult",
    "Severity",
    # Exceptions
    "PcLintError",
    "ConfigError",
    "MalformedLineError",
]
