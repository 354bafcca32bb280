"""Line classifier for PC-lint / FlexeLint output.

Each line of captured output is one of:

- noise: blank lines, the ``During Specific Walk:`` banner, and the
  indented ``File ...`` lines that follow it
- a diagnostic line in the fixed message format::

      <file>  <line>[ <column>]...  <Info|Warning|Error|Note> <code>: <message>

- anything else, which is malformed
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pclint.config.constants import WALK_BANNER
from pclint.core.errors import InternalError
from pclint.lint.models import Severity

_DIAGNOSTIC_PATTERN = re.compile(
    r"^(?P<file_name>\S+)"
    r"  (?P<line>\d+)"
    r"(?: (?P<column>\d+))*"
    r"  (?P<severity>Info|Warning|Error|Note)"
    r" (?P<code>\d+)"
    r": (?P<message>.*)$"
)

_WALK_FILE_PATTERN = re.compile(r"^  File(?: .*)?$")

_SEVERITY_TOKENS: dict[str, Severity] = {
    "Info": Severity.INFO,
    "Note": Severity.INFO,
    "Warning": Severity.WARNING,
    "Error": Severity.ERROR,
}


@dataclass(frozen=True, slots=True)
class Noise:
    """A line without diagnostic content."""

    text: str


@dataclass(frozen=True, slots=True)
class DiagnosticLine:
    """Fields extracted from a well-formed diagnostic line."""

    file_name: str
    line: int
    column: int
    severity: Severity
    code: str
    message: str


@dataclass(frozen=True, slots=True)
class Malformed:
    """A line that is neither noise nor a diagnostic."""

    text: str


Classification = Noise | DiagnosticLine | Malformed


def severity_from_token(token: str) -> Severity:
    """Map a severity token from the message format to a Severity."""
    try:
        return _SEVERITY_TOKENS[token]
    except KeyError:
        raise InternalError.unexpected(f"unknown severity token {token!r}", token=token) from None


def is_noise(line: str) -> bool:
    text = line.rstrip()
    if text.strip() in ("", WALK_BANNER):
        return True
    # Walk file lines are recognized by their exact two-space indent
    return _WALK_FILE_PATTERN.match(text) is not None


def classify(line: str) -> Classification:
    """Classify one line of tool output (without its line terminator)."""
    if is_noise(line):
        return Noise(line)

    match = _DIAGNOSTIC_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        return Malformed(line)

    # A repeated group keeps its last capture, so the last column wins
    column = match.group("column")
    return DiagnosticLine(
        file_name=match.group("file_name"),
        line=int(match.group("line")),
        column=int(column) if column is not None else 0,
        severity=severity_from_token(match.group("severity")),
        code=match.group("code"),
        message=match.group("message"),
    )
