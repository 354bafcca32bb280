"""Output parser for PC-lint / FlexeLint.

Lines are classified one at a time and folded into diagnostics in order.
Definition-site messages (the location-only codes) follow the diagnostic
they belong to and move that diagnostic's location instead of producing an
entry of their own.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable

from pclint.config.constants import LOCATION_ONLY_CODES
from pclint.core.logging import get_logger
from pclint.lint.classifier import Malformed, Noise, classify
from pclint.lint.models import Diagnostic, ParseResult

log = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split captured output on line terminators, dropping empty trailing entries."""
    lines = _LINE_BREAK.split(text)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def merge(
    lines: Iterable[str],
    *,
    location_only_codes: Collection[str] = LOCATION_ONLY_CODES,
    source: str = "pclint",
) -> ParseResult:
    """Fold classified lines into diagnostics.

    Args:
        lines: Output lines, in the order the tool printed them
        location_only_codes: Codes whose line/column replace the open diagnostic's
        source: Tool id recorded on each diagnostic

    Returns:
        ParseResult with diagnostics in input order, or the first malformed line
    """
    if isinstance(location_only_codes, str):
        folded = frozenset({location_only_codes})
    else:
        folded = frozenset(location_only_codes)
    diagnostics: list[Diagnostic] = []
    pending: Diagnostic | None = None

    for line in lines:
        classified = classify(line)

        if isinstance(classified, Noise):
            continue

        if isinstance(classified, Malformed):
            log.warning("pclint_malformed_line", line=classified.text)
            return ParseResult.error(classified.text)

        if classified.code in folded:
            if pending is None:
                log.debug(
                    "pclint_orphan_location_dropped",
                    file_name=classified.file_name,
                    line=classified.line,
                    code=classified.code,
                )
                continue
            log.debug(
                "pclint_location_folded",
                code=pending.code,
                from_line=pending.line,
                to_line=classified.line,
            )
            pending.line = classified.line
            pending.column = classified.column
            continue

        if pending is not None:
            diagnostics.append(pending)
        pending = Diagnostic(
            file_name=classified.file_name,
            line=classified.line,
            column=classified.column,
            severity=classified.severity,
            code=classified.code,
            message=classified.message,
            source=source,
        )

    if pending is not None:
        diagnostics.append(pending)

    return ParseResult.ok(diagnostics)


def parse_output(
    text: str,
    *,
    location_only_codes: Collection[str] = LOCATION_ONLY_CODES,
    source: str = "pclint",
) -> ParseResult:
    """Parse a complete blob of captured tool output."""
    return merge(split_lines(text), location_only_codes=location_only_codes, source=source)


def parse_pclint(stdout: str, stderr: str) -> ParseResult:
    """Parse PC-lint combined output (stdout followed by stderr)."""
    lines = split_lines(stdout) + split_lines(stderr)
    return merge(lines)


def parse_flexelint(stdout: str, stderr: str) -> ParseResult:
    """Parse FlexeLint combined output; same format as PC-lint."""
    lines = split_lines(stdout) + split_lines(stderr)
    return merge(lines, source="flexelint")
