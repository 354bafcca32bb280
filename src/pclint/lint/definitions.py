"""Tool definitions - register the supported lint tools."""

from pclint.config.constants import MESSAGE_FORMAT
from pclint.lint import parsers
from pclint.lint.tools import LintTool, registry

# One message per line, in the format the classifier expects
_COMMON_ARGS = [
    "-b",  # no banner
    "-hF1",  # message height 1: no source line echo
    "-width(0)",  # never wrap
    f"-format={MESSAGE_FORMAT}",
]

# Unreferenced-symbol messages are noise when a header is checked on its own
_HEADER_ARGS = ["-u", "-e750", "-e751", "-e752", "-e753", "-e754", "-e755", "-e756", "-e757"]

_SOURCE_ARGS = ["-u"]

registry.register(
    LintTool(
        tool_id="c.pclint",
        name="PC-lint",
        languages=frozenset({"c", "cpp"}),
        executable="lint-nt",
        common_args=list(_COMMON_ARGS),
        header_args=list(_HEADER_ARGS),
        source_args=list(_SOURCE_ARGS),
    ),
    parser=parsers.parse_pclint,
)

registry.register(
    LintTool(
        tool_id="c.flexelint",
        name="FlexeLint",
        languages=frozenset({"c", "cpp"}),
        executable="flint",
        common_args=list(_COMMON_ARGS),
        header_args=list(_HEADER_ARGS),
        source_args=list(_SOURCE_ARGS),
    ),
    parser=parsers.parse_flexelint,
)
