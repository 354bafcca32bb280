"""structlog setup for the pclint CLI.

Log records go through stdlib logging so each configured output can have
its own level and renderer (console or JSON).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pclint.config.models import LoggingConfig, LogOutputConfig

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def configure_logging(config: LoggingConfig | None = None, *, verbose: bool = False) -> None:
    """Install handlers for every output in config.

    verbose forces DEBUG on all outputs (the CLI's -v flag).
    """
    from pclint.config.models import LoggingConfig

    config = config or LoggingConfig()
    root_level = logging.DEBUG if verbose else logging.getLevelName(config.level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _handler_for(output)
        if verbose or output.level is None:
            handler.setLevel(root_level)
        else:
            handler.setLevel(logging.getLevelName(output.level))
        root.addHandler(handler)


def _handler_for(output: LogOutputConfig) -> logging.Handler:
    handler: logging.Handler
    if output.destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif output.destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        colors = output.destination == "stderr" and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_SHARED_PROCESSORS)
    )
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module logger that follows later configure_logging() calls."""
    return structlog.stdlib.get_logger(name)
