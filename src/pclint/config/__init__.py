"""Config module exports."""

from pclint.config.constants import LOCATION_ONLY_CODES
from pclint.config.loader import load_config
from pclint.config.models import LoggingConfig, ParserConfig, PcLintConfig

__all__ = [
    "load_config",
    "LOCATION_ONLY_CODES",
    "PcLintConfig",
    "LoggingConfig",
    "ParserConfig",
]
