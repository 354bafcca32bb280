"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PCLINT__SECTION__KEY)
3. Project YAML (.pclint.yaml)
4. Global YAML (~/.config/pclint/config.yaml)
5. Built-in defaults (this file)

Examples:
    PCLINT__LOGGING__LEVEL=DEBUG
    PCLINT__PARSER__LOCATION_ONLY_CODES='["830", "831", "832"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from pclint.config.constants import LOCATION_ONLY_CODES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PCLINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG reports every folded location line.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ParserConfig(BaseModel):
    """Output parser configuration.

    Env vars:
        PCLINT__PARSER__LOCATION_ONLY_CODES: JSON list of codes
    """

    location_only_codes: list[str] = Field(
        default_factory=lambda: sorted(LOCATION_ONLY_CODES),
        description="Codes folded into the preceding diagnostic's location. "
        "Override when the wrapped tool numbers its definition-site messages differently.",
    )

    @field_validator("location_only_codes")
    @classmethod
    def validate_codes(cls, v: list[str]) -> list[str]:
        for code in v:
            if not code.isdigit():
                raise ValueError(f"Diagnostic codes must be digits, got {code!r}")
        return v


class PcLintConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
