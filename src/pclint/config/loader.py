"""Configuration loading with pydantic-settings.

Sources, highest precedence first:
1. Keyword overrides passed to load_config() (CLI flags)
2. Environment variables (PCLINT__SECTION__KEY)
3. Project file (<project>/.pclint.yaml)
4. Global file (~/.config/pclint/config.yaml)
5. Model defaults
"""

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from pclint.config.models import LoggingConfig, ParserConfig, PcLintConfig
from pclint.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/pclint/config.yaml").expanduser()
PROJECT_CONFIG_NAME = ".pclint.yaml"

# YAML values for the load_config() call in progress
_yaml_layer: ContextVar[dict[str, Any] | None] = ContextVar("pclint_yaml_layer", default=None)


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read one config file; a missing file contributes nothing."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _overlay(lower: dict[str, Any], upper: dict[str, Any]) -> dict[str, Any]:
    """Section-wise merge: keys in upper win, nested sections merge."""
    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        merged[key] = _overlay(below, value) if isinstance(below, dict) and isinstance(value, dict) else value
    return merged


class PcLintSettings(BaseSettings):
    """Settings root. Env vars: PCLINT__LOGGING__LEVEL, PCLINT__PARSER__LOCATION_ONLY_CODES."""

    model_config = SettingsConfigDict(
        env_prefix="PCLINT__",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_source = InitSettingsSource(settings_cls, init_kwargs=_yaml_layer.get() or {})
        return (init_settings, env_settings, yaml_source)


def load_config(project_dir: Path | None = None, **overrides: Any) -> PcLintConfig:
    """Resolve the configuration for a project directory.

    Args:
        project_dir: Directory holding .pclint.yaml (default: current directory)
        **overrides: Section values that beat every other source

    Raises:
        ConfigError: A config file is not valid YAML, or a value fails validation.
    """
    project_file = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    layer = _overlay(_read_yaml(GLOBAL_CONFIG_PATH), _read_yaml(project_file))

    token = _yaml_layer.set(layer)
    try:
        settings = PcLintSettings(**overrides)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    finally:
        _yaml_layer.reset(token)

    return PcLintConfig.model_validate(settings.model_dump())
