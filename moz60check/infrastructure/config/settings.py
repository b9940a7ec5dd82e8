"""Configuration file handling.

Settings are read from the first existing file of:

1. an explicit ``--config`` path,
2. ``.moz60check.json`` in the working directory,
3. ``~/.config/moz60check/config.json``.

Without any file the defaults below apply.
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from moz60check.infrastructure.catalog.extension_catalog import default_extension_dirs
from moz60check.infrastructure.presentation.subprocess_presenter import validate_template

PROJECT_CONFIG_NAME = ".moz60check.json"


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tool_path: str = Field(default="moz60tool", description="moz60tool executable")
    tool_timeout_s: int = Field(default=120, gt=0, description="Per-file linter timeout")
    extension_dirs: list[Path] = Field(default_factory=default_extension_dirs)
    presenter_command: list[str] | None = Field(
        default=None,
        description="argv template for the presentation process ({name}, {uuid}, {url}, {path})",
    )
    log_file: Path | None = None

    @field_validator("extension_dirs")
    @classmethod
    def expand_dirs(cls, value: list[Path]) -> list[Path]:
        return [path.expanduser() for path in value]

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @field_validator("presenter_command")
    @classmethod
    def check_presenter_command(cls, value: list[str] | None) -> list[str] | None:
        if value is not None:
            validate_template(value)
        return value


def user_config_path() -> Path:
    return Path.home() / ".config" / "moz60check" / "config.json"


def candidate_paths(explicit: Path | None = None) -> list[Path]:
    if explicit is not None:
        return [explicit]
    return [Path.cwd() / PROJECT_CONFIG_NAME, user_config_path()]


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from the first existing config file."""
    for candidate in candidate_paths(path):
        if candidate.is_file():
            return _load_from_file(candidate)
        if path is not None:
            raise ConfigError(f"Config file not found: {candidate}")

    return Settings()


def _load_from_file(path: Path) -> Settings:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        settings = Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    logger.debug("Loaded settings from {}", path)
    return settings
