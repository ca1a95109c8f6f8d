"""Configuration file I/O.

Loads the optional ``config.toml`` with validation through the
StowedConfig Pydantic model, and merges it with command-line values.
"""

import tomllib
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from stowed.core.paths import get_config_path
from stowed.models.config import StowedConfig

T = TypeVar("T")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path | None = None) -> StowedConfig:
    """Load and validate the configuration file.

    A missing file is not an error; defaults are returned instead.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated StowedConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file exists but cannot be read.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return StowedConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return StowedConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def pick(cli_value: T | None, config_value: T | None, default: T) -> T:
    """Resolve a setting: command line first, then config file, then default."""
    if cli_value is not None:
        return cli_value
    if config_value is not None:
        return config_value
    return default
