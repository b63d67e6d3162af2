"""Configuration loading from TOML files and environment variables."""

import contextlib
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from fzgrep.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_FORMAT,
    ENV_LOG_LEVEL,
    ENV_NO_COLOR,
    ENV_NO_COLOR_STANDARD,
    get_config_path,
)
from fzgrep.config.schema import FzgrepConfig, OutputFormat
from fzgrep.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def load_config(
    config_path: Path | None = None,
    *,
    required: bool = False,
) -> FzgrepConfig:
    """Load configuration from a TOML file and environment variables.

    A missing file is not an error unless `required` is set: the
    defaults are used instead.

    Args:
        config_path: Path to config file. If None, uses default.
        required: Raise if the file does not exist.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If `required` and the file is missing.
        ConfigError: If the file cannot be parsed.
        ConfigValidationError: If configuration is invalid.
    """
    path = config_path or get_config_path()

    if not path.exists():
        if required:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        return _apply_env_overrides(FzgrepConfig())

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    try:
        config = FzgrepConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e

    return _apply_env_overrides(config)


def _apply_env_overrides(config: FzgrepConfig) -> FzgrepConfig:
    """Apply environment variable overrides to configuration."""
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        config.logging.level = log_level.upper()

    format_env = os.environ.get(ENV_FORMAT)
    if format_env:
        with contextlib.suppress(ValueError):
            config.output.default_format = OutputFormat(format_env.lower())

    no_color = os.environ.get(ENV_NO_COLOR)
    if (no_color and no_color.lower() in ("1", "true", "yes")) or os.environ.get(
        ENV_NO_COLOR_STANDARD
    ):
        config.output.color = False

    return config


def write_default_config(config_path: Path | None = None, *, force: bool = False) -> Path:
    """Write the default configuration file.

    Args:
        config_path: Destination. If None, uses default.
        force: Overwrite an existing file.

    Returns:
        The path written.

    Raises:
        ConfigError: If the file exists and `force` is not set.
    """
    path = config_path or get_config_path()
    if path.exists() and not force:
        raise ConfigError(f"Config file already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML)
    return path

