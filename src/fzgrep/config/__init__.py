"""Configuration management."""

from fzgrep.config.loader import load_config, write_default_config
from fzgrep.config.schema import FzgrepConfig

__all__ = [
    "FzgrepConfig",
    "load_config",
    "write_default_config",
]
