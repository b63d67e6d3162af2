"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "fzgrep"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "FZGREP_CONFIG"
ENV_LOG_LEVEL: Final[str] = "FZGREP_LOG_LEVEL"
ENV_FORMAT: Final[str] = "FZGREP_FORMAT"
ENV_NO_COLOR: Final[str] = "FZGREP_NO_COLOR"
ENV_NO_COLOR_STANDARD: Final[str] = "NO_COLOR"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# fzgrep configuration

[context]
before = 0
after = 0

[match]
line_numbers = false
source_names = "auto"  # auto, always, never
# top = 10  # keep only the best N matches

[traversal]
recursive = false
include = []
exclude = []
include_hidden = false

[output]
default_format = "plain"  # plain, rich, json, jsonl
color = true
show_score = false

[logging]
level = "ERROR"  # -v, -vv, -vvv raise it to WARNING, INFO, DEBUG
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
