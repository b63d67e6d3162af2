"""Diagnostic logging for fzgrep.

Diagnostics always go to stderr so they never mix with search results.
Verbosity follows the command line: only errors by default, each `-v`
enables one more level (warnings, info, debug), and `-q` turns logging
off altogether.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Final

# Module-level logger
logger = logging.getLogger("fzgrep")

# Index is the number of -v flags; extra flags saturate at DEBUG.
VERBOSITY_LEVELS: Final[tuple[int, ...]] = (
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)

# Above every standard level: nothing is emitted.
QUIET_LEVEL: Final[int] = logging.CRITICAL + 10

DEFAULT_LEVEL: Final[int] = logging.ERROR


def level_from_verbosity(verbose: int = 0, quiet: bool = False) -> int:
    """Map a `-v` count and the quiet flag to a logging level.

    >>> level_from_verbosity(0) == logging.ERROR
    True
    >>> level_from_verbosity(2) == logging.INFO
    True
    >>> level_from_verbosity(9) == logging.DEBUG
    True
    """
    if quiet:
        return QUIET_LEVEL
    index = min(max(verbose, 0), len(VERBOSITY_LEVELS) - 1)
    return VERBOSITY_LEVELS[index]


def parse_level(level: str | int | None) -> int:
    """Turn a level name such as "info" into its number.

    Unknown names fall back to the default level.
    """
    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else DEFAULT_LEVEL


def resolve_level(
    level: str | int | None = None,
    verbose: int = 0,
    quiet: bool = False,
) -> int:
    """Pick the effective level: quiet, then `-v` count, then `level`."""
    if quiet or verbose > 0:
        return level_from_verbosity(verbose, quiet)
    return parse_level(level)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log files and log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """grep-style diagnostics: `fzgrep: warning: message (key=value, ...)`."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m",  # Dim
        logging.INFO: "\033[34m",  # Blue
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[1;31m",  # Bold red
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = False) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        label = record.levelname.lower()
        if self.use_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            label = f"{color}{label}{self.RESET}"

        message = record.getMessage()
        context = getattr(record, "context", None)
        if context:
            fields = ", ".join(f"{key}={value}" for key, value in context.items())
            message = f"{message} ({fields})"

        line = f"fzgrep: {label}: {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str | int | None = None,
    *,
    verbose: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool = False,
) -> logging.Logger:
    """Configure the `fzgrep` logger for one run.

    Args:
        level: Level name or number used when neither `verbose` nor
            `quiet` is given (config file, environment, --log-level).
        verbose: Number of `-v` flags.
        quiet: Disable logging entirely, log file included.
        log_file: Optional file receiving JSON records.
        json_format: Write JSON records to stderr as well.
        use_color: Color the level label on stderr.

    Returns:
        The configured `fzgrep` logger.
    """
    effective = resolve_level(level, verbose, quiet)

    logger.setLevel(effective)
    logger.handlers.clear()
    logger.propagate = False

    if quiet:
        logger.addHandler(logging.NullHandler())
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        JSONFormatter() if json_format else ConsoleFormatter(use_color=use_color)
    )
    logger.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a module (e.g. 'fzgrep.search.pipeline')."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log a message with structured key-value context.

    The context travels on the record as `record.context` and is
    rendered by both formatters.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"context": context}, stacklevel=2)
