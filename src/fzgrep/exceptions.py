"""Exception hierarchy for fzgrep.

Every user-facing error exits with status 2, following grep: status 1
is reserved for a successful run that found no matches.
"""


class FzgrepError(Exception):
    """Base exception for all fzgrep errors."""

    exit_code: int = 2
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Config Errors
class ConfigError(FzgrepError):
    """Configuration errors."""

    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    user_message = "Invalid configuration"


# Search Errors
class SearchError(FzgrepError):
    """Search-related errors."""

    user_message = "Search error"


class SourceReadError(SearchError):
    """A source could not be opened or read."""

    user_message = "Cannot read source"

    def __init__(
        self,
        source_name: str | None,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.source_name = source_name

