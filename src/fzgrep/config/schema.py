"""Pydantic models for fzgrep configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutputFormat(str, Enum):
    """Supported output formats."""

    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"
    JSONL = "jsonl"


class SourceNameMode(str, Enum):
    """When to prefix results with the source name."""

    AUTO = "auto"  # only with several targets or recursion
    ALWAYS = "always"
    NEVER = "never"


class ContextConfig(BaseModel):
    """Context lines captured around each match."""

    before: int = Field(default=0, ge=0)
    after: int = Field(default=0, ge=0)


class MatchConfig(BaseModel):
    """Match metadata and collection settings."""

    line_numbers: bool = False
    source_names: SourceNameMode = SourceNameMode.AUTO
    top: int | None = None  # None keeps every match

    @field_validator("top")
    @classmethod
    def _check_top(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("top must be non-negative")
        return value


class TraversalConfig(BaseModel):
    """Directory traversal settings."""

    recursive: bool = False
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    include_hidden: bool = False


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: OutputFormat = OutputFormat.PLAIN
    color: bool = True
    show_score: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "ERROR"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


class FzgrepConfig(BaseModel):
    """Root configuration for fzgrep."""

    model_config = ConfigDict(use_enum_values=True)

    context: ContextConfig = Field(default_factory=ContextConfig)
    match: MatchConfig = Field(default_factory=MatchConfig)
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
