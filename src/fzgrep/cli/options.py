"""Shared CLI options for fzgrep.

This module provides the reusable Typer option declarations used by
the main command, plus conversion helpers from raw CLI values.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from fzgrep.config.schema import OutputFormat


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    RICH = "rich"
    JSON = "json"
    JSONL = "jsonl"


# Type aliases for CLI options
RecursiveOption = Annotated[
    bool,
    typer.Option(
        "--recursive",
        "-r",
        help="Recurse into directories. Use --include/--exclude for finer control.",
    ),
]

IncludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--include",
        help="Glob of files to scan when recursing. Can be repeated.",
    ),
]

ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        help="Glob of files to skip when recursing. Can be repeated.",
    ),
]

HiddenOption = Annotated[
    bool,
    typer.Option(
        "--hidden",
        help="Descend into hidden files and directories when recursing.",
    ),
]

LineNumberOption = Annotated[
    bool,
    typer.Option(
        "--line-number",
        "-n",
        help="Print line numbers with output lines.",
    ),
]

WithFilenameOption = Annotated[
    bool,
    typer.Option(
        "--with-filename",
        "-f",
        help="Print the source name with output lines.",
    ),
]

NoFilenameOption = Annotated[
    bool,
    typer.Option(
        "--no-filename",
        "-F",
        help="Suppress the source name prefix on output.",
    ),
]

ContextOption = Annotated[
    int | None,
    typer.Option(
        "--context",
        "-C",
        min=0,
        metavar="NUM",
        help="Print NUM lines of surrounding context.",
    ),
]

BeforeContextOption = Annotated[
    int | None,
    typer.Option(
        "--before-context",
        "-B",
        min=0,
        metavar="NUM",
        help="Print NUM lines of leading context.",
    ),
]

AfterContextOption = Annotated[
    int | None,
    typer.Option(
        "--after-context",
        "-A",
        min=0,
        metavar="NUM",
        help="Print NUM lines of trailing context.",
    ),
]

TopOption = Annotated[
    int | None,
    typer.Option(
        "--top",
        min=0,
        metavar="N",
        help="Keep only the N best matches. Bounds memory on huge inputs.",
    ),
]

FormatOption = Annotated[
    FormatChoice | None,
    typer.Option(
        "--format",
        help="Output format (plain, rich, json, jsonl). Defaults to config setting.",
        case_sensitive=False,
    ),
]

ColorOption = Annotated[
    bool | None,
    typer.Option(
        "--color/--no-color",
        help="Force colored output on or off (rich format only).",
        show_default=False,
    ),
]

ScoreOption = Annotated[
    bool,
    typer.Option(
        "--score",
        "-s",
        help="Show the score of each matching line.",
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Print nothing and disable logging; report through the exit status only.",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Configuration file to use instead of the default one.",
        dir_okay=False,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help=(
            "Log more to stderr. Repeat to increase: -v warnings, "
            "-vv info, -vvv debug. Without it only errors are logged."
        ),
    ),
]

LogLevelOption = Annotated[
    str | None,
    typer.Option(
        "--log-level",
        help="Log verbosity (DEBUG, INFO, WARNING, ERROR). Logs go to stderr.",
    ),
]


def get_output_format(
    format_choice: FormatChoice | None, default: OutputFormat | str = "plain"
) -> OutputFormat:
    """Convert CLI format choice to OutputFormat.

    Args:
        format_choice: CLI format choice or None.
        default: Default format if none specified.

    Returns:
        OutputFormat enum value.
    """
    if format_choice is None:
        return OutputFormat(default)
    return OutputFormat(format_choice.value)


def resolve_context_sizes(
    context: int | None,
    before: int | None,
    after: int | None,
) -> tuple[int | None, int | None]:
    """Combine -C with -B/-A.

    Returns:
        (before, after); None where the option was not given.

    Raises:
        typer.BadParameter: If -C is combined with -B or -A.
    """
    if context is not None:
        if before is not None or after is not None:
            raise typer.BadParameter(
                "--context cannot be combined with --before-context/--after-context"
            )
        return context, context
    return before, after


def resolve_filename_flag(with_filename: bool, no_filename: bool) -> bool | None:
    """Combine -f and -F into a tri-state: True, False or None (auto).

    Raises:
        typer.BadParameter: If both flags are given.
    """
    if with_filename and no_filename:
        raise typer.BadParameter(
            "--with-filename and --no-filename are mutually exclusive"
        )
    if with_filename:
        return True
    if no_filename:
        return False
    return None


def resolve_verbosity(verbose: int, quiet: bool) -> None:
    """Reject -q combined with -v.

    Raises:
        typer.BadParameter: If both are given.
    """
    if quiet and verbose:
        raise typer.BadParameter("--quiet and --verbose are mutually exclusive")
