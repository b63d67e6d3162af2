"""Output formatting (plain, rich, JSON).

This module provides formatters that render ranked match records in
different formats suitable for terminals, pipes and other programs.

Usage:
    from fzgrep.output import get_formatter

    formatter = get_formatter("rich", color=True)
    formatter.print_results(report.records)
"""

from typing import Any

from fzgrep.config.schema import OutputFormat
from fzgrep.output.base import (
    LineKind,
    OutputFormatter,
    OutputLine,
    group_positions,
    iter_output_lines,
)
from fzgrep.output.json_fmt import JSONFormatter, JSONLinesFormatter
from fzgrep.output.plain import PlainFormatter, format_location
from fzgrep.output.rich_fmt import RichFormatter, StyleSet

__all__ = [
    # Base classes
    "OutputFormatter",
    "OutputFormat",
    "OutputLine",
    "LineKind",
    "group_positions",
    "iter_output_lines",
    # Formatters
    "PlainFormatter",
    "JSONFormatter",
    "JSONLinesFormatter",
    "RichFormatter",
    "StyleSet",
    "format_location",
    "get_formatter",
]


def get_formatter(
    format_type: OutputFormat | str,
    verbose: bool = False,
    **kwargs: Any,
) -> OutputFormatter:
    """Get a formatter instance by format type.

    Args:
        format_type: The output format to use.
        verbose: Whether to enable verbose output.
        **kwargs: Additional formatter-specific options; options a
            formatter does not accept are dropped.

    Returns:
        An OutputFormatter instance.

    Raises:
        ValueError: If format_type is not recognized.
    """
    if isinstance(format_type, str):
        format_type = OutputFormat(format_type.lower())

    if format_type == OutputFormat.PLAIN:
        return PlainFormatter(
            verbose=verbose,
            show_score=kwargs.get("show_score", False),
            stream=kwargs.get("stream"),
            error_stream=kwargs.get("error_stream"),
        )
    if format_type == OutputFormat.RICH:
        return RichFormatter(
            verbose=verbose,
            color=kwargs.get("color", True),
            show_score=kwargs.get("show_score", False),
            stream=kwargs.get("stream"),
            error_stream=kwargs.get("error_stream"),
        )
    if format_type == OutputFormat.JSON:
        return JSONFormatter(
            verbose=verbose,
            stream=kwargs.get("stream"),
            error_stream=kwargs.get("error_stream"),
        )
    if format_type == OutputFormat.JSONL:
        return JSONLinesFormatter(
            verbose=verbose,
            stream=kwargs.get("stream"),
            error_stream=kwargs.get("error_stream"),
        )

    raise ValueError(f"Unknown format type: {format_type}")
