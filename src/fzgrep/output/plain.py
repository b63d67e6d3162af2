"""Plain text output formatter."""

from collections.abc import Sequence
from typing import TextIO

from fzgrep.config.schema import OutputFormat
from fzgrep.output.base import LineKind, OutputFormatter, OutputLine, iter_output_lines
from fzgrep.search.records import Location, MatchRecord


def format_location(location: Location, separator: str = ":") -> str:
    """Build the `name:lineno:` prefix of an output line."""
    prefix = ""
    if location.source_name is not None:
        prefix += f"{location.source_name}{separator}"
    if location.line_number is not None:
        prefix += f"{location.line_number}{separator}"
    return prefix


class PlainFormatter(OutputFormatter):
    """Plain text output formatter.

    Produces grep-style lines suitable for piping to other commands:
    every line, context included, is prefixed with its source name and
    line number when those are tracked.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        show_score: bool = False,
    ) -> None:
        """Initialize plain formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            show_score: Append the score to matching lines.
        """
        super().__init__(stream, error_stream, verbose)
        self._show_score = show_score

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def format_results(self, records: Sequence[MatchRecord]) -> str:
        """Format records as plain text."""
        lines: list[str] = []
        for record in records:
            for line in iter_output_lines(record):
                lines.append(self.format_line(line))
        return "\n".join(lines)

    def format_line(self, line: OutputLine) -> str:
        text = format_location(line.location) + line.text
        if line.kind == LineKind.MATCH and (self._show_score or self._verbose):
            text += f" (score {line.score})"
        return text
