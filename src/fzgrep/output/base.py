"""Output formatter protocol and base classes."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from fzgrep.config.schema import OutputFormat
from fzgrep.search.records import Location, MatchRecord


class LineKind(str, Enum):
    """Role of an output line relative to its match."""

    BEFORE = "before"
    MATCH = "match"
    AFTER = "after"


@dataclass(frozen=True)
class OutputLine:
    """One line to render, with its own location.

    Context lines inherit the source name of their match and get line
    numbers derived from the match's line number.
    """

    kind: LineKind
    text: str
    location: Location
    positions: tuple[int, ...] = ()
    score: int | None = None


def iter_output_lines(record: MatchRecord) -> Iterator[OutputLine]:
    """Expand a record into its leading context, match and trailing context."""
    source_name = record.location.source_name
    line_number = record.location.line_number

    before = record.context.before or ()
    for index, text in enumerate(before):
        number = line_number - (len(before) - index) if line_number is not None else None
        yield OutputLine(LineKind.BEFORE, text, Location(source_name, number))

    yield OutputLine(
        LineKind.MATCH,
        record.line,
        record.location,
        positions=record.fuzzy_match.positions,
        score=record.score,
    )

    for index, text in enumerate(record.context.after or ()):
        number = line_number + index + 1 if line_number is not None else None
        yield OutputLine(LineKind.AFTER, text, Location(source_name, number))


def group_positions(positions: Sequence[int]) -> list[tuple[int, int]]:
    """Group sorted positions into half-open ranges of consecutive indices.

    >>> group_positions([0, 1, 2, 5, 7, 8])
    [(0, 3), (5, 6), (7, 9)]
    """
    ranges: list[tuple[int, int]] = []
    for position in positions:
        if ranges and ranges[-1][1] == position:
            ranges[-1] = (ranges[-1][0], position + 1)
        else:
            ranges.append((position, position + 1))
    return ranges


class OutputFormatter(ABC):
    """Abstract base class for result formatters.

    Formatters render ranked match records to the terminal in
    different formats (plain text, JSON, rich formatted).
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the formatter.

        Args:
            stream: Output stream (defaults to stdout).
            error_stream: Error stream (defaults to stderr).
            verbose: Whether to show scores and other details.
        """
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self._stream

    @property
    def error_stream(self) -> TextIO:
        """Get the error stream."""
        return self._error_stream

    @property
    def verbose(self) -> bool:
        """Whether verbose output is enabled."""
        return self._verbose

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the format type of this formatter."""
        pass

    @abstractmethod
    def format_results(self, records: Sequence[MatchRecord]) -> str:
        """Format ranked records as a string.

        Args:
            records: Records, best first.

        Returns:
            Formatted string representation, empty when there are no
            records.
        """
        pass

    def format_error(self, message: str) -> str:
        """Format an error message."""
        return f"fzgrep: {message}"

    def print_results(self, records: Sequence[MatchRecord]) -> None:
        """Format and print records to the output stream."""
        formatted = self.format_results(records)
        if formatted:
            print(formatted, file=self._stream)

    def print_error(self, message: str) -> None:
        """Print an error message to the error stream."""
        print(self.format_error(message), file=self._error_stream)
