"""JSON output formatter."""

import json
from collections.abc import Sequence
from typing import Any, TextIO

from fzgrep.config.schema import OutputFormat
from fzgrep.output.base import OutputFormatter
from fzgrep.search.records import MatchRecord


class JSONFormatter(OutputFormatter):
    """JSON output formatter.

    Produces structured JSON output suitable for programmatic
    consumption and integration with other tools.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        indent: int | None = 2,
        ensure_ascii: bool = False,
    ) -> None:
        """Initialize JSON formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            indent: JSON indentation (None for compact).
            ensure_ascii: Whether to escape non-ASCII characters.
        """
        super().__init__(stream, error_stream, verbose)
        self._indent = indent
        self._ensure_ascii = ensure_ascii

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSON

    def _to_json(self, data: Any) -> str:
        """Convert data to JSON string."""
        return json.dumps(
            data,
            indent=self._indent,
            ensure_ascii=self._ensure_ascii,
            default=str,
        )

    def format_results(self, records: Sequence[MatchRecord]) -> str:
        """Format records as a single JSON document."""
        output: dict[str, Any] = {
            "success": True,
            "matches": [record.to_dict() for record in records],
            "count": len(records),
        }
        return self._to_json(output)

    def format_error(self, message: str) -> str:
        """Format an error as a JSON object."""
        return self._to_json({"success": False, "error": message})

    def print_results(self, records: Sequence[MatchRecord]) -> None:
        """Print the document even when empty, so consumers always get JSON."""
        print(self.format_results(records), file=self.stream)


class JSONLinesFormatter(JSONFormatter):
    """JSON Lines (JSONL) output formatter.

    Produces newline-delimited JSON for streaming output,
    where each line is one match record.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize JSONL formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
        """
        # JSONL uses compact JSON (no indentation)
        super().__init__(stream, error_stream, verbose, indent=None)

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSONL

    def format_results(self, records: Sequence[MatchRecord]) -> str:
        """Format each record as a separate JSON line."""
        return "\n".join(self._to_json(record.to_dict()) for record in records)

    def print_results(self, records: Sequence[MatchRecord]) -> None:
        formatted = self.format_results(records)
        if formatted:
            print(formatted, file=self.stream)
