"""Rich terminal output formatter."""

from collections.abc import Sequence
from io import StringIO
from typing import TextIO

from rich.console import Console
from rich.style import Style
from rich.text import Text

from fzgrep.config.schema import OutputFormat
from fzgrep.output.base import (
    LineKind,
    OutputFormatter,
    OutputLine,
    group_positions,
    iter_output_lines,
)
from fzgrep.search.records import MatchRecord


class StyleSet:
    """Styles applied to the pieces of an output line."""

    source_name = Style(color="magenta")
    line_number = Style(color="green")
    separator = Style(color="cyan")
    selected_line = Style()
    selected_match = Style(color="red", bold=True)
    context = Style(dim=True)
    score = Style(dim=True)


class RichFormatter(OutputFormatter):
    """Rich terminal output formatter.

    Highlights the matched characters of each selected line and dims
    the surrounding context. With color disabled no escape sequences
    are emitted.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        color: bool = True,
        show_score: bool = False,
        styles: StyleSet | None = None,
    ) -> None:
        """Initialize rich formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            color: Emit ANSI styles.
            show_score: Append the score to matching lines.
            styles: Style overrides.
        """
        super().__init__(stream, error_stream, verbose)
        self._color = color
        self._show_score = show_score
        self._styles = styles or StyleSet()

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    @property
    def color(self) -> bool:
        return self._color

    def format_results(self, records: Sequence[MatchRecord]) -> str:
        """Format records with Rich styling."""
        if not records:
            return ""

        string_io = StringIO()
        console = Console(
            file=string_io,
            force_terminal=self._color,
            no_color=not self._color,
            color_system="standard" if self._color else None,
            highlight=False,
            emoji=False,
            markup=False,
            width=10_000,
        )

        for record in records:
            for line in iter_output_lines(record):
                console.print(self.render_line(line), soft_wrap=True)

        return string_io.getvalue().rstrip("\n")

    def render_line(self, line: OutputLine) -> Text:
        """Build the styled text of one output line."""
        text = Text()
        styles = self._styles

        if line.location.source_name is not None:
            text.append(line.location.source_name, styles.source_name)
            text.append(":", styles.separator)
        if line.location.line_number is not None:
            text.append(str(line.location.line_number), styles.line_number)
            text.append(":", styles.separator)

        if line.kind != LineKind.MATCH:
            text.append(line.text, styles.context)
            return text

        cursor = 0
        for start, end in group_positions(line.positions):
            if start > cursor:
                text.append(line.text[cursor:start], styles.selected_line)
            text.append(line.text[start:end], styles.selected_match)
            cursor = end
        if cursor < len(line.text):
            text.append(line.text[cursor:], styles.selected_line)

        if self._show_score or self._verbose:
            text.append(f" (score {line.score})", styles.score)

        return text

    def format_error(self, message: str) -> str:
        """Format an error message, in red when color is enabled."""
        if not self._color:
            return super().format_error(message)
        string_io = StringIO()
        console = Console(file=string_io, force_terminal=True, highlight=False)
        console.print(Text(f"fzgrep: {message}", style="bold red"), soft_wrap=True)
        return string_io.getvalue().rstrip("\n")
