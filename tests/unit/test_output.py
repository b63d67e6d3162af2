"""Unit tests for output formatters."""

import json
from io import StringIO

import pytest

from fzgrep.output import (
    JSONFormatter,
    JSONLinesFormatter,
    LineKind,
    OutputFormat,
    PlainFormatter,
    RichFormatter,
    format_location,
    get_formatter,
    group_positions,
    iter_output_lines,
)
from fzgrep.search import Context, FuzzyMatch, Location, MatchRecord


@pytest.fixture
def record() -> MatchRecord:
    """A match on line 3 with one leading and two trailing lines."""
    return MatchRecord(
        line="MATCH",
        fuzzy_match=FuzzyMatch(score=30, positions=(0, 1, 2)),
        location=Location(source_name="f.txt", line_number=3),
        context=Context(before=("b",), after=("c", "d")),
    )


@pytest.fixture
def bare_record() -> MatchRecord:
    """A match without location or context."""
    return MatchRecord(line="hello world", fuzzy_match=FuzzyMatch(12, (0, 6)))


class TestHelpers:
    """Tests for shared output helpers."""

    def test_group_positions(self) -> None:
        """Test grouping consecutive positions."""
        assert group_positions([0, 1, 2, 5, 7, 8]) == [(0, 3), (5, 6), (7, 9)]
        assert group_positions([]) == []
        assert group_positions([4]) == [(4, 5)]

    def test_format_location(self) -> None:
        """Test the location prefix."""
        assert format_location(Location("f.txt", 3)) == "f.txt:3:"
        assert format_location(Location("f.txt", None)) == "f.txt:"
        assert format_location(Location(None, 3)) == "3:"
        assert format_location(Location()) == ""
        assert format_location(Location("f.txt", 3), separator="-") == "f.txt-3-"

    def test_iter_output_lines(self, record: MatchRecord) -> None:
        """Test that context lines get derived line numbers."""
        lines = list(iter_output_lines(record))
        assert [line.kind for line in lines] == [
            LineKind.BEFORE,
            LineKind.MATCH,
            LineKind.AFTER,
            LineKind.AFTER,
        ]
        assert [line.text for line in lines] == ["b", "MATCH", "c", "d"]
        assert [line.location.line_number for line in lines] == [2, 3, 4, 5]
        assert all(line.location.source_name == "f.txt" for line in lines)
        assert lines[1].positions == (0, 1, 2)
        assert lines[1].score == 30

    def test_iter_output_lines_without_numbers(self) -> None:
        """Test context lines when line numbers are not tracked."""
        record = MatchRecord(
            line="m",
            fuzzy_match=FuzzyMatch(1),
            context=Context(before=("a",), after=("b",)),
        )
        assert all(
            line.location.line_number is None for line in iter_output_lines(record)
        )


class TestPlainFormatter:
    """Tests for PlainFormatter."""

    def test_format_type(self) -> None:
        """Test format type property."""
        assert PlainFormatter().format_type == OutputFormat.PLAIN

    def test_format_results(self, record: MatchRecord) -> None:
        """Test grep-style lines with prefixes."""
        assert PlainFormatter().format_results([record]) == (
            "f.txt:2:b\nf.txt:3:MATCH\nf.txt:4:c\nf.txt:5:d"
        )

    def test_bare_record(self, bare_record: MatchRecord) -> None:
        """Test a record without prefixes."""
        assert PlainFormatter().format_results([bare_record]) == "hello world"

    def test_show_score(self, record: MatchRecord) -> None:
        """Test that only the matching line carries the score."""
        output = PlainFormatter(show_score=True).format_results([record])
        assert output.splitlines()[1] == "f.txt:3:MATCH (score 30)"
        assert output.count("(score") == 1

    def test_empty_results(self) -> None:
        """Test that nothing is printed without results."""
        stream = StringIO()
        formatter = PlainFormatter(stream=stream)
        formatter.print_results([])
        assert stream.getvalue() == ""

    def test_print_results(self, bare_record: MatchRecord) -> None:
        """Test printing to the output stream."""
        stream = StringIO()
        PlainFormatter(stream=stream).print_results([bare_record, bare_record])
        assert stream.getvalue() == "hello world\nhello world\n"

    def test_print_error(self) -> None:
        """Test printing errors to the error stream."""
        stream, errors = StringIO(), StringIO()
        PlainFormatter(stream=stream, error_stream=errors).print_error("boom")
        assert stream.getvalue() == ""
        assert errors.getvalue() == "fzgrep: boom\n"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_type(self) -> None:
        """Test format type property."""
        assert JSONFormatter().format_type == OutputFormat.JSON

    def test_format_results(self, record: MatchRecord) -> None:
        """Test the JSON document."""
        data = json.loads(JSONFormatter().format_results([record]))
        assert data["success"] is True
        assert data["count"] == 1
        match = data["matches"][0]
        assert match["line"] == "MATCH"
        assert match["score"] == 30
        assert match["positions"] == [0, 1, 2]
        assert match["source_name"] == "f.txt"
        assert match["line_number"] == 3
        assert match["before"] == ["b"]
        assert match["after"] == ["c", "d"]

    def test_empty_results_still_printed(self) -> None:
        """Test that an empty run still produces a document."""
        stream = StringIO()
        JSONFormatter(stream=stream).print_results([])
        data = json.loads(stream.getvalue())
        assert data == {"success": True, "matches": [], "count": 0}

    def test_non_ascii(self) -> None:
        """Test that non-ASCII text is kept as is."""
        record = MatchRecord(line="café", fuzzy_match=FuzzyMatch(3, (0,)))
        assert "café" in JSONFormatter().format_results([record])

    def test_format_error(self) -> None:
        """Test the JSON error object."""
        data = json.loads(JSONFormatter().format_error("Something failed"))
        assert data == {"success": False, "error": "Something failed"}


class TestJSONLinesFormatter:
    """Tests for JSONLinesFormatter."""

    def test_format_type(self) -> None:
        """Test format type property."""
        assert JSONLinesFormatter().format_type == OutputFormat.JSONL

    def test_one_record_per_line(
        self, record: MatchRecord, bare_record: MatchRecord
    ) -> None:
        """Test newline-delimited records."""
        output = JSONLinesFormatter().format_results([record, bare_record])
        lines = output.split("\n")
        assert len(lines) == 2
        assert json.loads(lines[0])["line"] == "MATCH"
        assert json.loads(lines[1])["line"] == "hello world"

    def test_empty_results(self) -> None:
        """Test that nothing is printed without results."""
        stream = StringIO()
        JSONLinesFormatter(stream=stream).print_results([])
        assert stream.getvalue() == ""


class TestRichFormatter:
    """Tests for RichFormatter."""

    def test_format_type(self) -> None:
        """Test format type property."""
        assert RichFormatter().format_type == OutputFormat.RICH

    def test_no_color(self, record: MatchRecord) -> None:
        """Test that disabled color emits no escape sequences."""
        output = RichFormatter(color=False).format_results([record])
        assert "\x1b[" not in output
        assert output.splitlines() == [
            "f.txt:2:b",
            "f.txt:3:MATCH",
            "f.txt:4:c",
            "f.txt:5:d",
        ]

    def test_color(self, record: MatchRecord) -> None:
        """Test that enabled color emits escape sequences."""
        output = RichFormatter(color=True).format_results([record])
        assert "\x1b[" in output
        assert "MATCH" not in output  # split into highlighted and plain spans
        assert "MAT" in output

    def test_render_line_spans(self, bare_record: MatchRecord) -> None:
        """Test that matched characters are styled."""
        formatter = RichFormatter(color=True)
        line = list(iter_output_lines(bare_record))[0]
        text = formatter.render_line(line)
        assert text.plain == "hello world"
        styled = [(span.start, span.end) for span in text.spans if span.style]
        assert (0, 1) in styled
        assert (6, 7) in styled

    def test_show_score(self, bare_record: MatchRecord) -> None:
        """Test score suffix."""
        output = RichFormatter(color=False, show_score=True).format_results(
            [bare_record]
        )
        assert output == "hello world (score 12)"

    def test_empty_results(self) -> None:
        """Test empty output."""
        assert RichFormatter().format_results([]) == ""

    def test_format_error(self) -> None:
        """Test error formatting with and without color."""
        assert RichFormatter(color=False).format_error("boom") == "fzgrep: boom"
        assert "\x1b[" in RichFormatter(color=True).format_error("boom")


class TestGetFormatter:
    """Tests for get_formatter factory."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("plain", PlainFormatter),
            ("rich", RichFormatter),
            ("json", JSONFormatter),
            ("jsonl", JSONLinesFormatter),
            ("JSON", JSONFormatter),
            (OutputFormat.RICH, RichFormatter),
        ],
    )
    def test_get_formatter(self, name: str, expected: type) -> None:
        """Test formatter selection."""
        assert type(get_formatter(name)) is expected

    def test_options_passed(self) -> None:
        """Test that options reach the formatter."""
        formatter = get_formatter("rich", color=False, show_score=True)
        assert isinstance(formatter, RichFormatter)
        assert formatter.color is False

    def test_unknown_format(self) -> None:
        """Test invalid format."""
        with pytest.raises(ValueError):
            get_formatter("xml")
