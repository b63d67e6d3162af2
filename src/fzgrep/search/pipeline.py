"""Single-pass matching pipeline.

Each source is read once, line by line. For every line the pipeline:

1. feeds the line to every match still waiting for trailing context,
   handing any that complete to the collector;
2. scores the line against the query;
3. on a hit, opens a new pending match seeded with a snapshot of the
   leading window;
4. pushes the line into the leading window.

At end of source every pending match is finalized with whatever
trailing context it has. All sources of a run feed one collector.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from fzgrep.exceptions import SourceReadError
from fzgrep.search.collection import ResultCollector, UnboundedCollector
from fzgrep.search.context import PendingMatch, SlidingWindow
from fzgrep.search.options import MatchOptions
from fzgrep.search.records import Location, MatchRecord
from fzgrep.search.scorer import score
from fzgrep.search.sources import Source
from fzgrep.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)


@dataclass
class SourceStats:
    """Counters for one scanned source."""

    name: str | None
    lines: int = 0
    matches: int = 0


@dataclass
class SearchReport:
    """Outcome of a full run.

    Attributes:
        records: Ranked match records, best first.
        sources: Per-source counters, in processing order.
        failures: Sources that could not be read.
    """

    records: list[MatchRecord]
    sources: list[SourceStats] = field(default_factory=list)
    failures: list[SourceReadError] = field(default_factory=list)

    @property
    def lines_scanned(self) -> int:
        return sum(s.lines for s in self.sources)

    @property
    def has_matches(self) -> bool:
        return bool(self.records)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


class Pipeline:
    """Scans sources for fuzzy matches of a query.

    The collector is injected so callers choose the collection strategy
    and may share one collector across several `process` calls.
    """

    def __init__(
        self,
        query: str,
        options: MatchOptions | None = None,
        collector: ResultCollector | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            query: The fuzzy query.
            options: What to record about each match.
            collector: Destination of finished records.
        """
        self.query = query
        self.options = options or MatchOptions()
        self.collector = collector if collector is not None else UnboundedCollector()

    def process(self, source: Source) -> SourceStats:
        """Scan one source, pushing every finished match to the collector.

        Raises:
            SourceReadError: If the source cannot be opened or read.
                Records completed before the failure stay collected;
                pending ones are dropped.
        """
        stats = SourceStats(name=source.name)
        context_size = self.options.context_size
        window = SlidingWindow(context_size.before)
        pending: list[PendingMatch] = []

        log_with_context(logger, logging.DEBUG, "Scanning source", source=source.name)

        try:
            for line_number, line in enumerate(source.lines(), start=1):
                stats.lines = line_number

                if pending:
                    pending = self._feed_pending(pending, line)

                fuzzy_match = score(self.query, line)
                if fuzzy_match is not None:
                    stats.matches += 1
                    location = Location(
                        source_name=source.name
                        if self.options.track_source_names
                        else None,
                        line_number=line_number
                        if self.options.track_line_numbers
                        else None,
                    )
                    match = PendingMatch(
                        line,
                        fuzzy_match,
                        location,
                        window.snapshot(),
                        context_size.after,
                    )
                    if match.is_ready:
                        self.collector.add(match.into_record())
                    else:
                        pending.append(match)

                window.feed(line)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(
                source.name, f"{source.name or '<unnamed>'}: {e}"
            ) from e

        for match in pending:
            self.collector.add(match.finalize())

        log_with_context(
            logger,
            logging.DEBUG,
            "Finished source",
            source=source.name,
            lines=stats.lines,
            matches=stats.matches,
        )
        return stats

    def run(self, sources: Iterable[Source]) -> SearchReport:
        """Scan all sources in order and rank the collected matches.

        A source that fails to read is logged and recorded in the report;
        the remaining sources are still scanned.
        """
        report = SearchReport(records=[])
        for source in sources:
            try:
                report.sources.append(self.process(source))
            except SourceReadError as e:
                log_with_context(
                    logger,
                    logging.WARNING,
                    "Failed to read source",
                    source=source.name,
                    error=str(e.__cause__ or e),
                )
                report.failures.append(e)

        report.records = self.collector.into_ranked()
        log_with_context(
            logger,
            logging.INFO,
            "Search complete",
            sources=len(report.sources),
            failures=len(report.failures),
            lines=report.lines_scanned,
            matches=len(report.records),
        )
        return report

    def _feed_pending(self, pending: list[PendingMatch], line: str) -> list[PendingMatch]:
        still_pending: list[PendingMatch] = []
        for match in pending:
            match.feed(line)
            if match.is_ready:
                self.collector.add(match.into_record())
            else:
                still_pending.append(match)
        return still_pending


def find_matches(
    query: str,
    sources: Iterable[Source],
    options: MatchOptions | None = None,
    collector: ResultCollector | None = None,
) -> SearchReport:
    """Convenience wrapper: build a pipeline and run it over `sources`."""
    return Pipeline(query, options, collector).run(sources)
