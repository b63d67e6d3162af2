"""Fuzzy line search.

This module provides the matching core: the fuzzy scorer, streaming
context capture, result collection strategies and the pipeline that
ties them together over a sequence of line sources.
"""

from fzgrep.search.collection import (
    ResultCollector,
    TopBracket,
    UnboundedCollector,
    make_collector,
)
from fzgrep.search.context import (
    AccumulatorState,
    ContextAccumulator,
    ContextStateError,
    PendingMatch,
    SlidingWindow,
)
from fzgrep.search.options import CollectionStrategy, ContextSize, MatchOptions
from fzgrep.search.pipeline import Pipeline, SearchReport, SourceStats, find_matches
from fzgrep.search.records import Context, Location, MatchRecord
from fzgrep.search.scorer import FuzzyMatch, score
from fzgrep.search.sources import (
    Source,
    file_source,
    stdin_source,
    unreadable_source,
)

__all__ = [
    # Scoring
    "FuzzyMatch",
    "score",
    # Records
    "Context",
    "Location",
    "MatchRecord",
    # Context capture
    "AccumulatorState",
    "ContextAccumulator",
    "ContextStateError",
    "PendingMatch",
    "SlidingWindow",
    # Collection
    "ResultCollector",
    "TopBracket",
    "UnboundedCollector",
    "make_collector",
    # Options
    "CollectionStrategy",
    "ContextSize",
    "MatchOptions",
    # Pipeline
    "Pipeline",
    "SearchReport",
    "SourceStats",
    "find_matches",
    # Sources
    "Source",
    "file_source",
    "stdin_source",
    "unreadable_source",
]
