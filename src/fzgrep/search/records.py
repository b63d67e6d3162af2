"""Match record types produced by the search pipeline."""

from dataclasses import dataclass, field
from typing import Any

from fzgrep.search.scorer import FuzzyMatch


@dataclass(frozen=True)
class Location:
    """Where a matching line was found.

    Attributes:
        source_name: Display name of the source, None if not tracked
            or the source has no name.
        line_number: 1-based line number, None if not tracked.
    """

    source_name: str | None = None
    line_number: int | None = None


@dataclass(frozen=True)
class Context:
    """Lines surrounding a matching line.

    None means the context was not requested. An empty tuple means it
    was requested but no lines were available.
    """

    before: tuple[str, ...] | None = None
    after: tuple[str, ...] | None = None


@dataclass(frozen=True, eq=False)
class MatchRecord:
    """A fully captured match.

    Records compare by fuzzy match score only: two records with equal
    scores are equal regardless of their content or location.

    Attributes:
        line: The matching line.
        fuzzy_match: Score and matched positions.
        location: Source name and line number.
        context: Leading and trailing context lines.
    """

    line: str
    fuzzy_match: FuzzyMatch
    location: Location = field(default_factory=Location)
    context: Context = field(default_factory=Context)

    __hash__ = None  # type: ignore[assignment]

    @property
    def score(self) -> int:
        """Shortcut for the fuzzy match score."""
        return self.fuzzy_match.score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.score == other.score

    def __lt__(self, other: "MatchRecord") -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: "MatchRecord") -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: "MatchRecord") -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: "MatchRecord") -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.score >= other.score

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "line": self.line,
            "score": self.fuzzy_match.score,
            "positions": list(self.fuzzy_match.positions),
            "source_name": self.location.source_name,
            "line_number": self.location.line_number,
            "before": list(self.context.before)
            if self.context.before is not None
            else None,
            "after": list(self.context.after)
            if self.context.after is not None
            else None,
        }
