"""Streaming capture of context lines around matches.

A source is read exactly once. Leading context comes from a sliding
window of the most recent lines; trailing context is gathered by one
accumulator per in-flight match, fed with every subsequent line until
it has seen enough lines or the source ends.
"""

from collections import deque
from enum import Enum

from fzgrep.search.records import Context, Location, MatchRecord
from fzgrep.search.scorer import FuzzyMatch


class ContextStateError(AssertionError):
    """An accumulator was driven through an illegal state transition.

    This is a bug in the caller's orchestration, never a user error.
    """


class AccumulatorState(str, Enum):
    """Lifecycle state of a context accumulator."""

    PENDING = "pending"
    READY = "ready"


class SlidingWindow:
    """Fixed-capacity FIFO of the most recent lines.

    A zero-capacity window is never materialized: feeding it is a no-op
    and its snapshot is None.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ContextStateError(f"Negative window capacity: {capacity}")
        self._data: deque[str] | None = (
            deque(maxlen=capacity) if capacity > 0 else None
        )

    @property
    def capacity(self) -> int:
        """Maximum number of lines held."""
        if self._data is None:
            return 0
        return self._data.maxlen or 0

    def feed(self, line: str) -> None:
        """Push a line, evicting the oldest one when full."""
        if self._data is not None:
            self._data.append(line)

    def snapshot(self) -> tuple[str, ...] | None:
        """Copy of the current contents, independent of later feeds."""
        if self._data is None:
            return None
        return tuple(self._data)

    def __len__(self) -> int:
        return len(self._data) if self._data is not None else 0


class ContextAccumulator:
    """Collects the trailing context of a single match.

    The accumulator is READY from birth when no trailing lines are
    requested. Otherwise it stays PENDING until it has been fed
    `trailing_size` lines, or until it is finalized at end of source.
    """

    def __init__(
        self,
        leading: tuple[str, ...] | None,
        trailing_size: int,
    ) -> None:
        if trailing_size < 0:
            raise ContextStateError(f"Negative trailing size: {trailing_size}")
        self._leading = leading
        self._trailing: list[str] | None = [] if trailing_size > 0 else None
        self._remaining = trailing_size
        self._state = (
            AccumulatorState.PENDING if trailing_size > 0 else AccumulatorState.READY
        )

    @property
    def state(self) -> AccumulatorState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        """Whether all requested trailing lines have been captured."""
        return self._state == AccumulatorState.READY

    @property
    def remaining(self) -> int:
        """Number of trailing slots still to fill."""
        return self._remaining

    @property
    def context(self) -> Context:
        """The finished context of a READY accumulator."""
        if self._state != AccumulatorState.READY:
            raise ContextStateError("Context requested from a pending accumulator")
        return self._build()

    def feed(self, line: str) -> "ContextAccumulator":
        """Append one trailing line.

        Raises:
            ContextStateError: If the accumulator is already READY.
        """
        if self._state == AccumulatorState.READY or self._trailing is None:
            raise ContextStateError("Accumulator fed after completion")

        self._trailing.append(line)
        self._remaining -= 1
        if self._remaining == 0:
            self._state = AccumulatorState.READY
        return self

    def finalize(self) -> Context:
        """Complete a PENDING accumulator at end of source.

        Returns whatever trailing lines were collected, possibly fewer
        than requested.

        Raises:
            ContextStateError: If the accumulator is already READY.
        """
        if self._state == AccumulatorState.READY:
            raise ContextStateError("Attempted to finalize a completed accumulator")
        self._state = AccumulatorState.READY
        self._remaining = 0
        return self._build()

    def _build(self) -> Context:
        after = tuple(self._trailing) if self._trailing is not None else None
        return Context(before=self._leading, after=after)


class PendingMatch:
    """A match whose trailing context is still being captured."""

    def __init__(
        self,
        line: str,
        fuzzy_match: FuzzyMatch,
        location: Location,
        leading: tuple[str, ...] | None,
        trailing_size: int,
    ) -> None:
        self.line = line
        self.fuzzy_match = fuzzy_match
        self.location = location
        self.accumulator = ContextAccumulator(leading, trailing_size)

    @property
    def is_ready(self) -> bool:
        return self.accumulator.is_ready

    def feed(self, line: str) -> "PendingMatch":
        self.accumulator.feed(line)
        return self

    def into_record(self) -> MatchRecord:
        """Build the record of a READY match."""
        return self._record(self.accumulator.context)

    def finalize(self) -> MatchRecord:
        """Build the record at end of source with partial trailing context."""
        return self._record(self.accumulator.finalize())

    def _record(self, context: Context) -> MatchRecord:
        return MatchRecord(
            line=self.line,
            fuzzy_match=self.fuzzy_match,
            location=self.location,
            context=context,
        )
