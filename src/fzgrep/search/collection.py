"""Result collection strategies.

Two interchangeable collectors rank finished match records by score:
one keeps everything and sorts once at the end, the other keeps only
the best K records at all times so memory stays bounded no matter how
many lines match.
"""

from abc import ABC, abstractmethod

from fzgrep.search.options import CollectionStrategy
from fzgrep.search.records import MatchRecord


class ResultCollector(ABC):
    """Abstract container of finished match records."""

    @abstractmethod
    def add(self, record: MatchRecord) -> bool:
        """Offer a record to the collector.

        Returns:
            True if the record was retained.
        """
        pass

    @abstractmethod
    def into_ranked(self) -> list[MatchRecord]:
        """Hand over the retained records ordered by descending score.

        This is the final read-out: the collector is left empty.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class UnboundedCollector(ResultCollector):
    """Keeps every record; sorts only when the results are read out."""

    def __init__(self) -> None:
        self._data: list[MatchRecord] = []

    def add(self, record: MatchRecord) -> bool:
        self._data.append(record)
        return True

    def into_ranked(self) -> list[MatchRecord]:
        ranked, self._data = self._data, []
        ranked.sort(key=lambda r: r.score, reverse=True)
        return ranked

    def __len__(self) -> int:
        return len(self._data)


class TopBracket(ResultCollector):
    """Keeps only the `capacity` highest-scoring records, sorted descending.

    Intended for runs where the number of matches is expected to be
    much larger than `capacity`. Every accepted record costs a re-sort,
    so with few matches this can be slower than collecting everything.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._data: list[MatchRecord] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def lowest(self) -> MatchRecord | None:
        """The lowest-scoring retained record."""
        return self._data[-1] if self._data else None

    def add(self, record: MatchRecord) -> bool:
        if self._capacity == 0:
            return False

        if len(self._data) == self._capacity:
            # Ties lose to records already held.
            if record.score <= self._data[-1].score:
                return False
            self._data.pop()

        self._data.append(record)
        self._data.sort(key=lambda r: r.score, reverse=True)
        return True

    def into_ranked(self) -> list[MatchRecord]:
        ranked, self._data = self._data, []
        return ranked

    def __len__(self) -> int:
        return len(self._data)


def make_collector(strategy: CollectionStrategy) -> ResultCollector:
    """Create the collector matching a collection strategy."""
    if strategy.top is None:
        return UnboundedCollector()
    return TopBracket(strategy.top)
