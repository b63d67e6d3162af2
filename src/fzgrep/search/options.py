"""Run options consumed by the search pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextSize:
    """Number of lines captured before and after each matching line."""

    before: int = 0
    after: int = 0

    def __post_init__(self) -> None:
        if self.before < 0 or self.after < 0:
            raise ValueError(
                f"Context sizes must be non-negative, got {self.before}/{self.after}"
            )


@dataclass(frozen=True)
class MatchOptions:
    """What to record about each match.

    Attributes:
        track_line_numbers: Record 1-based line numbers.
        track_source_names: Record the display name of the source.
        context_size: Leading and trailing context sizes.
    """

    track_line_numbers: bool = False
    track_source_names: bool = False
    context_size: ContextSize = ContextSize()


@dataclass(frozen=True)
class CollectionStrategy:
    """How many matches to keep.

    `top=None` keeps every match. An integer keeps only that many of
    the best ones; zero keeps nothing.
    """

    top: int | None = None

    def __post_init__(self) -> None:
        if self.top is not None and self.top < 0:
            raise ValueError(f"Top count must be non-negative, got {self.top}")

    @classmethod
    def collect_all(cls) -> "CollectionStrategy":
        return cls(top=None)

    @classmethod
    def collect_top(cls, count: int) -> "CollectionStrategy":
        return cls(top=count)
