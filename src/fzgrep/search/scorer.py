"""Fuzzy line scoring.

This module scores a query against a single candidate line using a
subsequence alignment in the spirit of the VS Code fuzzy scorer: every
query character must be found in the line, in order, and the score
rewards runs of consecutive matches, exact-case matches and matches
that land on word boundaries.
"""

from dataclasses import dataclass
from typing import Final

PATH_SEPARATORS: Final[frozenset[str]] = frozenset({"/", "\\"})
REGULAR_SEPARATORS: Final[frozenset[str]] = frozenset(
    {"_", "-", ".", " ", "'", '"', ":"}
)


class Score:
    """Per-character score components."""

    NONE: Final[int] = 0
    REGULAR: Final[int] = 1
    CONSECUTIVE_MATCH: Final[int] = 5
    EXACT_MATCH: Final[int] = 1
    WORD_START: Final[int] = 8
    AFTER_SEPARATOR: Final[int] = 4
    AFTER_PATH_SEPARATOR: Final[int] = 5
    CAMEL_CASE: Final[int] = 2


@dataclass(frozen=True)
class FuzzyMatch:
    """Result of a successful fuzzy match.

    Attributes:
        score: Non-negative match score, higher is better.
        positions: Strictly increasing indices of the matched characters
            in the candidate line.
    """

    score: int
    positions: tuple[int, ...] = ()


def is_separator(char: str | None) -> bool:
    """Check whether a character is a word or path separator."""
    return char is not None and (
        char in PATH_SEPARATORS or char in REGULAR_SEPARATORS
    )


def chars_equal(query_char: str, line_char: str) -> bool:
    """Case-insensitive equality with `/` and `\\` treated as the same."""
    if query_char.lower() == line_char.lower():
        return True
    return query_char in PATH_SEPARATORS and line_char in PATH_SEPARATORS


def char_score(
    query_char: str,
    line_char: str,
    prev_char: str | None,
    streak: int,
) -> int:
    """Compute the score for matching one query character at one position.

    Args:
        query_char: Character from the query.
        line_char: Character from the candidate line.
        prev_char: Character preceding `line_char`, None at line start.
        streak: Number of consecutive matched characters ending just
            before this position.

    Returns:
        The stacked score, or `Score.NONE` if the characters differ.
    """
    if not chars_equal(query_char, line_char):
        return Score.NONE

    score = Score.REGULAR + Score.CONSECUTIVE_MATCH * streak

    if query_char == line_char:
        score += Score.EXACT_MATCH

    if prev_char is None:
        score += Score.WORD_START

    if prev_char in PATH_SEPARATORS:
        score += Score.AFTER_PATH_SEPARATOR
    elif prev_char in REGULAR_SEPARATORS:
        score += Score.AFTER_SEPARATOR

    if line_char.isupper() and not is_separator(prev_char):
        score += Score.CAMEL_CASE

    return score


def score(query: str, line: str) -> FuzzyMatch | None:
    """Score `query` against `line`.

    An empty query matches every line with score 0 and no positions.

    Args:
        query: The search query.
        line: The candidate line.

    Returns:
        A FuzzyMatch, or None if the query is not a fuzzy subsequence
        of the line.
    """
    if not query:
        return FuzzyMatch(score=Score.NONE)

    query_len = len(query)
    line_len = len(line)
    if line_len < query_len:
        return None

    scores = [[0] * line_len for _ in range(query_len)]
    streaks = [[0] * line_len for _ in range(query_len)]

    for qi, query_char in enumerate(query):
        row_scores = scores[qi]
        row_streaks = streaks[qi]
        prev_scores = scores[qi - 1] if qi > 0 else None
        prev_streaks = streaks[qi - 1] if qi > 0 else None

        for li, line_char in enumerate(line):
            left_score = row_scores[li - 1] if li > 0 else Score.NONE

            if prev_scores is not None and prev_streaks is not None and li > 0:
                diag_score = prev_scores[li - 1]
                streak = prev_streaks[li - 1]
            else:
                diag_score = Score.NONE
                streak = 0

            # Past the first row a match must extend an earlier match.
            if qi > 0 and diag_score == Score.NONE:
                current = Score.NONE
            else:
                prev_char = line[li - 1] if li > 0 else None
                current = char_score(query_char, line_char, prev_char, streak)

            if current != Score.NONE and diag_score + current > left_score:
                row_scores[li] = diag_score + current
                row_streaks[li] = streak + 1
            else:
                row_scores[li] = left_score
                row_streaks[li] = 0

    total = scores[query_len - 1][line_len - 1]
    if total == Score.NONE:
        return None

    positions: list[int] = []
    qi = query_len - 1
    li = line_len - 1
    while qi >= 0 and li >= 0:
        if streaks[qi][li] == 0:
            li -= 1
        else:
            positions.append(li)
            qi -= 1
            li -= 1

    positions.reverse()
    return FuzzyMatch(score=total, positions=tuple(positions))
