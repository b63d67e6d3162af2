"""Line sources for the search pipeline.

A Source couples an optional display name with a way to open its
content. Sources are opened lazily, one at a time, so only the source
currently being scanned holds an open handle.
"""

import sys
from collections.abc import Callable, Iterable, Iterator
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import TextIO

STDIN_DISPLAY_NAME = "(standard input)"

Opener = Callable[[], AbstractContextManager[Iterable[str]]]


def strip_line_ending(line: str) -> str:
    """Remove a single trailing newline."""
    if line.endswith("\n"):
        return line[:-1]
    return line


class Source:
    """One logical stream of lines.

    Attributes:
        name: Display name, None for an unnamed stream.
    """

    def __init__(self, name: str | None, opener: Opener) -> None:
        self.name = name
        self._opener = opener

    def lines(self) -> Iterator[str]:
        """Yield lines without their line terminators.

        Raises:
            OSError: If the source cannot be opened or read.
            UnicodeDecodeError: If the content is not valid text.
        """
        with self._opener() as stream:
            for line in stream:
                yield strip_line_ending(line)

    @classmethod
    def from_lines(cls, lines: Iterable[str], name: str | None = None) -> "Source":
        """Build a source over in-memory lines."""
        return cls(name, lambda: nullcontext(lines))

    def __repr__(self) -> str:
        return f"Source(name={self.name!r})"


def file_source(
    path: Path | str,
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> Source:
    """Create a source reading a file on disk."""
    file_path = Path(path)

    def _open() -> AbstractContextManager[Iterable[str]]:
        return open(file_path, encoding=encoding, errors=errors)

    return Source(str(file_path), _open)


def stdin_source(stream: TextIO | None = None) -> Source:
    """Create a source reading the standard input (or a given stream)."""
    text_stream = stream if stream is not None else sys.stdin
    return Source(STDIN_DISPLAY_NAME, lambda: nullcontext(text_stream))


def unreadable_source(path: Path | str, error: OSError) -> Source:
    """Create a source that fails with `error` when opened.

    Lets a traversal failure flow through the pipeline and be reported
    like any other unreadable source.
    """

    def _open() -> AbstractContextManager[Iterable[str]]:
        raise error

    return Source(str(path), _open)
