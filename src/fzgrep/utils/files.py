"""Target expansion: turn command-line targets into files to scan."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from pathspec import PathSpec

# Binary file extensions to skip during recursion
BINARY_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".bmp",
        ".ico",
        ".webp",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".bz2",
        ".xz",
        ".7z",
        ".rar",
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".bin",
        ".mp3",
        ".mp4",
        ".wav",
        ".avi",
        ".mov",
        ".mkv",
        ".pyc",
        ".pyo",
        ".class",
        ".o",
        ".obj",
        ".db",
        ".sqlite",
        ".woff",
        ".woff2",
        ".ttf",
        ".otf",
        ".eot",
    }
)

# Directories never descended into
IGNORED_DIRS = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        ".venv",
        ".tox",
        ".nox",
    }
)


def is_binary_file(path: Path) -> bool:
    """Check if a file is likely binary based on extension."""
    return path.suffix.lower() in BINARY_EXTENSIONS


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden (starts with .)."""
    return path.name.startswith(".") and path.name not in (".", "..")


def should_ignore_dir(name: str, include_hidden: bool = False) -> bool:
    """Check if a directory should be skipped during traversal."""
    if name in IGNORED_DIRS:
        return True
    return not include_hidden and name.startswith(".")


@dataclass(frozen=True)
class PathFilter:
    """Include/exclude glob filter using gitignore-style patterns.

    A path passes when it matches no exclude pattern and, if include
    patterns were given, at least one of them. Paths are tested in
    slash-separated form relative to the traversal root.
    """

    include: PathSpec | None = None
    exclude: PathSpec | None = None

    @classmethod
    def from_globs(
        cls,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ) -> "PathFilter":
        return cls(
            include=PathSpec.from_lines("gitwildmatch", include) if include else None,
            exclude=PathSpec.from_lines("gitwildmatch", exclude) if exclude else None,
        )

    @property
    def is_empty(self) -> bool:
        return self.include is None and self.exclude is None

    def test(self, path: Path | str) -> bool:
        normalized = str(path).replace("\\", "/")
        if self.exclude is not None and self.exclude.match_file(normalized):
            return False
        return self.include is None or self.include.match_file(normalized)


@dataclass(frozen=True)
class UnreadableDirectory:
    """A directory that could not be listed during traversal.

    Yielded in place of the directory's contents so the caller can
    report the failure in order and keep going.
    """

    path: Path
    error: OSError


def iter_directory(
    directory: Path,
    *,
    path_filter: PathFilter | None = None,
    include_hidden: bool = False,
    skip_binary: bool = True,
) -> Iterator[Path | UnreadableDirectory]:
    """Iterate over files below a directory, depth-first in name order.

    Args:
        directory: Root directory to search.
        path_filter: Include/exclude filter applied to paths relative
            to `directory`.
        include_hidden: Include hidden files and directories.
        skip_binary: Skip files with binary extensions.

    Yields:
        Path objects for files to scan, and an UnreadableDirectory for
        every directory (the root included) that cannot be listed.
    """

    def _walk(path: Path) -> Iterator[Path | UnreadableDirectory]:
        try:
            entries = sorted(path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            yield UnreadableDirectory(path, e)
            return

        for entry in entries:
            if entry.is_dir():
                if should_ignore_dir(entry.name, include_hidden):
                    continue
                yield from _walk(entry)

            elif entry.is_file():
                if not include_hidden and is_hidden(entry):
                    continue
                if skip_binary and is_binary_file(entry):
                    continue
                if path_filter is not None and not path_filter.test(
                    entry.relative_to(directory)
                ):
                    continue
                yield entry

    yield from _walk(directory)


def iter_target_files(
    targets: Iterable[Path],
    *,
    recursive: bool = False,
    path_filter: PathFilter | None = None,
    include_hidden: bool = False,
) -> Iterator[Path | UnreadableDirectory]:
    """Expand targets into the files to scan.

    Files are yielded as given, even when they would be filtered out
    during recursion. Directories are expanded only when `recursive` is
    set; otherwise they are yielded unchanged so the caller can report
    them. Missing paths are yielded unchanged as well.
    """
    for target in targets:
        if recursive and target.is_dir():
            yield from iter_directory(
                target,
                path_filter=path_filter,
                include_hidden=include_hidden,
            )
        else:
            yield target
