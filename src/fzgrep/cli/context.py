"""Request factory for turning CLI options into a search run.

CLI options take precedence over the configuration file; anything not
given on the command line falls back to the loaded configuration.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from fzgrep.config.schema import FzgrepConfig, OutputFormat, SourceNameMode
from fzgrep.search.options import CollectionStrategy, ContextSize, MatchOptions
from fzgrep.search.sources import (
    Source,
    file_source,
    stdin_source,
    unreadable_source,
)
from fzgrep.utils.files import PathFilter, UnreadableDirectory, iter_target_files


class ExitCode:
    """Process exit statuses, following grep."""

    SUCCESS = 0  # at least one match
    NO_MATCHES = 1
    FAILURE = 2


@dataclass
class SearchRequest:
    """A fully resolved run configuration.

    Attributes:
        query: The fuzzy query.
        targets: Files and directories to scan; empty means stdin, or
            the current directory when recursive.
        match_options: What to record about each match.
        strategy: How many matches to keep.
        recursive: Whether directories are descended into.
        path_filter: Include/exclude globs applied while recursing.
        include_hidden: Whether hidden entries are scanned while recursing.
        output_format: How results are rendered.
        color: Whether rich output is colored.
        show_score: Whether scores are printed.
        quiet: Suppress all result output.
    """

    query: str
    targets: list[Path] = field(default_factory=list)
    match_options: MatchOptions = field(default_factory=MatchOptions)
    strategy: CollectionStrategy = field(default_factory=CollectionStrategy.collect_all)
    recursive: bool = False
    path_filter: PathFilter = field(default_factory=PathFilter)
    include_hidden: bool = False
    output_format: OutputFormat = OutputFormat.PLAIN
    color: bool = True
    show_score: bool = False
    quiet: bool = False

    def iter_sources(self, stdin: TextIO | None = None) -> Iterator[Source]:
        """Yield the sources to scan, opening none of them yet.

        Directories that cannot be listed become sources that fail when
        opened, so the pipeline reports them in order.
        """
        if not self.targets and not self.recursive:
            yield stdin_source(stdin)
            return

        targets = self.targets or [Path(".")]
        for entry in iter_target_files(
            targets,
            recursive=self.recursive,
            path_filter=self.path_filter,
            include_hidden=self.include_hidden,
        ):
            if isinstance(entry, UnreadableDirectory):
                yield unreadable_source(entry.path, entry.error)
            else:
                yield file_source(entry)


def should_track_source_names(
    mode: SourceNameMode | str,
    override: bool | None,
    target_count: int,
    recursive: bool,
) -> bool:
    """Decide whether results carry source names.

    An explicit -f/-F wins; otherwise `auto` shows names when several
    targets are given or directories are searched recursively.
    """
    if override is not None:
        return override
    mode = SourceNameMode(mode)
    if mode == SourceNameMode.ALWAYS:
        return True
    if mode == SourceNameMode.NEVER:
        return False
    return target_count > 1 or recursive


def create_request(
    query: str,
    targets: list[Path] | None,
    config: FzgrepConfig,
    *,
    recursive: bool = False,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
    include_hidden: bool = False,
    line_numbers: bool = False,
    with_filename: bool | None = None,
    before: int | None = None,
    after: int | None = None,
    top: int | None = None,
    output_format: OutputFormat | None = None,
    color: bool | None = None,
    show_score: bool = False,
    quiet: bool = False,
) -> SearchRequest:
    """Create a SearchRequest from CLI options and configuration.

    Example:
        request = create_request(
            "needle",
            [Path("src")],
            config,
            recursive=True,
            line_numbers=True,
            before=2,
        )
        report = find_matches(request.query, request.iter_sources(), ...)
    """
    target_list = list(targets or [])
    is_recursive = recursive or config.traversal.recursive

    track_names = should_track_source_names(
        config.match.source_names,
        with_filename,
        len(target_list),
        is_recursive,
    )

    context_size = ContextSize(
        before=before if before is not None else config.context.before,
        after=after if after is not None else config.context.after,
    )

    keep = top if top is not None else config.match.top
    strategy = (
        CollectionStrategy.collect_all()
        if keep is None
        else CollectionStrategy.collect_top(keep)
    )

    return SearchRequest(
        query=query,
        targets=target_list,
        match_options=MatchOptions(
            track_line_numbers=line_numbers or config.match.line_numbers,
            track_source_names=track_names,
            context_size=context_size,
        ),
        strategy=strategy,
        recursive=is_recursive,
        path_filter=PathFilter.from_globs(
            include=[*config.traversal.include, *(include or [])],
            exclude=[*config.traversal.exclude, *(exclude or [])],
        ),
        include_hidden=include_hidden or config.traversal.include_hidden,
        output_format=output_format or OutputFormat(config.output.default_format),
        color=color if color is not None else config.output.color,
        show_score=show_score or config.output.show_score,
        quiet=quiet,
    )
