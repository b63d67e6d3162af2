"""Main CLI application for fzgrep."""

import sys
from pathlib import Path

import typer
from rich.console import Console

from fzgrep import __version__
from fzgrep.cli.context import ExitCode, create_request
from fzgrep.cli.options import (
    AfterContextOption,
    BeforeContextOption,
    ColorOption,
    ConfigOption,
    ContextOption,
    ExcludeOption,
    FormatOption,
    HiddenOption,
    IncludeOption,
    LineNumberOption,
    LogLevelOption,
    NoFilenameOption,
    QuietOption,
    RecursiveOption,
    ScoreOption,
    TopOption,
    VerboseOption,
    WithFilenameOption,
    get_output_format,
    resolve_context_sizes,
    resolve_filename_flag,
    resolve_verbosity,
)
from fzgrep.config import load_config, write_default_config
from fzgrep.exceptions import FzgrepError
from fzgrep.output import get_formatter
from fzgrep.search import Pipeline, make_collector
from fzgrep.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Create Typer app
app = typer.Typer(
    name="fzgrep",
    help="Fuzzy grep: rank lines by how well they fuzzy-match a query.",
    add_completion=False,
    no_args_is_help=True,
    epilog=(
        "With more than one TARGET, or with --recursive, source names are shown. "
        "Exit status is 0 if any match is found, 1 otherwise; "
        "if any error occurs, the exit status is 2."
    ),
)

# Rich console for errors raised before a formatter exists
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fzgrep version {__version__}")
        raise typer.Exit()


def init_config_callback(value: bool) -> None:
    """Write the default configuration file and exit."""
    if value:
        try:
            path = write_default_config()
        except FzgrepError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(ExitCode.FAILURE) from None
        typer.echo(f"Wrote {path}")
        raise typer.Exit()


@app.command()
def search(
    query: str = typer.Argument(..., help="Pattern to fuzzy-match."),
    targets: list[Path] | None = typer.Argument(
        None,
        help=(
            "Files or directories to search. Defaults to the current directory "
            "with --recursive, and to the standard input otherwise."
        ),
        show_default=False,
    ),
    recursive: RecursiveOption = False,
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    hidden: HiddenOption = False,
    line_number: LineNumberOption = False,
    with_filename: WithFilenameOption = False,
    no_filename: NoFilenameOption = False,
    context: ContextOption = None,
    before_context: BeforeContextOption = None,
    after_context: AfterContextOption = None,
    top: TopOption = None,
    format: FormatOption = None,
    color: ColorOption = None,
    score: ScoreOption = False,
    quiet: QuietOption = False,
    verbose: VerboseOption = 0,
    config_path: ConfigOption = None,
    log_level: LogLevelOption = None,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        callback=init_config_callback,
        is_eager=True,
        help="Write a default configuration file and exit.",
    ),
) -> None:
    """Search TARGETS for lines fuzzy-matching QUERY, best matches first."""
    before, after = resolve_context_sizes(context, before_context, after_context)
    filename_flag = resolve_filename_flag(with_filename, no_filename)
    resolve_verbosity(verbose, quiet)

    try:
        config = load_config(config_path, required=config_path is not None)
    except FzgrepError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(ExitCode.FAILURE) from None

    setup_logging(
        log_level or config.logging.level,
        verbose=verbose,
        quiet=quiet,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        use_color=sys.stderr.isatty(),
    )

    request = create_request(
        query,
        targets,
        config,
        recursive=recursive,
        include=include,
        exclude=exclude,
        include_hidden=hidden,
        line_numbers=line_number,
        with_filename=filename_flag,
        before=before,
        after=after,
        top=top,
        output_format=get_output_format(format) if format is not None else None,
        color=color,
        show_score=score,
        quiet=quiet,
    )
    logger.debug("Running with %s", request)

    formatter = get_formatter(
        request.output_format,
        color=request.color,
        show_score=request.show_score,
    )

    pipeline = Pipeline(
        request.query,
        request.match_options,
        make_collector(request.strategy),
    )
    report = pipeline.run(request.iter_sources())

    if not request.quiet:
        for failure in report.failures:
            formatter.print_error(str(failure))
        formatter.print_results(report.records)

    if report.has_failures:
        raise typer.Exit(ExitCode.FAILURE)
    if not report.has_matches:
        raise typer.Exit(ExitCode.NO_MATCHES)
    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
