"""CLI layer for fzgrep.

This module provides the command-line interface for fzgrep,
built on Typer with Rich formatting support.

Usage:
    fzgrep --help
    fzgrep -n -C 2 query file.txt
    cat file.txt | fzgrep query
"""

from fzgrep.cli.app import app, main
from fzgrep.cli.context import ExitCode, SearchRequest, create_request
from fzgrep.cli.options import FormatChoice

__all__ = [
    # App
    "app",
    "main",
    # Request
    "ExitCode",
    "SearchRequest",
    "create_request",
    # Options
    "FormatChoice",
]
