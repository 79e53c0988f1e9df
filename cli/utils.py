"""CLI utilities for error reporting."""

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.markup import escape

from cli.display.console import console
from gitwrap.exceptions import CommandFailedError, GitError

logger = logging.getLogger(__name__)


@contextmanager
def handle_git_errors() -> Iterator[None]:
    """Print GitError failures and exit with status 1."""
    try:
        yield
    except CommandFailedError as e:
        logger.debug(f"Command line: {e.command_line}")
        console.print(
            f"[red]git exited with {e.exit_code}:[/red] {escape(e.stderr.strip())}"
        )
        raise typer.Exit(1) from e
    except GitError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
