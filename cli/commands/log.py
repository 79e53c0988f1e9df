"""Show commit logs and the files they touched."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import TableRenderer
from cli.utils import handle_git_errors


def log(
    rev_range: Annotated[
        str | None,
        typer.Argument(help="Revision range, e.g. v1.0..HEAD"),
    ] = None,
    path: Annotated[
        str | None,
        typer.Argument(help="Only commits touching this path"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of commits to show"),
    ] = 10,
    skip: Annotated[
        int,
        typer.Option("--skip", help="Skip this many commits first"),
    ] = 0,
    since: Annotated[
        str | None,
        typer.Option("--since", help="Only commits more recent than this date"),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--grep", help="Case-insensitive match on commit message"),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="Oldest commits first"),
    ] = False,
) -> None:
    """Show commit logs."""
    ctx = get_context()
    options = {
        "limit": limit,
        "skip": skip,
        "since": since,
        "search": search,
        "reverse": reverse,
    }

    with handle_git_errors():
        commits = ctx.git.log(rev_range, path, options=options)

    TableRenderer().render_commits(commits)


def changed(
    rev_range: Annotated[
        str | None,
        typer.Argument(help="Revision range, e.g. HEAD~3..HEAD"),
    ] = None,
    path: Annotated[
        str | None,
        typer.Argument(help="Only files under this path"),
    ] = None,
    status: Annotated[
        bool,
        typer.Option("--status", "-s", help="Show the change status of each file"),
    ] = False,
) -> None:
    """List files changed by the commits in a revision range."""
    ctx = get_context()
    renderer = TableRenderer()

    with handle_git_errors():
        changes = ctx.git.log_changed(rev_range, path, status=status)

    if status:
        renderer.render_changes(changes)
    else:
        renderer.render_lines(changes)
