"""Show raw diffs."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import handle_git_errors


def diff(
    rev_range: Annotated[
        str | None,
        typer.Argument(help="Revision or range (working tree if omitted)"),
    ] = None,
    path: Annotated[
        str | None,
        typer.Argument(help="Limit the diff to this path"),
    ] = None,
    cached: Annotated[
        bool,
        typer.Option("--cached", help="Diff the index instead of the working tree"),
    ] = False,
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Show a diffstat instead of the patch"),
    ] = False,
) -> None:
    """Show changes between commits, the index and the working tree."""
    ctx = get_context()

    with handle_git_errors():
        output = ctx.git.diff(rev_range, path, options={"cached": cached, "stat": stat})

    console.print(output, end="", markup=False, highlight=False)
