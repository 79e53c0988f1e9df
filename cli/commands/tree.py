"""List tree contents and tree-to-tree changes."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import TableRenderer
from cli.utils import handle_git_errors


def tree(
    branch: Annotated[
        str,
        typer.Argument(help="Commit, branch or tag"),
    ] = "HEAD",
    path: Annotated[
        str,
        typer.Argument(help="Directory inside the tree"),
    ] = "",
) -> None:
    """List the contents of a tree object."""
    ctx = get_context()

    with handle_git_errors():
        entries = ctx.git.tree(branch, path)

    TableRenderer().render_tree(entries)


def tree_diff(
    from_commit: Annotated[
        str,
        typer.Argument(help="Commit to compare from (its parent if used alone)"),
    ] = "HEAD",
    to_commit: Annotated[
        str | None,
        typer.Argument(help="Commit to compare to"),
    ] = None,
    status: Annotated[
        bool,
        typer.Option("--status", "-s", help="Show the change status of each file"),
    ] = False,
    diff_filter: Annotated[
        str,
        typer.Option("--filter", help="Change types to include (git --diff-filter)"),
    ] = "ACRMT",
) -> None:
    """List files changed between two trees."""
    ctx = get_context()
    renderer = TableRenderer()

    with handle_git_errors():
        changes = ctx.git.tree_diff(
            from_commit, to_commit, status=status, options={"filter": diff_filter}
        )

    if status:
        renderer.render_changes(changes)
    else:
        renderer.render_lines(changes)
