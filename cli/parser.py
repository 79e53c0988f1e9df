"""CLI app definition and command routing."""

from pathlib import Path

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import changed, diff, log, tree, tree_diff, version
from cli.context import CLIContext, get_context, set_context

app = typer.Typer(
    help="Query a git repository through the gitwrap library.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    repo: Annotated[
        Path | None,
        typer.Option(
            "--repo",
            "-C",
            help="Repository directory (default: GITWRAP_WORKING_DIR or cwd)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each git command line"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors"),
    ] = False,
) -> None:
    """Set up logging and the shared context."""
    setup_logging(verbose=verbose, quiet=quiet)
    set_context(CLIContext(repo=repo, verbose=verbose, quiet=quiet))
    ctx.call_on_close(lambda: get_context().close())


app.command()(version)
app.command()(log)
app.command()(changed)
app.command()(diff)
app.command()(tree)
app.command("tree-diff")(tree_diff)
