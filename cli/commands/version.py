"""Show the git version."""

from cli.context import get_context
from cli.display import console
from cli.utils import handle_git_errors


def version() -> None:
    """Show the version of the configured git binary."""
    ctx = get_context()

    with handle_git_errors():
        output = ctx.git.version()

    console.print(output.strip(), markup=False, highlight=False)
