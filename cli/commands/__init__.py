"""CLI commands package."""

from cli.commands.diff import diff
from cli.commands.log import changed, log
from cli.commands.tree import tree, tree_diff
from cli.commands.version import version

__all__ = [
    "changed",
    "diff",
    "log",
    "tree",
    "tree_diff",
    "version",
]
