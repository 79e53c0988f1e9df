"""Display helpers for CLI output."""

from cli.display.console import console
from cli.display.table_renderer import TableRenderer

__all__ = ["TableRenderer", "console"]
