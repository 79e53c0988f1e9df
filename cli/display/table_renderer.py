"""Table renderer for git records."""

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from gitwrap.models import ChangeRecord, CommitRecord, ObjectType, TreeEntry


class TableRenderer:
    """Render record lists as tables.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_commits(self, commits: list[CommitRecord]) -> None:
        """Render commits as HASH / AUTHOR / DATE / TITLE rows."""
        if not commits:
            self.render_empty("No commits found")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("HASH", style="yellow")
        table.add_column("AUTHOR", style="cyan")
        table.add_column("DATE", style="dim")
        table.add_column("TITLE")

        for commit in commits:
            table.add_row(
                commit.hash,
                escape(f"{commit.name} <{commit.email}>"),
                commit.date,
                escape(commit.title),
            )

        console.print(table)

    def render_tree(self, entries: list[TreeEntry]) -> None:
        """Render tree entries, directories before files."""
        if not entries:
            self.render_empty("Empty tree")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("MODE", style="dim")
        table.add_column("TYPE", style="dim")
        table.add_column("HASH", style="yellow")
        table.add_column("PATH")

        for entry in sorted(entries, key=lambda e: e.sort_key):
            path = escape(entry.path)
            if entry.type is not ObjectType.BLOB:
                path = f"[bold cyan]{path}/[/bold cyan]"
            table.add_row(entry.mode, entry.type.value, entry.hash[:12], path)

        console.print(table)

    def render_changes(self, changes: list[ChangeRecord]) -> None:
        """Render status / filename pairs."""
        if not changes:
            self.render_empty("No changes")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("STATUS", style="magenta")
        table.add_column("FILE")

        for change in changes:
            table.add_row(change.status, escape(change.filename))

        console.print(table)

    def render_lines(self, lines: list[str], empty_message: str = "No changes") -> None:
        if not lines:
            self.render_empty(empty_message)
            return
        for line in lines:
            console.print(line, markup=False, highlight=False)

    def render_empty(self, message: str) -> None:
        console.print(f"[dim]{message}[/dim]")
