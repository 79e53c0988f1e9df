"""Closed registry of supported git subcommands."""

from dataclasses import dataclass
from typing import Dict

from gitwrap.commands.options import (
    AddOptions,
    CommandOptions,
    CommitOptions,
    DiffOptions,
    InitOptions,
    LogOptions,
    NoOptions,
    ShowOptions,
    TreeDiffOptions,
)
from gitwrap.exceptions import GitError
from gitwrap.parsing import LineParser, LogParser, StatusParser, TreeParser, log_format
from gitwrap.parsing.base import OutputParser


@dataclass(frozen=True)
class CommandSpec:
    """How to build and parse one kind of invocation.

    Attributes:
        name: Registry key (e.g. "log", "log.changed_status")
        subcommand: git subcommand token, or None for global-only calls
        options: Option schema resolved before the process is spawned
        parser: Parser for stdout; None returns stdout untouched
        global_flags: Tokens placed before the subcommand
        fixed_flags: Tokens placed before the option flags
    """

    name: str
    subcommand: str | None
    options: type[CommandOptions] = NoOptions
    parser: OutputParser | None = None
    global_flags: tuple[str, ...] = ()
    fixed_flags: tuple[str, ...] = ()


class CommandRegistry:
    """Registry for command specs by name."""

    def __init__(self):
        """Initialize registry."""
        self._commands: Dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        """Register a command spec under its name."""
        if spec.name in self._commands:
            raise GitError(f"Command already registered: {spec.name}")
        self._commands[spec.name] = spec

    def get(self, name: str) -> CommandSpec:
        """Get command spec by name."""
        if name not in self._commands:
            raise GitError(
                f"Unknown command: {name}. Supported commands: "
                f"{', '.join(sorted(self._commands))}"
            )
        return self._commands[name]

    def names(self) -> list[str]:
        return sorted(self._commands)


def setup_command_registry() -> CommandRegistry:
    """Set up the registry with every supported subcommand."""
    registry = CommandRegistry()
    for spec in (
        CommandSpec("version", None, global_flags=("--version",)),
        CommandSpec("init", "init", InitOptions),
        CommandSpec("add", "add", AddOptions),
        CommandSpec("commit", "commit", CommitOptions),
        CommandSpec("show", "show", ShowOptions),
        CommandSpec(
            "log",
            "log",
            LogOptions,
            LogParser(),
            fixed_flags=(f"--format={log_format()}",),
        ),
        CommandSpec(
            "log.changed",
            "log",
            parser=LineParser(),
            fixed_flags=("--name-only", "--format="),
        ),
        CommandSpec(
            "log.changed_status",
            "log",
            parser=StatusParser(),
            fixed_flags=("--name-status", "--format="),
        ),
        CommandSpec("diff", "diff", DiffOptions),
        CommandSpec("tree", "ls-tree", parser=TreeParser()),
        CommandSpec(
            "tree.diff",
            "diff-tree",
            TreeDiffOptions,
            LineParser(),
            fixed_flags=("-r", "--no-commit-id", "--name-only"),
        ),
        CommandSpec(
            "tree.diff_status",
            "diff-tree",
            TreeDiffOptions,
            StatusParser(),
            fixed_flags=("-r", "--no-commit-id", "--name-status"),
        ),
    ):
        registry.register(spec)
    return registry
