"""Subcommand option schemas and the command registry."""

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
    resolve_options,
)
from gitwrap.commands.registry import (
    CommandRegistry,
    CommandSpec,
    setup_command_registry,
)

__all__ = [
    "AddOptions",
    "CommandOptions",
    "CommandRegistry",
    "CommandSpec",
    "CommitOptions",
    "DiffOptions",
    "InitOptions",
    "LogOptions",
    "NoOptions",
    "ShowOptions",
    "TreeDiffOptions",
    "resolve_options",
    "setup_command_registry",
]
