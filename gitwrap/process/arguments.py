"""Argument vector construction for git invocations."""

from typing import Iterable


class ArgumentBuilder:
    """Assemble the ordered token vector for one git invocation.

    Tokens are always emitted as::

        <binary> <global flags> <subcommand> <flags> <positionals> [-- <paths>]

    regardless of the order in which the builder methods are called, so a
    path can never be mistaken for a revision or a flag.

    Usage:
        argv = (
            ArgumentBuilder("git")
            .subcommand("log")
            .option("skip", 5)
            .positional("HEAD~3..HEAD")
            .paths("README.md")
            .build()
        )
        # ["git", "log", "--skip=5", "HEAD~3..HEAD", "--", "README.md"]
    """

    def __init__(self, binary: str = "git"):
        self._binary = binary
        self._global_flags: list[str] = []
        self._subcommand: str | None = None
        self._flags: list[str] = []
        self._positionals: list[str] = []
        self._paths: list[str] = []

    def global_flag(self, *tokens: str) -> "ArgumentBuilder":
        """Add tokens that precede the subcommand (e.g. `-c k=v`, `--version`)."""
        self._global_flags.extend(tokens)
        return self

    def config_override(self, key: str, value: str) -> "ArgumentBuilder":
        """Add a `-c key=value` global flag."""
        return self.global_flag("-c", f"{key}={value}")

    def subcommand(self, name: str | None) -> "ArgumentBuilder":
        self._subcommand = name
        return self

    def flag(self, name: str, enabled: bool = True) -> "ArgumentBuilder":
        """Add a boolean `--name` flag when enabled."""
        if enabled:
            self._flags.append(f"--{name}")
        return self

    def option(self, name: str, value) -> "ArgumentBuilder":
        """Add `--name=value` unless value is absent (None or empty string)."""
        if _is_present(value):
            self._flags.append(f"--{name}={value}")
        return self

    def short(self, letter: str, value=None) -> "ArgumentBuilder":
        """Add `-x` or `-x value`; a value of None adds the bare switch."""
        self._flags.append(f"-{letter}")
        if value is not None:
            self._flags.append(str(value))
        return self

    def raw(self, *tokens: str) -> "ArgumentBuilder":
        """Add pre-rendered flag tokens verbatim."""
        self._flags.extend(tokens)
        return self

    def positional(self, *values) -> "ArgumentBuilder":
        """Add revision-like positional arguments, skipping absent ones."""
        self._positionals.extend(str(v) for v in values if _is_present(v))
        return self

    def paths(self, *values) -> "ArgumentBuilder":
        """Add path arguments; they are emitted after a `--` separator."""
        self._paths.extend(str(v) for v in _flatten(values) if _is_present(v))
        return self

    def build(self) -> list[str]:
        """Return the token vector."""
        argv = [self._binary, *self._global_flags]
        if self._subcommand:
            argv.append(self._subcommand)
        argv.extend(self._flags)
        argv.extend(self._positionals)
        if self._paths:
            argv.append("--")
            argv.extend(self._paths)
        return argv


def _is_present(value) -> bool:
    return value is not None and value != ""


def _flatten(values: Iterable) -> list:
    flat = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(value)
        else:
            flat.append(value)
    return flat
