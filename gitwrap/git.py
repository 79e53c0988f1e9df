"""Git facade: one method per supported subcommand."""

import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from gitwrap.commands import (
    AddOptions,
    CommandOptions,
    CommandRegistry,
    CommitOptions,
    DiffOptions,
    InitOptions,
    LogOptions,
    ShowOptions,
    TreeDiffOptions,
    resolve_options,
    setup_command_registry,
)
from gitwrap.config import GitConfig
from gitwrap.exceptions import InvalidOptionsError, KeyProvisioningError
from gitwrap.models import ChangeRecord, CommitRecord, TreeEntry
from gitwrap.process import (
    ArgumentBuilder,
    InvocationRequest,
    ProcessRunner,
    SubprocessRunner,
    merge_environment,
    run,
)
from gitwrap.ssh import SshWrapper

logger = logging.getLogger(__name__)

OptionsArg = Mapping[str, Any] | CommandOptions | None
PathArg = str | Path | Sequence[str | Path] | None


class Git:
    """Run git subcommands against a working directory and parse their output.

    Options are passed as a mapping (or the command's options model) through
    the ``options`` keyword, so a call may supply positional fields, options,
    or options alone::

        git = Git(GitConfig(working_directory=Path("/path/to/repo")))
        git.log("v1.0..HEAD", "src", options={"limit": 5})
        git.log(options={"limit": 1})

    Unknown option keys raise InvalidOptionsError before git is started.
    Failures raise CommandFailedError, CommandTimeoutError or
    MalformedOutputError; no call returns partial results.

    The instance owns any temporary GIT_SSH wrapper created by
    set_private_key(); use it as a context manager (or call close()) to
    remove it. An instance dropped without close() removes it when collected.
    """

    def __init__(
        self,
        config: GitConfig | None = None,
        runner: ProcessRunner | None = None,
        registry: CommandRegistry | None = None,
    ):
        """
        Initialize Git.

        Args:
            config: Session configuration (defaults to GitConfig())
            runner: ProcessRunner implementation (defaults to SubprocessRunner)
            registry: Command registry (defaults to setup_command_registry())
        """
        self.config = config or GitConfig()
        self.runner = runner or SubprocessRunner()
        self.registry = registry or setup_command_registry()
        self._ssh_wrapper: SshWrapper | None = None

    # Configuration

    def set_bin(self, binary: str) -> "Git":
        return self._assign("binary", binary)

    def get_bin(self) -> str:
        return self.config.binary

    def set_repository(self, directory: str | Path) -> "Git":
        return self._assign("working_directory", directory)

    def set_timeout(self, timeout: int) -> "Git":
        return self._assign("timeout", timeout)

    def get_timeout(self) -> int:
        return self.config.timeout

    def set_env_var(self, name: str, value: Any) -> "Git":
        """Set a variable visible only to git child processes."""
        self.config.env[name] = str(value)
        return self

    def unset_env_var(self, name: str) -> "Git":
        self.config.env.pop(name, None)
        return self

    def get_env_var(self, name: str, default: str | None = None) -> str | None:
        return self.config.env.get(name, default)

    def get_env_vars(self) -> dict[str, str]:
        return dict(self.config.env)

    def _assign(self, field: str, value: Any) -> "Git":
        try:
            setattr(self.config, field, value)
        except ValidationError as e:
            raise InvalidOptionsError(f"Invalid {field}: {value!r}") from e
        return self

    def set_private_key(
        self,
        private_key: str | Path,
        port: int = 22,
        wrapper: str | Path | None = None,
    ) -> "Git":
        """
        Authenticate SSH remotes with an alternate private key.

        Sets GIT_SSH to a wrapper script and GIT_SSH_KEY / GIT_SSH_PORT for
        the script to read. Without an explicit wrapper, a temporary one is
        written and removed again by close().

        Args:
            private_key: Path to the private key
            port: Port the SSH server listens on
            wrapper: Path to an existing GIT_SSH wrapper script

        Raises:
            KeyProvisioningError: If the key or wrapper path cannot be resolved
        """
        key_path = _resolve_existing(private_key, "Private key")

        if wrapper is not None:
            wrapper_path = _resolve_existing(wrapper, "GIT_SSH wrapper script")
        else:
            if self._ssh_wrapper is None:
                self._ssh_wrapper = SshWrapper()
            wrapper_path = self._ssh_wrapper.create()

        logger.debug(f"Using private key {key_path} (port {port}) via {wrapper_path}")
        return (
            self.set_env_var("GIT_SSH", wrapper_path)
            .set_env_var("GIT_SSH_KEY", key_path)
            .set_env_var("GIT_SSH_PORT", int(port))
        )

    def close(self) -> None:
        """Remove the temporary GIT_SSH wrapper, if one was created."""
        if self._ssh_wrapper is None or self._ssh_wrapper.path is None:
            return
        if self.get_env_var("GIT_SSH") == str(self._ssh_wrapper.path):
            for name in ("GIT_SSH", "GIT_SSH_KEY", "GIT_SSH_PORT"):
                self.unset_env_var(name)
        self._ssh_wrapper.close()

    def __enter__(self) -> "Git":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Dispatch

    def execute(
        self,
        name: str,
        options: OptionsArg = None,
        flags: Sequence[str] = (),
        positionals: Sequence[Any] = (),
        paths: PathArg = None,
    ) -> Any:
        """
        Run a registered command.

        Args:
            name: Registry name of the command
            options: Options for the command's schema
            flags: Extra pre-rendered flag tokens
            positionals: Revision-like arguments
            paths: Path arguments, emitted after `--`

        Returns:
            Parsed records, or raw stdout for commands without a parser
        """
        spec = self.registry.get(name)
        resolved = resolve_options(spec.options, options)

        builder = ArgumentBuilder(self.config.binary)
        for key, value in self.config.config_overrides.items():
            builder.config_override(key, value)
        builder.global_flag(*spec.global_flags)
        builder.subcommand(spec.subcommand)
        builder.raw(*spec.fixed_flags)
        resolved.render(builder)
        builder.raw(*flags)
        builder.positional(*positionals)
        if paths is not None:
            builder.paths(paths)

        request = InvocationRequest(
            argv=tuple(builder.build()),
            cwd=self.config.working_directory,
            env=merge_environment(self.config.env),
            timeout=self.config.timeout,
        )
        output = run(self.runner, request)

        if spec.parser is None:
            return output
        return spec.parser.parse(output)

    # Subcommands

    def version(self) -> str:
        """Return `git --version` output."""
        return self.execute("version")

    def init(
        self, path: str | Path, options: Mapping[str, Any] | InitOptions | None = None
    ) -> None:
        """Create an empty repository or reinitialize an existing one.

        Options: bare, shared
        """
        self.execute("init", options, positionals=[path])

    def add(
        self, paths: PathArg, options: Mapping[str, Any] | AddOptions | None = None
    ) -> None:
        """Add file contents to the index.

        Options: force, ignore_errors
        """
        self.execute("add", options, paths=paths)

    def commit(
        self, message: str, options: Mapping[str, Any] | CommitOptions | None = None
    ) -> None:
        """Record changes to the repository.

        Options: all, amend, allow_empty, allow_empty_message
        """
        self.execute("commit", options, flags=["-m", message])

    def show(
        self, object_name: str, options: Mapping[str, Any] | ShowOptions | None = None
    ) -> str:
        """Show a blob, tree, tag or commit.

        Options: format, abbrev_commit
        """
        return self.execute("show", options, positionals=[object_name])

    def log(
        self,
        rev_range: str | None = None,
        path: PathArg = None,
        options: Mapping[str, Any] | LogOptions | None = None,
    ) -> list[CommitRecord]:
        """
        Return commit logs, newest first unless `reverse` is set.

        Options:
            limit (int): Number of commits to show (default 10)
            skip (int): Commits to skip before showing output (default 0)
            since (str): Show commits more recent than a date
            search (str): Case-insensitive match on the commit message
            reverse (bool): Oldest first
        """
        return self.execute("log", options, positionals=[rev_range], paths=path)

    def log_changed(
        self,
        rev_range: str | None = None,
        path: PathArg = None,
        status: bool = False,
    ) -> list[str] | list[ChangeRecord]:
        """
        Return files touched by the commits in rev_range.

        With status=True each entry is a ChangeRecord (e.g. status "M").
        A file touched by several commits appears once per commit.
        """
        name = "log.changed_status" if status else "log.changed"
        return self.execute(name, positionals=[rev_range], paths=path)

    def diff(
        self,
        rev_range: str | None = None,
        path: PathArg = None,
        options: Mapping[str, Any] | DiffOptions | None = None,
    ) -> str:
        """Return the raw diff for rev_range (working tree if omitted).

        Options: color, cached, stat
        """
        return self.execute("diff", options, positionals=[rev_range], paths=path)

    def tree(self, branch: str = "master", path: str = "") -> list[TreeEntry]:
        """
        List the contents of a tree object.

        Entries come in git's order; sort by `sort_key` to list submodules,
        then directories, then files.
        """
        return self.execute("tree", positionals=[f"{branch}:{path}"])

    def tree_diff(
        self,
        from_commit: str = "HEAD",
        to_commit: str | None = None,
        status: bool = False,
        options: Mapping[str, Any] | TreeDiffOptions | None = None,
    ) -> list[str] | list[ChangeRecord]:
        """
        Return files changed between two trees.

        With a single commit, compares it against its parent.

        Options:
            filter (str): `--diff-filter` letters (default "ACRMT")
        """
        name = "tree.diff_status" if status else "tree.diff"
        return self.execute(name, options, positionals=[from_commit, to_commit])


def _resolve_existing(path: str | Path, label: str) -> Path:
    try:
        return Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise KeyProvisioningError(f"{label} could not be resolved: {path}") from e
