"""Shared CLI context with lazy-initialized dependencies."""

from pathlib import Path

from gitwrap import Git, GitConfig


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext(repo=Path("."))
        commits = ctx.git.log(options={"limit": 5})
    """

    def __init__(
        self, repo: Path | None = None, verbose: bool = False, quiet: bool = False
    ):
        """Initialize CLI context.

        Args:
            repo: Repository directory overriding GITWRAP_WORKING_DIR
            verbose: If True, enable debug logging
            quiet: If True, suppress non-error output
        """
        self.repo = repo
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: GitConfig | None = None
        self._git: Git | None = None

    @property
    def config(self) -> GitConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = GitConfig.from_env()
            if self.repo is not None:
                self._config.working_directory = self.repo
        return self._config

    @property
    def git(self) -> Git:
        """Get git facade (lazy-loaded)."""
        if self._git is None:
            self._git = Git(self.config)
        return self._git

    def close(self) -> None:
        if self._git is not None:
            self._git.close()


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
