"""Exception hierarchy for git operations."""


class GitError(Exception):
    """Base exception for git operations."""

    pass


class InvalidOptionsError(GitError):
    """Unrecognized or malformed option supplied to a subcommand."""

    pass


class KeyProvisioningError(GitError):
    """Private key or GIT_SSH wrapper path could not be resolved."""

    pass


class CommandFailedError(GitError):
    """Git exited with a non-zero status."""

    def __init__(self, stderr: str, exit_code: int, command_line: str):
        self.stderr = stderr
        self.exit_code = exit_code
        self.command_line = command_line
        message = stderr.strip() or f"exit code {exit_code}"
        super().__init__(f"{command_line}: {message}")


class CommandTimeoutError(GitError):
    """Git exceeded the configured wall-clock limit and was terminated."""

    def __init__(self, timeout: float, command_line: str):
        self.timeout = timeout
        self.command_line = command_line
        super().__init__(f"{command_line}: timed out after {timeout}s")


class MalformedOutputError(GitError):
    """Git output did not match the shape expected by its parser."""

    def __init__(self, message: str, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        super().__init__(f"{message} (line {line_number}: {line!r})")
