"""Child process execution for git commands."""

import logging
import os
import shlex
import signal
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Protocol

from gitwrap.exceptions import CommandFailedError, CommandTimeoutError

logger = logging.getLogger(__name__)

# Exit status reported when the binary itself could not be started
SPAWN_FAILURE_EXIT_CODE = 127


@dataclass(frozen=True)
class InvocationRequest:
    """Everything needed to run one git process."""

    argv: tuple[str, ...]
    cwd: Path
    env: Mapping[str, str] = field(default_factory=dict)
    timeout: float | None = None

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering of argv for diagnostics."""
        return shlex.join(self.argv)


@dataclass(frozen=True)
class InvocationResult:
    """Result of a git command execution."""

    returncode: int
    stdout: str
    stderr: str


def merge_environment(overlay: Mapping[str, str]) -> dict[str, str]:
    """Layer overlay variables over the inherited environment.

    Overlay entries win on key collision; inherited entries are never removed.
    """
    env = dict(os.environ)
    env.update({key: str(value) for key, value in overlay.items()})
    return env


class ProcessRunner(Protocol):
    """Protocol for git process execution."""

    def execute(self, request: InvocationRequest) -> InvocationResult:
        """
        Run the request to completion.

        Args:
            request: Fully built invocation

        Returns:
            InvocationResult with returncode, stdout, and stderr

        Raises:
            CommandTimeoutError: If the process outlived request.timeout
        """
        ...


class SubprocessRunner:
    """ProcessRunner implementation using subprocess."""

    def execute(self, request: InvocationRequest) -> InvocationResult:
        """
        Execute a git command using subprocess.

        The child is killed and reaped before CommandTimeoutError propagates.

        Args:
            request: Fully built invocation

        Returns:
            InvocationResult with returncode, stdout, and stderr
        """
        logger.debug(f"Running: {request.command_line} (cwd={request.cwd})")
        try:
            process = subprocess.Popen(
                list(request.argv),
                cwd=request.cwd,
                env=dict(request.env) if request.env else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                start_new_session=os.name == "posix",
            )
        except OSError as e:
            # Convert spawn failure to a result so it surfaces as a failed command
            return InvocationResult(
                returncode=SPAWN_FAILURE_EXIT_CODE,
                stdout="",
                stderr=str(e),
            )

        try:
            stdout, stderr = process.communicate(timeout=request.timeout)
        except subprocess.TimeoutExpired:
            _terminate(process)
            process.communicate()
            logger.warning(
                f"Git command timed out after {request.timeout}s: "
                f"{request.command_line}"
            )
            raise CommandTimeoutError(request.timeout, request.command_line)
        except BaseException:
            _terminate(process)
            process.wait()
            raise

        return InvocationResult(
            returncode=process.returncode,
            stdout=stdout,
            stderr=stderr,
        )


def _terminate(process: subprocess.Popen) -> None:
    """Kill the child (and anything it spawned in its session)."""
    if process.poll() is not None:
        return
    if os.name == "posix":
        try:
            os.killpg(process.pid, signal.SIGKILL)
            return
        except ProcessLookupError:
            return
        except PermissionError:
            pass
    process.kill()


def run(runner: ProcessRunner, request: InvocationRequest) -> str:
    """
    Execute a request and return stdout, failing on a non-zero exit.

    Args:
        runner: ProcessRunner implementation
        request: Fully built invocation

    Returns:
        Captured stdout

    Raises:
        CommandFailedError: If git exited with a non-zero status
        CommandTimeoutError: If git exceeded the timeout
    """
    result = runner.execute(request)
    if result.returncode != 0:
        logger.debug(
            f"Git command failed ({result.returncode}): {request.command_line}: "
            f"{result.stderr.strip()}"
        )
        raise CommandFailedError(
            result.stderr, result.returncode, request.command_line
        )
    return result.stdout
