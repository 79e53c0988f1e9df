"""Temporary GIT_SSH wrapper script for private-key authentication."""

import logging
import os
import stat
import tempfile
import weakref
from pathlib import Path

logger = logging.getLogger(__name__)

# Reads the key and port from the variables Git.set_private_key() exports
WRAPPER_SCRIPT = """#!/bin/sh
exec ssh -i "$GIT_SSH_KEY" -p "$GIT_SSH_PORT" -o IdentitiesOnly=yes "$@"
"""


def _remove_script(path: Path) -> None:
    path.unlink(missing_ok=True)
    logger.debug(f"Removed GIT_SSH wrapper {path}")


class SshWrapper:
    """Executable wrapper script on disk.

    The script is removed by close(), or when the wrapper is garbage
    collected or the interpreter exits without close() having run.

    Usage:
        with SshWrapper() as wrapper:
            env["GIT_SSH"] = str(wrapper.path)
    """

    def __init__(self, directory: Path | None = None):
        self.directory = directory
        self.path: Path | None = None
        self._finalizer: weakref.finalize | None = None

    def create(self) -> Path:
        """Write the script (once) and return its path."""
        if self.path is not None:
            return self.path

        fd, name = tempfile.mkstemp(
            prefix="gitwrap-ssh-", suffix=".sh", dir=self.directory
        )
        path = Path(name)
        try:
            with os.fdopen(fd, "w") as f:
                f.write(WRAPPER_SCRIPT)
            path.chmod(stat.S_IRWXU)
        except OSError:
            path.unlink(missing_ok=True)
            raise

        self.path = path
        self._finalizer = weakref.finalize(self, _remove_script, path)
        logger.debug(f"Created GIT_SSH wrapper {path}")
        return path

    def close(self) -> None:
        """Remove the script if it was created."""
        if self._finalizer is not None:
            self._finalizer()
        self._finalizer = None
        self.path = None

    def __enter__(self) -> "SshWrapper":
        self.create()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
