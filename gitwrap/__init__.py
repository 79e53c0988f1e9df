"""Python wrapper around the git command line."""

from gitwrap.config import GitConfig
from gitwrap.exceptions import (
    CommandFailedError,
    CommandTimeoutError,
    GitError,
    InvalidOptionsError,
    KeyProvisioningError,
    MalformedOutputError,
)
from gitwrap.git import Git
from gitwrap.models import ChangeRecord, CommitRecord, ObjectType, TreeEntry

__all__ = [
    "ChangeRecord",
    "CommandFailedError",
    "CommandTimeoutError",
    "CommitRecord",
    "Git",
    "GitConfig",
    "GitError",
    "InvalidOptionsError",
    "KeyProvisioningError",
    "MalformedOutputError",
    "ObjectType",
    "TreeEntry",
]
