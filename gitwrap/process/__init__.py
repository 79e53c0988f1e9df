"""Argument construction and process execution."""

from gitwrap.process.arguments import ArgumentBuilder
from gitwrap.process.runner import (
    InvocationRequest,
    InvocationResult,
    ProcessRunner,
    SubprocessRunner,
    merge_environment,
    run,
)

__all__ = [
    "ArgumentBuilder",
    "InvocationRequest",
    "InvocationResult",
    "ProcessRunner",
    "SubprocessRunner",
    "merge_environment",
    "run",
]
