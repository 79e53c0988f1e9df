"""Structured records parsed from git output."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ObjectType(str, Enum):
    """Object types listed by `git ls-tree`."""

    SUBMODULE = "submodule"
    TREE = "tree"
    BLOB = "blob"

    @property
    def priority(self) -> int:
        """Sort priority: submodules, then trees, then blobs."""
        return _TYPE_PRIORITY[self]


_TYPE_PRIORITY = {
    ObjectType.SUBMODULE: 0,
    ObjectType.TREE: 1,
    ObjectType.BLOB: 2,
}


class CommitRecord(BaseModel):
    """One line of `git log` output."""

    model_config = ConfigDict(frozen=True)

    hash: str
    name: str
    email: str
    date: str  # As printed by git (RFC 2822), not reparsed
    title: str


class TreeEntry(BaseModel):
    """One entry of a tree listing."""

    model_config = ConfigDict(frozen=True)

    mode: str
    type: ObjectType
    hash: str
    path: str
    sort_key: str


class ChangeRecord(BaseModel):
    """A status code paired with a filename (`--name-status` output)."""

    model_config = ConfigDict(frozen=True)

    status: str
    filename: str
