"""Pydantic models for git output records."""

from gitwrap.models.records import ChangeRecord, CommitRecord, ObjectType, TreeEntry

__all__ = [
    "ChangeRecord",
    "CommitRecord",
    "ObjectType",
    "TreeEntry",
]
