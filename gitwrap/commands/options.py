"""Typed option schemas for git subcommands.

Each subcommand declares a pydantic model whose fields are the recognized
option names with their types and defaults. The rendering rule for a field
is attached as ``Annotated`` metadata::

    class LogOptions(CommandOptions):
        skip: Annotated[int, Option("skip")] = 0     # --skip=0
        reverse: Annotated[bool, Flag("reverse")] = False  # --reverse

Fields are rendered in declaration order.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gitwrap.exceptions import InvalidOptionsError
from gitwrap.process.arguments import ArgumentBuilder


@dataclass(frozen=True)
class Flag:
    """Render `--name` when the value is truthy."""

    name: str

    def apply(self, builder: ArgumentBuilder, value: Any) -> None:
        builder.flag(self.name, bool(value))


@dataclass(frozen=True)
class Option:
    """Render `--name=value` (plus any trailing tokens) when a value is present."""

    name: str
    trailing: tuple[str, ...] = ()

    def apply(self, builder: ArgumentBuilder, value: Any) -> None:
        if value is None or value == "":
            return
        builder.option(self.name, value)
        builder.raw(*self.trailing)


@dataclass(frozen=True)
class Short:
    """Render `-x value` when a value is present."""

    letter: str

    def apply(self, builder: ArgumentBuilder, value: Any) -> None:
        if value is None or value == "":
            return
        builder.short(self.letter, value)


RenderRule = Flag | Option | Short


class CommandOptions(BaseModel):
    """Base class for subcommand option schemas."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self, builder: ArgumentBuilder) -> ArgumentBuilder:
        """Append this record's flags to builder."""
        for name, field_info in type(self).model_fields.items():
            for rule in field_info.metadata:
                if isinstance(rule, RenderRule):
                    rule.apply(builder, getattr(self, name))
        return builder


class NoOptions(CommandOptions):
    """Schema for subcommands that accept no options."""


class LogOptions(CommandOptions):
    since: Annotated[str | None, Option("since")] = None
    search: Annotated[str | None, Option("grep", trailing=("-i",))] = None
    limit: Annotated[int, Short("n"), Field(ge=0)] = 10
    skip: Annotated[int, Option("skip"), Field(ge=0)] = 0
    reverse: Annotated[bool, Flag("reverse")] = False


class DiffOptions(CommandOptions):
    color: Annotated[bool, Flag("color")] = False
    cached: Annotated[bool, Flag("cached")] = False
    stat: Annotated[bool, Flag("stat")] = False


class TreeDiffOptions(CommandOptions):
    # Added, Copied, Renamed, Modified, Type changed
    filter: Annotated[str | None, Option("diff-filter")] = "ACRMT"


class InitOptions(CommandOptions):
    bare: Annotated[bool, Flag("bare")] = False
    shared: Annotated[bool, Flag("shared")] = False


class AddOptions(CommandOptions):
    force: Annotated[bool, Flag("force")] = False
    ignore_errors: Annotated[bool, Flag("ignore-errors")] = False


class CommitOptions(CommandOptions):
    all: Annotated[bool, Flag("all")] = False
    amend: Annotated[bool, Flag("amend")] = False
    allow_empty: Annotated[bool, Flag("allow-empty")] = False
    allow_empty_message: Annotated[bool, Flag("allow-empty-message")] = False


class ShowOptions(CommandOptions):
    format: Annotated[str | None, Option("format")] = None
    abbrev_commit: Annotated[bool, Flag("abbrev-commit")] = False


OptionsT = TypeVar("OptionsT", bound=CommandOptions)


def resolve_options(
    schema: type[OptionsT], supplied: Mapping[str, Any] | OptionsT | None
) -> OptionsT:
    """
    Validate supplied options against a schema.

    Args:
        schema: CommandOptions subclass declaring the recognized options
        supplied: Option mapping, an already-built schema instance, or None

    Returns:
        Validated, immutable options record with defaults filled in

    Raises:
        InvalidOptionsError: On unknown keys or values of the wrong type
    """
    if supplied is None:
        return schema()
    if isinstance(supplied, schema):
        return supplied
    if not isinstance(supplied, Mapping):
        raise InvalidOptionsError(
            f"Options must be a mapping or {schema.__name__}, "
            f"got {type(supplied).__name__}"
        )

    unknown = sorted(str(key) for key in supplied if key not in schema.model_fields)
    if unknown:
        recognized = ", ".join(schema.model_fields) or "none"
        raise InvalidOptionsError(
            f"Unrecognized option(s) {', '.join(unknown)}; recognized: {recognized}"
        )

    try:
        return schema(**supplied)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid options: {e}") from e
