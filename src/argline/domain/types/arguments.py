"""Argument schema and intermediate parse types."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["ArgType", "ArgumentSpec", "ParsedPair", "ConvertedArgument"]


class ArgType(str, Enum):
    """Semantic type of a command argument."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    DATETIME = "datetime"
    TIMESPAN = "timespan"
    STRING_LIST = "string_list"

    @classmethod
    def from_tag(cls, tag: str) -> "ArgType":
        """Resolve a type tag or one of its short aliases.

        Raises:
            ValueError: If the tag names no known type
        """
        normalized = tag.strip().lower()
        normalized = _TYPE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown argument type '{tag}' (expected one of: {known})") from None


_TYPE_ALIASES = {
    "str": "string",
    "bool": "boolean",
    "int": "integer",
    "list": "string_list",
}


class ArgumentSpec(BaseModel):
    """Declaration of one expected command argument.

    Specs are written in the textual form ``name:type`` with a trailing ``*``
    for optional arguments, e.g. ``verbose:boolean*`` or ``:integer`` for an
    unnamed (positional-only) argument.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Argument name, generated when absent")
    type: ArgType = Field(ArgType.STRING, description="Semantic type of the value")
    is_optional: bool = Field(False, description="Whether the argument may be omitted")

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type_alias(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ArgType):
            return ArgType.from_tag(value)
        return value

    @property
    def is_flag(self) -> bool:
        """An optional boolean argument whose presence alone means True."""
        return self.is_optional and self.type == ArgType.BOOLEAN

    @classmethod
    def from_declaration(cls, declaration: str) -> "ArgumentSpec":
        """
        Build a spec from its textual declaration.

        Examples:
            'count:integer' -> required integer named 'count'
            'verbose:bool*' -> optional boolean (a flag) named 'verbose'
            'path' -> required string named 'path'
            ':int' -> required unnamed integer

        Args:
            declaration: Declaration text

        Returns:
            The parsed ArgumentSpec

        Raises:
            ValueError: If the declaration is empty or names an unknown type
        """
        text = declaration.strip()
        is_optional = text.endswith("*")
        if is_optional:
            text = text[:-1].rstrip()

        if ":" in text:
            name, tag = text.split(":", 1)
            arg_type = ArgType.from_tag(tag) if tag.strip() else ArgType.STRING
        else:
            name, arg_type = text, ArgType.STRING

        name = name.strip()
        if not name and ":" not in text:
            raise ValueError(f"Empty argument declaration: {declaration!r}")

        return cls(name=name or None, type=arg_type, is_optional=is_optional)

    def __str__(self) -> str:
        return f"{self.name or ''}:{self.type.value}" + ("*" if self.is_optional else "")


class ParsedPair(NamedTuple):
    """A (name, value) pair; a None name marks an unassigned positional value."""

    name: Optional[str]
    value: Optional[str]


@dataclass(frozen=True)
class ConvertedArgument:
    """An argument after type coercion.

    ``converted`` is False when coercion failed and the raw string was kept.
    """

    name: str
    value: Any
    spec: Optional[ArgumentSpec] = None
    converted: bool = True
