"""Configuration for the command parser."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Lexical settings shared by every parsing stage."""

    # Leading character of a name token ("-v", "--path")
    name_marker: str = "-"

    # Quote delimiting a single token or a single list item
    quote_char: str = '"'

    # Separator between items of a string_list value
    list_separator: str = ","

    def __post_init__(self) -> None:
        for field_name in ("name_marker", "quote_char", "list_separator"):
            value = getattr(self, field_name)
            if len(value) != 1 or value.isspace():
                raise ValueError(
                    f"{field_name} must be a single non-whitespace character, got {value!r}"
                )
        if self.quote_char in (self.name_marker, self.list_separator):
            raise ValueError("quote_char must differ from name_marker and list_separator")

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Load configuration from ARGLINE_* environment variables.

        Unset variables fall back to the defaults.
        """
        defaults = cls()
        return cls(
            name_marker=os.getenv("ARGLINE_NAME_MARKER", defaults.name_marker),
            quote_char=os.getenv("ARGLINE_QUOTE_CHAR", defaults.quote_char),
            list_separator=os.getenv("ARGLINE_LIST_SEPARATOR", defaults.list_separator),
        )


DEFAULT_CONFIG = ParserConfig()
