"""Structured parse errors."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from argline.domain.types.arguments import ArgumentSpec
from argline.formatting import pretty

__all__ = ["ParseErrorKind", "ParseError", "ParseException"]


class ParseErrorKind(str, Enum):
    """Kind of problem found while parsing a command line."""

    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    TYPE_MISMATCH = "type_mismatch"
    MISSING_REQUIRED_VALUE = "missing_required_value"
    # Reserved: the tokenizer never reports errors yet
    LEX_ERROR = "lex_error"


@dataclass(frozen=True)
class ParseError:
    """One problem with a command line, tied to the argument it concerns."""

    kind: ParseErrorKind
    arg_name: str
    argument: Optional[ArgumentSpec] = None
    value: Any = None

    @property
    def message(self) -> str:
        if self.kind == ParseErrorKind.MISSING_REQUIRED_ARGUMENT:
            return f"Missing required argument '{self.arg_name}'"
        if self.kind == ParseErrorKind.UNEXPECTED_ARGUMENT:
            return f"Unexpected argument '{self.arg_name}' (value: '{pretty(self.value)}')"
        if self.kind == ParseErrorKind.TYPE_MISMATCH:
            expected = self.argument.type.value if self.argument else "unknown"
            return f"Argument '{self.arg_name}' expects {expected}, got '{pretty(self.value)}'"
        if self.kind == ParseErrorKind.MISSING_REQUIRED_VALUE:
            return f"Argument '{self.arg_name}' requires a value"
        return f"Could not tokenize input near '{pretty(self.value)}'"

    def __str__(self) -> str:
        return self.message


class ParseException(Exception):
    """Raised by ParseResult.unwrap() when parsing failed."""

    def __init__(self, errors: Iterable[ParseError]):
        self.errors = list(errors)
        super().__init__("; ".join(error.message for error in self.errors))
