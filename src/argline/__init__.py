"""Schema-driven parsing of single-line CLI/REPL commands into typed arguments."""

from argline.config import ParserConfig
from argline.core.coercion import TypeCoercer
from argline.core.parsers import CommandParser, parse
from argline.domain.types import (
    ArgType,
    ArgumentSpec,
    ParseError,
    ParseErrorKind,
    ParseException,
    ParseResult,
)
from argline.formatting import pretty

__all__ = [
    "ArgType",
    "ArgumentSpec",
    "CommandParser",
    "ParseError",
    "ParseErrorKind",
    "ParseException",
    "ParseResult",
    "ParserConfig",
    "TypeCoercer",
    "parse",
    "pretty",
]
