"""Shared domain types."""

from argline.domain.types.arguments import ArgType, ArgumentSpec, ConvertedArgument, ParsedPair
from argline.domain.types.conversion import Conversion
from argline.domain.types.errors import ParseError, ParseErrorKind, ParseException
from argline.domain.types.results import ParseResult

__all__ = [
    "ArgType",
    "ArgumentSpec",
    "Conversion",
    "ConvertedArgument",
    "ParsedPair",
    "ParseError",
    "ParseErrorKind",
    "ParseException",
    "ParseResult",
]
