"""Parsing stages for command text."""

from argline.core.parsers.tokenizer import tokenize, lex_errors
from argline.core.parsers.schema import sanitize_schema, flag_names
from argline.core.parsers.assigner import TokenAssigner
from argline.core.parsers.binder import SchemaBinder
from argline.core.parsers.converter import TypeConverter
from argline.core.parsers.pipeline import CommandParser, parse

__all__ = [
    "tokenize",
    "lex_errors",
    "sanitize_schema",
    "flag_names",
    "TokenAssigner",
    "SchemaBinder",
    "TypeConverter",
    "CommandParser",
    "parse",
]
