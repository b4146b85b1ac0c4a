"""Command parser that runs the parsing stages in sequence."""

from typing import Iterable, Optional

from argline.config import DEFAULT_CONFIG, ParserConfig
from argline.core.coercion import TypeCoercer
from argline.core.parsers.assigner import TokenAssigner
from argline.core.parsers.binder import SchemaBinder
from argline.core.parsers.converter import TypeConverter
from argline.core.parsers.schema import SpecLike, flag_names, sanitize_schema
from argline.core.parsers.tokenizer import lex_errors, tokenize
from argline.domain.protocols import Coercer
from argline.domain.types import ParseError, ParseResult
from argline.formatting import pretty
from argline.logger import get_logger

logger = get_logger("parsers")


class CommandParser:
    """
    Parses one line of command text into typed arguments.

    Stages: sanitize schema -> tokenize -> assign tokens -> bind to schema ->
    convert types. The first stage that reports errors stops the parse and
    its errors, and only its errors, are returned.

    The parser keeps no per-call state; one instance can serve any number of
    commands, from any thread.

    Example:
        ```python
        parser = CommandParser()
        result = parser.parse('-n 3 "my file"', ["file:string", "n:integer*"])
        assert result.values == {"n": 3, "file": "my file"}
        ```
    """

    def __init__(self, config: Optional[ParserConfig] = None, coercer: Optional[Coercer] = None):
        self.config = config or DEFAULT_CONFIG
        self.coercer = coercer or TypeCoercer(self.config)
        self.assigner = TokenAssigner(self.config, self.coercer)
        self.binder = SchemaBinder()
        self.converter = TypeConverter(self.config, self.coercer)

    def parse(self, command_text: Optional[str], expected_args: Optional[Iterable[SpecLike]] = None) -> ParseResult:
        """
        Parse command text against the expected arguments.

        Args:
            command_text: One line of input, e.g. '-v -n 3 src dst'
            expected_args: Schema; None parses without validation, naming
                positional values "0", "1", ...

        Returns:
            ParseResult with the name -> value mapping, or with the errors of
            the first failing stage

        Raises:
            ValueError: If the schema itself is invalid
        """
        schema = sanitize_schema(expected_args)

        tokens = tokenize(command_text, self.config)
        errors = lex_errors(tokens)
        if errors:
            return self._fail("tokenize", errors)

        pairs = self.assigner.assign(tokens, flag_names(schema))
        errors = self.assigner.pair_errors(pairs)
        if errors:
            return self._fail("assign", errors)

        bound = self.binder.bind(pairs, schema)
        errors = self.binder.binding_errors(bound, schema)
        if errors:
            return self._fail("bind", errors)

        converted = self.converter.convert(bound, schema)
        errors = self.converter.conversion_errors(converted, schema)
        if errors:
            return self._fail("convert", errors)

        values = {arg.name: arg.value for arg in converted}
        logger.debug(f"Parsed {command_text!r} into {pretty(values)}")
        return ParseResult.success(values)

    def _fail(self, stage: str, errors: list[ParseError]) -> ParseResult:
        logger.debug(f"Parse stopped at {stage} stage with {len(errors)} error(s): {[str(e) for e in errors]}")
        return ParseResult.failure(errors)


_default_parser = CommandParser()


def parse(command_text: Optional[str], expected_args: Optional[Iterable[SpecLike]] = None) -> ParseResult:
    """Parse command text with the default configuration. See CommandParser.parse."""
    return _default_parser.parse(command_text, expected_args)
