"""Type converter: coerces bound string values to their declared types."""

from typing import Optional

from argline.config import DEFAULT_CONFIG, ParserConfig
from argline.core.coercion import TypeCoercer
from argline.core.quoting import split_list
from argline.domain.protocols import Coercer
from argline.domain.types import (
    ArgType,
    ArgumentSpec,
    ConvertedArgument,
    ParsedPair,
    ParseError,
    ParseErrorKind,
)
from argline.formatting import pretty
from argline.logger import get_logger

logger = get_logger("parsers.converter")


class TypeConverter:
    """Turns bound (name, raw value) pairs into typed values."""

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG, coercer: Optional[Coercer] = None):
        self.config = config
        self.coercer = coercer or TypeCoercer(config)

    def convert(self, pairs: list[ParsedPair], schema: list[ArgumentSpec]) -> list[ConvertedArgument]:
        """
        Convert every bound pair.

        Special cases, checked in order:
        - a string_list value is split on the list separator, honoring quotes
        - a missing value for an optional boolean, or for a name the schema
          does not know, means the flag is set: True
        - any other missing value stays None

        A value that cannot be coerced keeps its raw string and is marked
        unconverted; conversion_errors() turns that into TYPE_MISMATCH.

        Args:
            pairs: Output of the schema binder, all named
            schema: Sanitized schema

        Returns:
            One ConvertedArgument per pair, in order
        """
        by_name = {spec.name: spec for spec in schema}
        converted = [self._convert_pair(pair, by_name.get(pair.name)) for pair in pairs]
        logger.debug(f"Converted arguments: {pretty({arg.name: arg.value for arg in converted})}")
        return converted

    def conversion_errors(
        self, converted: list[ConvertedArgument], schema: list[ArgumentSpec]
    ) -> list[ParseError]:
        """
        Report values of the wrong type and required arguments left without a value.

        Without a schema nothing is checked.
        """
        if not schema:
            return []

        errors: list[ParseError] = []
        for arg in converted:
            spec = arg.spec
            if spec is None:
                continue
            if arg.value is not None and not arg.converted:
                errors.append(
                    ParseError(
                        kind=ParseErrorKind.TYPE_MISMATCH,
                        arg_name=arg.name,
                        argument=spec,
                        value=arg.value,
                    )
                )
            if not spec.is_optional and arg.value is None:
                errors.append(
                    ParseError(
                        kind=ParseErrorKind.MISSING_REQUIRED_VALUE,
                        arg_name=arg.name,
                        argument=spec,
                    )
                )

        if errors:
            logger.debug(f"Conversion failed: {[error.message for error in errors]}")
        return errors

    def _convert_pair(self, pair: ParsedPair, spec: Optional[ArgumentSpec]) -> ConvertedArgument:
        arg_type = spec.type if spec else ArgType.STRING
        is_optional = spec.is_optional if spec else True
        raw = pair.value

        if raw and arg_type == ArgType.STRING_LIST:
            return ConvertedArgument(pair.name, split_list(raw, self.config), spec)

        if raw is None:
            is_flag = (arg_type == ArgType.BOOLEAN and is_optional) or spec is None
            return ConvertedArgument(pair.name, True if is_flag else None, spec)

        conversion = self.coercer.convert(raw, arg_type)
        value = conversion.value if conversion.ok else raw
        return ConvertedArgument(pair.name, value, spec, converted=conversion.ok)
