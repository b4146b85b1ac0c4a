"""String coercion over the closed set of argument types.

Each ArgType maps to a pydantic TypeAdapter running in lax mode, so the usual
textual spellings are accepted ("42", "yes", "1.50", "2024-05-01T10:00:00",
"01:30:00"). string_list values are split with the list quoting rule instead.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from pydantic import TypeAdapter, ValidationError

from argline.config import DEFAULT_CONFIG, ParserConfig
from argline.core.quoting import split_list
from argline.domain.types import ArgType, Conversion
from argline.logger import get_logger

logger = get_logger("coercion")

COERCION_TABLE: dict[ArgType, TypeAdapter[Any]] = {
    ArgType.STRING: TypeAdapter(str),
    ArgType.BOOLEAN: TypeAdapter(bool),
    ArgType.INTEGER: TypeAdapter(int),
    ArgType.DECIMAL: TypeAdapter(Decimal),
    ArgType.FLOAT: TypeAdapter(float),
    ArgType.DATETIME: TypeAdapter(datetime),
    ArgType.TIMESPAN: TypeAdapter(timedelta),
    ArgType.STRING_LIST: TypeAdapter(list[str]),
}


class TypeCoercer:
    """Default Coercer implementation backed by COERCION_TABLE."""

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config

    def can_convert(self, value: str, arg_type: ArgType) -> bool:
        return self.convert(value, arg_type).ok

    def convert(self, value: str, arg_type: ArgType) -> Conversion:
        """
        Convert a raw command-line string to the given semantic type.

        Args:
            value: Raw string
            arg_type: Target type

        Returns:
            Conversion.success with the typed value, or Conversion.failure
            with the first validation message
        """
        adapter = COERCION_TABLE.get(arg_type)
        if adapter is None:
            return Conversion.failure(f"No coercion registered for type '{arg_type}'")

        raw: Any = value
        if arg_type == ArgType.STRING_LIST:
            raw = split_list(value, self.config)

        try:
            return Conversion.success(adapter.validate_python(raw))
        except ValidationError as exc:
            errors = exc.errors()
            reason = errors[0]["msg"] if errors else str(exc)
            logger.debug(f"Could not convert '{value}' to {arg_type.value}: {reason}")
            return Conversion.failure(reason)
