"""String coercion protocol."""

from typing import Protocol

from argline.domain.types.arguments import ArgType
from argline.domain.types.conversion import Conversion

__all__ = ["Coercer"]


class Coercer(Protocol):
    """Protocol for string-to-type coercion.

    The parser only ever asks two questions of a coercer: can this raw string
    become a value of the given semantic type, and if so, what value.
    """

    def can_convert(self, value: str, arg_type: ArgType) -> bool:
        """Check whether the raw string converts to the given type.

        Args:
            value: Raw string from the command line
            arg_type: Target semantic type

        Returns:
            True if convert() would succeed
        """
        ...

    def convert(self, value: str, arg_type: ArgType) -> Conversion:
        """Convert the raw string to the given type.

        Args:
            value: Raw string from the command line
            arg_type: Target semantic type

        Returns:
            Conversion.success with the typed value, or Conversion.failure
        """
        ...
