"""Outcome of parsing one command line."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from argline.domain.types.errors import ParseError, ParseException

__all__ = ["ParseResult"]


@dataclass(frozen=True)
class ParseResult:
    """Either the typed argument mapping or the errors of the failing stage.

    A result never carries both: a failed parse has no partial mapping.

    Example:
        ```python
        result = parse('-n 3 "some file"', specs)
        if result:
            run(**result.values)
        else:
            for error in result.errors:
                print(error)
        ```
    """

    values: Optional[dict[str, Any]] = None
    errors: list[ParseError] = field(default_factory=list)

    # Holds a dict and a list, so results compare by value but are not hashable.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def success(cls, values: dict[str, Any]) -> "ParseResult":
        return cls(values=dict(values))

    @classmethod
    def failure(cls, errors: Iterable[ParseError]) -> "ParseResult":
        errors = list(errors)
        if not errors:
            raise ValueError("A failed ParseResult needs at least one error")
        return cls(values=None, errors=errors)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> dict[str, Any]:
        """Return the mapping, or raise ParseException with every error."""
        if self.errors:
            raise ParseException(self.errors)
        return dict(self.values or {})

    def __bool__(self) -> bool:
        return self.ok
