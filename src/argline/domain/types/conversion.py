"""Tagged outcome of a single string-to-type coercion."""

from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Conversion"]


@dataclass(frozen=True)
class Conversion:
    """Success carries the typed value; failure carries the reason."""

    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "Conversion":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "Conversion":
        return cls(ok=False, error=error)
