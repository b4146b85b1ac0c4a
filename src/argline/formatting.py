"""
Diagnostic formatting for parsed values, used in error messages and logs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any


def pretty(value: Any) -> str:
    """
    Render a value for humans, handling None and collections gracefully.

    Examples:
        >>> pretty(None)
        ''
        >>> pretty({"foo": 1, "bar": True})
        '([bar,True],[foo,1])'
        >>> pretty(["a", "b"])
        '(a,b)'
        >>> pretty(Decimal("1.500"))
        '1.5'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, Mapping):
        return format_mapping(value)
    if isinstance(value, Iterable):
        return "(" + ",".join(pretty(item) for item in value) + ")"
    return str(value)


def format_decimal(value: Decimal) -> str:
    """Print a decimal in plain notation without trailing zeros."""
    if not value.is_finite():
        return str(value)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_mapping(mapping: Mapping[Any, Any]) -> str:
    """Print a mapping as ``([key,value],...)`` with keys in sorted order."""
    keys = sorted(mapping, key=pretty)
    return "(" + ",".join(f"[{pretty(key)},{pretty(mapping[key])}]" for key in keys) + ")"
