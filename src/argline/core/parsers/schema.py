"""Schema sanitizer for normalizing expected-argument declarations."""

from typing import Any, Iterable, Optional, Union

from argline.domain.types import ArgumentSpec
from argline.logger import get_logger

logger = get_logger("parsers.schema")

SpecLike = Union[ArgumentSpec, str, dict[str, Any]]


def sanitize_schema(specs: Optional[Iterable[SpecLike]]) -> list[ArgumentSpec]:
    """
    Normalize a schema to a list of named ArgumentSpec objects.

    Handles:
        - ArgumentSpec instances
        - Textual declarations ('count:integer', 'verbose:bool*')
        - Dicts with 'name', 'type' and 'is_optional' keys

    Unnamed specs are named "0", "1", ... in declaration order; named specs
    pass through unchanged. A missing schema gives an empty list, which turns
    validation off for the whole parse.

    Args:
        specs: The caller's schema, or None

    Returns:
        New list of ArgumentSpec, every one with a name

    Raises:
        ValueError: If two specs end up with the same name
    """
    if specs is None:
        return []

    sanitized: list[ArgumentSpec] = []
    next_synthetic = 0
    for spec in specs:
        spec = _coerce_spec(spec)
        if spec.name is None:
            spec = spec.model_copy(update={"name": str(next_synthetic)})
            next_synthetic += 1
        sanitized.append(spec)

    names = [spec.name for spec in sanitized]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate argument names in schema: {duplicates}")

    logger.debug(f"Sanitized schema: {[str(spec) for spec in sanitized]}")
    return sanitized


def flag_names(schema: Iterable[ArgumentSpec]) -> frozenset[str]:
    """Names of the optional boolean specs, which may appear without a value."""
    return frozenset(spec.name for spec in schema if spec.is_flag and spec.name is not None)


def _coerce_spec(spec: SpecLike) -> ArgumentSpec:
    if isinstance(spec, ArgumentSpec):
        return spec
    if isinstance(spec, str):
        return ArgumentSpec.from_declaration(spec)
    if isinstance(spec, dict):
        return ArgumentSpec.model_validate(spec)
    raise TypeError(f"Cannot use {type(spec).__name__} as an argument spec")
