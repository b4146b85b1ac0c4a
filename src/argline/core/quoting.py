"""Quote-aware splitting shared by the tokenizer and list coercion.

A quoted span (``"like this"``) is kept whole even when it contains the
separator; quote characters are then trimmed from both ends of every piece.
There is no escaping and no nesting.
"""

import re
from functools import lru_cache

from argline.config import DEFAULT_CONFIG, ParserConfig


@lru_cache(maxsize=32)
def _piece_pattern(quote_char: str, separator: str | None) -> re.Pattern:
    q = re.escape(quote_char)
    if separator is None:
        rest = r"\S+"
    else:
        rest = rf"[^{re.escape(separator)}]+"
    return re.compile(rf"{q}[^{q}]*{q}|{rest}")


def split_quoted(text: str, quote_char: str, separator: str | None = None) -> list[str]:
    """
    Split text on a separator (whitespace when None), honoring quoted spans.

    Examples:
        split_quoted('-f "bar baz"', '"') -> ['-f', 'bar baz']
        split_quoted('"a,b","c"', '"', ',') -> ['a,b', 'c']
    """
    if not text:
        return []
    pattern = _piece_pattern(quote_char, separator)
    return [piece.strip(quote_char) for piece in pattern.findall(text)]


def split_list(value: str, config: ParserConfig = DEFAULT_CONFIG) -> list[str]:
    """Split a string_list value on the configured separator."""
    return split_quoted(value, config.quote_char, config.list_separator)
