"""Tokenizer: raw command text to a flat list of tokens."""

from typing import Optional

from argline.config import DEFAULT_CONFIG, ParserConfig
from argline.core.quoting import split_quoted
from argline.domain.types import ParseError
from argline.logger import get_logger

logger = get_logger("parsers.tokenizer")


def tokenize(text: Optional[str], config: ParserConfig = DEFAULT_CONFIG) -> list[str]:
    """
    Split command text on whitespace, keeping double-quoted spans whole.

    Examples:
        '-f "bar baz"' -> ['-f', 'bar baz']
        'copy a b' -> ['copy', 'a', 'b']
        '' -> []

    Args:
        text: Raw command text (None is treated as empty)
        config: Lexical settings

    Returns:
        List of tokens with surrounding quotes removed
    """
    if not text:
        return []
    tokens = split_quoted(text, config.quote_char)
    logger.debug(f"Tokenized {text!r} into {tokens}")
    return tokens


def lex_errors(tokens: list[str]) -> list[ParseError]:
    """Lexical errors in a token list.

    Tokenizing cannot fail today; this is where unbalanced quotes would be
    reported as LEX_ERROR.
    """
    return []
