"""Token assigner: groups tokens into (name, value) pairs."""

from typing import Iterable, Optional

from argline.config import DEFAULT_CONFIG, ParserConfig
from argline.core.coercion import TypeCoercer
from argline.domain.protocols import Coercer
from argline.domain.types import ArgType, ParsedPair, ParseError
from argline.logger import get_logger

logger = get_logger("parsers.assigner")


class TokenAssigner:
    """
    Walks the token list left to right and pairs names with their values.

    Rules, applied to the leading remaining token:
    - '-name' followed by a value token -> ('name', value), two tokens taken
    - '-name' at the end or before another name -> ('name', None)
    - '-flag' (optional boolean) -> ('flag', None), unless the next token is a
      boolean literal such as 'true' or 'no', which it then takes as its value
    - anything else -> (None, token), a positional value

    A flag never swallows a non-boolean token: in '-v path', 'path' stays
    a positional value.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG, coercer: Optional[Coercer] = None):
        self.config = config
        self.coercer = coercer or TypeCoercer(config)

    def assign(self, tokens: list[str], flags: Iterable[str] = ()) -> list[ParsedPair]:
        """
        Pair up tokens.

        Examples:
            ['-n', '3', 'file'] -> [('n', '3'), (None, 'file')]
            ['-v', 'path'] with flags {'v'} -> [('v', None), (None, 'path')]
            ['-v', 'false'] with flags {'v'} -> [('v', 'false')]

        Args:
            tokens: Output of the tokenizer
            flags: Names of the arguments that may appear without a value

        Returns:
            Pairs in input order
        """
        flags = frozenset(flags)
        pairs: list[ParsedPair] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            takes_value = following is not None and not self.is_name(following)

            if not self.is_name(token):
                pairs.append(ParsedPair(None, token))
                i += 1
                continue

            name = self.to_name(token)
            if name in flags:
                takes_value = takes_value and self.coercer.can_convert(following, ArgType.BOOLEAN)

            if takes_value:
                pairs.append(ParsedPair(name, following))
                i += 2
            else:
                pairs.append(ParsedPair(name, None))
                i += 1

        logger.debug(f"Assigned tokens {tokens} into pairs {pairs}")
        return pairs

    def is_name(self, token: str) -> bool:
        return token.startswith(self.config.name_marker)

    def to_name(self, token: str) -> str:
        return token.lstrip(self.config.name_marker)

    def pair_errors(self, pairs: list[ParsedPair]) -> list[ParseError]:
        """Structural errors in the pair list; none are detected yet."""
        return []
