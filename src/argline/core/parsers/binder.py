"""Schema binder: names positional values and checks them against the schema."""

from argline.domain.types import ArgumentSpec, ParsedPair, ParseError, ParseErrorKind
from argline.logger import get_logger

logger = get_logger("parsers.binder")


class SchemaBinder:
    """Binds unnamed pairs to schema slots in declaration order.

    Positional values take the declared names not already given explicitly
    on the command line, in schema order. Once those run out they are
    numbered "0", "1", ... skipping any number already used as a name.
    """

    def bind(self, pairs: list[ParsedPair], schema: list[ArgumentSpec]) -> list[ParsedPair]:
        """
        Give every pair a name.

        Examples:
            [(None, 'a'), (None, 'b')] with schema [src, dst] -> [('src', 'a'), ('dst', 'b')]
            [(None, 'b'), ('src', 'a')] with schema [src, dst] -> [('dst', 'b'), ('src', 'a')]
            [(None, 'a'), (None, 'b')] with no schema -> [('0', 'a'), ('1', 'b')]

        Args:
            pairs: Output of the token assigner
            schema: Sanitized schema

        Returns:
            Pairs in the same order, all named
        """
        unnamed = sum(1 for pair in pairs if pair.name is None)
        explicit = {pair.name for pair in pairs if pair.name is not None}
        candidates = self._candidate_names(schema, explicit, unnamed)

        bound: list[ParsedPair] = []
        next_candidate = 0
        for pair in pairs:
            if pair.name is None:
                pair = ParsedPair(candidates[next_candidate], pair.value)
                next_candidate += 1
            bound.append(pair)

        logger.debug(f"Bound pairs {pairs} to {bound}")
        return bound

    def binding_errors(self, bound: list[ParsedPair], schema: list[ArgumentSpec]) -> list[ParseError]:
        """
        Report required arguments that are missing and names the schema lacks.

        Without a schema nothing is checked.

        Args:
            bound: Output of bind()
            schema: Sanitized schema

        Returns:
            MISSING_REQUIRED_ARGUMENT errors in schema order, then
            UNEXPECTED_ARGUMENT errors in order of first appearance
        """
        if not schema:
            return []

        errors: list[ParseError] = []
        supplied = {pair.name for pair in bound}
        for spec in schema:
            if not spec.is_optional and spec.name not in supplied:
                errors.append(
                    ParseError(
                        kind=ParseErrorKind.MISSING_REQUIRED_ARGUMENT,
                        arg_name=spec.name,
                        argument=spec,
                    )
                )

        allowed = {spec.name for spec in schema}
        reported: set[str] = set()
        for pair in bound:
            if pair.name in allowed or pair.name in reported:
                continue
            reported.add(pair.name)
            errors.append(
                ParseError(
                    kind=ParseErrorKind.UNEXPECTED_ARGUMENT,
                    arg_name=pair.name,
                    value=pair.value,
                )
            )

        if errors:
            logger.debug(f"Binding failed: {[error.message for error in errors]}")
        return errors

    def _candidate_names(self, schema: list[ArgumentSpec], explicit: set[str], count: int) -> list[str]:
        declared = [spec.name for spec in schema]
        candidates = [name for name in declared if name not in explicit][:count]
        number = 0
        while len(candidates) < count:
            name = str(number)
            if name not in declared and name not in explicit:
                candidates.append(name)
            number += 1
        return candidates
