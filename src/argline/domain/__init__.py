"""Domain layer - argument schema, parse results and collaborator protocols.

This layer contains:
- types: ArgumentSpec, ParsedPair, ParseError, ParseResult and friends
- protocols: Interfaces for collaborators such as the string coercer

The domain layer has no dependencies on the core or CLI layers.
"""
