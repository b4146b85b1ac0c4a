"""Domain protocols - interfaces for pluggable collaborators."""

from argline.domain.protocols.coercion import Coercer

__all__ = ["Coercer"]
