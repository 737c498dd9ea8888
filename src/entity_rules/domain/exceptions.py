"""Domain-level errors."""

from __future__ import annotations


class EntityError(RuntimeError):
    """Base class for entity and rule errors."""


class InvalidArgumentError(EntityError, ValueError):
    """Raised when an entity is constructed with missing or invalid values."""


class TypeMismatchError(EntityError, TypeError):
    """Raised when a rule compares an entity against an incompatible type."""


__all__ = ["EntityError", "InvalidArgumentError", "TypeMismatchError"]
