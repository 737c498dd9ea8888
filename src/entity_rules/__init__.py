"""Immutable entities with derived pricing and eligibility rules."""

from __future__ import annotations

from .config import AppSettings
from .domain import (
    Buyer,
    CategoryRule,
    Dog,
    EntityError,
    House,
    InvalidArgumentError,
    Person,
    TypeMismatchError,
)

__all__ = [
    "AppSettings",
    "Buyer",
    "CategoryRule",
    "Dog",
    "EntityError",
    "House",
    "InvalidArgumentError",
    "Person",
    "TypeMismatchError",
]
