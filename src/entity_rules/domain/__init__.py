"""Domain layer public API."""

from __future__ import annotations

from .base import DomainModel
from .dog import BREED_PRICES, Dog
from .enums import KnownBreed, Scenario
from .exceptions import EntityError, InvalidArgumentError, TypeMismatchError
from .housing import PRICE_TO_SALARY_RATIO, Buyer, House
from .person import VOTING_AGE, Person
from .rules import Category, CategoryRule
from .types import Age, Name, NonNegativeAmount, PositiveAmount

__all__ = [
    "Age",
    "BREED_PRICES",
    "Buyer",
    "Category",
    "CategoryRule",
    "Dog",
    "DomainModel",
    "EntityError",
    "House",
    "InvalidArgumentError",
    "KnownBreed",
    "Name",
    "NonNegativeAmount",
    "PRICE_TO_SALARY_RATIO",
    "Person",
    "PositiveAmount",
    "Scenario",
    "TypeMismatchError",
    "VOTING_AGE",
]
