"""Dog entity and its pricing and breeding rules."""

from __future__ import annotations

from .base import DomainModel
from .enums import KnownBreed
from .exceptions import TypeMismatchError
from .rules import CategoryRule
from .types import Age, Name

BREED_PRICES = CategoryRule(
    categories=(
        (KnownBreed.HUSKY.value, 1000),
        (KnownBreed.CHIHUAHA.value, 200),
    ),
    default=100,
)


class Dog(DomainModel):
    """A dog offered for sale."""

    name: Name
    breed: str
    age: Age

    def price(self) -> int:
        return BREED_PRICES.evaluate(self.breed)

    def can_breed_with(self, other: Dog) -> bool:
        """Return whether both dogs share exactly the same breed label."""

        if not isinstance(other, Dog):
            msg = f"Cannot compare a Dog with {type(other).__name__}"
            raise TypeMismatchError(msg)
        return self.breed == other.breed


__all__ = ["BREED_PRICES", "Dog"]
