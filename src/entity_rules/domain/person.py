"""Person entity."""

from __future__ import annotations

from .base import DomainModel
from .types import Age, Name

VOTING_AGE = 18


class Person(DomainModel):
    first_name: Name
    last_name: Name
    age: Age

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def can_vote(self) -> bool:
        return self.age >= VOTING_AGE


__all__ = ["Person", "VOTING_AGE"]
