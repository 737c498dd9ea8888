"""Enumerations used across the domain layer."""

from __future__ import annotations

from enum import StrEnum


class KnownBreed(StrEnum):
    """Breeds with a dedicated price. Labels are matched verbatim."""

    HUSKY = "husky"
    CHIHUAHA = "chihuaha"


class Scenario(StrEnum):
    """Example scenarios printed by the demo command."""

    DOGS = "dogs"
    HOUSES = "houses"
    PEOPLE = "people"
