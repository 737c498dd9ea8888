"""Exact-match category rules."""

from __future__ import annotations

import logging

from pydantic import field_validator

from .base import DomainModel

logger = logging.getLogger(__name__)

Category = tuple[str, int]


class CategoryRule(DomainModel):
    """Ordered string-equality lookup with a fallback value.

    Labels are compared case-sensitively without trimming; the first matching
    label wins and unmatched keys yield ``default``.
    """

    categories: tuple[Category, ...]
    default: int

    @field_validator("categories")
    @classmethod
    def ensure_unique_labels(cls, value: tuple[Category, ...]) -> tuple[Category, ...]:
        seen: set[str] = set()
        for label, _ in value:
            if label in seen:
                msg = f"Duplicate category label: {label!r}"
                raise ValueError(msg)
            seen.add(label)
        return value

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.categories)

    def evaluate(self, key: str) -> int:
        for label, value in self.categories:
            if key == label:
                logger.debug("Category %r matched label %r -> %s", key, label, value)
                return value
        logger.debug("Category %r unmatched, using default %s", key, self.default)
        return self.default


__all__ = ["Category", "CategoryRule"]
