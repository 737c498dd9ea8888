"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    currency: str = "dollars"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("ENTITY_RULES_ENV", cls.environment),
            log_level=os.getenv("ENTITY_RULES_LOG_LEVEL", cls.log_level).strip().upper(),
            currency=os.getenv("ENTITY_RULES_CURRENCY") or cls.currency,
        )


__all__ = ["AppSettings"]
