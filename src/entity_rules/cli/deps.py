"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from functools import lru_cache

from entity_rules.config import AppSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings for CLI commands."""

    return AppSettings.from_env()


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, falling back to ``WARNING``."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(settings: AppSettings) -> None:
    """Install a stderr handler and apply the configured root log level."""

    level = resolve_log_level(settings.log_level)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
