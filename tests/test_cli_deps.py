from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from entity_rules.cli.deps import configure_logging, resolve_log_level
from entity_rules.config import AppSettings


@pytest.fixture(autouse=True)
def _restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" info ", logging.INFO),
        ("error", logging.ERROR),
        ("LOUD", logging.WARNING),
        ("", logging.WARNING),
    ],
)
def test_resolve_log_level(name: str, expected: int) -> None:
    assert resolve_log_level(name) == expected


def test_configure_logging_applies_level() -> None:
    configure_logging(AppSettings(log_level="DEBUG"))
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_falls_back_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTITY_RULES_LOG_LEVEL", "LOUD")
    settings = AppSettings.from_env()
    configure_logging(settings)
    assert logging.getLogger().level == logging.WARNING
