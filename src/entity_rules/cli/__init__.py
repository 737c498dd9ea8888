"""Command-line interface for entity rules."""

from __future__ import annotations

from .app import app

__all__ = ["app"]
