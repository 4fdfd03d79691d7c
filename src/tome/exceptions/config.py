"""Configuration-related exceptions."""

from __future__ import annotations

from tome.exceptions.base import TomeError


class ConfigError(TomeError, ValueError):
    """Raised when the tome configuration is invalid."""
