"""Discovery-related exceptions."""

from __future__ import annotations

from tome.exceptions.base import TomeError


class InvalidSkillNameError(TomeError, ValueError):
    """Raised when a skill directory name cannot be used as a library entry."""


class DiscoveryError(TomeError):
    """Raised when a plugin install-record file exists but cannot be trusted."""
