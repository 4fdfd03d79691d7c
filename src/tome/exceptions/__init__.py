"""Shared exception hierarchy for Tome."""

from __future__ import annotations

from .base import TomeError
from .config import ConfigError
from .discovery import DiscoveryError, InvalidSkillNameError
from .sync import ManifestEscapeError, SyncError

__all__ = [
    "ConfigError",
    "DiscoveryError",
    "InvalidSkillNameError",
    "ManifestEscapeError",
    "SyncError",
    "TomeError",
]
