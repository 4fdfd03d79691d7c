"""Exceptions raised while mutating the library, targets, or served content."""

from __future__ import annotations

from tome.exceptions.base import TomeError


class SyncError(TomeError, OSError):
    """Raised when a filesystem or target document operation fails."""


class ManifestEscapeError(TomeError):
    """Raised when a skill manifest symlink resolves outside its skill directory."""
