"""Base exception type for Tome."""

from __future__ import annotations


class TomeError(Exception):
    """Base error for all Tome failures."""
