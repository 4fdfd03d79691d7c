"""Shared constants for Tome."""
