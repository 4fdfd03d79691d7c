"""Command-line interface for tome."""
