"""Post-load sanity checks for tome configuration."""

from __future__ import annotations

import difflib

from tome.config.model import TomeConfig
from tome.exceptions import ConfigError


def validate_config(config: TomeConfig) -> None:
    """Raise :class:`ConfigError` for misconfigurations that must stop a run."""
    if config.library_dir.exists() and not config.library_dir.is_dir():
        raise ConfigError(f"library_dir exists but is not a directory: {config.library_dir}")

    seen: set[str] = set()
    for source in config.sources:
        if not source.name:
            raise ConfigError("source name cannot be empty")
        if source.name in seen:
            raise ConfigError(f"duplicate source name: '{source.name}'")
        seen.add(source.name)


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
