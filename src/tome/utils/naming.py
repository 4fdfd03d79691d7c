"""Skill-name validation helpers."""

from __future__ import annotations

from tome.constants.naming import (
    CONTROL_CHAR_PATTERN,
    PATH_SEPARATORS,
    RESERVED_SKILL_NAMES,
    STRICT_SKILL_NAME_PATTERN,
)
from tome.exceptions import InvalidSkillNameError


def validate_skill_name(raw_name: str) -> str:
    """Return ``raw_name`` if it is usable as a library entry name.

    Validation is lenient: only names that cannot safely become a single
    path component are rejected. Use :func:`is_strict_skill_name` to flag
    names outside the recommended ``[a-z0-9-]+`` form.
    """
    if not raw_name:
        raise InvalidSkillNameError("skill name cannot be empty")
    if raw_name in RESERVED_SKILL_NAMES:
        raise InvalidSkillNameError(f"skill name is reserved: {raw_name!r}")
    if any(separator in raw_name for separator in PATH_SEPARATORS):
        raise InvalidSkillNameError(f"skill name contains path separator: {raw_name!r}")
    if CONTROL_CHAR_PATTERN.search(raw_name):
        raise InvalidSkillNameError(f"skill name contains control characters: {raw_name!r}")
    return raw_name


def is_strict_skill_name(name: str) -> bool:
    """Return True when ``name`` uses only lowercase letters, digits, and hyphens."""
    return STRICT_SKILL_NAME_PATTERN.match(name) is not None
