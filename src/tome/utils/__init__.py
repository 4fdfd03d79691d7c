"""Utility helpers shared across Tome modules."""

from .naming import is_strict_skill_name, validate_skill_name
from .paths import (
    canonicalize,
    is_within,
    link_target_exists,
    paths_equivalent,
    read_link_target,
    resolve_link_target,
    symlink_points_to,
)

__all__ = [
    "canonicalize",
    "is_strict_skill_name",
    "is_within",
    "link_target_exists",
    "paths_equivalent",
    "read_link_target",
    "resolve_link_target",
    "symlink_points_to",
    "validate_skill_name",
]
