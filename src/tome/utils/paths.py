"""Symlink target resolution and path equivalence.

A symlink stores its target verbatim, so the same destination may be spelled
relative (``../sources/my-skill``) or absolute, and may pass through other
symlinks on the way. Every idempotency decision in the sync pipeline goes
through :func:`symlink_points_to`, which compares canonical paths when both
sides exist and falls back to lexically normalized absolute paths when one of
them does not (a dangling link still needs a stable comparison target).
"""

from __future__ import annotations

import os
from pathlib import Path


def resolve_link_target(link_path: Path, raw_target: Path) -> Path:
    """Resolve a symlink's raw target against the directory holding the link.

    Absolute targets are returned unchanged; ``..`` segments are kept.
    """
    if raw_target.is_absolute():
        return raw_target
    return link_path.parent / raw_target


def read_link_target(link_path: Path) -> Path:
    """Read ``link_path`` and return its target in absolute form."""
    return resolve_link_target(link_path, link_path.readlink())


def canonicalize(path: Path) -> Path | None:
    """Return the real path of ``path``, or ``None`` if any segment is missing."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def paths_equivalent(first: Path, second: Path) -> bool:
    """Return True when both paths denote the same filesystem object."""
    first_real = canonicalize(first)
    second_real = canonicalize(second)
    if first_real is not None and second_real is not None:
        return first_real == second_real
    return _lexical_absolute(first) == _lexical_absolute(second)


def symlink_points_to(link_path: Path, expected_target: Path) -> bool:
    """Return True when ``link_path`` is a symlink whose target is ``expected_target``."""
    try:
        raw_target = link_path.readlink()
    except OSError:
        return False
    return paths_equivalent(resolve_link_target(link_path, raw_target), expected_target)


def link_target_exists(link_path: Path) -> bool:
    """Return True when the destination of the symlink ``link_path`` exists."""
    return read_link_target(link_path).exists()


def is_within(path: Path, root: Path) -> bool:
    """Return True when ``path`` lies inside ``root`` (or is ``root``).

    The final component of ``path`` is never followed, so a dangling library
    entry still counts as inside the library.
    """
    lexical = _lexical_absolute(path)
    if lexical.is_relative_to(_lexical_absolute(root)):
        return True
    anchored = lexical.parent.resolve() / lexical.name
    return anchored.is_relative_to(root.resolve())


def _lexical_absolute(path: Path) -> Path:
    return Path(os.path.normpath(os.path.abspath(path)))
