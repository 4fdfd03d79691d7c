"""Idempotent create/replace decisions for a single managed symlink."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, TypeAlias

from tome.exceptions import SyncError
from tome.utils.paths import symlink_points_to

LinkAction: TypeAlias = Literal["create", "update", "unchanged", "skip"]


def plan_link(link_path: Path, expected_target: Path, *, force: bool = False) -> LinkAction:
    """Decide what to do so that ``link_path`` points at ``expected_target``.

    ``skip`` means a file or directory that is not a symlink already holds
    the name; it is never removed or overwritten.
    """
    if link_path.is_symlink():
        if not force and symlink_points_to(link_path, expected_target):
            return "unchanged"
        return "update"
    if link_path.exists():
        return "skip"
    return "create"


def replace_link(link_path: Path, target: Path, *, remove_existing: bool) -> None:
    """Create ``link_path -> target``, first removing the old symlink if asked."""
    if remove_existing:
        try:
            link_path.unlink()
        except OSError as exc:
            raise SyncError(f"failed to remove stale symlink {link_path}: {exc}") from exc
    try:
        link_path.symlink_to(target, target_is_directory=True)
    except OSError as exc:
        raise SyncError(f"failed to symlink {link_path} -> {target}: {exc}") from exc
