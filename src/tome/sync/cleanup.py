"""Removal of broken library links and stale target links.

Library entries are always ours, so any library symlink whose destination is
gone is removed. Target directories are shared with other tools: a target
symlink is removed only when it points into the library and that library
entry no longer exists. Broken links pointing anywhere else are left alone.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tome.config.model import TomeConfig
from tome.exceptions import SyncError
from tome.model import CleanupResult, LinkIssue
from tome.utils.paths import is_within, link_target_exists, read_link_target

logger = logging.getLogger(__name__)


def find_broken_library_links(library_dir: Path) -> list[LinkIssue]:
    """Return library symlinks whose destination no longer exists."""
    issues: list[LinkIssue] = []
    for link in _iter_symlinks(library_dir):
        if not link_target_exists(link):
            issues.append(LinkIssue(link=link, target=read_link_target(link)))
    return issues


def find_stale_target_links(target_dir: Path, library_dir: Path) -> list[LinkIssue]:
    """Return target symlinks into ``library_dir`` whose destination is gone."""
    issues: list[LinkIssue] = []
    for link in _iter_symlinks(target_dir):
        target = read_link_target(link)
        if is_within(target, library_dir) and not target.exists():
            issues.append(LinkIssue(link=link, target=target))
    return issues


def cleanup_library(library_dir: Path, *, dry_run: bool = False) -> int:
    """Remove broken library symlinks and return how many were (or would be) removed."""
    return _remove_links(find_broken_library_links(library_dir), dry_run=dry_run)


def cleanup_target(target_dir: Path, library_dir: Path, *, dry_run: bool = False) -> int:
    """Remove stale links from one target directory and return the count."""
    return _remove_links(find_stale_target_links(target_dir, library_dir), dry_run=dry_run)


def cleanup_all(config: TomeConfig, *, dry_run: bool = False) -> CleanupResult:
    """Clean the library and every symlink target, enabled or not."""
    result = CleanupResult(removed_from_library=cleanup_library(config.library_dir, dry_run=dry_run))
    for name, skills_dir in config.symlink_targets():
        result.removed_from_targets[name] = cleanup_target(skills_dir, config.library_dir, dry_run=dry_run)
    return result


def _iter_symlinks(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    try:
        return sorted(child for child in directory.iterdir() if child.is_symlink())
    except OSError as exc:
        raise SyncError(f"failed to read {directory}: {exc}") from exc


def _remove_links(issues: list[LinkIssue], *, dry_run: bool) -> int:
    for issue in issues:
        if dry_run:
            logger.info("Would remove broken link %s -> %s", issue.link, issue.target)
            continue
        try:
            issue.link.unlink()
        except OSError as exc:
            raise SyncError(f"failed to remove {issue.link}: {exc}") from exc
        logger.info("Removed broken link %s -> %s", issue.link, issue.target)
    return len(issues)
