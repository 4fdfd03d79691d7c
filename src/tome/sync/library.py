"""Consolidate discovered skills into the library as one symlink per name."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tome.exceptions import SyncError
from tome.model import ConsolidateResult, DiscoveredSkill
from tome.sync.links import plan_link, replace_link

logger = logging.getLogger(__name__)


def consolidate(
    skills: Iterable[DiscoveredSkill],
    library_dir: Path,
    *,
    dry_run: bool = False,
    force: bool = False,
) -> ConsolidateResult:
    """Ensure ``library_dir/<name>`` is a symlink to each skill's directory.

    Existing equivalent links are left alone, links pointing elsewhere are
    replaced, and any non-symlink occupying a skill's name is skipped with a
    warning. With ``dry_run`` the counters are computed but nothing on disk
    changes.
    """
    if not dry_run:
        try:
            library_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SyncError(f"failed to create library dir {library_dir}: {exc}") from exc

    result = ConsolidateResult()
    for skill in skills:
        link_path = library_dir / skill.name
        action = plan_link(link_path, skill.path, force=force)

        if action == "unchanged":
            result.unchanged += 1
            continue
        if action == "skip":
            logger.warning("%s exists and is not a symlink, skipping", link_path)
            result.skipped += 1
            continue

        if not dry_run:
            replace_link(link_path, skill.path, remove_existing=action == "update")
        if action == "update":
            logger.debug("Updated %s -> %s", link_path, skill.path)
            result.updated += 1
        else:
            logger.debug("Created %s -> %s", link_path, skill.path)
            result.created += 1

    return result
