"""End-to-end sync: discover, consolidate, distribute, clean up."""

from __future__ import annotations

import logging

from tome.config.model import TomeConfig
from tome.model import SyncResult
from tome.sync.cleanup import cleanup_all
from tome.sync.discovery import discover_all
from tome.sync.distribute import distribute
from tome.sync.library import consolidate

logger = logging.getLogger(__name__)


def run_sync(config: TomeConfig, *, dry_run: bool = False, force: bool = False) -> SyncResult:
    """Run one full sync in sequence.

    Any filesystem error aborts the run; steps already applied stay applied.
    When discovery finds nothing the run stops there and the library and
    targets are left untouched.
    """
    discovery = discover_all(config)
    if not discovery.skills:
        logger.info("No skills discovered, nothing to sync")
        return SyncResult(discovery=discovery, dry_run=dry_run)

    logger.debug("Discovered %d skill(s)", len(discovery.skills))
    library = consolidate(discovery.skills, config.library_dir, dry_run=dry_run, force=force)
    targets = tuple(
        distribute(config.library_dir, name, target, dry_run=dry_run, force=force)
        for name, target in config.iter_targets()
    )
    cleanup = cleanup_all(config, dry_run=dry_run)

    return SyncResult(discovery=discovery, library=library, targets=targets, cleanup=cleanup, dry_run=dry_run)
