"""Sync pipeline stages."""

from tome.sync.cleanup import (
    cleanup_all,
    cleanup_library,
    cleanup_target,
    find_broken_library_links,
    find_stale_target_links,
)
from tome.sync.discovery import discover_all, discover_source, scan_for_skills
from tome.sync.distribute import distribute, mcp_registration
from tome.sync.doctor import diagnose
from tome.sync.library import consolidate
from tome.sync.pipeline import run_sync
from tome.sync.status import collect_status

__all__ = [
    "cleanup_all",
    "cleanup_library",
    "cleanup_target",
    "collect_status",
    "consolidate",
    "diagnose",
    "discover_all",
    "discover_source",
    "distribute",
    "find_broken_library_links",
    "find_stale_target_links",
    "mcp_registration",
    "run_sync",
    "scan_for_skills",
]
