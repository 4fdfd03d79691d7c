"""Read-only status summary."""

from __future__ import annotations

import logging

from tome.config.model import TomeConfig
from tome.exceptions import DiscoveryError
from tome.model import SourceStatus, StatusReport, TargetStatus
from tome.sync.cleanup import find_broken_library_links
from tome.sync.discovery import discover_source

logger = logging.getLogger(__name__)


def collect_status(config: TomeConfig) -> StatusReport:
    """Summarize library, sources, and targets without modifying anything."""
    library_count: int | None = None
    broken_links: int | None = None
    if config.library_dir.is_dir():
        library_count = sum(1 for _ in config.library_dir.iterdir())
        broken_links = len(find_broken_library_links(config.library_dir))

    sources: list[SourceStatus] = []
    for source in config.sources:
        try:
            skills, _ = discover_source(source)
            count: int | None = len(skills)
        except DiscoveryError as exc:
            logger.debug("Source %s could not be read: %s", source.name, exc)
            count = None
        sources.append(SourceStatus(name=source.name, path=source.path, skill_count=count))

    targets = tuple(
        TargetStatus(
            name=name,
            enabled=target.enabled,
            method=target.method_name,
            location=target.location,
        )
        for name, target in config.iter_targets()
    )

    return StatusReport(
        library_dir=config.library_dir,
        library_count=library_count,
        sources=tuple(sources),
        targets=targets,
        broken_links=broken_links,
    )
