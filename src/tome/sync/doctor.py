"""Read-only health audit with optional repair of broken links."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from tome.config.model import TomeConfig
from tome.model import DoctorReport
from tome.sync.cleanup import cleanup_all, find_broken_library_links, find_stale_target_links

logger = logging.getLogger(__name__)


def diagnose(config: TomeConfig, *, dry_run: bool = False) -> DoctorReport:
    """Audit the library, enabled symlink targets, and source paths.

    When issues exist and ``dry_run`` is false, broken links are removed via
    the cleanup path. Config issues are reported but never repaired.
    """
    library_issues = _check_library(config)
    target_issues = {name: issues for name, issues in _check_targets(config) if issues}
    config_issues = tuple(
        f"source '{source.name}' path does not exist: {source.path}"
        for source in config.sources
        if not source.path.exists()
    )

    report = DoctorReport(
        library_issues=library_issues,
        target_issues=target_issues,
        config_issues=config_issues,
        dry_run=dry_run,
    )
    if report.total_issues == 0 or dry_run:
        return report

    logger.debug("Repairing %d issue(s)", report.total_issues)
    return DoctorReport(
        library_issues=library_issues,
        target_issues=target_issues,
        config_issues=config_issues,
        repaired=cleanup_all(config),
        dry_run=dry_run,
    )


def _check_library(config: TomeConfig) -> tuple[str, ...]:
    if not config.library_dir.is_dir():
        return (f"library directory does not exist: {config.library_dir}",)
    return tuple(
        f"broken link {issue.link.name} -> {issue.target}"
        for issue in find_broken_library_links(config.library_dir)
    )


def _check_targets(config: TomeConfig) -> Iterator[tuple[str, tuple[str, ...]]]:
    for name, skills_dir in config.symlink_targets(enabled_only=True):
        if not skills_dir.is_dir():
            yield name, (f"target directory does not exist: {skills_dir}",)
            continue
        issues = find_stale_target_links(skills_dir, config.library_dir)
        yield name, tuple(f"stale link {issue.link.name} -> {issue.target}" for issue in issues)
