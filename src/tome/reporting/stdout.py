"""Human-readable stdout rendering for sync, list, status, and doctor."""

from __future__ import annotations

from collections.abc import Sequence

from tome.constants.branding import NO_SKILLS_MESSAGE
from tome.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    LIST_COLUMNS,
    STATUS_SOURCE_COLUMN_WIDTH,
    STATUS_TARGET_COLUMN_WIDTH,
)
from tome.model import DiscoveredSkill, DoctorReport, StatusReport, SyncResult


def _colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{ANSI_RESET}" if enabled else text


def render_sync(result: SyncResult, *, color: bool = False) -> str:
    """Render the outcome of a sync run."""
    lines: list[str] = []
    if result.dry_run:
        lines.append(_colorize("Dry run: no changes were made.", ANSI_YELLOW, color))

    if not result.discovery.skills:
        lines.append(NO_SKILLS_MESSAGE)
        return "\n".join(lines)

    lines.append(f"Discovered {len(result.discovery.skills)} skill(s)")
    if result.library is not None:
        library = result.library
        lines.append(
            f"Library: {library.created} created, {library.unchanged} unchanged, {library.updated} updated"
        )
        if library.skipped:
            lines.append(_colorize(f"  {library.skipped} skipped (not a symlink)", ANSI_YELLOW, color))

    for target in result.targets:
        line = f"{target.target_name}: {target.changed} linked, {target.unchanged} unchanged"
        if target.skipped:
            line += f", {target.skipped} skipped"
        lines.append(line)

    if result.cleanup is not None and result.cleanup.total_removed:
        lines.append(f"Cleanup: {result.cleanup.total_removed} broken link(s) removed")

    if result.discovery.warnings:
        lines.append(_colorize(f"{len(result.discovery.warnings)} warning(s)", ANSI_YELLOW, color))
    lines.append(_colorize("Sync complete.", ANSI_GREEN, color))
    return "\n".join(lines)


def render_skill_list(skills: Sequence[DiscoveredSkill], *, color: bool = False) -> str:
    """Render discovered skills as an aligned table with a total line."""
    if not skills:
        return NO_SKILLS_MESSAGE

    rows = [(skill.name, skill.source_name, str(skill.path)) for skill in skills]
    widths = [max(len(header), *(len(row[i]) for row in rows)) for i, header in enumerate(LIST_COLUMNS[:2])]

    header = "  ".join(
        [*(column.ljust(widths[i]) for i, column in enumerate(LIST_COLUMNS[:2])), LIST_COLUMNS[2]]
    )
    lines = [_colorize(header, ANSI_BOLD, color)]
    for name, source, path in rows:
        lines.append(f"{name.ljust(widths[0])}  {source.ljust(widths[1])}  {_colorize(path, ANSI_DIM, color)}")
    lines.append("")
    lines.append(f"{len(skills)} skill(s) total")
    return "\n".join(lines)


def render_status(report: StatusReport, *, color: bool = False) -> str:
    """Render the read-only status summary."""
    count = "not created" if report.library_count is None else f"{report.library_count} skill(s)"
    lines = [
        f"{_colorize('Library:', ANSI_BOLD, color)} {report.library_dir} ({count})",
        "",
        _colorize("Sources:", ANSI_BOLD, color),
    ]
    if not report.sources:
        lines.append("  (none configured)")
    for source in report.sources:
        skills = "?" if source.skill_count is None else str(source.skill_count)
        label = f"{source.name} ({source.path})"
        lines.append(f"  {label.ljust(STATUS_SOURCE_COLUMN_WIDTH)} {skills} skill(s)")

    lines.append("")
    lines.append(_colorize("Targets:", ANSI_BOLD, color))
    if not report.targets:
        lines.append("  (none configured)")
    for target in report.targets:
        state = (
            _colorize("enabled", ANSI_GREEN, color) if target.enabled else _colorize("disabled", ANSI_DIM, color)
        )
        lines.append(f"  {target.name.ljust(STATUS_TARGET_COLUMN_WIDTH)} {state}  {target.method}  {target.location}")

    lines.append("")
    if report.broken_links is None:
        health = "unknown (library not created)"
    elif report.broken_links:
        health = _colorize(f"{report.broken_links} broken link(s)", ANSI_RED, color)
    else:
        health = _colorize("ok", ANSI_GREEN, color)
    lines.append(f"{_colorize('Health:', ANSI_BOLD, color)} {health}")
    return "\n".join(lines)


def render_doctor(report: DoctorReport, *, color: bool = False) -> str:
    """Render doctor findings and, when it ran, the repair summary."""
    lines: list[str] = []
    for issue in report.library_issues:
        lines.append(f"{_colorize('library', ANSI_CYAN, color)}: {issue}")
    for name, issues in report.target_issues.items():
        for issue in issues:
            lines.append(f"{_colorize(name, ANSI_CYAN, color)}: {issue}")
    for issue in report.config_issues:
        lines.append(f"{_colorize('config', ANSI_CYAN, color)}: {issue}")

    summary = f"Found {report.total_issues} issue(s)."
    if report.total_issues == 0:
        lines.append(_colorize(summary, ANSI_GREEN, color))
        return "\n".join(lines)

    lines.append(_colorize(summary, ANSI_YELLOW, color))
    if report.repaired is not None:
        lines.append(f"Repaired: {report.repaired.total_removed} broken link(s) removed")
        if report.config_issues:
            lines.append("Config issues need manual attention.")
    elif report.dry_run:
        lines.append("Dry run: nothing was repaired.")
    return "\n".join(lines)
