"""Core data models for the sync pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DiscoveredSkill:
    """A skill directory found in a source. Recomputed on every run."""

    name: str
    path: Path
    source_name: str


@dataclass(frozen=True)
class SkillConflict:
    """A skill name found in more than one source; the earlier source wins."""

    name: str
    winner: str
    loser: str

    def describe(self) -> str:
        """Human-readable warning text for this conflict."""
        return (
            f"skill '{self.name}' found in both '{self.winner}' and '{self.loser}', "
            f"using '{self.winner}'"
        )


@dataclass(frozen=True)
class DiscoveryResult:
    """Deduplicated, exclusion-filtered skills plus non-fatal warnings."""

    skills: tuple[DiscoveredSkill, ...] = ()
    warnings: tuple[str, ...] = ()
    conflicts: tuple[SkillConflict, ...] = ()

    def __iter__(self) -> Iterator[object]:
        yield self.skills
        yield self.warnings


@dataclass
class ConsolidateResult:
    """Counters for one consolidation pass over the library."""

    created: int = 0
    unchanged: int = 0
    updated: int = 0
    skipped: int = 0


@dataclass
class DistributeResult:
    """Counters for distributing the library to a single target."""

    target_name: str
    changed: int = 0
    unchanged: int = 0
    skipped: int = 0


@dataclass
class CleanupResult:
    """Broken or stale links removed (or, in dry-run, that would be removed)."""

    removed_from_library: int = 0
    removed_from_targets: dict[str, int] = field(default_factory=dict)

    @property
    def total_removed(self) -> int:
        """Links removed across the library and every target."""
        return self.removed_from_library + sum(self.removed_from_targets.values())


@dataclass(frozen=True)
class LinkIssue:
    """A managed symlink whose destination no longer exists."""

    link: Path
    target: Path


@dataclass(frozen=True)
class DoctorReport:
    """Outcome of a read-only audit, plus the repair summary when one ran."""

    library_issues: tuple[str, ...] = ()
    target_issues: dict[str, tuple[str, ...]] = field(default_factory=dict)
    config_issues: tuple[str, ...] = ()
    repaired: CleanupResult | None = None
    dry_run: bool = False

    @property
    def total_issues(self) -> int:
        """Issues found across library, targets, and config."""
        target_total = sum(len(issues) for issues in self.target_issues.values())
        return len(self.library_issues) + target_total + len(self.config_issues)


@dataclass(frozen=True)
class SourceStatus:
    """Skill count for one source; ``None`` when the source could not be read."""

    name: str
    path: Path
    skill_count: int | None


@dataclass(frozen=True)
class TargetStatus:
    """Configured state of one target."""

    name: str
    enabled: bool
    method: str
    location: Path


@dataclass(frozen=True)
class StatusReport:
    """Read-only summary of library, sources, targets, and link health."""

    library_dir: Path
    library_count: int | None
    sources: tuple[SourceStatus, ...] = ()
    targets: tuple[TargetStatus, ...] = ()
    broken_links: int | None = 0


@dataclass(frozen=True)
class SyncResult:
    """Everything a sync run did, or in dry-run would do."""

    discovery: DiscoveryResult
    library: ConsolidateResult | None = None
    targets: tuple[DistributeResult, ...] = ()
    cleanup: CleanupResult | None = None
    dry_run: bool = False
