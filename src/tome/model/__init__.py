"""Core data models for Tome."""

from .entities import (
    CleanupResult,
    ConsolidateResult,
    DiscoveredSkill,
    DiscoveryResult,
    DistributeResult,
    DoctorReport,
    LinkIssue,
    SkillConflict,
    SourceStatus,
    StatusReport,
    SyncResult,
    TargetStatus,
)

__all__ = [
    "CleanupResult",
    "ConsolidateResult",
    "DiscoveredSkill",
    "DiscoveryResult",
    "DistributeResult",
    "DoctorReport",
    "LinkIssue",
    "SkillConflict",
    "SourceStatus",
    "StatusReport",
    "SyncResult",
    "TargetStatus",
]
