"""Resolved configuration model for tome."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from tome.constants.config import METHOD_MCP, METHOD_SYMLINK
from tome.types import MethodName, SourceType


@dataclass(frozen=True)
class Source:
    """A configured origin of skills. Declaration order sets priority."""

    name: str
    path: Path
    kind: SourceType


@dataclass(frozen=True)
class SymlinkMethod:
    """Mirror library entries into ``skills_dir`` as symlinks."""

    skills_dir: Path


@dataclass(frozen=True)
class McpMethod:
    """Register the tome server inside the JSON document at ``config_path``."""

    config_path: Path


TargetMethod: TypeAlias = SymlinkMethod | McpMethod


@dataclass(frozen=True)
class TargetConfig:
    """A distribution target; the method variant carries the path it needs."""

    enabled: bool
    method: TargetMethod

    @property
    def method_name(self) -> MethodName:
        """Config-document spelling of the distribution method."""
        return METHOD_SYMLINK if isinstance(self.method, SymlinkMethod) else METHOD_MCP

    @property
    def skills_dir(self) -> Path | None:
        """Skills directory for symlink targets, ``None`` for MCP targets."""
        return self.method.skills_dir if isinstance(self.method, SymlinkMethod) else None

    @property
    def mcp_config(self) -> Path | None:
        """JSON document path for MCP targets, ``None`` for symlink targets."""
        return self.method.config_path if isinstance(self.method, McpMethod) else None

    @property
    def location(self) -> Path:
        """Path the target method writes to."""
        return self.method.skills_dir if isinstance(self.method, SymlinkMethod) else self.method.config_path


@dataclass(frozen=True)
class TomeConfig:
    """Resolved tome config. Immutable for the duration of a run."""

    library_dir: Path
    exclude: frozenset[str] = frozenset()
    sources: tuple[Source, ...] = ()
    targets: dict[str, TargetConfig] = field(default_factory=dict)

    def iter_targets(self) -> Iterator[tuple[str, TargetConfig]]:
        """Yield ``(name, target)`` pairs in declaration order."""
        yield from self.targets.items()

    def symlink_targets(self, *, enabled_only: bool = False) -> Iterator[tuple[str, Path]]:
        """Yield ``(name, skills_dir)`` for symlink targets."""
        for name, target in self.targets.items():
            if enabled_only and not target.enabled:
                continue
            if target.skills_dir is not None:
                yield name, target.skills_dir
