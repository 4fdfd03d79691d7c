"""Tool implementations served over MCP: listing and reading skills."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tome.constants.branding import NO_SKILLS_MESSAGE
from tome.constants.discovery import SKILL_MARKDOWN_FILENAME
from tome.exceptions import ManifestEscapeError
from tome.model import DiscoveredSkill
from tome.utils.paths import canonicalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolReply:
    """Text returned to the client; ``is_error`` marks a tool-level failure."""

    text: str
    is_error: bool = False


def list_skills(skills: Sequence[DiscoveredSkill]) -> ToolReply:
    """Describe every discovered skill, one per line."""
    if not skills:
        return ToolReply(NO_SKILLS_MESSAGE)
    lines = [f"{len(skills)} skill(s) found:"]
    lines.extend(f"- {skill.name} (source: {skill.source_name}, path: {skill.path})" for skill in skills)
    return ToolReply("\n".join(lines))


def read_skill(skills: Sequence[DiscoveredSkill], name: str) -> ToolReply:
    """Return the ``SKILL.md`` contents of the named skill.

    An unknown name is a tool-level error. A manifest symlink that resolves
    outside its skill directory raises :class:`ManifestEscapeError`.
    """
    skill = next((candidate for candidate in skills if candidate.name == name), None)
    if skill is None:
        return ToolReply(f"Skill '{name}' not found", is_error=True)

    manifest = skill.path / SKILL_MARKDOWN_FILENAME
    if manifest.is_symlink():
        real_manifest = canonicalize(manifest)
        real_root = canonicalize(skill.path)
        if real_manifest is None or real_root is None or not real_manifest.is_relative_to(real_root):
            raise ManifestEscapeError(f"{SKILL_MARKDOWN_FILENAME} for skill '{name}' resolves outside {skill.path}")

    try:
        text = manifest.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to read %s: %s", manifest, exc)
        return ToolReply(f"Failed to read skill '{name}': {exc}", is_error=True)
    return ToolReply(text)
