"""Skill discovery across configured sources.

Two source kinds are supported. ``directory`` sources are scanned one level
deep for ``<child>/SKILL.md``. ``claude-plugins`` sources are read through
their ``installed_plugins.json`` install records, and each record's
``<installPath>/skills`` directory is scanned the same way.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from jsonschema import Draft202012Validator

from tome.config.model import Source, TomeConfig
from tome.constants.discovery import (
    INSTALL_PATH_KEY,
    INSTALLED_PLUGINS_FILENAME,
    INSTALLED_PLUGINS_V1_SCHEMA,
    INSTALLED_PLUGINS_V2_SCHEMA,
    PLUGIN_SKILLS_DIRNAME,
    SKILL_MARKDOWN_FILENAME,
    SOURCE_TYPE_CLAUDE_PLUGINS,
)
from tome.exceptions import DiscoveryError, InvalidSkillNameError
from tome.io import load_json_file
from tome.model import DiscoveredSkill, DiscoveryResult, SkillConflict
from tome.utils.naming import is_strict_skill_name, validate_skill_name

logger = logging.getLogger(__name__)

_V1_VALIDATOR = Draft202012Validator(INSTALLED_PLUGINS_V1_SCHEMA)
_V2_VALIDATOR = Draft202012Validator(INSTALLED_PLUGINS_V2_SCHEMA)


def discover_all(config: TomeConfig) -> DiscoveryResult:
    """Discover skills from every source in declaration order.

    Excluded names are dropped. When a name appears in more than one source
    the first source wins and the later occurrence is reported as a conflict.
    """
    skills: list[DiscoveredSkill] = []
    warnings: list[str] = []
    conflicts: list[SkillConflict] = []
    winners: dict[str, DiscoveredSkill] = {}

    for source in config.sources:
        source_skills, source_warnings = discover_source(source)
        warnings.extend(source_warnings)

        for skill in source_skills:
            if skill.name in config.exclude:
                logger.debug("Excluded skill %s from source %s", skill.name, source.name)
                continue
            existing = winners.get(skill.name)
            if existing is not None:
                conflicts.append(SkillConflict(name=skill.name, winner=existing.source_name, loser=skill.source_name))
                continue
            winners[skill.name] = skill
            skills.append(skill)

    for conflict in conflicts:
        warning = conflict.describe()
        warnings.append(warning)
        logger.warning(warning)

    return DiscoveryResult(skills=tuple(skills), warnings=tuple(warnings), conflicts=tuple(conflicts))


def discover_source(source: Source) -> tuple[list[DiscoveredSkill], list[str]]:
    """Discover skills from a single source, without dedup or exclusion."""
    warnings: list[str] = []
    if source.kind == SOURCE_TYPE_CLAUDE_PLUGINS:
        skills = _discover_claude_plugins(source, warnings)
    else:
        skills = _discover_directory(source, warnings)
    return skills, warnings


def _discover_directory(source: Source, warnings: list[str]) -> list[DiscoveredSkill]:
    if not _is_readable_dir(source.path, warnings):
        _warn(warnings, f"source '{source.name}' path does not exist: {source.path}")
        return []
    return scan_for_skills(source.path, source.name, warnings)


def _discover_claude_plugins(source: Source, warnings: list[str]) -> list[DiscoveredSkill]:
    records_path = source.path / INSTALLED_PLUGINS_FILENAME
    if records_path.is_file():
        return _discover_from_install_records(records_path, source.name, warnings)

    parent_path = source.path.parent / INSTALLED_PLUGINS_FILENAME
    if parent_path.is_file():
        _warn(warnings, f"{INSTALLED_PLUGINS_FILENAME} not found at '{records_path}', trying parent directory")
        return _discover_from_install_records(parent_path, source.name, warnings)

    _warn(warnings, f"no {INSTALLED_PLUGINS_FILENAME} found for source '{source.name}'")
    return []


def _discover_from_install_records(
    records_path: Path,
    source_name: str,
    warnings: list[str],
) -> list[DiscoveredSkill]:
    try:
        document = load_json_file(records_path)
    except OSError as exc:
        raise DiscoveryError(f"failed to read {records_path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DiscoveryError(f"failed to parse {records_path}: {exc}") from exc

    if _V1_VALIDATOR.is_valid(document):
        records = list(document)  # type: ignore[call-overload]
    elif _V2_VALIDATOR.is_valid(document):
        plugins = document["plugins"]  # type: ignore[index]
        records = [record for entries in plugins.values() if isinstance(entries, list) for record in entries]
    else:
        _warn(warnings, f"unrecognized {INSTALLED_PLUGINS_FILENAME} format in {records_path}")
        return []

    skills: list[DiscoveredSkill] = []
    for record in records:
        install_path = record.get(INSTALL_PATH_KEY) if isinstance(record, dict) else None
        if not isinstance(install_path, str) or not install_path:
            logger.debug("Skipping install record without %s in %s", INSTALL_PATH_KEY, records_path)
            continue
        skills_dir = Path(install_path) / PLUGIN_SKILLS_DIRNAME
        if _is_readable_dir(skills_dir, warnings):
            skills.extend(scan_for_skills(skills_dir, source_name, warnings))
    return skills


def scan_for_skills(directory: Path, source_name: str, warnings: list[str]) -> list[DiscoveredSkill]:
    """Return one skill per immediate child directory holding a ``SKILL.md`` file.

    Symlinked child directories are not followed, so a directory that is
    both a source and a distribution target does not rediscover its own
    mirrored links.
    """
    skills: list[DiscoveredSkill] = []
    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        _warn(warnings, f"skipping unreadable directory {directory}: {exc}")
        return skills

    for child in children:
        try:
            if not _is_skill_dir(child):
                continue
        except OSError as exc:
            _warn(warnings, f"skipping entry in {directory}: {exc}")
            continue
        try:
            name = validate_skill_name(child.name)
        except InvalidSkillNameError as exc:
            _warn(warnings, f"skipping skill in {child}: {exc}")
            continue
        if not is_strict_skill_name(name):
            _warn(warnings, f"skill name '{name}' should be lowercase letters, digits, or hyphens")
        skills.append(DiscoveredSkill(name=name, path=child.absolute(), source_name=source_name))
    return skills


def _is_skill_dir(child: Path) -> bool:
    if child.is_symlink() or not child.is_dir():
        return False
    return (child / SKILL_MARKDOWN_FILENAME).is_file()


def _is_readable_dir(path: Path, warnings: list[str]) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        _warn(warnings, f"skipping unreadable directory {path}: {exc}")
        return False


def _warn(warnings: list[str], warning: str) -> None:
    warnings.append(warning)
    logger.warning(warning)
