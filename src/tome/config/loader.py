"""Config loading and normalization for tome."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from tome.config.model import McpMethod, Source, SymlinkMethod, TargetConfig, TargetMethod, TomeConfig
from tome.config.paths import default_config_path, default_library_dir, expand_tilde
from tome.config.validator import suggest_key
from tome.constants.config import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_SOURCE_KEYS,
    ALLOWED_TARGET_KEYS,
    METHOD_MCP,
    METHOD_SYMLINK,
    VALID_METHODS,
)
from tome.constants.discovery import VALID_SOURCE_TYPES
from tome.exceptions import ConfigError, InvalidSkillNameError
from tome.utils.naming import validate_skill_name

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None, *, home: Path) -> TomeConfig:
    """Load tome config from an explicit path or ``<home>/.config/tome/config.yaml``.

    A missing file yields the defaults. An explicit path whose parent
    directory does not exist is treated as a typo and rejected.
    """
    if config_path is None:
        path = default_config_path(home)
    else:
        path = expand_tilde(config_path, home)
        if not path.exists() and not path.parent.is_dir():
            raise ConfigError(f"Config file not found: {path}")

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return TomeConfig(library_dir=default_library_dir(home))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    return parse_config(raw, home=home, origin=str(path))


def parse_config(raw: Any, *, home: Path, origin: str = "<config>") -> TomeConfig:
    """Build a :class:`TomeConfig` from a parsed YAML document."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {origin} must be a YAML mapping")
    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, "config")

    library_raw = raw.get("library_dir")
    if library_raw is None:
        library_dir = default_library_dir(home)
    else:
        library_dir = _ensure_path(library_raw, "library_dir", home)

    return TomeConfig(
        library_dir=library_dir,
        exclude=_parse_exclude(raw.get("exclude", [])),
        sources=_parse_sources(raw.get("sources", []), home),
        targets=_parse_targets(raw.get("targets", {}), home),
    )


def _parse_exclude(value: Any) -> frozenset[str]:
    names = _ensure_string_list(value, "exclude")
    try:
        return frozenset(validate_skill_name(name) for name in names)
    except InvalidSkillNameError as exc:
        raise ConfigError(f"exclude: {exc}") from exc


def _parse_sources(value: Any, home: Path) -> tuple[Source, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("sources must be a list of mappings")

    sources: list[Source] = []
    for index, item in enumerate(value):
        key_name = f"sources[{index}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        _reject_unknown_keys(item, ALLOWED_SOURCE_KEYS, key_name)

        name = item.get("name")
        if not isinstance(name, str):
            raise ConfigError(f"{key_name}.name must be a string")
        kind = item.get("type")
        if kind not in VALID_SOURCE_TYPES:
            raise ConfigError(f"{key_name}.type must be one of {sorted(VALID_SOURCE_TYPES)}, got {kind!r}")
        sources.append(Source(name=name, path=_ensure_path(item.get("path"), f"{key_name}.path", home), kind=kind))
    return tuple(sources)


def _parse_targets(value: Any, home: Path) -> dict[str, TargetConfig]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("targets must be a mapping of target name to settings")

    targets: dict[str, TargetConfig] = {}
    for name, item in value.items():
        key_name = f"targets.{name}"
        if not isinstance(item, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        _reject_unknown_keys(item, ALLOWED_TARGET_KEYS, key_name)

        enabled = item.get("enabled")
        if not isinstance(enabled, bool):
            raise ConfigError(f"{key_name}.enabled must be a boolean")
        targets[str(name)] = TargetConfig(enabled=enabled, method=_parse_method(item, key_name, home))
    return targets


def _parse_method(item: dict[str, Any], key_name: str, home: Path) -> TargetMethod:
    method = item.get("method")
    if method not in VALID_METHODS:
        raise ConfigError(f"{key_name}.method must be one of {sorted(VALID_METHODS)}, got {method!r}")

    if method == METHOD_SYMLINK:
        if item.get("skills_dir") is None:
            raise ConfigError(f"{key_name}: symlink target requires skills_dir")
        if item.get("mcp_config") is not None:
            raise ConfigError(f"{key_name}: symlink target does not accept mcp_config")
        return SymlinkMethod(skills_dir=_ensure_path(item["skills_dir"], f"{key_name}.skills_dir", home))

    if item.get("mcp_config") is None:
        raise ConfigError(f"{key_name}: {METHOD_MCP} target requires mcp_config")
    if item.get("skills_dir") is not None:
        raise ConfigError(f"{key_name}: {METHOD_MCP} target does not accept skills_dir")
    return McpMethod(config_path=_ensure_path(item["mcp_config"], f"{key_name}.mcp_config", home))


def _ensure_path(value: Any, key_name: str, home: Path) -> Path:
    """Coerce a non-empty string to a home-expanded path, raising ConfigError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty path string")
    return expand_tilde(Path(value), home)


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _reject_unknown_keys(raw: dict[str, Any], allowed: frozenset[str], key_name: str) -> None:
    for key in sorted(str(k) for k in raw):
        if key not in allowed:
            hint = suggest_key(key, allowed)
            message = f"unknown key `{key}` in {key_name}"
            raise ConfigError(f"{message} ({hint})" if hint else message)
