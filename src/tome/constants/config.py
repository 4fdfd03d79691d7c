"""Configuration defaults, filenames, and allowed document keys."""

from __future__ import annotations

from pathlib import PurePosixPath

CONFIG_FILENAME: str = "config.yaml"
CONFIG_DIR_PARTS: tuple[str, ...] = (".config", "tome")
DEFAULT_LIBRARY_DIR_PARTS: tuple[str, ...] = (".local", "share", "tome", "skills")
HOME_PREFIX: PurePosixPath = PurePosixPath("~")

METHOD_SYMLINK: str = "symlink"
METHOD_MCP: str = "mcp"
VALID_METHODS: frozenset[str] = frozenset({METHOD_SYMLINK, METHOD_MCP})

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"library_dir", "exclude", "sources", "targets"})
ALLOWED_SOURCE_KEYS: frozenset[str] = frozenset({"name", "path", "type"})
ALLOWED_TARGET_KEYS: frozenset[str] = frozenset({"enabled", "method", "skills_dir", "mcp_config"})
