"""Publish the library to distribution targets."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from tome.config.model import McpMethod, TargetConfig
from tome.constants.mcp import (
    MCP_CONFIG_TEMP_PREFIX,
    MCP_CONFIG_TEMP_SUFFIX,
    MCP_SERVER_COMMAND,
    MCP_SERVER_KEY,
    MCP_SERVERS_KEY,
)
from tome.exceptions import SyncError
from tome.io import load_json_file, write_json_atomic
from tome.model import DistributeResult
from tome.sync.links import plan_link, replace_link
from tome.types import JsonObject

logger = logging.getLogger(__name__)


def distribute(
    library_dir: Path,
    target_name: str,
    target: TargetConfig,
    *,
    dry_run: bool = False,
    force: bool = False,
) -> DistributeResult:
    """Distribute the library to one target; disabled targets are a no-op."""
    if not target.enabled:
        logger.debug("Target %s is disabled, skipping", target_name)
        return DistributeResult(target_name=target_name)

    if isinstance(target.method, McpMethod):
        return _distribute_mcp(target.method.config_path, target_name, dry_run=dry_run, force=force)
    return _distribute_symlinks(library_dir, target.method.skills_dir, target_name, dry_run=dry_run, force=force)


def mcp_registration() -> JsonObject:
    """Server entry written under ``mcpServers.<reserved key>``."""
    return {"command": MCP_SERVER_COMMAND, "args": [], "env": {}}


def _distribute_symlinks(
    library_dir: Path,
    skills_dir: Path,
    target_name: str,
    *,
    dry_run: bool,
    force: bool,
) -> DistributeResult:
    """Mirror every library entry into ``skills_dir`` as a link to the entry."""
    if not dry_run:
        try:
            skills_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SyncError(f"failed to create target dir {skills_dir}: {exc}") from exc

    result = DistributeResult(target_name=target_name)
    for entry in _library_entries(library_dir):
        target_link = skills_dir / entry.name
        action = plan_link(target_link, entry, force=force)

        if action == "unchanged":
            result.unchanged += 1
            continue
        if action == "skip":
            logger.warning("%s exists in target %s and is not a symlink, skipping", target_link, target_name)
            result.skipped += 1
            continue

        if not dry_run:
            replace_link(target_link, entry, remove_existing=action == "update")
        result.changed += 1

    return result


def _library_entries(library_dir: Path) -> list[Path]:
    """List library entries; a library that does not exist yet has none."""
    if not library_dir.is_dir():
        logger.debug("Library %s does not exist yet, nothing to distribute", library_dir)
        return []
    try:
        return sorted(library_dir.iterdir())
    except OSError as exc:
        raise SyncError(f"failed to read library dir {library_dir}: {exc}") from exc


def _distribute_mcp(config_path: Path, target_name: str, *, dry_run: bool, force: bool) -> DistributeResult:
    """Register the tome server in a JSON tool config, preserving other keys."""
    result = DistributeResult(target_name=target_name)
    document = _load_mcp_document(config_path)

    servers = document.setdefault(MCP_SERVERS_KEY, {})
    if not isinstance(servers, dict):
        raise SyncError(f"{MCP_SERVERS_KEY} in {config_path} is not a JSON object")

    existing = servers.get(MCP_SERVER_KEY)
    if not force and isinstance(existing, dict) and existing.get("command") == MCP_SERVER_COMMAND:
        result.unchanged = 1
        return result

    servers[MCP_SERVER_KEY] = mcp_registration()
    if not dry_run:
        try:
            write_json_atomic(
                path=config_path,
                payload=document,
                temp_prefix=MCP_CONFIG_TEMP_PREFIX,
                temp_suffix=MCP_CONFIG_TEMP_SUFFIX,
                sort_keys=False,
            )
        except OSError as exc:
            raise SyncError(f"failed to write {config_path}: {exc}") from exc
        logger.debug("Registered %s in %s", MCP_SERVER_KEY, config_path)

    result.changed = 1
    return result


def _load_mcp_document(config_path: Path) -> JsonObject:
    if not config_path.exists():
        return {}
    try:
        document = load_json_file(config_path)
    except OSError as exc:
        raise SyncError(f"failed to read {config_path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SyncError(f"failed to parse {config_path}: {exc}") from exc
    if not isinstance(document, dict):
        raise SyncError(f"mcp config {config_path} is not a JSON object")
    return document
