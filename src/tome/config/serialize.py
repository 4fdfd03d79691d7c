"""Render a resolved config back into its YAML document shape."""

from __future__ import annotations

import yaml

from tome.config.model import TomeConfig
from tome.types import JsonObject


def config_to_dict(config: TomeConfig) -> JsonObject:
    """Return the config as plain data in the on-disk key layout."""
    targets: JsonObject = {}
    for name, target in config.iter_targets():
        entry: JsonObject = {"enabled": target.enabled, "method": target.method_name}
        if target.skills_dir is not None:
            entry["skills_dir"] = str(target.skills_dir)
        if target.mcp_config is not None:
            entry["mcp_config"] = str(target.mcp_config)
        targets[name] = entry

    return {
        "library_dir": str(config.library_dir),
        "exclude": sorted(config.exclude),
        "sources": [
            {"name": source.name, "path": str(source.path), "type": source.kind} for source in config.sources
        ],
        "targets": targets,
    }


def render_config_yaml(config: TomeConfig) -> str:
    """Serialize the config as a YAML document."""
    return yaml.safe_dump(config_to_dict(config), sort_keys=False, default_flow_style=False)
