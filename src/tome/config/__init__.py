"""Configuration loading, validation, and normalization for tome.

This package facade re-exports all public names so that callers can use
``from tome.config import ...``.
"""

from __future__ import annotations

from tome.config.loader import load_config, parse_config
from tome.config.model import McpMethod, Source, SymlinkMethod, TargetConfig, TargetMethod, TomeConfig
from tome.config.paths import default_config_path, default_library_dir, expand_tilde
from tome.config.serialize import config_to_dict, render_config_yaml
from tome.config.validator import suggest_key, validate_config

__all__ = [
    "McpMethod",
    "Source",
    "SymlinkMethod",
    "TargetConfig",
    "TargetMethod",
    "TomeConfig",
    "config_to_dict",
    "default_config_path",
    "default_library_dir",
    "expand_tilde",
    "load_config",
    "parse_config",
    "render_config_yaml",
    "suggest_key",
    "validate_config",
]
