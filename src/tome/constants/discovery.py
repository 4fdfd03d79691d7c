"""Constants for skill discovery across configured sources."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
INSTALLED_PLUGINS_FILENAME: str = "installed_plugins.json"
PLUGIN_SKILLS_DIRNAME: str = "skills"
INSTALL_PATH_KEY: str = "installPath"

SOURCE_TYPE_CLAUDE_PLUGINS: str = "claude-plugins"
SOURCE_TYPE_DIRECTORY: str = "directory"
VALID_SOURCE_TYPES: frozenset[str] = frozenset({SOURCE_TYPE_CLAUDE_PLUGINS, SOURCE_TYPE_DIRECTORY})

# v1: flat array of install records.
INSTALLED_PLUGINS_V1_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
}

# v2: {"version": 2, "plugins": {"<name>@<registry>": [records...]}}
# Plugin entries that are not arrays are skipped individually.
INSTALLED_PLUGINS_V2_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["plugins"],
    "properties": {
        "version": {"type": "integer"},
        "plugins": {"type": "object"},
    },
}
