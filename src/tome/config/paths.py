"""Home-relative path expansion and default locations.

The home directory is always passed in explicitly; entry points resolve it
once at startup.
"""

from __future__ import annotations

from pathlib import Path

from tome.constants.config import (
    CONFIG_DIR_PARTS,
    CONFIG_FILENAME,
    DEFAULT_LIBRARY_DIR_PARTS,
    HOME_PREFIX,
)


def expand_tilde(path: Path, home: Path) -> Path:
    """Expand a leading ``~`` component against ``home``."""
    parts = path.parts
    if parts and parts[0] == str(HOME_PREFIX):
        return home.joinpath(*parts[1:])
    return path


def default_config_path(home: Path) -> Path:
    """Return ``<home>/.config/tome/config.yaml``."""
    return home.joinpath(*CONFIG_DIR_PARTS, CONFIG_FILENAME)


def default_library_dir(home: Path) -> Path:
    """Return ``<home>/.local/share/tome/skills``."""
    return home.joinpath(*DEFAULT_LIBRARY_DIR_PARTS)
