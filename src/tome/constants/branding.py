"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "tome"
CLI_DESCRIPTION: str = "Sync AI coding skills across tools"
CLI_EPILOG: str = "\n".join(
    (
        "Examples:",
        "  tome sync --dry-run",
        "  tome status",
        "  tome list",
        "  tome doctor",
    )
)
NO_SKILLS_MESSAGE: str = "No skills found. Add sources to your tome config."
