"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"

LIST_COLUMNS: tuple[str, ...] = ("SKILL", "SOURCE", "PATH")
STATUS_SOURCE_COLUMN_WIDTH: int = 40
STATUS_TARGET_COLUMN_WIDTH: int = 20
