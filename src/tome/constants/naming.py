"""Regex patterns used for skill-name validation."""

from __future__ import annotations

import re

STRICT_SKILL_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z0-9-]+$")
CONTROL_CHAR_PATTERN: re.Pattern[str] = re.compile(r"[\x00-\x1f\x7f]")
PATH_SEPARATORS: tuple[str, ...] = ("/", "\\")
RESERVED_SKILL_NAMES: frozenset[str] = frozenset({".", ".."})
