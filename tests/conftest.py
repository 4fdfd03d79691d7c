"""Shared pytest fixtures for filesystem-backed sync tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SkillFactory = Callable[..., Path]


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return an isolated home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Return a library path that does not exist yet."""
    return tmp_path / "library"


@pytest.fixture
def make_skill() -> SkillFactory:
    """Return a factory creating ``<root>/<name>/SKILL.md``."""

    def _make(root: Path, name: str, body: str | None = None) -> Path:
        skill_dir = root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / "SKILL.md").write_text(body if body is not None else f"# {name}\n", encoding="utf-8")
        return skill_dir

    return _make
