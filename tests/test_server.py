"""Tests for the skill tools and MCP dispatch."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR

from tome.exceptions import ManifestEscapeError
from tome.model import DiscoveredSkill
from tome.server.app import TOOLS, create_server, dispatch_tool
from tome.server.tools import list_skills, read_skill

SkillFactory = Callable[..., Path]


@pytest.fixture
def skills(tmp_path: Path, make_skill: SkillFactory) -> list[DiscoveredSkill]:
    return [
        DiscoveredSkill(name="alpha", path=make_skill(tmp_path / "src", "alpha", "# Alpha\nUse it.\n"), source_name="a"),
        DiscoveredSkill(name="beta", path=make_skill(tmp_path / "src", "beta"), source_name="b"),
    ]


def test_list_skills_describes_each_skill(skills: list[DiscoveredSkill]) -> None:
    reply = list_skills(skills)

    lines = reply.text.splitlines()
    assert lines[0] == "2 skill(s) found:"
    assert lines[1] == f"- alpha (source: a, path: {skills[0].path})"
    assert not reply.is_error


def test_list_skills_without_skills() -> None:
    assert list_skills([]).text == "No skills found. Add sources to your tome config."


def test_read_skill_returns_manifest(skills: list[DiscoveredSkill]) -> None:
    assert read_skill(skills, "alpha").text == "# Alpha\nUse it.\n"


def test_read_unknown_skill_is_tool_error(skills: list[DiscoveredSkill]) -> None:
    reply = read_skill(skills, "gamma")

    assert reply.is_error
    assert "gamma" in reply.text


def test_manifest_symlink_inside_skill_is_allowed(tmp_path: Path) -> None:
    skill_dir = tmp_path / "inner"
    (skill_dir / "docs").mkdir(parents=True)
    (skill_dir / "docs" / "real.md").write_text("inside", encoding="utf-8")
    (skill_dir / "SKILL.md").symlink_to(Path("docs/real.md"))

    reply = read_skill([DiscoveredSkill(name="inner", path=skill_dir, source_name="a")], "inner")

    assert reply.text == "inside"


def test_manifest_symlink_escape_is_refused(tmp_path: Path) -> None:
    secret = tmp_path / "secret.txt"
    secret.write_text("do not serve", encoding="utf-8")
    skill_dir = tmp_path / "sneaky"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").symlink_to(secret)
    skills = [DiscoveredSkill(name="sneaky", path=skill_dir, source_name="a")]

    with pytest.raises(ManifestEscapeError):
        read_skill(skills, "sneaky")
    with pytest.raises(McpError) as excinfo:
        dispatch_tool(skills, "read_skill", {"name": "sneaky"})
    assert excinfo.value.error.code == INTERNAL_ERROR


def test_dispatch_routes_list_and_rejects_unknown_tools(skills: list[DiscoveredSkill]) -> None:
    assert dispatch_tool(skills, "list_skills", {}).text.startswith("2 skill(s)")
    with pytest.raises(McpError):
        dispatch_tool(skills, "write_skill", {})
    with pytest.raises(McpError):
        dispatch_tool(skills, "read_skill", {})


def test_server_advertises_both_tools(skills: list[DiscoveredSkill]) -> None:
    server = create_server(skills)

    assert server.name == "tome-mcp"
    assert [tool.name for tool in TOOLS] == ["list_skills", "read_skill"]
