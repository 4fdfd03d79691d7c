"""Tests for skill-name validation."""

from __future__ import annotations

import pytest

from tome.exceptions import InvalidSkillNameError
from tome.utils.naming import is_strict_skill_name, validate_skill_name


@pytest.mark.parametrize(
    "raw_name",
    [
        pytest.param("", id="empty"),
        pytest.param(".", id="dot"),
        pytest.param("..", id="dotdot"),
        pytest.param("a/b", id="slash"),
        pytest.param("a\\b", id="backslash"),
        pytest.param("a\nb", id="control-char"),
    ],
)
def test_unusable_names_are_rejected(raw_name: str) -> None:
    with pytest.raises(InvalidSkillNameError):
        validate_skill_name(raw_name)


def test_lenient_names_pass_validation_but_not_strict_check() -> None:
    assert validate_skill_name("My Skill") == "My Skill"
    assert not is_strict_skill_name("My Skill")
    assert is_strict_skill_name("my-skill-2")
