"""Tests for symlink target resolution and equivalence."""

from __future__ import annotations

from pathlib import Path

from tome.utils.paths import (
    is_within,
    link_target_exists,
    paths_equivalent,
    resolve_link_target,
    symlink_points_to,
)


def test_resolve_link_target_joins_relative_to_link_parent(tmp_path: Path) -> None:
    link = tmp_path / "library" / "demo"

    assert resolve_link_target(link, Path("../sources/demo")) == tmp_path / "library" / "../sources/demo"
    assert resolve_link_target(link, Path("/abs/demo")) == Path("/abs/demo")


def test_relative_and_absolute_links_are_equivalent(tmp_path: Path) -> None:
    source = tmp_path / "sources" / "demo"
    source.mkdir(parents=True)
    library = tmp_path / "library"
    library.mkdir()
    relative_link = library / "relative"
    absolute_link = library / "absolute"
    relative_link.symlink_to(Path("../sources/demo"))
    absolute_link.symlink_to(source)

    assert symlink_points_to(relative_link, source)
    assert symlink_points_to(absolute_link, source)


def test_equivalence_follows_intermediate_symlinks(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    alias = tmp_path / "alias"
    alias.symlink_to(real)

    assert paths_equivalent(alias, real)


def test_dangling_link_compares_lexically(tmp_path: Path) -> None:
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "gone" / ".." / "missing")

    assert symlink_points_to(link, tmp_path / "missing")
    assert not symlink_points_to(link, tmp_path / "other")


def test_symlink_points_to_is_false_for_regular_files(tmp_path: Path) -> None:
    regular = tmp_path / "file"
    regular.write_text("x", encoding="utf-8")

    assert not symlink_points_to(regular, regular)


def test_is_within_accepts_missing_leaf(tmp_path: Path) -> None:
    library = tmp_path / "library"
    library.mkdir()

    assert is_within(library / "deleted-skill", library)
    assert not is_within(tmp_path / "elsewhere" / "skill", library)


def test_link_target_exists_tracks_destination(tmp_path: Path) -> None:
    destination = tmp_path / "skill"
    destination.mkdir()
    link = tmp_path / "link"
    link.symlink_to(Path("skill"))

    assert link_target_exists(link)
    destination.rmdir()
    assert not link_target_exists(link)
