"""End-to-end tests for the sync pipeline and status."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from pathlib import Path

from tome.config.model import McpMethod, Source, SymlinkMethod, TargetConfig, TomeConfig
from tome.reporting.stdout import render_status, render_sync
from tome.sync import collect_status, run_sync

SkillFactory = Callable[..., Path]


def _config(tmp_path: Path, library_dir: Path) -> TomeConfig:
    return TomeConfig(
        library_dir=library_dir,
        sources=(
            Source(name="a", path=tmp_path / "a", kind="directory"),
            Source(name="b", path=tmp_path / "b", kind="directory"),
        ),
        targets={
            "codex": TargetConfig(enabled=True, method=SymlinkMethod(skills_dir=tmp_path / "codex")),
            "ag": TargetConfig(enabled=True, method=McpMethod(config_path=tmp_path / "mcp.json")),
        },
    )


def test_sync_links_library_and_targets(tmp_path: Path, library_dir: Path, make_skill: SkillFactory) -> None:
    make_skill(tmp_path / "a", "foo")
    make_skill(tmp_path / "b", "foo")
    make_skill(tmp_path / "b", "bar")
    config = _config(tmp_path, library_dir)

    result = run_sync(config)

    assert result.library is not None
    assert result.library.created == 2
    assert (library_dir / "foo").resolve() == (tmp_path / "a" / "foo").resolve()
    assert (library_dir / "bar").resolve() == (tmp_path / "b" / "bar").resolve()
    assert [(target.target_name, target.changed) for target in result.targets] == [("codex", 2), ("ag", 1)]
    assert (tmp_path / "codex" / "foo").readlink() == library_dir / "foo"
    assert "tome" in json.loads((tmp_path / "mcp.json").read_text(encoding="utf-8"))["mcpServers"]
    assert len(result.discovery.conflicts) == 1

    rendered = render_sync(run_sync(config))
    assert "Library: 0 created, 2 unchanged, 0 updated" in rendered
    assert "codex: 0 linked, 2 unchanged" in rendered


def test_removed_source_skill_is_cleaned_everywhere(
    tmp_path: Path, library_dir: Path, make_skill: SkillFactory
) -> None:
    make_skill(tmp_path / "a", "keep")
    doomed = make_skill(tmp_path / "a", "doomed")
    config = _config(tmp_path, library_dir)
    run_sync(config)
    shutil.rmtree(doomed)

    result = run_sync(config)

    assert result.cleanup is not None
    assert result.cleanup.removed_from_library == 1
    assert result.cleanup.removed_from_targets["codex"] == 1
    assert not (library_dir / "doomed").is_symlink()
    assert not (tmp_path / "codex" / "doomed").is_symlink()


def test_dry_run_leaves_filesystem_untouched(tmp_path: Path, library_dir: Path, make_skill: SkillFactory) -> None:
    make_skill(tmp_path / "a", "foo")
    config = _config(tmp_path, library_dir)

    result = run_sync(config, dry_run=True)

    assert result.dry_run
    assert result.library is not None
    assert result.library.created == 1
    assert not library_dir.exists()
    assert not (tmp_path / "codex").exists()
    assert not (tmp_path / "mcp.json").exists()


def test_no_skills_stops_after_discovery(tmp_path: Path, library_dir: Path) -> None:
    result = run_sync(_config(tmp_path, library_dir))

    assert result.library is None
    assert result.targets == ()
    assert not library_dir.exists()
    assert "No skills found" in render_sync(result)


def test_status_summarizes_sources_targets_and_health(
    tmp_path: Path, library_dir: Path, make_skill: SkillFactory
) -> None:
    make_skill(tmp_path / "a", "foo")
    config = _config(tmp_path, library_dir)
    run_sync(config)
    (library_dir / "dangling").symlink_to(tmp_path / "nowhere")

    report = collect_status(config)

    assert report.library_count == 2
    assert report.broken_links == 1
    assert [(source.name, source.skill_count) for source in report.sources] == [("a", 1), ("b", 0)]
    assert [(target.name, target.method) for target in report.targets] == [("codex", "symlink"), ("ag", "mcp")]
    assert "1 broken link(s)" in render_status(report)
