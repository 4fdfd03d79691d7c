"""Tests for doctor diagnosis and repair."""

from __future__ import annotations

from pathlib import Path

from tome.config.model import McpMethod, Source, SymlinkMethod, TargetConfig, TomeConfig
from tome.reporting.stdout import render_doctor
from tome.sync.doctor import diagnose


def test_dry_run_reports_then_real_run_repairs(tmp_path: Path, library_dir: Path) -> None:
    library_dir.mkdir()
    broken = library_dir / "broken"
    broken.symlink_to(tmp_path / "deleted-skill")
    config = TomeConfig(library_dir=library_dir)

    preview = diagnose(config, dry_run=True)

    assert preview.total_issues == 1
    assert preview.repaired is None
    assert broken.is_symlink()
    assert "Found 1 issue(s)." in render_doctor(preview)

    repaired = diagnose(config)

    assert repaired.repaired is not None
    assert repaired.repaired.removed_from_library == 1
    assert not broken.is_symlink()
    assert "Found 0 issue(s)." in render_doctor(diagnose(config, dry_run=True))


def test_missing_library_counts_as_one_issue(library_dir: Path) -> None:
    report = diagnose(TomeConfig(library_dir=library_dir), dry_run=True)

    assert report.total_issues == 1
    assert "does not exist" in report.library_issues[0]


def test_checks_enabled_symlink_targets_only(tmp_path: Path, library_dir: Path) -> None:
    library_dir.mkdir()
    config = TomeConfig(
        library_dir=library_dir,
        targets={
            "missing": TargetConfig(enabled=True, method=SymlinkMethod(skills_dir=tmp_path / "missing")),
            "off": TargetConfig(enabled=False, method=SymlinkMethod(skills_dir=tmp_path / "off")),
            "ag": TargetConfig(enabled=True, method=McpMethod(config_path=tmp_path / "mcp.json")),
        },
    )

    report = diagnose(config, dry_run=True)

    assert list(report.target_issues) == ["missing"]
    assert report.total_issues == 1


def test_config_issues_are_reported_but_not_repaired(tmp_path: Path, library_dir: Path) -> None:
    library_dir.mkdir()
    config = TomeConfig(
        library_dir=library_dir,
        sources=(Source(name="gone", path=tmp_path / "gone", kind="directory"),),
    )

    report = diagnose(config)

    assert report.config_issues == (f"source 'gone' path does not exist: {tmp_path / 'gone'}",)
    assert report.repaired is not None
    assert report.repaired.total_removed == 0
    assert diagnose(config).total_issues == 1


def test_healthy_setup_reports_no_issues(library_dir: Path) -> None:
    library_dir.mkdir()

    report = diagnose(TomeConfig(library_dir=library_dir))

    assert report.total_issues == 0
    assert render_doctor(report) == "Found 0 issue(s)."


def test_stale_target_links_are_audited_and_foreign_links_kept(tmp_path: Path, library_dir: Path) -> None:
    library_dir.mkdir()
    target_dir = tmp_path / "codex"
    target_dir.mkdir()
    ours = target_dir / "removed-skill"
    ours.symlink_to(library_dir / "removed-skill")
    foreign = target_dir / "foreign"
    foreign.symlink_to(tmp_path / "elsewhere" / "gone")
    config = TomeConfig(
        library_dir=library_dir,
        targets={"codex": TargetConfig(enabled=True, method=SymlinkMethod(skills_dir=target_dir))},
    )

    preview = diagnose(config, dry_run=True)

    assert list(preview.target_issues) == ["codex"]
    assert len(preview.target_issues["codex"]) == 1
    assert "removed-skill" in preview.target_issues["codex"][0]

    repaired = diagnose(config)

    assert repaired.repaired is not None
    assert repaired.repaired.removed_from_targets == {"codex": 1}
    assert not ours.is_symlink()
    assert foreign.is_symlink()
