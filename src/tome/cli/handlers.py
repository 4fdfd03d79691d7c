"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tome.config import default_config_path, expand_tilde, load_config, render_config_yaml, validate_config
from tome.config.model import TomeConfig
from tome.reporting.stdout import render_doctor, render_skill_list, render_status, render_sync
from tome.sync import collect_status, diagnose, discover_all, run_sync

logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace, home: Path) -> TomeConfig:
    config = load_config(args.config, home=home)
    validate_config(config)
    return config


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()


def handle_sync(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome sync``."""
    config = _load(args, home)
    result = run_sync(config, dry_run=args.dry_run, force=args.force)
    print(render_sync(result, color=_use_color(args)))
    return 0


def handle_status(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome status``."""
    report = collect_status(_load(args, home))
    print(render_status(report, color=_use_color(args)))
    return 0


def handle_doctor(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome doctor``; issues alone do not fail the command."""
    report = diagnose(_load(args, home), dry_run=args.dry_run)
    print(render_doctor(report, color=_use_color(args)))
    return 0


def handle_list(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome list``."""
    discovery = discover_all(_load(args, home))
    print(render_skill_list(discovery.skills, color=_use_color(args)))
    return 0


def handle_serve(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome serve``."""
    from tome.server.app import serve

    serve(_load(args, home))
    return 0


def handle_config(args: argparse.Namespace, *, home: Path) -> int:
    """Run ``tome config``."""
    if args.path:
        path = default_config_path(home) if args.config is None else expand_tilde(args.config, home)
        print(path)
        return 0
    print(render_config_yaml(_load(args, home)), end="")
    return 0
