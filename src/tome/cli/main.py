"""CLI entrypoint for tome."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tome import __version__
from tome.cli.handlers import (
    handle_config,
    handle_doctor,
    handle_list,
    handle_serve,
    handle_status,
    handle_sync,
)
from tome.constants.branding import BRAND_NAME, CLI_DESCRIPTION, CLI_EPILOG
from tome.exceptions import ConfigError, TomeError

_HANDLERS = {
    "sync": handle_sync,
    "status": handle_status,
    "doctor": handle_doctor,
    "list": handle_list,
    "ls": handle_list,
    "serve": handle_serve,
    "config": handle_config,
}


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-n", "--dry-run", action="store_true", help="Show what would change without changing it")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show errors")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        epilog=CLI_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Discover, consolidate, and distribute skills")
    sync.add_argument("-f", "--force", action="store_true", help="Recreate every managed link")
    _add_common_arguments(sync)

    status = subparsers.add_parser("status", help="Show library, sources, and targets")
    _add_common_arguments(status)

    doctor = subparsers.add_parser("doctor", help="Diagnose and repair broken links")
    _add_common_arguments(doctor)

    listing = subparsers.add_parser("list", aliases=["ls"], help="List discovered skills")
    _add_common_arguments(listing)

    serve = subparsers.add_parser("serve", help="Serve skills over MCP on stdio")
    _add_common_arguments(serve)

    config = subparsers.add_parser("config", help="Print the resolved config")
    config.add_argument("--path", action="store_true", help="Print only the config file path")
    _add_common_arguments(config)

    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    return logging.INFO


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_log_level(args), format="%(levelname)s %(message)s", stream=sys.stderr)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args, home=Path.home())
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except TomeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
