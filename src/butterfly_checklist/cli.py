"""
Command-line interface for the checklist pipeline.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from butterfly_checklist import __version__
from butterfly_checklist.config import get_settings
from butterfly_checklist.errors import ChecklistError
from butterfly_checklist.flows.build import build_all
from butterfly_checklist.flows.fetch import fetch_all


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="butterfly-checklist",
        description="Map a regional butterfly checklist to a Darwin Core Archive",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    fetch_parser = subparsers.add_parser("fetch", help="Download source tables")
    fetch_parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="URL of the source CSV directory (default: source_base_url from settings)",
    )

    build_parser = subparsers.add_parser("build", help="Build the Darwin Core Archive")
    build_parser.add_argument(
        "--source-dir",
        type=Path,
        default=None,
        help="Directory with the source CSV files (default: <data_dir>/raw)",
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a status, red-list or region code has no mapping",
    )

    subparsers.add_parser("refresh", help="Fetch sources and build the archive")

    return parser


def configure_logging(debug: bool) -> None:
    """Send pipeline log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Dataset: {settings.dataset.dataset_name}")
    print(f"Source directory: {settings.source_path}")
    print(f"Output directory: {settings.data_dir / 'processed'}")
    print(f"Unmapped codes: {settings.unmapped_code_policy}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    result = fetch_all(base_url=args.base_url)
    if result["skipped"]:
        print("No source base URL configured; nothing to fetch.")
    else:
        print(f"Fetched: {', '.join(result['fetched']) or 'none'}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_all(source_dir=args.source_dir, strict=True if args.strict else None)
    print(
        f"Wrote {result['taxa']} taxa, {result['distributions']} distributions, "
        f"{result['vernacular_names']} vernacular names "
        f"({result['excluded_records']} records excluded)"
    )
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch sources then build the archive."""
    print("Fetching source tables...")
    fetch_all()

    print("Building archive...")
    build_all()

    print("Done.")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "build": cmd_build,
        "refresh": cmd_refresh,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ChecklistError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
