"""
cli/main.py - Command line entry point

Commands:
    demo                 Run the illustrative loading scenario
    manifest PATH        Board the containers described in a JSON manifest
"""

from __future__ import annotations
from typing import List, Optional, TextIO
import argparse
import json
import logging
import sys

from ..bootstrap import load_config, setup_logging
from ..errors import ManifestError
from ..manifest import ManifestResult, apply_manifest, load_manifest
from .demo import run_demo

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MANIFEST_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Container ship loading rules",
        prog="containership",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("demo", help="Run the illustrative loading scenario")

    manifest_parser = subparsers.add_parser(
        "manifest", help="Board the containers described in a JSON manifest",
    )
    manifest_parser.add_argument("path", help="Path to manifest JSON file")
    manifest_parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    return parser


def print_result(result: ManifestResult, as_json: bool, out: TextIO) -> None:
    """Print a manifest result as text or JSON."""
    if as_json:
        print(json.dumps(result.to_dict(), indent=2), file=out)
        return

    ship = result.ship
    print(f"Ship {ship.name or '(unnamed)'}", file=out)
    print(f"  Containers: {ship.container_count}/{ship.max_container_count}", file=out)
    print(f"  Weight: {ship.total_weight_kg:.1f} kg / {ship.max_weight_kg:.1f} kg", file=out)
    for container in result.boarded:
        print(f"  + {container.serial_number} ({container.load_mass} kg)", file=out)
    for rejection in result.rejected:
        print(f"  - {rejection.serial_number}: {rejection.error}", file=out)


def main(args: Optional[List[str]] = None, out: TextIO = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)
        out: Output stream (defaults to stdout)

    Returns:
        Exit code
    """
    out = out or sys.stdout
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        parser.print_help(out)
        return EXIT_USAGE

    config = load_config(parsed.config)
    if parsed.verbose:
        log_level = "DEBUG"
    else:
        log_level = parsed.log_level or config.logging.level
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    if parsed.command == "demo":
        run_demo(out)
        return EXIT_OK

    try:
        manifest = load_manifest(parsed.path)
    except ManifestError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=out)
        return EXIT_MANIFEST_ERROR

    print_result(apply_manifest(manifest), parsed.json, out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
