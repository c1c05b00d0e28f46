"""Perch CLI — inspect the route segments of an app directory.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="perch — build-time route segment collection.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch segments ---------------------------------------------------
    segments_parser = subparsers.add_parser(
        "segments",
        help="List the segments and config of every route",
    )
    segments_parser.add_argument("app_dir", help="Path to the app directory")
    segments_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and collection details",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "segments":
        from perch.cli._segments import run_segments

        run_segments(args)
