"""``perch segments`` — list collected route segments.

Discovers every route under an app directory, collects its segments,
and prints one row per segment with its parameter, declared config,
and whether it exports ``generate_static_params``.
"""

import argparse
import logging
import sys

import anyio

from perch.config import DiscoveryConfig
from perch.discovery import discover_routes
from perch.errors import ConfigurationError
from perch.segments import Segment, collect_segments


async def _collect_all(config: DiscoveryConfig) -> list[tuple[str, Segment]]:
    rows: list[tuple[str, Segment]] = []
    for loaded in discover_routes(config):
        route = loaded.route_module.definition.pathname
        for segment in await collect_segments(loaded):
            rows.append((route, segment))
    return rows


def _format_config(segment: Segment) -> str:
    if segment.config is None:
        return "-"
    return ", ".join(f"{key}={getattr(segment.config, key)!r}" for key in segment.config.keys())


def run_segments(args: argparse.Namespace) -> None:
    """Print the segments of every route under ``args.app_dir``."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = DiscoveryConfig(app_dir=args.app_dir)
    try:
        collected = anyio.run(_collect_all, config)
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not collected:
        print("No routes found.")
        return

    # Build rows: (route, segment, param, config, gsp)
    rows: list[tuple[str, str, str, str, str]] = [
        (
            route,
            segment.name or "/",
            segment.param or "-",
            _format_config(segment),
            "yes" if segment.generate_static_params is not None else "-",
        )
        for route, segment in collected
    ]

    headers = ("ROUTE", "SEGMENT", "PARAM", "CONFIG", "GSP")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths[:-1]) + "  {}"

    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row))
