"""Perch — build-time route segment collection for filesystem-routed apps.

Walks a route's layout tree (or splits an endpoint's path) into ordered
segments, each carrying its parameter name, backing module, declared
build configuration, and static parameter generator.

Basic usage::

    from perch import DiscoveryConfig, collect_segments, discover_routes

    for loaded in discover_routes(DiscoveryConfig(app_dir="app")):
        segments = await collect_segments(loaded)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "DiscoveryConfig",
    "InvariantError",
    "PerchError",
    "Segment",
    "SegmentConfig",
    "SegmentConfigError",
    "collect_segments",
    "discover_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "DiscoveryConfig":
        from perch.config import DiscoveryConfig

        return DiscoveryConfig

    if name == "discover_routes":
        from perch.discovery import discover_routes

        return discover_routes

    if name in ("Segment", "SegmentConfig", "collect_segments"):
        from perch import segments as _segments

        return getattr(_segments, name)

    if name in ("ConfigurationError", "InvariantError", "PerchError", "SegmentConfigError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
