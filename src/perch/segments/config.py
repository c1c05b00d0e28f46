"""Segment configuration parsing.

Route modules declare build directives as module-level names::

    # app/blog/[slug]/page.py
    revalidate = 60
    dynamic_params = False
    runtime = "nodejs"

``parse_segment_config`` validates and normalizes them into a frozen
``SegmentConfig``.  Unrecognized names are ignored.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Literal

from perch.errors import SegmentConfigError

Dynamic = Literal["auto", "error", "force-static", "force-dynamic"]
FetchCache = Literal[
    "auto",
    "default-cache",
    "only-cache",
    "force-cache",
    "force-no-store",
    "default-no-store",
    "only-no-store",
]
Runtime = Literal["nodejs", "edge"]

_DYNAMIC_VALUES: frozenset[str] = frozenset({"auto", "error", "force-static", "force-dynamic"})
_FETCH_CACHE_VALUES: frozenset[str] = frozenset({
    "auto",
    "default-cache",
    "only-cache",
    "force-cache",
    "force-no-store",
    "default-no-store",
    "only-no-store",
})
# Accepted spelling -> normalized runtime
_RUNTIME_VALUES: dict[str, Runtime] = {
    "nodejs": "nodejs",
    "edge": "edge",
    "experimental-edge": "edge",
}


@dataclass(frozen=True, slots=True)
class SegmentConfig:
    """Build configuration declared by one segment.

    Every field defaults to ``None``, meaning "not declared".  Callers
    distinguish "no config" from "config with defaults" by checking
    ``keys()``.
    """

    dynamic: Dynamic | None = None
    dynamic_params: bool | None = None
    revalidate: int | Literal[False] | None = None
    fetch_cache: FetchCache | None = None
    runtime: Runtime | None = None
    preferred_region: tuple[str, ...] | None = None
    max_duration: int | None = None

    def keys(self) -> tuple[str, ...]:
        """Names of the fields this segment actually declared."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)


def parse_segment_config(exports: Mapping[str, Any], route: str) -> SegmentConfig:
    """Validate the recognized config names in *exports*.

    Args:
        exports: A module's public names (see ``module_exports``).
        route: Route pathname, used in error messages.

    Returns:
        A normalized :class:`SegmentConfig`, possibly with no keys.

    Raises:
        SegmentConfigError: If a recognized name has an invalid value.
    """
    values: dict[str, Any] = {}

    if "dynamic" in exports:
        values["dynamic"] = _choice(exports["dynamic"], _DYNAMIC_VALUES, "dynamic", route)

    if "dynamic_params" in exports:
        value = exports["dynamic_params"]
        if not isinstance(value, bool):
            raise SegmentConfigError(route, f"'dynamic_params' must be a bool, got {value!r}")
        values["dynamic_params"] = value

    if "revalidate" in exports:
        values["revalidate"] = _revalidate(exports["revalidate"], route)

    if "fetch_cache" in exports:
        values["fetch_cache"] = _choice(
            exports["fetch_cache"], _FETCH_CACHE_VALUES, "fetch_cache", route
        )

    if "runtime" in exports:
        runtime = _choice(exports["runtime"], frozenset(_RUNTIME_VALUES), "runtime", route)
        values["runtime"] = _RUNTIME_VALUES[runtime]

    if "preferred_region" in exports:
        values["preferred_region"] = _regions(exports["preferred_region"], route)

    if "max_duration" in exports:
        value = exports["max_duration"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            msg = f"'max_duration' must be a non-negative int, got {value!r}"
            raise SegmentConfigError(route, msg)
        values["max_duration"] = value

    return SegmentConfig(**values)


def _choice(value: object, allowed: frozenset[str], name: str, route: str) -> Any:
    if not isinstance(value, str) or value not in allowed:
        options = ", ".join(repr(v) for v in sorted(allowed))
        raise SegmentConfigError(route, f"'{name}' must be one of {options}, got {value!r}")
    return value


def _revalidate(value: object, route: str) -> int | Literal[False]:
    # False means "cache forever"; True is not a valid interval
    if value is False:
        return False
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"'revalidate' must be False or a non-negative int, got {value!r}"
        raise SegmentConfigError(route, msg)
    return value


def _regions(value: object, route: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence) and all(isinstance(v, str) for v in value):
        return tuple(value)
    msg = f"'preferred_region' must be a str or a sequence of str, got {value!r}"
    raise SegmentConfigError(route, msg)
