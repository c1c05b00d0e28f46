"""Attach a module's declared configuration to its segment."""

import logging
from collections.abc import Mapping
from typing import Any

from perch.errors import SegmentConfigError
from perch.segments.config import parse_segment_config
from perch.segments.types import Segment

logger = logging.getLogger("perch.segments")


def module_exports(userland: object) -> Mapping[str, Any] | None:
    """Return the names a module exposes, or ``None`` if it has none.

    Accepts real modules, namespaces, and plain mappings.  Primitives and
    ``None`` are not structured objects and yield ``None``.
    """
    if isinstance(userland, Mapping):
        return userland
    if userland is None or isinstance(userland, (str, bytes, int, float)):
        return None
    try:
        return vars(userland)
    except TypeError:
        return None


def attach(segment: Segment, userland: object, route: str) -> None:
    """Parse *userland*'s segment config and attach it to *segment*.

    A missing or unstructured module is not an error; the segment simply
    gets no configuration.

    Raises:
        SegmentConfigError: If a config value is invalid, or the segment
            combines ``generate_static_params`` with the edge runtime.
    """
    exports = module_exports(userland)
    if exports is None:
        return

    config = parse_segment_config(exports, route)
    if config.keys():
        segment.config = config
        logger.debug("Segment %r of %s declares %s", segment.name, route, ", ".join(config.keys()))

    generate_static_params = exports.get("generate_static_params")
    if callable(generate_static_params):
        segment.generate_static_params = generate_static_params

        if segment.config is not None and segment.config.runtime == "edge":
            raise SegmentConfigError(
                route,
                "the edge runtime is not supported with 'generate_static_params'",
            )
