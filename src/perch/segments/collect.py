"""Segment collection for page and endpoint routes.

Pages walk their loader tree; endpoints split their pathname.  Both build
:class:`Segment` records root-to-leaf and run ``attach()`` on every
segment backed by a server module.
"""

import logging
import re

from perch.client import is_client_reference
from perch.errors import InvariantError
from perch.modules import (
    AppPageModule,
    AppRouteModule,
    LoadedRoute,
    is_app_page_module,
    is_app_route_module,
)
from perch.params import get_segment_param
from perch.segments.attach import attach
from perch.segments.types import Segment
from perch.tree import PAGE_SEGMENT_KEY, LoaderTree, get_layout_or_page_module

logger = logging.getLogger("perch.segments")

# Tree node names: a bracketed placeholder at the end ("[slug]", "(.)[id]")
_TREE_DYNAMIC_RE = re.compile(r"\[.*\]$")

# Path components: the whole component is bracketed ("[id]", "[...rest]")
_PATH_DYNAMIC_RE = re.compile(r"^\[.*\]$")


def _param_for(name: str, is_dynamic_segment: bool) -> str | None:
    if not is_dynamic_segment:
        return None
    segment_param = get_segment_param(name)
    return segment_param.param if segment_param is not None else None


async def collect_page_segments(route_module: AppPageModule) -> list[list[Segment]]:
    """Walk a page's loader tree and collect one chain per page leaf.

    Each parallel branch gets its own copy of the chain built so far, so
    sibling branches never see each other's segments.  Branches are walked
    one at a time, in declaration order.

    Returns:
        Chains of segments, root-to-leaf, in traversal order.
    """
    route = route_module.definition.pathname
    chains: list[list[Segment]] = []

    async def process(tree: LoaderTree, chain: list[Segment]) -> None:
        resolved = await get_layout_or_page_module(tree)
        name = tree.segment

        is_dynamic_segment = _TREE_DYNAMIC_RE.search(name) is not None
        segment = Segment(
            name=name,
            param=_param_for(name, is_dynamic_segment),
            file_path=resolved.file_path,
            is_dynamic_segment=is_dynamic_segment,
        )

        # Client modules can't declare server configuration
        if is_client_reference(resolved.module):
            logger.debug("Skipping config for client module %s", resolved.file_path)
        else:
            attach(segment, resolved.module, route)

        chain.append(segment)

        if name == PAGE_SEGMENT_KEY:
            chains.append(list(chain))
            logger.debug("Collected %d segments for %s", len(chain), route)

        for child in tree.parallel_routes.values():
            await process(child, [*chain])

    await process(route_module.loader_tree, [])
    return chains


def collect_route_segments(route_module: AppRouteModule) -> list[Segment]:
    """Derive an endpoint's segments from its pathname.

    Only the last segment is backed by a module (the endpoint itself), so
    it alone gets a file path and configuration.

    Raises:
        InvariantError: If the pathname has no segments.
    """
    route = route_module.definition.pathname

    # "/blog/[id]" -> ["blog", "[id]"]
    parts = route.split("/")[1:]
    if not parts:
        raise InvariantError(f"Expected at least one segment for route {route!r}")

    segments: list[Segment] = []
    for name in parts:
        is_dynamic_segment = _PATH_DYNAMIC_RE.match(name) is not None
        segments.append(Segment(
            name=name,
            param=_param_for(name, is_dynamic_segment),
            is_dynamic_segment=is_dynamic_segment,
        ))

    segment = segments[-1]
    segment.file_path = route_module.definition.filename
    attach(segment, route_module.userland, route)

    return segments


async def collect_segments(loaded: LoadedRoute) -> list[Segment]:
    """Collect the segments of a loaded route, root-to-leaf.

    Page routes contribute every chain from their loader tree, in
    traversal order.

    Raises:
        InvariantError: If the route is neither an endpoint nor a page.
        SegmentConfigError: If any segment's configuration is invalid.
    """
    route_module = loaded.route_module

    if is_app_route_module(route_module):
        return collect_route_segments(route_module)

    if is_app_page_module(route_module):
        chains = await collect_page_segments(route_module)
        return [segment for chain in chains for segment in chain]

    raise InvariantError(
        "Expected a route module to be one of app route or page, "
        f"got {type(route_module).__name__}"
    )
