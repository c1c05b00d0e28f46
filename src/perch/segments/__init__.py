"""Route segment collection.

Turns a loaded route into the ordered segments that compose it, each
carrying its parameter name, backing module path, declared build
configuration, and static parameter generator::

    segments = await collect_segments(loaded)
    for segment in segments:
        print(segment.name, segment.param, segment.config)
"""

from perch.segments.attach import attach, module_exports
from perch.segments.collect import collect_page_segments, collect_route_segments, collect_segments
from perch.segments.config import SegmentConfig, parse_segment_config
from perch.segments.types import Segment

__all__ = [
    "Segment",
    "SegmentConfig",
    "attach",
    "collect_page_segments",
    "collect_route_segments",
    "collect_segments",
    "module_exports",
    "parse_segment_config",
]
