"""Dynamic segment parameter parsing.

Segment names wrapped in brackets become route parameters::

    [slug]          -> SegmentParam("slug", "dynamic")
    [...path]       -> SegmentParam("path", "catchall")
    [[...path]]     -> SegmentParam("path", "optional-catchall")
    (.)[id]         -> SegmentParam("id", "dynamic")   # interception marker stripped
"""

from dataclasses import dataclass
from typing import Literal

ParamType = Literal["dynamic", "catchall", "optional-catchall"]

# Longest first so "(..)(..)" wins over "(..)"
INTERCEPTION_MARKERS: tuple[str, ...] = ("(..)(..)", "(...)", "(..)", "(.)")


@dataclass(frozen=True, slots=True)
class SegmentParam:
    """A parameter declared by a segment name."""

    param: str
    type: ParamType


def get_segment_param(segment: str) -> SegmentParam | None:
    """Extract the parameter declared by *segment*, or ``None``.

    Only names that *start* with a bracket (after an optional interception
    marker) declare a parameter.  ``"x[y]"`` looks dynamic to a trailing
    bracket check but declares nothing here.
    """
    for marker in INTERCEPTION_MARKERS:
        if segment.startswith(marker):
            segment = segment[len(marker):]
            break

    if segment.startswith("[[...") and segment.endswith("]]"):
        return SegmentParam(param=segment[5:-2], type="optional-catchall")

    if segment.startswith("[...") and segment.endswith("]"):
        return SegmentParam(param=segment[4:-1], type="catchall")

    if segment.startswith("[") and segment.endswith("]"):
        return SegmentParam(param=segment[1:-1], type="dynamic")

    return None
