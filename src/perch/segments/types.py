"""The Segment record produced by segment collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch._internal.types import GenerateStaticParams
    from perch.segments.config import SegmentConfig


@dataclass(slots=True)
class Segment:
    """One unit of a route's path chain.

    Created fresh per collection call.  ``attach()`` fills in ``config``
    and ``generate_static_params``; treat the record as read-only after
    that.

    Attributes:
        name: Raw segment name as it appears in the tree or path.
        param: Dynamic parameter name, ``None`` when the name declares none.
        file_path: Backing implementation module, ``None`` for structural nodes.
        config: Declared build configuration, ``None`` when nothing was declared.
        is_dynamic_segment: Whether ``name`` has bracketed parameter syntax.
        generate_static_params: The module's static parameter generator, if any.
    """

    name: str
    param: str | None = None
    file_path: str | None = None
    config: SegmentConfig | None = None
    is_dynamic_segment: bool = False
    generate_static_params: GenerateStaticParams | None = None
