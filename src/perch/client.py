"""Client-only module detection.

A module opts out of server-side evaluation by making ``"use client"`` its
docstring::

    "use client"

    def render(): ...

Client modules cannot declare build-time configuration, so segment
collection records them but never reads their exports.
"""

from collections.abc import Mapping
from typing import Any

CLIENT_DIRECTIVE = "use client"


def is_client_reference(module: Any) -> bool:
    """Return True if *module* is marked with the ``"use client"`` directive."""
    if module is None:
        return False
    if isinstance(module, Mapping):
        doc = module.get("__doc__")
    else:
        doc = getattr(module, "__doc__", None)
    if not isinstance(doc, str):
        return False
    lines = doc.strip().splitlines()
    return bool(lines) and lines[0].strip() == CLIENT_DIRECTIVE
