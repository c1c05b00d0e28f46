"""Loader tree: the nested layout/page structure behind a page route.

Each node names one segment, maps branch keys to child nodes (``children``
plus one key per ``@slot``), and carries lazy references to the
implementation modules that live at that level::

    LoaderTree("", {
        "children": LoaderTree("blog", {
            "children": LoaderTree("[slug]", {
                "children": LoaderTree("__PAGE__", modules={"page": page_ref}),
            }),
        }, modules={"layout": blog_layout_ref}),
    }, modules={"layout": root_layout_ref})

Built once by discovery; never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from perch._internal.invoke import invoke
from perch._internal.types import ModuleLoader

# Reserved leaf names
PAGE_SEGMENT_KEY = "__PAGE__"
DEFAULT_SEGMENT_KEY = "__DEFAULT__"

ModuleType = Literal["layout", "page", "default"]


@dataclass(frozen=True, slots=True)
class ModuleRef:
    """A lazily loaded implementation module and the file it comes from."""

    loader: ModuleLoader
    file_path: str


@dataclass(frozen=True, slots=True)
class LoaderTree:
    """One node of a page route's loader tree.

    Attributes:
        segment: Raw segment name (``"blog"``, ``"[slug]"``, ``"__PAGE__"``).
        parallel_routes: Child nodes keyed by branch, in declaration order.
        modules: Module references by kind (``layout``, ``page``, ``default``).
    """

    segment: str
    parallel_routes: dict[str, LoaderTree] = field(default_factory=dict)
    modules: dict[str, ModuleRef] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """Result of resolving a node's implementation module.

    All fields are ``None`` for structural nodes with no module.
    """

    module: object | None = None
    module_type: ModuleType | None = None
    file_path: str | None = None


async def get_layout_or_page_module(tree: LoaderTree) -> ResolvedModule:
    """Load the module that implements *tree*'s segment.

    A layout wins over a page at the same node.  A ``default`` module is
    only used by the ``__DEFAULT__`` fallback leaf of a parallel slot.
    """
    layout = tree.modules.get("layout")
    if layout is not None:
        return ResolvedModule(await invoke(layout.loader), "layout", layout.file_path)

    page = tree.modules.get("page")
    if page is not None:
        return ResolvedModule(await invoke(page.loader), "page", page.file_path)

    default = tree.modules.get("default")
    if default is not None and tree.segment == DEFAULT_SEGMENT_KEY:
        return ResolvedModule(await invoke(default.loader), "default", default.file_path)

    return ResolvedModule()
