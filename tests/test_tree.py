"""Tests for perch.tree — loader tree module resolution."""

from types import SimpleNamespace

from perch.tree import (
    DEFAULT_SEGMENT_KEY,
    PAGE_SEGMENT_KEY,
    LoaderTree,
    ModuleRef,
    ResolvedModule,
    get_layout_or_page_module,
)


def _ref(module: object, path: str) -> ModuleRef:
    return ModuleRef(loader=lambda: module, file_path=path)


class TestGetLayoutOrPageModule:
    async def test_layout(self) -> None:
        layout = SimpleNamespace(revalidate=10)
        tree = LoaderTree("blog", modules={"layout": _ref(layout, "app/blog/layout.py")})

        resolved = await get_layout_or_page_module(tree)

        assert resolved.module is layout
        assert resolved.module_type == "layout"
        assert resolved.file_path == "app/blog/layout.py"

    async def test_page(self) -> None:
        page = SimpleNamespace()
        tree = LoaderTree(PAGE_SEGMENT_KEY, modules={"page": _ref(page, "app/page.py")})

        resolved = await get_layout_or_page_module(tree)

        assert resolved.module is page
        assert resolved.module_type == "page"

    async def test_layout_wins_over_page(self) -> None:
        layout = SimpleNamespace()
        tree = LoaderTree(
            "blog",
            modules={
                "page": _ref(SimpleNamespace(), "app/blog/page.py"),
                "layout": _ref(layout, "app/blog/layout.py"),
            },
        )

        resolved = await get_layout_or_page_module(tree)

        assert resolved.module is layout

    async def test_default_only_for_default_leaf(self) -> None:
        default = SimpleNamespace()
        ref = _ref(default, "app/@modal/default.py")

        leaf = await get_layout_or_page_module(
            LoaderTree(DEFAULT_SEGMENT_KEY, modules={"default": ref})
        )
        other = await get_layout_or_page_module(LoaderTree("modal", modules={"default": ref}))

        assert leaf.module is default
        assert leaf.module_type == "default"
        assert other == ResolvedModule()

    async def test_structural_node(self) -> None:
        resolved = await get_layout_or_page_module(LoaderTree("(group)"))

        assert resolved.module is None
        assert resolved.module_type is None
        assert resolved.file_path is None

    async def test_async_loader(self) -> None:
        page = SimpleNamespace()

        async def load() -> object:
            return page

        tree = LoaderTree(PAGE_SEGMENT_KEY, modules={"page": ModuleRef(load, "app/page.py")})

        resolved = await get_layout_or_page_module(tree)

        assert resolved.module is page


class TestLoaderTree:
    def test_defaults(self) -> None:
        tree = LoaderTree("blog")
        assert tree.parallel_routes == {}
        assert tree.modules == {}

    def test_branch_order_preserved(self) -> None:
        tree = LoaderTree("", {"children": LoaderTree("a"), "modal": LoaderTree("b")})
        assert list(tree.parallel_routes) == ["children", "modal"]
