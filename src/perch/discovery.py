"""Filesystem route discovery for the app/ directory.

Walks the app directory tree and discovers:
- ``page.py`` files as page routes, each with a loader tree running from
  the root down to the page
- ``route.py`` files as endpoint routes
- ``layout.py`` files wrapping every page below them
- ``@slot`` directories as parallel routes, falling back to ``default.py``;
  ``@children`` is the page chain itself and adds no branch

Directory names wrapped in ``(parens)`` are route groups: they appear in
the loader tree but not in the URL.  Directories starting with ``_`` or
``.`` are private and skipped.

Endpoint modules are imported during discovery.  Page tree modules are
imported lazily in a worker thread, the first time segment collection
resolves them, and each file is imported at most once per discovery.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

import anyio

from perch.config import DiscoveryConfig
from perch.errors import ConfigurationError
from perch.modules import AppPageModule, AppRouteModule, LoadedRoute, RouteDefinition
from perch.tree import DEFAULT_SEGMENT_KEY, PAGE_SEGMENT_KEY, LoaderTree, ModuleRef

logger = logging.getLogger("perch.discovery")


def discover_routes(config: DiscoveryConfig | None = None) -> list[LoadedRoute]:
    """Walk an app directory and discover all routes.

    Args:
        config: Discovery settings; defaults to ``DiscoveryConfig()``.

    Returns:
        Loaded routes in directory order, ready for ``collect_segments``.

    Raises:
        FileNotFoundError: If the app directory does not exist.
        ConfigurationError: If a directory declares both a page and a
            route, or a route module fails to import.
    """
    config = config or DiscoveryConfig()
    root = Path(config.app_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"App directory not found: {root}")

    walker = _Walker(root, config)
    walker.walk(root, dirs=[root])
    return walker.routes


class _Walker:
    """Discovery state for one app directory."""

    def __init__(self, root: Path, config: DiscoveryConfig) -> None:
        self.root = root
        self.config = config
        self.routes: list[LoadedRoute] = []
        self._refs: dict[Path, ModuleRef] = {}

    def walk(self, directory: Path, *, dirs: list[Path]) -> None:
        """Recursively walk *directory*; *dirs* is the chain from the root."""
        page_file = directory / self.config.page_file
        route_file = directory / self.config.route_file

        if page_file.is_file() and route_file.is_file():
            msg = (
                f"Conflicting route and page at {directory}: "
                f"a directory may contain {self.config.page_file} or "
                f"{self.config.route_file}, not both."
            )
            raise ConfigurationError(msg)

        pathname = _pathname(dirs[1:])

        if page_file.is_file():
            tree = self._build_tree(dirs, 0)
            definition = RouteDefinition("APP_PAGE", pathname, str(page_file))
            self.routes.append(LoadedRoute(AppPageModule(definition, tree)))
            logger.debug("Discovered page %s (%s)", pathname, page_file)

        if route_file.is_file():
            userland = _load_module(route_file, self.root)
            definition = RouteDefinition("APP_ROUTE", pathname, str(route_file))
            self.routes.append(LoadedRoute(AppRouteModule(definition, userland)))
            logger.debug("Discovered route %s (%s)", pathname, route_file)

        for item in sorted(directory.iterdir()):
            if not item.is_dir():
                continue
            if item.name.startswith(("_", ".", "@")):
                continue
            self.walk(item, dirs=[*dirs, item])

    def _build_tree(self, dirs: list[Path], index: int) -> LoaderTree:
        """Build the loader tree node for ``dirs[index]`` down to the page."""
        directory = dirs[index]
        parallel_routes: dict[str, LoaderTree] = {}

        if index == len(dirs) - 1:
            page = self._ref(directory / self.config.page_file)
            parallel_routes["children"] = LoaderTree(PAGE_SEGMENT_KEY, modules={"page": page})
        else:
            parallel_routes["children"] = self._build_tree(dirs, index + 1)

        rest = [d.name for d in dirs[index + 1:]]
        for slot in _slots(directory):
            slot_tree = self._build_slot(slot, rest)
            if slot_tree is not None:
                parallel_routes[slot.name[1:]] = slot_tree

        name = "" if index == 0 else directory.name
        return LoaderTree(name, parallel_routes, self._layout(directory))

    def _build_slot(self, slot: Path, rest: list[str]) -> LoaderTree | None:
        """Build a ``@slot`` subtree matching the remaining path *rest*.

        Falls back to the slot's ``default.py`` when the slot has no page
        for this path, and drops the slot when it has neither.
        """
        target = slot.joinpath(*rest)
        if (target / self.config.page_file).is_file():
            return self._slot_chain(slot, rest)

        default_file = slot / self.config.default_file
        if default_file.is_file():
            return LoaderTree(DEFAULT_SEGMENT_KEY, modules={"default": self._ref(default_file)})
        return None

    def _slot_chain(self, directory: Path, rest: list[str]) -> LoaderTree:
        if not rest:
            page = self._ref(directory / self.config.page_file)
            return LoaderTree(PAGE_SEGMENT_KEY, modules={"page": page})

        child = directory / rest[0]
        return LoaderTree(
            rest[0],
            {"children": self._slot_chain(child, rest[1:])},
            self._layout(child),
        )

    def _layout(self, directory: Path) -> dict[str, ModuleRef]:
        layout_file = directory / self.config.layout_file
        if layout_file.is_file():
            return {"layout": self._ref(layout_file)}
        return {}

    def _ref(self, file: Path) -> ModuleRef:
        ref = self._refs.get(file)
        if ref is None:
            ref = ModuleRef(loader=_LazyModule(file, self.root), file_path=str(file))
            self._refs[file] = ref
        return ref


class _LazyModule:
    """Module loader that imports its file on first call.

    The import runs in a worker thread so user module code never blocks
    the event loop driving segment collection.
    """

    __slots__ = ("_file", "_module", "_root")

    def __init__(self, file: Path, root: Path) -> None:
        self._file = file
        self._root = root
        self._module: object | None = None

    async def __call__(self) -> object:
        if self._module is None:
            self._module = await anyio.to_thread.run_sync(_load_module, self._file, self._root)
        return self._module


def _load_module(file: Path, root: Path) -> object:
    """Import a Python file as a module without touching ``sys.path``.

    The module is registered in ``sys.modules`` while it executes so
    dataclasses and relative lookups inside it can find their module.

    Raises:
        ConfigurationError: If the file cannot be imported.
    """
    relative = file.relative_to(root).with_suffix("")
    module_name = "perch_app." + ".".join(relative.parts)

    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Cannot load route module {file}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to load route module {file}: {exc}"
        raise ConfigurationError(msg) from exc
    return module


def _slots(directory: Path) -> list[Path]:
    # "@children" is the implicit children slot, already built from the page chain
    return [
        item
        for item in sorted(directory.iterdir())
        if item.is_dir() and item.name.startswith("@") and item.name not in ("@", "@children")
    ]


def _pathname(dirs: list[Path]) -> str:
    """Derive a URL pathname from directory names, dropping route groups.

    ``[app]/blog/[slug]``     -> ``/blog/[slug]``
    ``[app]/(marketing)/about`` -> ``/about``
    ``[app]``                 -> ``/``
    """
    parts = [d.name for d in dirs if not (d.name.startswith("(") and d.name.endswith(")"))]
    return "/" + "/".join(parts)
