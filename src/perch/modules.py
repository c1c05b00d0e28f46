"""Route module types: what discovery hands to segment collection.

A route is either an *endpoint* (``route.py``, one module, no tree) or a
*page* (``page.py`` plus every layout above it, as a loader tree).  The
two kinds form a closed union, ``RouteModule``.
"""

from dataclasses import dataclass
from typing import Any, Literal, TypeGuard

from perch.tree import LoaderTree

RouteKind = Literal["APP_ROUTE", "APP_PAGE"]


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """Where a route lives.

    Attributes:
        kind: ``"APP_ROUTE"`` for endpoints, ``"APP_PAGE"`` for pages.
        pathname: URL pattern with bracketed params (``/blog/[slug]``).
        filename: Implementation module path (the ``route.py`` or ``page.py``).
    """

    kind: RouteKind
    pathname: str
    filename: str


@dataclass(frozen=True, slots=True)
class AppRouteModule:
    """An endpoint route backed by a single module."""

    definition: RouteDefinition
    userland: Any


@dataclass(frozen=True, slots=True)
class AppPageModule:
    """A page route realized by a nested loader tree."""

    definition: RouteDefinition
    loader_tree: LoaderTree


RouteModule = AppRouteModule | AppPageModule


@dataclass(frozen=True, slots=True)
class LoadedRoute:
    """A route entry ready for segment collection."""

    route_module: RouteModule


def is_app_route_module(route_module: object) -> TypeGuard[AppRouteModule]:
    """Return True for endpoint-style route modules."""
    return isinstance(route_module, AppRouteModule)


def is_app_page_module(route_module: object) -> TypeGuard[AppPageModule]:
    """Return True for page-style route modules."""
    return isinstance(route_module, AppPageModule)
