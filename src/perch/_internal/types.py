"""Shared type aliases used across perch modules."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

# Parameter mapping for one pre-rendered path, e.g. {"slug": "hello"}
Params: TypeAlias = dict[str, str | list[str]]

# User-declared static parameter generator, opaque to perch; called by
# static export planners with the parent segments' params
GenerateStaticParams: TypeAlias = Callable[..., list[Params] | Awaitable[list[Params]]]

# Lazily loads an implementation module, sync or async
ModuleLoader: TypeAlias = Callable[[], Any]
