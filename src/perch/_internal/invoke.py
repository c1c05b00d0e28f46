"""Invoke helpers — call sync or async loaders uniformly.

Module loaders attached to a loader tree can be ``def`` or ``async def``.
Anything that resolves a module must handle both cases, so the
sync/async check lives here in exactly one place.

Usage::

    from perch._internal.invoke import invoke

    module = await invoke(ref.loader)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns the module immediately
        def load():
            return importlib.import_module("app.blog.page")

        # async: returns a coroutine, awaited automatically
        async def load():
            return await anyio.to_thread.run_sync(import_page)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
