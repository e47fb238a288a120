"""Invoke helpers: call sync or async fetchers uniformly.

Fetchers can be ``def fetch()`` or ``async def fetch()``. Blocking sync
fetchers (file reads, HTTP downloads) must not stall the event loop, so
they run on a worker thread.

Usage::

    from vanityurls._internal.invoke import invoke

    raw = await invoke(fetcher.fetch)
"""

import asyncio
import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Await ``func`` if it is a coroutine function, else run it in a thread."""
    if inspect.iscoroutinefunction(func):
        return await func(*args, **kwargs)
    result = await asyncio.to_thread(func, *args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def invoke_sync(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call ``func`` from synchronous code, driving it if it is async.

    Must not be called from a running event loop.
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = asyncio.run(_await(result))
    return result


async def _await(awaitable: Any) -> Any:
    return await awaitable
