"""Invoke helpers — call sync or async callables uniformly.

Guards, middleware units, and lifecycle hooks can be ``def`` or
``async def``. Any code that calls a user-provided callable must handle
both cases. This module keeps the sync/async check in one place.

Usage::

    from wren._internal.invoke import invoke, settle

    result = await invoke(guard)
    value = await settle(generator_step)
"""

import inspect
from typing import Any


async def settle(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        value = await value
    return value


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Works with both sync and async callables::

        # sync — returns immediately
        def confirm_leave() -> bool:
            return not form.dirty

        # async — awaited automatically
        async def confirm_leave() -> bool:
            return await dialog.ask("Discard changes?")
    """
    return await settle(func(*args, **kwargs))
