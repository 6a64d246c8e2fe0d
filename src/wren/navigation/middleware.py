"""Navigation middleware — units and the two-phase adapter.

A middleware unit is any callable taking the navigation context. What
it returns decides how many phases it takes part in::

    # Plain — runs once, before render
    def log_view(ctx):
        analytics.view(ctx.canonical_path)

    # Deferred — awaited once, before render
    async def load_user(ctx):
        ctx.user = await api.user(ctx.params["id"])

    # Two-phase — before render up to the yield, teardown after it
    def subscribe(ctx):
        sub = feed.subscribe(ctx.params["id"])
        yield
        sub.close()

    # Lifecycle object — one hook per phase
    class Spinner(LifecycleMiddleware):
        def before_render(self, ctx): overlay.show()
        def after_render(self, ctx): overlay.hide()

Generators may yield more than once: each continuation call resumes to
the next ``yield``, so a unit can step through after-render,
before-dispose and after-dispose. An awaitable yielded value is awaited.

The adapter (``adapt_middleware``) wraps each unit in a ``MiddlewareStep``
that remembers whether its first phase ran. The first call runs the
before-render part and reports whether the sequence may continue (no
redirect on the context). Every later call resumes the unit and always
reports success, so teardown runs even after a redirect.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncGenerator, Awaitable, Generator, Iterable
from typing import TYPE_CHECKING, Any

from wren._internal.invoke import invoke, settle
from wren._internal.types import MiddlewareUnit

if TYPE_CHECKING:
    from wren.navigation.context import NavigationContext

_LIFECYCLE_HOOKS = ("before_render", "after_render", "before_dispose", "after_dispose")


class LifecycleMiddleware:
    """Base class for object-style middleware.

    Override any subset of the hooks. An instance can be listed as a
    middleware unit directly, or returned from a middleware function.
    Hooks may be sync or async.
    """

    def before_render(self, ctx: NavigationContext) -> Any:
        return None

    def after_render(self, ctx: NavigationContext) -> Any:
        return None

    def before_dispose(self, ctx: NavigationContext) -> Any:
        return None

    def after_dispose(self, ctx: NavigationContext) -> Any:
        return None


def _is_lifecycle_object(obj: Any) -> bool:
    if isinstance(obj, LifecycleMiddleware):
        return True
    if callable(obj) or obj is None:
        return False
    return any(callable(getattr(obj, hook, None)) for hook in _LIFECYCLE_HOOKS)


# -- Resumable variants --


class Resumable:
    """A started middleware unit. ``before()`` once, then ``after()`` per continuation."""

    __slots__ = ()

    async def before(self) -> None:
        return None

    async def after(self) -> None:
        return None


class Plain(Resumable):
    """The unit already ran to completion when it was called."""

    __slots__ = ()


class Deferred(Resumable):
    """The unit returned an awaitable; awaiting it is the whole unit."""

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._awaitable = awaitable

    async def before(self) -> None:
        await self._awaitable


class TwoPhase(Resumable):
    """A generator unit, advanced one ``yield`` per call."""

    __slots__ = ("_done", "_gen")

    def __init__(self, gen: Generator[Any, None, Any]) -> None:
        self._gen = gen
        self._done = False

    async def before(self) -> None:
        await self._advance()

    async def after(self) -> None:
        await self._advance()

    async def _advance(self) -> None:
        if self._done:
            return
        try:
            value = next(self._gen)
        except StopIteration:
            self._done = True
            return
        await settle(value)


class AsyncTwoPhase(Resumable):
    """An async generator unit, advanced one ``yield`` per call."""

    __slots__ = ("_agen", "_done")

    def __init__(self, agen: AsyncGenerator[Any, None]) -> None:
        self._agen = agen
        self._done = False

    async def before(self) -> None:
        await self._advance()

    async def after(self) -> None:
        await self._advance()

    async def _advance(self) -> None:
        if self._done:
            return
        try:
            value = await anext(self._agen)
        except StopAsyncIteration:
            self._done = True
            return
        await settle(value)


class Lifecycle(Resumable):
    """A lifecycle object; each call runs the next hook in phase order."""

    __slots__ = ("_ctx", "_obj", "_stage")

    def __init__(self, obj: Any, ctx: NavigationContext) -> None:
        self._obj = obj
        self._ctx = ctx
        self._stage = 0

    async def before(self) -> None:
        await self._advance()

    async def after(self) -> None:
        await self._advance()

    async def _advance(self) -> None:
        if self._stage >= len(_LIFECYCLE_HOOKS):
            return
        hook = getattr(self._obj, _LIFECYCLE_HOOKS[self._stage], None)
        self._stage += 1
        if callable(hook):
            await invoke(hook, self._ctx)


def _wrap(result: Any, ctx: NavigationContext) -> Resumable:
    if inspect.isgenerator(result):
        return TwoPhase(result)
    if inspect.isasyncgen(result):
        return AsyncTwoPhase(result)
    if _is_lifecycle_object(result):
        return Lifecycle(result, ctx)
    if inspect.isawaitable(result):
        return Deferred(result)
    return Plain()


# -- Adapter --


class MiddlewareStep:
    """One middleware unit bound to one context.

    Calling the step runs the unit's next phase and returns whether the
    enclosing sequence should continue.
    """

    __slots__ = ("_ctx", "_resumable", "_unit", "has_run_first_phase")

    def __init__(self, unit: MiddlewareUnit, ctx: NavigationContext) -> None:
        self._unit = unit
        self._ctx = ctx
        self._resumable: Resumable | None = None
        self.has_run_first_phase = False

    async def __call__(self) -> bool:
        if not self.has_run_first_phase:
            target = self._unit if _is_lifecycle_object(self._unit) else self._unit(self._ctx)
            self._resumable = _wrap(target, self._ctx)
            await self._resumable.before()
            self.has_run_first_phase = True
            # Only the first phase is gated; a redirect upstream stops the sequence here
            return not self._ctx.redirected

        assert self._resumable is not None
        await self._resumable.after()
        return True

    def __repr__(self) -> str:
        name = getattr(self._unit, "__qualname__", type(self._unit).__name__)
        return f"<MiddlewareStep {name} first_phase={self.has_run_first_phase}>"


def adapt_middleware(units: Iterable[MiddlewareUnit], ctx: NavigationContext) -> list[MiddlewareStep]:
    """Bind each unit to *ctx* as a two-phase ``MiddlewareStep``."""
    return [MiddlewareStep(unit, ctx) for unit in units]
