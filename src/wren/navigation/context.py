"""Navigation context — one node per matched route segment.

A navigation builds a linear chain of contexts from the root route down
to the deepest nested match. Lifecycle phases are called on the root
and walk the chain:

    ======================  ===============  ==========================
    phase                   order            stops descending when
    ======================  ===============  ==========================
    run_before_navigate     root -> leaf     a guard returns False
    run_before_render       root -> leaf     the context redirected
    render                  root -> leaf     the context redirected
    run_after_render        root -> leaf     the context redirected
    run_before_dispose      leaf -> root     the context redirected
    run_after_dispose       leaf -> root     the context redirected
    ======================  ===============  ==========================

Before render, each context runs the app-wide middleware and then its
route's middleware as two short-circuiting sequences. Only the steps
whose first phase actually ran are kept as continuations, so later
phases resume exactly the middleware that was started, including after
a redirect.

Queues are drained once per phase, by the outermost call, across the
whole live subtree.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping
from typing import TYPE_CHECKING, Any

from wren._internal.types import Guard
from wren.navigation.middleware import MiddlewareStep, adapt_middleware
from wren.navigation.queue import TaskQueue, drain
from wren.navigation.redirect import RedirectArgs, RedirectController
from wren.navigation.sequence import sequence

if TYPE_CHECKING:
    from wren.navigation.tree import ContextTree
    from wren.routing.route import Route
    from wren.routing.router import Router

logger = logging.getLogger("wren.navigation")


class NavigationContext:
    """A matched route segment in the navigation chain.

    Attributes are plain (no ``__slots__``): construction overrides and
    middleware may attach arbitrary state, e.g. ``ctx.user``.
    """

    def __init__(
        self,
        router: Router,
        parent: NavigationContext | None,
        path: str,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        match = router.resolve_route(path)

        self.router: Router = router
        self.route: Route = match.route
        self.params: dict[str, Any] = match.params
        self.path = path
        self.pathname = match.pathname
        self.parent_id: int | None = parent.id if parent is not None else None
        self.child_id: int | None = None

        self._redirect = RedirectController()
        self._queue = TaskQueue()
        self._before_navigate_callbacks: list[Guard] = []
        self._app_middleware_downstream: list[MiddlewareStep] = []
        self._route_middleware_downstream: list[MiddlewareStep] = []

        for name, value in (overrides or {}).items():
            setattr(self, name, value)

        self.id = self.tree.add(self)
        if parent is not None:
            # Only one child per context; a previous child is unlinked, not disposed
            parent.child_id = self.id

        if match.child_path:
            try:
                router.child(match.child_path, parent=self)
            except Exception:
                # A half-built chain must not stay in the tree
                self.tree.detach(self.id)
                raise

    # -- Tree --

    @property
    def tree(self) -> ContextTree:
        return self.router.tree

    @property
    def parent(self) -> NavigationContext | None:
        return self.tree.get(self.parent_id)

    @property
    def child(self) -> NavigationContext | None:
        return self.tree.get(self.child_id)

    @property
    def root(self) -> NavigationContext:
        """The topmost ancestor (``self`` for the root)."""
        parents = self.parents
        return parents[-1] if parents else self

    @property
    def parents(self) -> list[NavigationContext]:
        """Ancestors, closest first."""
        return list(self.tree.walk(self.id, upward=True))

    @property
    def children(self) -> list[NavigationContext]:
        """Descendants, closest first."""
        return list(self.tree.walk(self.id, upward=False))

    @property
    def is_detached(self) -> bool:
        return self.id not in self.tree

    # -- Paths --

    @property
    def base(self) -> str:
        """Mount prefix of this context: app base plus every ancestor's pathname."""
        parent = self.parent
        if parent is None:
            return self.router.base
        return parent.base + parent.pathname

    @property
    def canonical_path(self) -> str:
        """Path relative to the application root, independent of nesting."""
        base = self.base
        root_base = self.root.base
        if root_base and base.lower().startswith(root_base.lower()):
            base = base[len(root_base):]
        return base + self.pathname

    # -- Mutators --

    def add_before_navigate_callback(self, callback: Guard) -> None:
        """Register a guard; the most recently added runs first."""
        self._before_navigate_callbacks.insert(0, callback)

    def queue(self, operation: Awaitable[Any]) -> None:
        """Queue an awaitable to finish before the current phase completes."""
        self._queue.push(operation)

    def redirect(
        self,
        path: str,
        *,
        force: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        """Abort further descent and ask the navigator to go to *path* instead."""
        if self._redirect.set(path, force=force, overrides=overrides):
            logger.info("Context %r redirected to %r", self.path, path)

    @property
    def redirected(self) -> bool:
        return self._redirect.is_set

    @property
    def redirect_path(self) -> str | None:
        return self._redirect.path

    @property
    def redirect_args(self) -> RedirectArgs | None:
        return self._redirect.args

    # -- Lifecycle --

    async def run_before_navigate_callbacks(self) -> bool:
        """Run every guard in the chain; ``False`` means the navigation should not proceed."""
        callbacks: list[Guard] = list(self._before_navigate_callbacks)
        for ctx in self.children:
            callbacks.extend(ctx._before_navigate_callbacks)
        result = await sequence(callbacks)
        if self.router.config.lifecycle_logging:
            logger.debug("before_navigate %r: guards passed=%s", self.path, result.success)
        return result.success

    async def run_before_render(self, flush: bool = True) -> None:
        app_downstream = adapt_middleware(self.router.middleware, self)
        route_downstream = adapt_middleware(self.route.middleware, self)

        app_result = await sequence(app_downstream)
        route_result = await sequence(route_downstream)

        self._app_middleware_downstream = app_downstream[: app_result.count]
        self._route_middleware_downstream = route_downstream[: route_result.count]
        self._log_phase("before_render")

        child = self.child
        if child is not None and not self.redirected:
            await child.run_before_render(flush=False)
        if flush:
            await self.flush_queue()

    def render(self) -> None:
        """Mount each context's component down to the first redirected context."""
        ctx: NavigationContext | None = self
        while ctx is not None and not ctx.redirected:
            ctx.router.component(ctx.id, ctx.route.component)
            ctx._log_phase("render")
            ctx = ctx.child
        self.router.mount.flush()

    async def run_after_render(self, flush: bool = True) -> None:
        await sequence([*self._app_middleware_downstream, *self._route_middleware_downstream])
        self._log_phase("after_render")

        child = self.child
        if child is not None and not self.redirected:
            await child.run_after_render(flush=False)
        if flush:
            await self.flush_queue()

    async def run_before_dispose(self, flush: bool = True) -> None:
        child = self.child
        if child is not None and not self.redirected:
            await child.run_before_dispose(flush=False)
        await sequence([*self._route_middleware_downstream, *self._app_middleware_downstream])
        self._log_phase("before_dispose")
        if flush:
            await self.flush_queue()

    async def run_after_dispose(self, flush: bool = True) -> None:
        child = self.child
        if child is not None and not self.redirected:
            await child.run_after_dispose(flush=False)
        await sequence([*self._route_middleware_downstream, *self._app_middleware_downstream])
        self._log_phase("after_dispose")
        if flush:
            await self.flush_queue()

    async def flush_queue(self) -> None:
        """Drain this context's queue and every live descendant's, concurrently."""
        await drain([self._queue, *(c._queue for c in self.children)])

    # -- Introspection --

    @property
    def continuations(self) -> tuple[int, int]:
        """Number of captured (app, route) middleware continuations."""
        return len(self._app_middleware_downstream), len(self._route_middleware_downstream)

    def _log_phase(self, phase: str) -> None:
        if self.router.config.lifecycle_logging:
            logger.debug("%s %s (path=%r)", phase, self.route.path, self.path)

    def __repr__(self) -> str:
        return f"<NavigationContext id={self.id} route={self.route.path!r} path={self.path!r}>"
