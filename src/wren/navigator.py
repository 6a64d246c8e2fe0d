"""Navigator — drives one navigation from guard checks to after-render.

Owns the route table, the context tree, and the current chain. A
navigation builds the new chain, then interleaves the phases of the
outgoing and incoming chains:

    1. build the incoming chain (NoMatchingRoute aborts here)
    2. outgoing guards          -- False cancels the navigation
    3. incoming before_render
    4. outgoing before_dispose
    5. incoming render
    6. outgoing after_dispose   -- then the outgoing chain is detached
    7. incoming after_render
    8. follow a redirect, if any context requested one

Redirect navigations skip the guards of the chain being replaced: the
redirected chain never finished arriving, so it has nothing to protect.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from wren.config import NavigationConfig
from wren.errors import TooManyRedirects
from wren.mount import Mount
from wren.navigation.context import NavigationContext
from wren.navigation.tree import ContextTree
from wren.routing.route import Route
from wren.routing.router import Router
from wren.routing.table import RouteTable

logger = logging.getLogger("wren.navigation")


class Navigator:
    """Top-level navigation coordinator.

    Usage::

        navigator = Navigator(
            [Route("/", "home"), Route("/login", "login")],
            mount=outlet,
            config=NavigationConfig(base="/app", middleware=(track_pageviews,)),
        )
        await navigator.navigate("/")
        navigator.current.route.component   # "home"
    """

    __slots__ = ("config", "current", "mount", "table", "tree")

    def __init__(
        self,
        routes: Iterable[Route],
        mount: Mount,
        config: NavigationConfig | None = None,
    ) -> None:
        self.config: NavigationConfig = config or NavigationConfig()
        self.table = RouteTable(tuple(routes))
        self.mount = mount
        self.tree = ContextTree()
        self.current: NavigationContext | None = None

    def resolve(self, path: str, overrides: Mapping[str, Any] | None = None) -> NavigationContext:
        """Build the context chain for *path* without running any phase."""
        router = Router(
            self.table,
            path,
            config=self.config,
            mount=self.mount,
            tree=self.tree,
            overrides=dict(overrides or {}),
        )
        return router.ctx

    async def navigate(
        self,
        path: str,
        *,
        force: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> bool:
        """Navigate to *path*.

        Returns ``False`` if the path is already current (and not
        ``force``), a guard cancelled the navigation, or a followed
        redirect returned ``False``. A phase that raises before the new
        chain becomes current leaves the previous chain current.

        Raises:
            NoMatchingRoute: If *path* (or a redirect target) does not resolve.
            TooManyRedirects: If redirects chain past ``config.max_redirects``.
        """
        return await self._navigate(path, force=force, overrides=overrides, redirects=0)

    async def _navigate(
        self,
        path: str,
        *,
        force: bool,
        overrides: Mapping[str, Any] | None,
        redirects: int,
    ) -> bool:
        outgoing = self.current
        if outgoing is not None and not force and outgoing.path == path:
            logger.debug("Already at %r", path)
            return False

        incoming = self.resolve(path, overrides)

        try:
            if outgoing is not None and redirects == 0:
                if not await outgoing.run_before_navigate_callbacks():
                    logger.info("Navigation to %r cancelled by a guard", path)
                    self.tree.detach(incoming.id)
                    return False

            await incoming.run_before_render()
            if outgoing is not None:
                await outgoing.run_before_dispose()
            incoming.render()
            if outgoing is not None:
                await outgoing.run_after_dispose()
                self.tree.detach(outgoing.id)
            self.current = incoming
            await incoming.run_after_render()
        except BaseException:
            # A chain that never became current must not stay in the tree
            if self.current is not incoming:
                self.tree.detach(incoming.id)
            raise

        redirecting = next((c for c in (incoming, *incoming.children) if c.redirected), None)
        if redirecting is None:
            return True

        if redirects >= self.config.max_redirects:
            raise TooManyRedirects(path, self.config.max_redirects)
        target = redirecting.redirect_path
        args = redirecting.redirect_args
        assert target is not None and args is not None
        logger.info("Following redirect %r -> %r", path, target)
        return await self._navigate(
            target, force=args.force, overrides=args.overrides, redirects=redirects + 1,
        )

    async def dispose(self) -> None:
        """Tear down the current chain and detach it."""
        outgoing = self.current
        if outgoing is None:
            return
        await outgoing.run_before_dispose()
        await outgoing.run_after_dispose()
        self.tree.detach(outgoing.id)
        self.current = None
