"""Router — resolution capability for one level of the context chain.

A router pairs a route table with the navigation-wide collaborators
(config, mount, context tree) and builds the context for its level.
Creating the root router builds the whole chain: each context whose
match leaves a child path asks its router for a child router.
"""

from __future__ import annotations

import logging
from typing import Any

from wren.config import NavigationConfig
from wren.mount import Mount
from wren.navigation.context import NavigationContext
from wren.navigation.tree import ContextTree
from wren.routing.route import RouteMatch
from wren.routing.table import RouteTable, child_table

logger = logging.getLogger("wren.routing")


class Router:
    """Resolution capability for one nesting level.

    Usage::

        router = Router(table, "/users/42", config=config, mount=mount, tree=tree)
        ctx = router.ctx            # root context, "/users"
        ctx.child.pathname          # "/42"
    """

    __slots__ = ("config", "ctx", "mount", "parent", "table", "tree")

    def __init__(
        self,
        table: RouteTable,
        path: str,
        *,
        config: NavigationConfig,
        mount: Mount,
        tree: ContextTree,
        parent: NavigationContext | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> None:
        self.table = table
        self.config = config
        self.mount = mount
        self.tree = tree
        self.parent = parent
        self.ctx = NavigationContext(self, parent, path, overrides)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def base(self) -> str:
        """Application mount base."""
        return self.config.base

    @property
    def middleware(self) -> tuple[Any, ...]:
        """Application-wide middleware units."""
        return self.config.middleware

    def resolve_route(self, path: str) -> RouteMatch:
        """Resolve *path* at this level. Raises ``NoMatchingRoute``."""
        match = self.table.match(path)
        logger.debug(
            "Resolved %r -> %r (pathname=%r, child_path=%r)",
            path, match.route.path, match.pathname, match.child_path,
        )
        return match

    def child(self, path: str, parent: NavigationContext) -> Router:
        """Build the router (and context) for the level below *parent*."""
        return Router(
            child_table(parent.route),
            path,
            config=self.config,
            mount=self.mount,
            tree=self.tree,
            parent=parent,
        )

    def component(self, context_id: int, component: str) -> None:
        """Mount *component* at this level's outlet."""
        self.mount.mount(context_id, component)
