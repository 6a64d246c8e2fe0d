"""Context tree — arena of navigation contexts indexed by stable ids.

Contexts reference their parent and child by id, never by object. Once a
chain is detached its ids no longer resolve, so a stale context sees
``None`` instead of keeping a replaced chain alive.

Every walk is bounded by the arena size. A longer walk means the links
form a cycle, which raises ``ContextTreeError``.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import TYPE_CHECKING

from wren.errors import ContextTreeError

if TYPE_CHECKING:
    from wren.navigation.context import NavigationContext


class ContextTree:
    """Arena owning every live navigation context.

    Usage::

        tree = ContextTree()
        context_id = tree.add(ctx)
        tree.get(context_id)         # ctx
        tree.detach(root_id)         # root and all its descendants
        tree.get(context_id)         # None
    """

    __slots__ = ("_ids", "_records")

    def __init__(self) -> None:
        self._records: dict[int, NavigationContext] = {}
        self._ids = itertools.count(1)

    def add(self, ctx: NavigationContext) -> int:
        """Register *ctx* and return its new id."""
        context_id = next(self._ids)
        self._records[context_id] = ctx
        return context_id

    def get(self, context_id: int | None) -> NavigationContext | None:
        if context_id is None:
            return None
        return self._records.get(context_id)

    def walk(self, context_id: int | None, *, upward: bool) -> Iterator[NavigationContext]:
        """Yield contexts along parent (``upward``) or child links, excluding the start."""
        start = self.get(context_id)
        if start is None:
            return
        limit = len(self._records)
        node = start
        for _ in range(limit + 1):
            next_id = node.parent_id if upward else node.child_id
            node = self.get(next_id)
            if node is None:
                return
            yield node
        direction = "parent" if upward else "child"
        msg = f"Context {context_id} has a {direction} chain longer than the tree ({limit})"
        raise ContextTreeError(msg)

    def detach(self, context_id: int) -> list[int]:
        """Remove a context and its descendants. Returns the removed ids."""
        ctx = self.get(context_id)
        if ctx is None:
            return []
        removed = [context_id, *(c.id for c in self.walk(context_id, upward=False))]
        parent = self.get(ctx.parent_id)
        if parent is not None and parent.child_id == context_id:
            parent.child_id = None
        for rid in removed:
            del self._records[rid]
        return removed

    def __contains__(self, context_id: object) -> bool:
        return context_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<ContextTree contexts={len(self._records)}>"
