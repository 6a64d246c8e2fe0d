"""Mount protocol — the rendering substrate's boundary.

Anything with these two methods can render a navigation::

    class DomMount:
        def mount(self, context_id: int, component: str) -> None:
            outlets[context_id].swap(component)

        def flush(self) -> None:
            scheduler.run_pending()

No base class required. The navigator checks the shape, not the lineage.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Mount(Protocol):
    """Protocol for mounting a context's component at its outlet."""

    def mount(self, context_id: int, component: str) -> None:
        """Mount *component* at the outlet owned by *context_id*."""
        ...

    def flush(self) -> None:
        """Run any pending rendering work eagerly."""
        ...
