"""Test utilities for wren navigations.

``RecordingMount`` satisfies the ``Mount`` protocol and remembers what
was mounted, so tests can assert on rendering without a UI::

    mount = RecordingMount()
    navigator = Navigator(routes, mount)
    await navigator.navigate("/users/42")
    assert mount.components == ["users-shell", "user-detail"]
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingMount:
    """A ``Mount`` that records calls instead of rendering."""

    mounted: list[tuple[int, str]] = field(default_factory=list)
    flushes: int = 0

    def mount(self, context_id: int, component: str) -> None:
        self.mounted.append((context_id, component))

    def flush(self) -> None:
        self.flushes += 1

    @property
    def components(self) -> list[str]:
        """Mounted component names, in mount order."""
        return [component for _, component in self.mounted]

    def clear(self) -> None:
        self.mounted.clear()
        self.flushes = 0
