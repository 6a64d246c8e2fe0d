"""Per-context queue of pending side effects.

Middleware and components queue awaitables on a context while a phase
runs; the phase is finished only when the queues of the context and its
whole live subtree have been drained together::

    async def preload(ctx):
        ctx.queue(images.prefetch(ctx.params["gallery"]))

Draining captures and clears each queue synchronously, then awaits every
captured operation concurrently in one anyio task group. Work queued
after the capture waits for the next drain.
"""

import logging
from collections.abc import Awaitable, Iterable
from typing import Any

import anyio

logger = logging.getLogger("wren.navigation")


class TaskQueue:
    """Ordered pending awaitables for one context. Not awaited until drained."""

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: list[Awaitable[Any]] = []

    def push(self, operation: Awaitable[Any]) -> None:
        self._pending.append(operation)

    def take(self) -> list[Awaitable[Any]]:
        """Return the pending operations and leave the queue empty."""
        pending, self._pending = self._pending, []
        return pending

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __repr__(self) -> str:
        return f"<TaskQueue pending={len(self._pending)}>"


async def drain(queues: Iterable[TaskQueue]) -> int:
    """Capture every queue in *queues* and await all operations concurrently.

    Returns the number of operations awaited. Failures surface as an
    ``ExceptionGroup`` raised by the task group.
    """
    operations = [op for q in queues for op in q.take()]
    if not operations:
        return 0

    async def _settle(operation: Awaitable[Any]) -> None:
        await operation

    async with anyio.create_task_group() as tg:
        for operation in operations:
            tg.start_soon(_settle, operation)
    logger.debug("Drained %d queued operation(s)", len(operations))
    return len(operations)
