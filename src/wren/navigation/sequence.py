"""Short-circuiting, strictly ordered execution of callbacks."""

from collections.abc import Iterable
from dataclasses import dataclass

from wren._internal.invoke import invoke
from wren._internal.types import Callback


@dataclass(frozen=True, slots=True)
class SequenceResult:
    """Outcome of ``sequence()``.

    Attributes:
        count: Callbacks invoked, including the one that stopped the run.
        success: ``False`` if any callback returned exactly ``False``.
    """

    count: int
    success: bool


async def sequence(callbacks: Iterable[Callback]) -> SequenceResult:
    """Run *callbacks* one at a time, in order, each awaited before the next.

    A callback returning ``None`` (or any value other than ``False``)
    continues the run; ``False`` stops it without invoking the rest::

        result = await sequence([a, b, c])   # b returns False
        result.count    # 2
        result.success  # False
    """
    count = 0
    for callback in callbacks:
        count += 1
        if await invoke(callback) is False:
            return SequenceResult(count=count, success=False)
    return SequenceResult(count=count, success=True)
