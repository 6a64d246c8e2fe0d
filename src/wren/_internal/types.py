"""Shared type aliases used across wren modules."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

# Middleware unit — receives the navigation context; returns None, an
# awaitable, a generator, or a lifecycle object (see navigation.middleware)
MiddlewareUnit: TypeAlias = Callable[[Any], Any]

# Sequence callback — zero-argument; returns bool/None or an awaitable of one
Callback: TypeAlias = Callable[[], bool | None | Awaitable[bool | None]]

# Before-navigate guard — same shape as a sequence callback
Guard: TypeAlias = Callback
