"""Wren exception hierarchy.

Shared across routing, the context tree, and the navigator so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route table or navigation config is invalid.

    Typically raised while compiling route patterns, before any
    navigation runs.
    """


class ContextTreeError(WrenError):
    """Raised when a walk over the context tree exceeds the arena size.

    Only possible if parent/child links form a cycle.
    """


@dataclass(frozen=True, slots=True)
class NavigationError(WrenError):
    """An error that aborts a navigation.

    Raised by route resolution or the navigator. Never raised by a
    guard; a failing guard is a normal ``False`` result.
    """

    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path!r}: {self.detail}"
        return repr(self.path)


class NoMatchingRoute(NavigationError):  # noqa: N818
    """No route in the table matches the path."""

    def __init__(self, path: str, detail: str = "No matching route") -> None:
        super().__init__(path=path, detail=detail)


class TooManyRedirects(NavigationError):  # noqa: N818
    """A navigation redirected more times than ``max_redirects`` allows."""

    def __init__(self, path: str, limit: int) -> None:
        super().__init__(path=path, detail=f"Exceeded {limit} consecutive redirects")
