"""Per-context redirect state.

A redirect is an internal correction of the navigation target. It is
recorded, not raised: lifecycle phases check it before descending, and
the navigator follows it once the current navigation has settled.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

logger = logging.getLogger("wren.navigation")


@dataclass(frozen=True, slots=True)
class RedirectArgs:
    """Options for following a redirect.

    Attributes:
        push: Always ``False`` — a redirect replaces rather than adds a
            history entry.
        force: Navigate even if the target equals the current path.
        overrides: Attributes applied to the redirect target's root context.
    """

    push: Literal[False] = False
    force: bool = False
    overrides: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


class RedirectController:
    """Records at most one redirect per navigation run. The first one wins."""

    __slots__ = ("_args", "_path")

    def __init__(self) -> None:
        self._path: str | None = None
        self._args: RedirectArgs | None = None

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def args(self) -> RedirectArgs | None:
        return self._args

    @property
    def is_set(self) -> bool:
        return self._path is not None

    def set(
        self,
        path: str,
        *,
        force: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> bool:
        """Record a redirect to *path*. Returns ``False`` if one was already set."""
        if self._path is not None:
            logger.warning(
                "Ignoring redirect to %r: already redirecting to %r", path, self._path,
            )
            return False
        self._path = path
        self._args = RedirectArgs(force=force, overrides=MappingProxyType(dict(overrides or {})))
        return True

    def __repr__(self) -> str:
        return f"<RedirectController path={self._path!r}>"
