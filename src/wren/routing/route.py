"""Route and RouteMatch frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wren._internal.types import MiddlewareUnit


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    A route with ``children`` is nested: it matches a path prefix and the
    remainder is resolved against its children by the next context down::

        Route("/users", "users-shell", children=(
            Route("/", "user-list"),
            Route("/{id:int}", "user-detail", middleware=(load_user,)),
        ))
    """

    path: str
    component: str
    middleware: tuple[MiddlewareUnit, ...] = ()
    children: tuple[Route, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        # Routes are cache keys for compiled tables; keep them hashable
        object.__setattr__(self, "middleware", tuple(self.middleware))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_nested(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``pathname`` is the part of the path this route consumed;
    ``child_path`` is what is left for the nested route's children
    (empty for a leaf route).
    """

    route: Route
    params: dict[str, Any]
    pathname: str
    child_path: str = ""
