"""Compiled route table with trie-based path matching.

One table per nesting level: the top-level routes form the root table,
and every nested route's ``children`` form the table its child context
resolves against. Tables are immutable once built. A nested route's child
table is built on first use and cached by the route's identity, so
repeated navigations reuse it.
"""

import re
from dataclasses import dataclass
from typing import Any

from wren.errors import ConfigurationError, NoMatchingRoute
from wren.routing.params import convert_param, converter_for, segment_regex
from wren.routing.route import PathSegment, Route, RouteMatch

_FLASK_STYLE_PARAM = re.compile(r"<[^>]+>")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]
        "/files/{path:path}" -> [PathSegment("{path:path}", is_param=True, param_type="path")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders or unknown
    converters.
    """
    if _FLASK_STYLE_PARAM.search(path):
        msg = (
            f"Route path {path!r} uses <param> placeholders. "
            "Wren expects {param} or {param:type}."
        )
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            converter_for(param_type)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Catch-all route (path converter)
        self.catch_all: _CatchAllEdge | None = None
        # Route terminating at this node
        self.route: Route | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge — consumes remaining path."""

    param_name: str
    route: Route


class RouteTable:
    """Compiled route table for one nesting level.

    Usage::

        table = RouteTable([
            Route("/", "home"),
            Route("/users", "users", children=(Route("/{id:int}", "user"),)),
        ])
        match = table.match("/users/42")
        match.pathname    # "/users"
        match.child_path  # "/42"
    """

    __slots__ = ("_root", "_routes")

    def __init__(self, routes: tuple[Route, ...] | list[Route] = ()) -> None:
        self._root = _TrieNode()
        self._routes: tuple[Route, ...] = ()
        for route in routes:
            self._add(route)

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration order."""
        return self._routes

    def _add(self, route: Route) -> None:
        segments = parse_path(route.path)
        node = self._root

        for seg in segments:
            if seg.is_param and seg.param_type == "path":
                # Catch-all: consumes rest of path, must be last segment
                if route.is_nested:
                    msg = f"Nested route {route.path!r} cannot end in a path parameter"
                    raise ConfigurationError(msg)
                if node.catch_all is not None:
                    msg = f"Duplicate catch-all route {route.path!r}"
                    raise ConfigurationError(msg)
                node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", route=route)
                self._routes = (*self._routes, route)
                return

            if seg.is_param:
                if node.param_child is None:
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=segment_regex(seg.param_type),
                        node=_TrieNode(),
                    )
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        if node.route is not None:
            msg = f"Duplicate route {route.path!r} (already registered as {node.route.path!r})"
            raise ConfigurationError(msg)
        node.route = route
        self._routes = (*self._routes, route)

    def match(self, path: str) -> RouteMatch:
        """Match *path* against the table.

        Returns a ``RouteMatch`` on success.
        Raises ``NoMatchingRoute`` if no route matches the path.
        """
        parts = [p for p in path.strip("/").split("/") if p]
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NoMatchingRoute(path)

        route, params, consumed = result
        pathname = "".join(f"/{p}" for p in parts[:consumed])
        if consumed < len(parts):
            child_path = "/" + "/".join(parts[consumed:])
        elif route.is_nested:
            # Fully consumed nested route: children resolve their index route
            child_path = "/"
        else:
            child_path = ""
        return RouteMatch(route=route, params=params, pathname=pathname, child_path=child_path)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, Any],
    ) -> tuple[Route, dict[str, Any], int] | None:
        """Recursively match path parts against the trie.

        Returns the route, its params, and how many parts it consumed.
        """
        # All parts consumed — return this node
        if index == len(parts):
            if node.route is not None:
                return node.route, params, index
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                new_params = {**params, edge.param_name: convert_param(part, edge.param_type)}
                result = self._match_node(edge.node, parts, index + 1, new_params)
                if result is not None:
                    return result

        # 3. Try catch-all
        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            new_params = {**params, node.catch_all.param_name: remaining}
            return node.catch_all.route, new_params, len(parts)

        # 4. Nested route owning this prefix; the rest goes to its children
        if node.route is not None and node.route.is_nested:
            return node.route, params, index

        return None

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"<RouteTable {[r.path for r in self._routes]!r}>"


# id(route) -> (route, table); the route is held so its id stays unique
_child_tables: dict[int, tuple[Route, RouteTable]] = {}


def child_table(route: Route) -> RouteTable:
    """Return the (cached) table for *route*'s children.

    Keyed on the route object itself rather than its fields: middleware
    units need not be hashable.
    """
    entry = _child_tables.get(id(route))
    if entry is None:
        entry = (route, RouteTable(route.children))
        _child_tables[id(route)] = entry
    return entry[1]
