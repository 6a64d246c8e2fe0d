"""Tests for wren.routing.route — Route, RouteMatch, PathSegment."""

import pytest

from wren.routing.route import PathSegment, Route, RouteMatch


def _mw(ctx) -> None:
    return None


class TestPathSegment:
    def test_static(self) -> None:
        seg = PathSegment(value="users")
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.param_type == "str"

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRoute:
    def test_defaults(self) -> None:
        route = Route("/users", "user-list")
        assert route.middleware == ()
        assert route.children == ()
        assert route.name is None
        assert route.is_nested is False

    def test_lists_become_tuples(self) -> None:
        route = Route("/users", "users", middleware=[_mw], children=[Route("/", "index")])  # type: ignore[arg-type]
        assert route.middleware == (_mw,)
        assert isinstance(route.children, tuple)
        assert route.is_nested is True

    def test_hashable(self) -> None:
        a = Route("/users", "users", middleware=(_mw,))
        b = Route("/users", "users", middleware=(_mw,))
        assert hash(a) == hash(b)
        assert a == b

    def test_frozen(self) -> None:
        route = Route("/users", "users")
        with pytest.raises(AttributeError):
            route.component = "other"  # type: ignore[misc]


class TestRouteMatch:
    def test_leaf_has_no_child_path(self) -> None:
        route = Route("/users", "users")
        match = RouteMatch(route=route, params={}, pathname="/users")
        assert match.child_path == ""
