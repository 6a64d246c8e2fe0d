"""Tests for wren.routing.router — per-level routers building the context chain."""

import pytest

from wren.config import NavigationConfig
from wren.errors import NoMatchingRoute
from wren.navigation.tree import ContextTree
from wren.routing.route import Route
from wren.routing.router import Router
from wren.routing.table import RouteTable
from wren.testing import RecordingMount

ROUTES = (
    Route("/app", "shell", children=(
        Route("/users", "users", children=(
            Route("/", "user-list"),
            Route("/{id:int}", "user"),
        )),
    )),
    Route("/login", "login"),
)


def _router(path: str, config: NavigationConfig | None = None) -> Router:
    return Router(
        RouteTable(ROUTES),
        path,
        config=config or NavigationConfig(),
        mount=RecordingMount(),
        tree=ContextTree(),
    )


class TestRouter:
    def test_root_router(self) -> None:
        router = _router("/login")
        assert router.is_root is True
        assert router.ctx.route.component == "login"
        assert router.ctx.router is router

    def test_builds_whole_chain(self) -> None:
        root = _router("/app/users/42").ctx
        assert [c.route.component for c in (root, *root.children)] == ["shell", "users", "user"]
        assert root.child is not None
        assert root.child.router.is_root is False
        assert root.child.router.parent is root

    def test_index_route_resolved(self) -> None:
        root = _router("/app/users").ctx
        assert root.children[-1].route.component == "user-list"

    def test_config_shared_down_the_chain(self) -> None:
        config = NavigationConfig(base="/base", middleware=(print,))
        root = _router("/app/users/1", config).ctx
        for ctx in (root, *root.children):
            assert ctx.router.config is config
            assert ctx.router.middleware == (print,)
            assert ctx.router.base == "/base"

    def test_all_levels_share_tree_and_mount(self) -> None:
        root = _router("/app/users/1").ctx
        for ctx in root.children:
            assert ctx.tree is root.tree
            assert ctx.router.mount is root.router.mount
        assert len(root.tree) == 3

    def test_unmatched_child_segment_raises(self) -> None:
        with pytest.raises(NoMatchingRoute) as exc_info:
            _router("/app/users/alice")
        assert exc_info.value.path == "/alice"

    def test_failed_chain_leaves_tree_empty(self) -> None:
        tree = ContextTree()
        with pytest.raises(NoMatchingRoute):
            Router(
                RouteTable(ROUTES),
                "/app/users/alice",
                config=NavigationConfig(),
                mount=RecordingMount(),
                tree=tree,
            )
        assert len(tree) == 0

    def test_component_mounts_through_mount(self) -> None:
        router = _router("/login")
        router.component(router.ctx.id, "login")
        assert router.mount.mounted == [(router.ctx.id, "login")]  # type: ignore[attr-defined]
