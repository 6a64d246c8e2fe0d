"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    ContextTreeError,
    NavigationError,
    NoMatchingRoute,
    TooManyRedirects,
    WrenError,
)


class TestHierarchy:
    def test_navigation_error_is_wren_error(self) -> None:
        assert issubclass(NavigationError, WrenError)

    def test_no_matching_route_is_navigation_error(self) -> None:
        assert issubclass(NoMatchingRoute, NavigationError)

    def test_too_many_redirects_is_navigation_error(self) -> None:
        assert issubclass(TooManyRedirects, NavigationError)

    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_context_tree_error_is_wren_error(self) -> None:
        assert issubclass(ContextTreeError, WrenError)


class TestNavigationError:
    def test_str_with_detail(self) -> None:
        err = NavigationError(path="/users", detail="Gone")
        assert str(err) == "'/users': Gone"

    def test_str_without_detail(self) -> None:
        assert str(NavigationError(path="/users")) == "'/users'"

    def test_frozen(self) -> None:
        err = NavigationError(path="/users")
        with pytest.raises(AttributeError):
            err.path = "/other"  # type: ignore[misc]


class TestNoMatchingRoute:
    def test_defaults(self) -> None:
        err = NoMatchingRoute("/nowhere")
        assert err.path == "/nowhere"
        assert err.detail == "No matching route"
        assert str(err) == "'/nowhere': No matching route"

    def test_raise_and_catch_as_navigation_error(self) -> None:
        with pytest.raises(NavigationError):
            raise NoMatchingRoute("/nowhere")


class TestTooManyRedirects:
    def test_detail_names_limit(self) -> None:
        err = TooManyRedirects("/loop", 5)
        assert err.path == "/loop"
        assert "5" in err.detail
