"""Tests for wren.navigation.redirect — redirect state and args."""

import logging

import pytest

from wren.navigation.redirect import RedirectArgs, RedirectController


class TestRedirectArgs:
    def test_defaults(self) -> None:
        args = RedirectArgs()
        assert args.push is False
        assert args.force is False
        assert dict(args.overrides) == {}

    def test_frozen(self) -> None:
        args = RedirectArgs()
        with pytest.raises(AttributeError):
            args.force = True  # type: ignore[misc]


class TestRedirectController:
    def test_initially_unset(self) -> None:
        rc = RedirectController()
        assert rc.is_set is False
        assert rc.path is None
        assert rc.args is None

    def test_set(self) -> None:
        rc = RedirectController()
        assert rc.set("/login", force=True, overrides={"reason": "auth"}) is True
        assert rc.is_set is True
        assert rc.path == "/login"
        assert rc.args is not None
        assert rc.args.push is False
        assert rc.args.force is True
        assert rc.args.overrides["reason"] == "auth"

    def test_overrides_are_read_only_copies(self) -> None:
        source = {"reason": "auth"}
        rc = RedirectController()
        rc.set("/login", overrides=source)
        source["reason"] = "changed"
        assert rc.args is not None
        assert rc.args.overrides["reason"] == "auth"
        with pytest.raises(TypeError):
            rc.args.overrides["reason"] = "x"  # type: ignore[index]

    def test_first_redirect_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        rc = RedirectController()
        rc.set("/login")
        with caplog.at_level(logging.WARNING, logger="wren.navigation"):
            assert rc.set("/elsewhere") is False
        assert rc.path == "/login"
        assert "Ignoring redirect to '/elsewhere'" in caplog.text
