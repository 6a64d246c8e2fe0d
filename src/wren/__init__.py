"""Wren — nested navigation lifecycles for client-side routing.

Every navigation builds a chain of contexts, one per nested route
segment, and runs guards, before-render middleware, rendering,
after-render effects and teardown across the chain in a fixed order.
Any context can redirect; descendants stop, and every middleware that
already started still gets its teardown.

Basic usage::

    from wren import Navigator, NavigationConfig, Route

    def require_login(ctx):
        if not session.user:
            ctx.redirect("/login")

    navigator = Navigator(
        [
            Route("/login", "login-page"),
            Route("/admin", "admin-shell", middleware=(require_login,), children=(
                Route("/", "dashboard"),
                Route("/users/{id:int}", "user-editor"),
            )),
        ],
        mount=outlet,
        config=NavigationConfig(base="/app"),
    )
    await navigator.navigate("/admin/users/42")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "ContextTreeError",
    "LifecycleMiddleware",
    "Mount",
    "NavigationConfig",
    "NavigationContext",
    "NavigationError",
    "Navigator",
    "NoMatchingRoute",
    "Route",
    "RouteTable",
    "TooManyRedirects",
    "WrenError",
    "sequence",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Navigator":
        from wren.navigator import Navigator

        return Navigator

    if name == "NavigationConfig":
        from wren.config import NavigationConfig

        return NavigationConfig

    if name == "Mount":
        from wren.mount import Mount

        return Mount

    if name in ("Route", "RouteTable"):
        from wren.routing import route as _route
        from wren.routing import table as _table

        return getattr(_route, name, None) or getattr(_table, name)

    if name in ("NavigationContext", "LifecycleMiddleware", "sequence"):
        from wren import navigation as _nav

        return getattr(_nav, name)

    if name in (
        "ConfigurationError",
        "ContextTreeError",
        "NavigationError",
        "NoMatchingRoute",
        "TooManyRedirects",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
