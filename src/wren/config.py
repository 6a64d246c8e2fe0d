"""Navigation configuration.

NavigationConfig is a frozen dataclass — immutable after creation and
passed explicitly from the navigator down to every router and context.
There is no process-wide router state.
"""

from dataclasses import dataclass

from wren._internal.types import MiddlewareUnit


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Navigation configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigationConfig(base="/app", middleware=(track_pageviews,))
    """

    # Mount point of the application; prefix of every context's base
    base: str = ""

    # Application-wide middleware, run for every context before its route middleware
    middleware: tuple[MiddlewareUnit, ...] = ()

    # Consecutive redirects followed by Navigator.navigate() before giving up
    max_redirects: int = 10

    # DEBUG-level log line per lifecycle phase
    lifecycle_logging: bool = True
