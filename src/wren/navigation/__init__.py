"""Navigation — the context chain and its lifecycle machinery.

    NavigationContext -- one node per matched route segment
    ContextTree -- arena of live contexts, indexed by id
    LifecycleMiddleware -- base class for object-style middleware
    sequence -- ordered, short-circuiting callback runner
"""

from wren.navigation.context import NavigationContext
from wren.navigation.middleware import LifecycleMiddleware, MiddlewareStep, adapt_middleware
from wren.navigation.queue import TaskQueue
from wren.navigation.redirect import RedirectArgs, RedirectController
from wren.navigation.sequence import SequenceResult, sequence
from wren.navigation.tree import ContextTree

__all__ = [
    "ContextTree",
    "LifecycleMiddleware",
    "MiddlewareStep",
    "NavigationContext",
    "RedirectArgs",
    "RedirectController",
    "SequenceResult",
    "TaskQueue",
    "adapt_middleware",
    "sequence",
]
