"""Route parameter converters.

A route segment ``{name:type}`` captures one path segment (or, for
``path``, the rest of the path) and converts it before it lands in
``ctx.params``::

    Route("/users/{id:int}", "user")   # ctx.params == {"id": 42}
"""

import re
from typing import NamedTuple

from wren.errors import ConfigurationError


class Converter(NamedTuple):
    pattern: str
    type: type


CONVERTERS: dict[str, Converter] = {
    "str": Converter(r"[^/]+", str),
    "int": Converter(r"\d+", int),
    "float": Converter(r"\d+(?:\.\d+)?", float),
    "path": Converter(r".+", str),
}


def converter_for(param_type: str) -> Converter:
    """Look up a converter. Raises ``ConfigurationError`` for unknown types."""
    try:
        return CONVERTERS[param_type]
    except KeyError:
        known = ", ".join(sorted(CONVERTERS))
        msg = f"Unknown route parameter type {param_type!r} (known: {known})"
        raise ConfigurationError(msg) from None


def segment_regex(param_type: str) -> re.Pattern[str]:
    """Compiled full-segment regex for *param_type*."""
    return re.compile(f"^{converter_for(param_type).pattern}$")


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured segment to the parameter's type.

    Raises ``ValueError`` if *value* does not fit the type.
    """
    return converter_for(param_type).type(value)
