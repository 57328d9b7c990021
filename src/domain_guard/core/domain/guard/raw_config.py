"""Total field extraction over loosely-typed configuration values.

Every helper returns its stated default on a type mismatch instead of raising,
so a rule with odd optional fields still loads.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

E = TypeVar("E", bound=StrEnum)

_EMPTY: Mapping[str, Any] = {}


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""
    return value if isinstance(value, Mapping) else _EMPTY


def string_tuple(value: Any) -> tuple[str, ...]:
    """Stringify every item of a list/tuple; anything else yields ``()``."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(item) for item in value)


def string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def enum_or(enum_type: type[E], value: Any, default: E) -> E:
    """Look up ``value`` among the enum's values, falling back to ``default``."""
    if isinstance(value, str):
        try:
            return enum_type(value)
        except ValueError:
            return default
    return default
