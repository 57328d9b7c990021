from domain_guard.core.domain.guard.guard_rule import GuardRule
from domain_guard.core.domain.guard.scope import (
    ROOT_SCOPE,
    normalize_scope_dir,
    scope_applies_to,
    scope_depth,
)
from domain_guard.core.domain.guard.value_objects import (
    MATCH_EVERYTHING,
    ContentScope,
    GuardActions,
    GuardFilters,
    TieBreakMode,
)

__all__ = [
    "MATCH_EVERYTHING",
    "ROOT_SCOPE",
    "ContentScope",
    "GuardActions",
    "GuardFilters",
    "GuardRule",
    "TieBreakMode",
    "normalize_scope_dir",
    "scope_applies_to",
    "scope_depth",
]
