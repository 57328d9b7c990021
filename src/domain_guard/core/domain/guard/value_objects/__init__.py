from domain_guard.core.domain.guard.value_objects.content_scope import ContentScope
from domain_guard.core.domain.guard.value_objects.guard_actions import GuardActions
from domain_guard.core.domain.guard.value_objects.guard_filters import (
    MATCH_EVERYTHING,
    GuardFilters,
)
from domain_guard.core.domain.guard.value_objects.tie_break_mode import TieBreakMode

__all__ = [
    "MATCH_EVERYTHING",
    "ContentScope",
    "GuardActions",
    "GuardFilters",
    "TieBreakMode",
]
