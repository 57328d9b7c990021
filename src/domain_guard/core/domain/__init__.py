from domain_guard.core.domain.actions import ActionPlan, ReviewComment
from domain_guard.core.domain.diff import FileDiff, PRDiff
from domain_guard.core.domain.guard import (
    ContentScope,
    GuardActions,
    GuardFilters,
    GuardRule,
    TieBreakMode,
)
from domain_guard.core.domain.matching import (
    AggregatedRuleMatch,
    FileMatchOutcome,
    TieBreakAccumulator,
)

__all__ = [
    "ActionPlan",
    "AggregatedRuleMatch",
    "ContentScope",
    "FileDiff",
    "FileMatchOutcome",
    "GuardActions",
    "GuardFilters",
    "GuardRule",
    "PRDiff",
    "ReviewComment",
    "TieBreakAccumulator",
    "TieBreakMode",
]
