from dataclasses import dataclass, field
from typing import Any

from domain_guard.core.domain.guard.value_objects.content_scope import ContentScope
from domain_guard.core.domain.guard.value_objects.tie_break_mode import TieBreakMode

MATCH_EVERYTHING = ".*"


@dataclass(frozen=True, kw_only=True)
class GuardFilters:
    content_pattern: str = MATCH_EVERYTHING
    content_scope: ContentScope = ContentScope.ALL
    tie_break_mode: TieBreakMode = TieBreakMode.ALL
    exclude_paths: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Plain strings are accepted; an unknown value raises ValueError.
        object.__setattr__(self, "content_scope", ContentScope(self.content_scope))
        object.__setattr__(self, "tie_break_mode", TieBreakMode(self.tie_break_mode))
        object.__setattr__(self, "exclude_paths", tuple(self.exclude_paths))

    def to_record(self) -> dict[str, Any]:
        return {
            "diff_regex": self.content_pattern,
            "quirk": self.tie_break_mode.value,
            "diff_type": self.content_scope.value,
            "exclude_paths": list(self.exclude_paths),
        }
