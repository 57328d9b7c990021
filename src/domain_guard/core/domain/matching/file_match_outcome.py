from dataclasses import dataclass, field
from typing import Any

from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.domain.matching.tie_break_accumulator import TieBreakAccumulator


@dataclass
class FileMatchOutcome:
    """Every rule that fired for one file, split by tie-break mode."""

    file_path: str
    direct_matches: list[GuardRule] = field(default_factory=list)
    tie_break: TieBreakAccumulator = field(default_factory=TieBreakAccumulator)

    @property
    def tie_break_matches(self) -> list[GuardRule]:
        return self.tie_break.best_rules

    @property
    def tie_break_depth(self) -> int:
        return self.tie_break.best_depth

    def add_direct_match(self, rule: GuardRule) -> None:
        if all(held.identity != rule.identity for held in self.direct_matches):
            self.direct_matches.append(rule)

    def update_tie_break(self, rule: GuardRule, depth: int) -> None:
        self.tie_break.offer(rule, depth)

    def has_matches(self) -> bool:
        return bool(self.direct_matches or self.tie_break.best_rules)

    def matches(self) -> list[GuardRule]:
        """Direct matches followed by tie-break winners, unique by identity."""
        seen: set[str] = set()
        merged: list[GuardRule] = []
        for rule in [*self.direct_matches, *self.tie_break.best_rules]:
            if rule.identity not in seen:
                seen.add(rule.identity)
                merged.append(rule)
        return merged

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "direct_matches": [rule.identity for rule in self.direct_matches],
            "tie_break_matches": [rule.identity for rule in self.tie_break_matches],
            "tie_break_depth": self.tie_break_depth,
        }
