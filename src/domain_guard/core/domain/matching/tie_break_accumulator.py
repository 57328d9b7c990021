from dataclasses import dataclass, field

from domain_guard.core.domain.guard import GuardRule


@dataclass
class TieBreakAccumulator:
    """Streaming max-by-depth reduction over ``last_match`` candidates.

    A strictly deeper candidate replaces the held set, an equally deep one
    joins it and a shallower one is ignored, so feed order only matters
    between different depths.
    """

    best_depth: int = 0
    best_rules: list[GuardRule] = field(default_factory=list)

    def offer(self, rule: GuardRule, depth: int) -> None:
        if depth > self.best_depth:
            self.best_depth = depth
            self.best_rules = [rule]
        elif depth == self.best_depth and all(
            held.identity != rule.identity for held in self.best_rules
        ):
            self.best_rules.append(rule)
