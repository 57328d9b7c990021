from domain_guard.core.domain.matching.aggregated_rule_match import AggregatedRuleMatch
from domain_guard.core.domain.matching.file_match_outcome import FileMatchOutcome
from domain_guard.core.domain.matching.tie_break_accumulator import TieBreakAccumulator

__all__ = ["AggregatedRuleMatch", "FileMatchOutcome", "TieBreakAccumulator"]
