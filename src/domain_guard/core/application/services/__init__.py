from domain_guard.core.application.services.action_planner import plan_actions
from domain_guard.core.application.services.diff_parser import parse_diff, parse_pr_diff
from domain_guard.core.application.services.glob_matcher import glob_match
from domain_guard.core.application.services.match_aggregator import (
    aggregate_matches,
    group_by_scope,
)
from domain_guard.core.application.services.match_deduplicator import (
    dedupe_matches,
    exclude_seen,
    merge_persisted_rules,
)
from domain_guard.core.application.services.rule_loader import load_records, load_rule, load_rules
from domain_guard.core.application.services.rule_matcher import matches_rule

__all__ = [
    "aggregate_matches",
    "dedupe_matches",
    "exclude_seen",
    "glob_match",
    "group_by_scope",
    "load_records",
    "load_rule",
    "load_rules",
    "matches_rule",
    "merge_persisted_rules",
    "parse_diff",
    "parse_pr_diff",
    "plan_actions",
]
