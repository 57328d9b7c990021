"""Evaluate every applicable rule against every changed file."""

from collections.abc import Iterable, Mapping, Sequence

import structlog

from domain_guard.core.application.services.rule_matcher import matches_rule
from domain_guard.core.domain.diff import FileDiff, PRDiff
from domain_guard.core.domain.guard import (
    GuardRule,
    TieBreakMode,
    normalize_scope_dir,
    scope_applies_to,
    scope_depth,
)
from domain_guard.core.domain.matching import FileMatchOutcome

logger = structlog.get_logger()

RulesByScope = Mapping[str, Sequence[GuardRule]]


def group_by_scope(rules: Iterable[GuardRule]) -> dict[str, list[GuardRule]]:
    grouped: dict[str, list[GuardRule]] = {}
    for rule in rules:
        grouped.setdefault(rule.scope_dir, []).append(rule)
    return grouped


def aggregate_matches(diff: PRDiff, rules_by_scope: RulesByScope) -> dict[str, FileMatchOutcome]:
    """Per-file match outcomes; files without any match are left out."""
    outcomes: dict[str, FileMatchOutcome] = {}
    for file_path, file_diff in diff.file_diffs.items():
        outcome = evaluate_file(file_diff, rules_by_scope)
        if outcome.has_matches():
            outcomes[file_path] = outcome
    logger.info(
        "Guard rules evaluated",
        file_count=len(diff.file_diffs),
        scope_count=len(rules_by_scope),
        matched_file_count=len(outcomes),
    )
    return outcomes


def evaluate_file(file_diff: FileDiff, rules_by_scope: RulesByScope) -> FileMatchOutcome:
    outcome = FileMatchOutcome(file_path=file_diff.file_path)
    for scope_dir, rules in rules_by_scope.items():
        if not scope_applies_to(scope_dir, file_diff.file_path):
            continue
        depth = scope_depth(scope_dir)
        for rule in rules:
            if not matches_rule(rule, file_diff):
                continue
            if rule.filters.tie_break_mode is TieBreakMode.LAST_MATCH:
                outcome.update_tie_break(rule, depth)
            else:
                outcome.add_direct_match(rule)
            logger.debug(
                "Guard rule matched",
                rule=rule.identity,
                file_path=file_diff.file_path,
                scope_dir=normalize_scope_dir(scope_dir),
            )
    return outcome
