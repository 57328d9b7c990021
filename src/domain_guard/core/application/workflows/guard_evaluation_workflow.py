"""Deterministic guard pipeline: Parse -> Load -> Aggregate -> Dedupe -> Plan -> Persist."""

from dataclasses import dataclass, field
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars

from domain_guard.core.application.ports import MatchStorePort, RuleSourcePort
from domain_guard.core.application.services.action_planner import (
    DEFAULT_MAX_ASSIGNEES,
    DEFAULT_SUMMARY_TITLE,
    plan_actions,
)
from domain_guard.core.application.services.diff_parser import parse_pr_diff
from domain_guard.core.application.services.match_aggregator import aggregate_matches
from domain_guard.core.application.services.match_deduplicator import (
    dedupe_matches,
    exclude_seen,
    merge_persisted_rules,
)
from domain_guard.core.domain.actions import ActionPlan
from domain_guard.core.domain.diff import PRDiff
from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.domain.matching import AggregatedRuleMatch, FileMatchOutcome
from domain_guard.core.exceptions import WorkflowExecutionError

logger = structlog.get_logger()


@dataclass
class GuardEvaluationResult:
    diff: PRDiff
    outcomes: dict[str, FileMatchOutcome] = field(default_factory=dict)
    matches: list[AggregatedRuleMatch] = field(default_factory=list)
    new_matches: list[AggregatedRuleMatch] = field(default_factory=list)
    plan: ActionPlan | None = None
    persisted: list[GuardRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "diff": self.diff.summary(),
            "outcomes": [outcome.to_dict() for outcome in self.outcomes.values()],
            "matches": [match.to_dict() for match in self.matches],
            "new_matches": [match.to_dict() for match in self.new_matches],
            "plan": self.plan.to_dict() if self.plan is not None else None,
            "persisted": [rule.to_record() for rule in self.persisted],
        }


class GuardEvaluationWorkflow:
    """Runs every guard rule against a raw diff and records what fired."""

    def __init__(
        self,
        rule_source: RuleSourcePort,
        match_store: MatchStorePort | None = None,
        max_assignees: int = DEFAULT_MAX_ASSIGNEES,
        summary_title: str = DEFAULT_SUMMARY_TITLE,
    ) -> None:
        self._rule_source = rule_source
        self._match_store = match_store
        self._max_assignees = max_assignees
        self._summary_title = summary_title

    def execute(self, raw_diff: str) -> GuardEvaluationResult:
        bind_contextvars(event_type="workflow.guard_evaluation")
        diff = parse_pr_diff(raw_diff)
        logger.info("Diff parsed", file_count=len(diff.file_diffs))

        rules_by_scope = self._load_rules()
        previous = self._load_previous()

        outcomes = aggregate_matches(diff, rules_by_scope)
        matches = dedupe_matches(outcomes)
        new_matches = exclude_seen(matches, previous.keys())
        for skipped in matches:
            if skipped.identity in previous:
                logger.info("Skipping rule matched in a previous run", rule=skipped.identity)

        plan = plan_actions(new_matches, self._max_assignees, self._summary_title)
        persisted = merge_persisted_rules(matches, previous)
        self._save(persisted)
        logger.info(
            "Guard evaluation completed",
            matched_rule_count=len(matches),
            new_rule_count=len(new_matches),
        )
        return GuardEvaluationResult(
            diff=diff,
            outcomes=outcomes,
            matches=matches,
            new_matches=new_matches,
            plan=plan,
            persisted=persisted,
        )

    def _load_rules(self) -> dict[str, list[GuardRule]]:
        try:
            rules_by_scope = self._rule_source.load_rules_by_scope()
        except Exception as exc:
            raise WorkflowExecutionError(
                f"Failed to load guard rules: {exc}", context={"step": "load_rules"}
            ) from exc
        logger.info(
            "Guard rules loaded",
            scope_count=len(rules_by_scope),
            rule_count=sum(len(rules) for rules in rules_by_scope.values()),
        )
        return rules_by_scope

    def _load_previous(self) -> dict[str, GuardRule]:
        if self._match_store is None:
            return {}
        try:
            return self._match_store.load_previous()
        except Exception as exc:
            raise WorkflowExecutionError(
                f"Failed to load previous matches: {exc}", context={"step": "load_previous"}
            ) from exc

    def _save(self, rules: list[GuardRule]) -> None:
        if self._match_store is None:
            return
        try:
            self._match_store.save(rules)
        except Exception as exc:
            raise WorkflowExecutionError(
                f"Failed to persist matches: {exc}", context={"step": "save_matches"}
            ) from exc
