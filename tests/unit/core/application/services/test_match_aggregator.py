"""Unit tests - match aggregation across nested scopes."""

from collections.abc import Callable

from domain_guard.core.application.services.diff_parser import parse_pr_diff
from domain_guard.core.application.services.match_aggregator import (
    aggregate_matches,
    group_by_scope,
)
from domain_guard.core.domain.guard import GuardFilters, GuardRule

RuleFactory = Callable[..., GuardRule]

INVOICE = "services/billing/invoice.py"


class TestNestedScopePrecedence:
    def test_deeper_last_match_scope_wins(self, make_rule: RuleFactory, sample_diff: str) -> None:
        rule_a = make_rule("a", scope_dir=".", filters={"quirk": "last_match"})
        rule_b = make_rule("b", scope_dir="services/billing", filters={"quirk": "last_match"})

        outcomes = aggregate_matches(
            parse_pr_diff(sample_diff),
            {".": [rule_a], "services/billing": [rule_b]},
        )

        invoice = outcomes[INVOICE]
        assert [rule.name for rule in invoice.tie_break_matches] == ["b"]
        assert invoice.tie_break_depth == 2
        assert invoice.direct_matches == []

    def test_all_mode_rule_still_applies_alongside_winner(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        rule_a = make_rule("a", scope_dir=".")
        rule_b = make_rule("b", scope_dir="services/billing", filters={"quirk": "last_match"})

        outcomes = aggregate_matches(
            parse_pr_diff(sample_diff),
            {".": [rule_a], "services/billing": [rule_b]},
        )

        invoice = outcomes[INVOICE]
        assert [rule.name for rule in invoice.direct_matches] == ["a"]
        assert [rule.name for rule in invoice.tie_break_matches] == ["b"]

    def test_result_independent_of_scope_order(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        scopes = {
            ".": [make_rule("root", filters={"quirk": "last_match"})],
            "services": [make_rule("svc", scope_dir="services", filters={"quirk": "last_match"})],
            "services/billing": [
                make_rule("x", scope_dir="services/billing", filters={"quirk": "last_match"}),
                make_rule("y", scope_dir="services/billing", filters={"quirk": "last_match"}),
            ],
        }
        diff = parse_pr_diff(sample_diff)

        forward = aggregate_matches(diff, scopes)
        backward = aggregate_matches(diff, dict(reversed(list(scopes.items()))))

        for outcomes in (forward, backward):
            assert {rule.name for rule in outcomes[INVOICE].tie_break_matches} == {"x", "y"}
            assert outcomes[INVOICE].tie_break_depth == 2

    def test_root_and_first_level_scopes_tie(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        scopes = {
            ".": [make_rule("root", filters={"quirk": "last_match"})],
            "services": [make_rule("svc", scope_dir="services", filters={"quirk": "last_match"})],
        }

        outcomes = aggregate_matches(parse_pr_diff(sample_diff), scopes)

        assert {rule.name for rule in outcomes[INVOICE].tie_break_matches} == {"root", "svc"}


class TestScopeApplicability:
    def test_scope_only_sees_files_beneath_it(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        rule = make_rule("billing", scope_dir="services/billing")

        outcomes = aggregate_matches(parse_pr_diff(sample_diff), {"services/billing": [rule]})

        assert list(outcomes) == [INVOICE]

    def test_partial_directory_name_is_not_a_prefix(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        rule = make_rule("bill", scope_dir="services/bill")

        assert aggregate_matches(parse_pr_diff(sample_diff), {"services/bill": [rule]}) == {}


class TestResultShape:
    def test_files_without_matches_are_left_out(
        self, make_rule: RuleFactory, sample_diff: str
    ) -> None:
        rule = make_rule("docs", paths=["docs/*"])

        outcomes = aggregate_matches(parse_pr_diff(sample_diff), {".": [rule]})

        assert list(outcomes) == ["docs/readme.md"]

    def test_empty_diff_yields_empty_result(self, make_rule: RuleFactory) -> None:
        assert aggregate_matches(parse_pr_diff(""), {".": [make_rule("any")]}) == {}

    def test_no_rules_yields_empty_result(self, sample_diff: str) -> None:
        assert aggregate_matches(parse_pr_diff(sample_diff), {}) == {}

    def test_group_by_scope(self, make_rule: RuleFactory) -> None:
        rules = [make_rule("a"), make_rule("b", scope_dir="svc"), make_rule("c")]

        grouped = group_by_scope(rules)

        assert {scope: [r.name for r in group] for scope, group in grouped.items()} == {
            ".": ["a", "c"],
            "svc": ["b"],
        }


def test_directly_built_last_match_filters_compete_by_depth(sample_diff: str) -> None:
    root = GuardRule(name="a", scope_dir=".", filters=GuardFilters(tie_break_mode="last_match"))
    billing = GuardRule(
        name="b",
        scope_dir="services/billing",
        filters=GuardFilters(tie_break_mode="last_match"),
    )

    outcomes = aggregate_matches(
        parse_pr_diff(sample_diff), {".": [root], "services/billing": [billing]}
    )

    assert [rule.name for rule in outcomes[INVOICE].tie_break_matches] == ["b"]
    assert outcomes[INVOICE].direct_matches == []
