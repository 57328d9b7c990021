"""Unit tests - per-rule deduplication and previously-seen suppression."""

from collections.abc import Callable

from domain_guard.core.application.services.match_deduplicator import (
    dedupe_matches,
    exclude_seen,
    merge_persisted_rules,
)
from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.domain.matching import FileMatchOutcome

RuleFactory = Callable[..., GuardRule]


def _outcome(file_path: str, *direct: GuardRule) -> FileMatchOutcome:
    outcome = FileMatchOutcome(file_path=file_path)
    for rule in direct:
        outcome.add_direct_match(rule)
    return outcome


class TestDedupeMatches:
    def test_first_file_becomes_anchor(self, make_rule: RuleFactory) -> None:
        owners = make_rule("owners")
        outcomes = {
            "b.py": _outcome("b.py", owners),
            "a.py": _outcome("a.py", owners),
            "c.py": _outcome("c.py", owners),
        }

        [match] = dedupe_matches(outcomes)

        assert match.anchor_file == "b.py"
        assert match.additional_files == {"a.py", "c.py"}
        assert match.all_files() == ["b.py", "a.py", "c.py"]

    def test_groups_by_identity_not_name(self, make_rule: RuleFactory) -> None:
        root = make_rule("owners")
        nested = make_rule("owners", scope_dir="svc")
        outcomes = {"svc/x.py": _outcome("svc/x.py", root, nested)}

        matches = dedupe_matches(outcomes)

        assert [m.identity for m in matches] == ["./owners", "svc/owners"]

    def test_tie_break_winners_are_included(self, make_rule: RuleFactory) -> None:
        outcome = FileMatchOutcome(file_path="svc/x.py")
        outcome.update_tie_break(make_rule("deep", scope_dir="svc"), 1)

        [match] = dedupe_matches({"svc/x.py": outcome})

        assert match.identity == "svc/deep"
        assert match.additional_files == set()

    def test_previously_seen_rules_are_excluded(self, make_rule: RuleFactory) -> None:
        seen_rule = make_rule("seen")
        fresh_rule = make_rule("fresh")
        outcomes = {"a.py": _outcome("a.py", seen_rule, fresh_rule)}

        matches = dedupe_matches(outcomes, previously_seen={"./seen"})

        assert [m.identity for m in matches] == ["./fresh"]

    def test_empty_outcomes_yield_empty_list(self) -> None:
        assert dedupe_matches({}) == []
        assert dedupe_matches({}, previously_seen={"./x"}) == []


class TestPersistence:
    def test_seen_rule_is_still_available_for_re_emission(self, make_rule: RuleFactory) -> None:
        seen_rule = make_rule("seen", actions={"labels": ["old"]})
        fresh_rule = make_rule("fresh")
        previous = {seen_rule.identity: seen_rule}
        matches = dedupe_matches({"a.py": _outcome("a.py", seen_rule, fresh_rule)})

        new_matches = exclude_seen(matches, previous.keys())
        persisted = merge_persisted_rules(matches, previous)

        assert [m.identity for m in new_matches] == ["./fresh"]
        assert [rule.identity for rule in persisted] == ["./seen", "./fresh"]
        assert persisted[0] is seen_rule

    def test_previous_rules_not_matched_now_are_kept(self, make_rule: RuleFactory) -> None:
        old_rule = make_rule("old", scope_dir="legacy")
        current = dedupe_matches({"a.py": _outcome("a.py", make_rule("now"))})

        persisted = merge_persisted_rules(current, {old_rule.identity: old_rule})

        assert [rule.identity for rule in persisted] == ["./now", "legacy/old"]
