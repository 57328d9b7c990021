"""Collapse per-file outcomes into one record per rule."""

from collections.abc import Collection, Iterable, Mapping

from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.domain.matching import AggregatedRuleMatch, FileMatchOutcome


def dedupe_matches(
    outcomes: Mapping[str, FileMatchOutcome],
    previously_seen: Collection[str] | None = None,
) -> list[AggregatedRuleMatch]:
    """Group (file, rule) pairs by rule identity.

    The first file met for a rule, in ``outcomes`` order, becomes its anchor.
    Rules whose identity is in ``previously_seen`` are left out.
    """
    grouped: dict[str, AggregatedRuleMatch] = {}
    for file_path, outcome in outcomes.items():
        for rule in outcome.matches():
            match = grouped.get(rule.identity)
            if match is None:
                grouped[rule.identity] = AggregatedRuleMatch(rule=rule, anchor_file=file_path)
            else:
                match.add_file_path(file_path)
    matches = list(grouped.values())
    if previously_seen:
        return exclude_seen(matches, previously_seen)
    return matches


def exclude_seen(
    matches: Iterable[AggregatedRuleMatch], previously_seen: Collection[str]
) -> list[AggregatedRuleMatch]:
    seen = set(previously_seen)
    return [match for match in matches if match.identity not in seen]


def merge_persisted_rules(
    matches: Iterable[AggregatedRuleMatch], previous: Mapping[str, GuardRule]
) -> list[GuardRule]:
    """Rules to record for the next run, unique by identity.

    Current matches come first; a previously recorded rule is kept unchanged.
    """
    merged: dict[str, GuardRule] = {
        match.identity: previous.get(match.identity, match.rule) for match in matches
    }
    for identity, rule in previous.items():
        merged.setdefault(identity, rule)
    return list(merged.values())
