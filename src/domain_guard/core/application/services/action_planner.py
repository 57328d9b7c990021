"""Turn newly matched rules into the review actions to request on the pull request."""

from collections.abc import Iterable, Sequence

from domain_guard.core.domain.actions import ActionPlan, ReviewComment
from domain_guard.core.domain.matching import AggregatedRuleMatch

DEFAULT_SUMMARY_TITLE = "Triggered Domain Guard rules:"
DEFAULT_MAX_ASSIGNEES = 10


def plan_actions(
    matches: Sequence[AggregatedRuleMatch],
    max_assignees: int = DEFAULT_MAX_ASSIGNEES,
    summary_title: str = DEFAULT_SUMMARY_TITLE,
) -> ActionPlan:
    summary = summary_title
    comments: list[ReviewComment] = []
    for match in matches:
        comments.extend(_build_comments(match))
        summary += f"\n{match.rule.summary()}"

    assignees = _unique(a for m in matches for a in m.rule.actions.assignees)
    return ActionPlan(
        summary=summary,
        comments=comments,
        reviewers=_unique(r for m in matches for r in m.rule.actions.reviewers),
        teams=_unique(t for m in matches for t in m.rule.actions.teams),
        assignees=assignees[:max_assignees],
        assignee_overflow=assignees[max_assignees:],
        labels=_unique(label for m in matches for label in m.rule.actions.labels),
    )


def _build_comments(match: AggregatedRuleMatch) -> list[ReviewComment]:
    context = ""
    if match.additional_files:
        listed = "\n".join(f"- {path}" for path in sorted(match.additional_files))
        context = f"\n\n_Also affects files:_\n{listed}"
    return [
        ReviewComment(path=match.anchor_file, body=f"{comment}{context}")
        for comment in match.rule.actions.comments
    ]


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))
