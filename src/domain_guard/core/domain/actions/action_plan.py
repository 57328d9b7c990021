from dataclasses import dataclass, field
from typing import Any

from domain_guard.core.domain.actions.review_comment import ReviewComment


@dataclass
class ActionPlan:
    """Review actions to perform on the pull request for newly matched rules."""

    summary: str
    comments: list[ReviewComment] = field(default_factory=list)
    reviewers: list[str] = field(default_factory=list)
    teams: list[str] = field(default_factory=list)
    assignees: list[str] = field(default_factory=list)
    assignee_overflow: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.comments or self.reviewers or self.teams or self.assignees or self.labels)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "comments": [
                {"path": c.path, "body": c.body, "position": c.position} for c in self.comments
            ],
            "reviewers": self.reviewers,
            "teams": self.teams,
            "assignees": self.assignees,
            "assignee_overflow": self.assignee_overflow,
            "labels": self.labels,
        }
