from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class GuardActions:
    """Review actions requested when a guard rule fires."""

    comments: tuple[str, ...] = field(default_factory=tuple)
    reviewers: tuple[str, ...] = field(default_factory=tuple)
    assignees: tuple[str, ...] = field(default_factory=tuple)
    teams: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)

    def to_record(self) -> dict[str, Any]:
        return {
            "comments": list(self.comments),
            "reviewers": list(self.reviewers),
            "assignees": list(self.assignees),
            "teams": list(self.teams),
            "labels": list(self.labels),
        }
