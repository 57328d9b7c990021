from dataclasses import dataclass, field
from typing import Any

from domain_guard.core.domain.guard import GuardRule


@dataclass
class AggregatedRuleMatch:
    """One rule's footprint across the diff.

    ``anchor_file`` hosts the rule's review comment; ``additional_files``
    holds every other file the rule matched.
    """

    rule: GuardRule
    anchor_file: str
    additional_files: set[str] = field(default_factory=set)

    @property
    def identity(self) -> str:
        return self.rule.identity

    def add_file_path(self, file_path: str) -> None:
        if file_path != self.anchor_file:
            self.additional_files.add(file_path)

    def all_files(self) -> list[str]:
        return [self.anchor_file, *sorted(self.additional_files)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.identity,
            "anchor_file": self.anchor_file,
            "additional_files": sorted(self.additional_files),
        }
