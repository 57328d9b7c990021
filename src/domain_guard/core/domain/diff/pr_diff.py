from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from domain_guard.core.domain.diff.file_diff import FileDiff


@dataclass(frozen=True, kw_only=True)
class PRDiff:
    """Full change set for one comparison, keyed by post-change file path.

    Key order follows the order in which file headers appear in ``full_diff``.
    """

    full_diff: str
    file_diffs: Mapping[str, FileDiff] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_diffs", MappingProxyType(dict(self.file_diffs)))

    def get_file_diff(self, file_path: str) -> FileDiff | None:
        return self.file_diffs.get(file_path)

    def file_paths(self) -> list[str]:
        return list(self.file_diffs)

    def total_added_count(self) -> int:
        return sum(len(fd.added_lines) for fd in self.file_diffs.values())

    def total_deleted_count(self) -> int:
        return sum(len(fd.deleted_lines) for fd in self.file_diffs.values())

    def total_changed_count(self) -> int:
        return self.total_added_count() + self.total_deleted_count()

    def summary(self) -> dict[str, Any]:
        return {
            "file_count": len(self.file_diffs),
            "total_added_count": self.total_added_count(),
            "total_deleted_count": self.total_deleted_count(),
            "total_changed_count": self.total_changed_count(),
            "files": [fd.summary() for fd in self.file_diffs.values()],
        }
