from domain_guard.core.domain.diff.file_diff import FileDiff
from domain_guard.core.domain.diff.pr_diff import PRDiff

__all__ = ["FileDiff", "PRDiff"]
