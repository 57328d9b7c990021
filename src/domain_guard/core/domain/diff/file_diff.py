"""Structured representation of a single file's changes within a unified diff."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class FileDiff:
    """One file block of a multi-file diff.

    ``added_lines`` and ``deleted_lines`` hold line content with the leading
    ``+``/``-`` marker stripped; ``+++``/``---`` file headers never appear in them.
    """

    file_path: str
    raw_diff: str
    added_lines: tuple[str, ...] = field(default_factory=tuple)
    deleted_lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def changed_lines(self) -> tuple[str, ...]:
        """Added lines followed by deleted lines (concatenated, not interleaved)."""
        return self.added_lines + self.deleted_lines

    def summary(self) -> dict[str, int | str]:
        return {
            "file_path": self.file_path,
            "added_count": len(self.added_lines),
            "deleted_count": len(self.deleted_lines),
            "changed_count": len(self.added_lines) + len(self.deleted_lines),
        }
