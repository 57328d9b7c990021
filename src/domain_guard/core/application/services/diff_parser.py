"""Pure functions for splitting a multi-file unified diff into FileDiff objects."""

import re

import structlog

from domain_guard.core.domain.diff import FileDiff, PRDiff

logger = structlog.get_logger()

_FILE_HEADER_RE = re.compile(r"^diff --git a/(.*?) b/(.*)$")


def parse_diff(raw_diff: str) -> dict[str, FileDiff]:
    """Map each post-change file path to its FileDiff, in header order.

    A block runs from its ``diff --git`` header up to the next header or the
    end of input; a header with no line after it is dropped. Text before the
    first header is ignored and a repeated path keeps the last block. Never
    raises.
    """
    file_diffs: dict[str, FileDiff] = {}
    current_path: str | None = None
    current_lines: list[str] = []
    for line in raw_diff.split("\n"):
        header = _FILE_HEADER_RE.match(line)
        if header is None:
            current_lines.append(line)
            continue
        _store_block(file_diffs, current_path, current_lines)
        current_path = header.group(2)
        current_lines = [line]
    _store_block(file_diffs, current_path, current_lines)
    logger.debug("Diff parsed", file_count=len(file_diffs))
    return file_diffs


def parse_pr_diff(raw_diff: str) -> PRDiff:
    return PRDiff(full_diff=raw_diff, file_diffs=parse_diff(raw_diff))


def build_file_diff(file_path: str, raw_diff: str) -> FileDiff:
    """Extract added and deleted lines of one file block, skipping file headers."""
    added: list[str] = []
    deleted: list[str] = []
    for line in raw_diff.split("\n"):
        if line.startswith(("+++", "---")):
            continue
        if line.startswith("+"):
            added.append(line[1:])
        elif line.startswith("-"):
            deleted.append(line[1:])
    return FileDiff(
        file_path=file_path,
        raw_diff=raw_diff,
        added_lines=tuple(added),
        deleted_lines=tuple(deleted),
    )


def _store_block(file_diffs: dict[str, FileDiff], path: str | None, lines: list[str]) -> None:
    if path is None or len(lines) < 2:
        return
    file_diffs[path] = build_file_diff(path, "\n".join(lines))
