from domain_guard.core.application.services.glob_matcher import matches_any, relative_to_scope
from domain_guard.core.domain.diff import FileDiff
from domain_guard.core.domain.guard import ContentScope, GuardRule


def matches_path(rule: GuardRule, file_path: str) -> bool:
    """Exclusions win; an empty ``paths`` list accepts every remaining file."""
    rel = relative_to_scope(file_path, rule.scope_dir)
    if matches_any(rule.filters.exclude_paths, rel):
        return False
    if not rule.paths:
        return True
    return matches_any(rule.paths, rel)


def content_subject(rule: GuardRule, file_diff: FileDiff) -> str:
    """Text the rule's content pattern is searched in, per its content scope."""
    scope = rule.filters.content_scope
    if scope is ContentScope.ADDITIONS:
        return "\n".join(file_diff.added_lines)
    if scope is ContentScope.REMOVALS:
        return "\n".join(file_diff.deleted_lines)
    if scope is ContentScope.RAW:
        return file_diff.raw_diff
    return "\n".join(file_diff.changed_lines)


def matches_content(rule: GuardRule, file_diff: FileDiff) -> bool:
    return rule.content_regex.search(content_subject(rule, file_diff)) is not None


def matches_rule(rule: GuardRule, file_diff: FileDiff) -> bool:
    """True when both the path test and the content test pass for this file."""
    return matches_path(rule, file_diff.file_path) and matches_content(rule, file_diff)
