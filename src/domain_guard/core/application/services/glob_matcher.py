"""Glob dialect used by guard rule ``paths`` and ``exclude_paths``.

Shell-style ``fnmatch`` matching, case-sensitive: ``*`` also crosses ``/``.
Each pattern is tried against the path and its ``/``-anchored form so that
``**/name`` matches a root-level ``name``, and an inner ``/**/`` also
matches zero directories (``src/**/*.py`` matches ``src/app.py``).
"""

import fnmatch
import itertools
import posixpath

from domain_guard.core.domain.guard import ROOT_SCOPE, normalize_scope_dir


def glob_match(pattern: str, relative_path: str) -> bool:
    anchored = f"/{relative_path}"
    return any(
        fnmatch.fnmatchcase(relative_path, variant) or fnmatch.fnmatchcase(anchored, variant)
        for variant in _pattern_variants(pattern)
    )


def _pattern_variants(pattern: str) -> set[str]:
    # Each inner "/**/" may also stand for zero directories.
    parts = pattern.split("/**/")
    variants: set[str] = set()
    for separators in itertools.product(("/**/", "/"), repeat=len(parts) - 1):
        variant = parts[0]
        for separator, part in zip(separators, parts[1:]):
            variant += separator + part
        variants.add(variant)
    return variants


def matches_any(patterns: tuple[str, ...], relative_path: str) -> bool:
    return any(glob_match(pattern, relative_path) for pattern in patterns)


def relative_to_scope(file_path: str, scope_dir: str) -> str:
    """Posix path of ``file_path`` relative to ``scope_dir``."""
    path = file_path.replace("\\", "/")
    scope = normalize_scope_dir(scope_dir)
    if scope == ROOT_SCOPE:
        return posixpath.normpath(path)
    if path.startswith(f"{scope}/"):
        return path[len(scope) + 1 :]
    return posixpath.relpath(path, scope)
