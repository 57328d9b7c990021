"""Scope directory helpers: normalisation, containment and precedence depth."""

ROOT_SCOPE = "."


def normalize_scope_dir(scope_dir: str) -> str:
    """Posix-style, no leading ``./`` and no trailing ``/``; empty means root."""
    normalized = scope_dir.replace("\\", "/").strip()
    while normalized.startswith("./"):
        normalized = normalized[2:]
    normalized = normalized.rstrip("/")
    return normalized or ROOT_SCOPE


def scope_depth(scope_dir: str) -> int:
    """Number of path segments in the scope; the root scope counts as one."""
    return len(normalize_scope_dir(scope_dir).split("/"))


def scope_applies_to(scope_dir: str, file_path: str) -> bool:
    """True when ``file_path`` lives under ``scope_dir`` (segment-aware prefix)."""
    scope = normalize_scope_dir(scope_dir)
    if scope == ROOT_SCOPE:
        return True
    path = file_path.replace("\\", "/")
    return path == scope or path.startswith(f"{scope}/")
