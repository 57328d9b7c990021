from enum import StrEnum


class ContentScope(StrEnum):
    """Subset of a file diff that a rule's content pattern is tested against."""

    ALL = "all"
    ADDITIONS = "additions"
    REMOVALS = "removals"
    RAW = "raw"
