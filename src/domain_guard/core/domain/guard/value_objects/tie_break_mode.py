from enum import StrEnum


class TieBreakMode(StrEnum):
    """How a matching rule competes with rules from other scopes.

    ``ALL`` always applies; ``LAST_MATCH`` only applies when declared in the
    deepest scope that produced a ``LAST_MATCH`` hit for the file.
    """

    ALL = "all"
    LAST_MATCH = "last_match"
