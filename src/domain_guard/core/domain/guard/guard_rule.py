"""Guard rule entity: path globs, content filter and review actions."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from domain_guard.core.domain.guard.raw_config import (
    as_mapping,
    enum_or,
    string_or,
    string_tuple,
)
from domain_guard.core.domain.guard.scope import normalize_scope_dir
from domain_guard.core.domain.guard.value_objects import (
    MATCH_EVERYTHING,
    ContentScope,
    GuardActions,
    GuardFilters,
    TieBreakMode,
)
from domain_guard.core.exceptions import ConfigError, RulePatternError


@dataclass(frozen=True, kw_only=True)
class GuardRule:
    """A named guard declared in the configuration file of ``scope_dir``.

    ``name`` is only unique within its scope, so the rule identity is
    ``"<scope_dir>/<name>"``. The content pattern is compiled with DOTALL
    semantics on construction; an invalid pattern rejects the rule.
    """

    name: str
    scope_dir: str
    paths: tuple[str, ...] = field(default_factory=tuple)
    filters: GuardFilters = field(default_factory=GuardFilters)
    actions: GuardActions = field(default_factory=GuardActions)
    content_regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scope_dir", normalize_scope_dir(self.scope_dir))
        try:
            compiled = re.compile(self.filters.content_pattern, re.DOTALL)
        except (re.error, OverflowError, RecursionError) as exc:
            raise RulePatternError(
                f"Invalid diff_regex for rule '{self.name}': {exc}",
                context={
                    "rule_name": self.name,
                    "scope_dir": self.scope_dir,
                    "pattern": self.filters.content_pattern,
                },
            ) from exc
        object.__setattr__(self, "content_regex", compiled)

    @property
    def identity(self) -> str:
        return f"{self.scope_dir}/{self.name}"

    @classmethod
    def from_config(cls, name: str, raw: Any, scope_dir: str) -> "GuardRule":
        """Build a rule from a parsed configuration record.

        Only a non-mapping record is an error; every optional field falls back
        to its default when missing or mistyped.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError(
                f"Rule '{name}' must be a mapping, got {type(raw).__name__}",
                context={"rule_name": name, "scope_dir": scope_dir},
            )
        raw_filters = as_mapping(raw.get("filters"))
        raw_actions = as_mapping(raw.get("actions"))
        filters = GuardFilters(
            content_pattern=string_or(raw_filters.get("diff_regex"), MATCH_EVERYTHING),
            content_scope=enum_or(ContentScope, raw_filters.get("diff_type"), ContentScope.ALL),
            tie_break_mode=enum_or(TieBreakMode, raw_filters.get("quirk"), TieBreakMode.ALL),
            exclude_paths=string_tuple(raw_filters.get("exclude_paths")),
        )
        actions = GuardActions(
            comments=string_tuple(raw_actions.get("comments")),
            reviewers=string_tuple(raw_actions.get("reviewers")),
            assignees=string_tuple(raw_actions.get("assignees")),
            teams=string_tuple(raw_actions.get("teams")),
            labels=string_tuple(raw_actions.get("labels")),
        )
        return cls(
            name=name,
            scope_dir=scope_dir,
            paths=string_tuple(raw.get("paths")),
            filters=filters,
            actions=actions,
        )

    @classmethod
    def from_record(cls, record: Any) -> "GuardRule":
        """Rebuild a rule from the flat record produced by :meth:`to_record`."""
        if not isinstance(record, Mapping):
            raise ConfigError(f"Invalid guard record: {type(record).__name__}")
        name = string_or(record.get("name"), "")
        scope_dir = string_or(record.get("dir"), ".")
        return cls.from_config(name, record, scope_dir)

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "dir": self.scope_dir,
            "paths": list(self.paths),
            "filters": self.filters.to_record(),
            "actions": self.actions.to_record(),
        }

    def summary(self) -> str:
        """Multi-line, human-readable description of the rule's actions."""
        text = f"{self.identity}:\n"
        listed = (
            ("Assignees", self.actions.assignees),
            ("Reviewers", self.actions.reviewers),
            ("Teams", self.actions.teams),
            ("Labels", self.actions.labels),
        )
        for label, values in listed:
            if values:
                text += f"  - {label}: [{', '.join(values)}]\n"
        if self.actions.comments:
            text += f"  - Comments: [{len(self.actions.comments)} comment(s)]\n"
        return text
