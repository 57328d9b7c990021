"""Build GuardRule objects from already-parsed configuration data.

A broken rule never aborts loading: it is logged with its name and scope
directory and left out, while its siblings still load.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.exceptions import ConfigError

logger = structlog.get_logger()


def load_rule(name: str, raw_record: Any, scope_dir: str) -> GuardRule:
    """Raise ConfigError for a non-mapping record or an invalid content pattern."""
    return GuardRule.from_config(name, raw_record, scope_dir)


def load_rules(parsed: Any, scope_dir: str) -> list[GuardRule]:
    """One rule per top-level key of a parsed configuration unit."""
    if not isinstance(parsed, Mapping):
        if parsed is not None:
            logger.warning(
                "Ignoring non-mapping guard configuration",
                scope_dir=scope_dir,
                value_type=type(parsed).__name__,
            )
        return []
    rules: list[GuardRule] = []
    for name, raw_record in parsed.items():
        try:
            rules.append(load_rule(str(name), raw_record, scope_dir))
        except ConfigError as exc:
            logger.warning(
                "Skipping invalid guard rule",
                rule_name=str(name),
                scope_dir=scope_dir,
                error=str(exc),
            )
    return rules


def load_records(records: Any) -> list[GuardRule]:
    """Rebuild rules from persisted ``to_record`` output, skipping bad entries."""
    if not isinstance(records, list):
        return []
    rules: list[GuardRule] = []
    for record in records:
        try:
            rules.append(GuardRule.from_record(record))
        except ConfigError as exc:
            logger.warning("Skipping invalid persisted guard record", error=str(exc))
    return rules
