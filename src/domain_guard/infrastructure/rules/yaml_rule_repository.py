"""Discovers guard configuration files under a repository root and loads their rules."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from domain_guard.core.application.ports import RuleSourcePort
from domain_guard.core.application.services.rule_loader import load_rules
from domain_guard.core.domain.guard import ROOT_SCOPE, GuardRule

logger = structlog.get_logger()


class YamlRuleRepository(RuleSourcePort):
    """Reads every ``*<suffix>`` file below ``root`` as YAML guard configuration.

    Rules are grouped by the file's directory relative to ``root`` (``"."`` for
    the root itself). A file that cannot be read or parsed is logged and skipped.
    """

    def __init__(self, root: Path, suffix: str = ".dg") -> None:
        self.root = root
        self.suffix = suffix

    def load_rules_by_scope(self) -> dict[str, list[GuardRule]]:
        results: dict[str, dict[str, GuardRule]] = {}
        for config_path in self._discover():
            parsed = self._read_config(config_path)
            if parsed is None:
                continue
            scope_dir = self._scope_for(config_path)
            scope_rules = results.setdefault(scope_dir, {})
            for rule in load_rules(parsed, scope_dir):
                scope_rules[rule.name] = rule
        return {scope: list(rules.values()) for scope, rules in results.items()}

    def _discover(self) -> list[Path]:
        if not self.root.is_dir():
            logger.warning("Rules root is not a directory", rules_root=str(self.root))
            return []
        return sorted(
            path for path in self.root.rglob(f"*{self.suffix}") if path.is_file()
        )

    def _scope_for(self, config_path: Path) -> str:
        relative = config_path.parent.relative_to(self.root).as_posix()
        return relative if relative not in ("", ".") else ROOT_SCOPE

    @staticmethod
    def _read_config(config_path: Path) -> dict[str, Any] | None:
        """Merge all YAML documents of the file; later documents override earlier keys."""
        try:
            content = config_path.read_text(encoding="utf-8")
            documents = list(yaml.safe_load_all(content))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            logger.warning(
                "Failed to read guard configuration file",
                config_path=str(config_path),
                error=str(exc),
            )
            return None
        merged: dict[str, Any] = {}
        for document in documents:
            if isinstance(document, dict):
                merged.update(document)
            elif document is not None:
                logger.warning(
                    "Ignoring non-mapping YAML document",
                    config_path=str(config_path),
                    value_type=type(document).__name__,
                )
        return merged
