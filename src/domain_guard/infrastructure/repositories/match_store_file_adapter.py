import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from domain_guard.core.application.ports import MatchStorePort
from domain_guard.core.domain.guard import GuardRule
from domain_guard.core.exceptions import ConfigError
from domain_guard.infrastructure.repositories.persisted_guard_record import (
    PersistedGuardRecord,
)

logger = structlog.get_logger()


class MatchStoreFileAdapter(MatchStorePort):
    """Keeps the rules matched by previous runs in a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path

    def load_previous(self) -> dict[str, GuardRule]:
        previous: dict[str, GuardRule] = {}
        for entry in self._read_json():
            rule = self._to_rule(entry)
            if rule is not None:
                previous[rule.identity] = rule
        logger.info(
            "Loaded previous matches", match_count=len(previous), matches_file=str(self.file_path)
        )
        return previous

    def save(self, rules: Sequence[GuardRule]) -> None:
        self._write_json([rule.to_record() for rule in rules])
        logger.info("Matches written", match_count=len(rules), matches_file=str(self.file_path))

    def _read_json(self) -> list[Any]:
        if not self.file_path.exists():
            return []
        try:
            content = self.file_path.read_text(encoding="utf-8").strip()
            data = json.loads(content) if content else []
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Failed to read previous matches", error=str(e))
            return []
        if not isinstance(data, list):
            logger.warning("Previous matches file is not a JSON list", error=type(data).__name__)
            return []
        return data

    @staticmethod
    def _to_rule(entry: Any) -> GuardRule | None:
        try:
            record = PersistedGuardRecord.model_validate(entry)
            return GuardRule.from_record(record.model_dump())
        except (ValidationError, ConfigError) as e:
            logger.warning("Skipping invalid persisted match", error=str(e))
            return None

    def _write_json(self, data: list[dict[str, Any]]) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", dir=self.file_path.parent, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                json.dump(data, tmp, indent=2)
                tmp_path = tmp.name
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            logger.error("Failed to write matches file", error=str(e))
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
