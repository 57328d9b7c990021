"""structlog processor giving JSON log lines a stable Domain Guard layout.

Output keys: ``timestamp``, ``level``, ``service``, ``environment``,
``message`` and, when present, ``rule``, ``counts``, ``error`` and ``extra``.
"""

from __future__ import annotations

import os
from typing import Any

_RULE_KEYS = ("rule", "rule_name", "scope_dir", "file_path", "config_path")


def _pop_rule_block(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {key: event_dict.pop(key) for key in _RULE_KEYS if key in event_dict}


def _pop_counts_block(event_dict: dict[str, Any]) -> dict[str, Any]:
    count_keys = [key for key in event_dict if key.endswith("_count")]
    return {key.removesuffix("_count"): event_dict.pop(key) for key in count_keys}


def _pop_error_block(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    message = event_dict.pop("error", None)
    traceback = event_dict.pop("exception", None)
    if message is None and traceback is None:
        return None
    return {"message": message, "traceback": traceback}


def guard_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    shaped: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "domain-guard"),
        "environment": os.environ.get("APP_ENV", "local"),
        "message": event_dict.pop("event", ""),
    }
    for key, block in (
        ("rule", _pop_rule_block(event_dict)),
        ("counts", _pop_counts_block(event_dict)),
        ("error", _pop_error_block(event_dict)),
    ):
        if block:
            shaped[key] = block
    if event_dict:
        shaped["extra"] = dict(event_dict)
    return shaped
