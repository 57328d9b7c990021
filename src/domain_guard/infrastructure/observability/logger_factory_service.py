"""Logging setup for the Domain Guard CLI.

structlog events and plain ``logging`` records go through one
``ProcessorFormatter`` on stderr, so stdout only carries command results.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from domain_guard.infrastructure.observability.logging.guard_schema_processor import (
    guard_schema_processor,
)

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog and the stdlib root logger; later calls are no-ops.

    ``LOG_FORMAT`` (``json`` or ``console``) forces the renderer, otherwise
    deployed environments (``APP_ENV``) get JSON and everything else gets
    console output.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(pre_chain, _select_renderer()))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger().bind(component=component)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(pre_chain: list[Any], renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    # Only the JSON output is reshaped; console lines stay flat key=value.
    tail: list[Any] = [renderer]
    if isinstance(renderer, structlog.processors.JSONRenderer):
        tail = [guard_schema_processor, renderer]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if not log_format:
        app_env = os.environ.get("APP_ENV", "local").lower()
        log_format = "json" if app_env in _JSON_ENVIRONMENTS else "console"
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
