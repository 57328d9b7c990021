"""Exception hierarchy shared by every Domain Guard layer.

Each error carries a ``context`` dict so callers can log structured details
without string-matching on messages.
"""

from typing import Any


class DomainGuardError(Exception):
    """Base exception for all Domain Guard errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ConfigError(DomainGuardError):
    """Raised when a guard rule record is structurally invalid."""


class RulePatternError(ConfigError):
    """Raised when a rule's content pattern is not a valid regular expression."""


class WorkflowExecutionError(DomainGuardError):
    """Raised when the evaluation workflow cannot complete one of its steps."""
