from domain_guard.core.exceptions.domain_guard_error import (
    ConfigError,
    DomainGuardError,
    RulePatternError,
    WorkflowExecutionError,
)

__all__ = [
    "ConfigError",
    "DomainGuardError",
    "RulePatternError",
    "WorkflowExecutionError",
]
