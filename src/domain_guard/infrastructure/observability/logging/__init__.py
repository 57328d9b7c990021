from domain_guard.infrastructure.observability.logging.guard_schema_processor import (
    guard_schema_processor,
)

__all__ = ["guard_schema_processor"]
