from domain_guard.infrastructure.configuration.guard_settings import GuardSettings

__all__ = ["GuardSettings"]
