from domain_guard.infrastructure.repositories.match_store_file_adapter import (
    MatchStoreFileAdapter,
)
from domain_guard.infrastructure.repositories.persisted_guard_record import (
    PersistedGuardRecord,
)

__all__ = ["MatchStoreFileAdapter", "PersistedGuardRecord"]
