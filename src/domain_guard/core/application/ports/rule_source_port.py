from abc import ABC, abstractmethod

from domain_guard.core.domain.guard import GuardRule


class RuleSourcePort(ABC):
    @abstractmethod
    def load_rules_by_scope(self) -> dict[str, list[GuardRule]]:
        """Returns every active guard rule grouped by its declaring scope directory."""
        pass
