from abc import ABC, abstractmethod
from collections.abc import Sequence

from domain_guard.core.domain.guard import GuardRule


class MatchStorePort(ABC):
    @abstractmethod
    def load_previous(self) -> dict[str, GuardRule]:
        """Returns the rules recorded by a previous run, keyed by rule identity."""
        pass

    @abstractmethod
    def save(self, rules: Sequence[GuardRule]) -> None:
        """Records the matched rules for the next run."""
        pass
