from domain_guard.core.application.ports.match_store_port import MatchStorePort
from domain_guard.core.application.ports.rule_source_port import RuleSourcePort

__all__ = ["MatchStorePort", "RuleSourcePort"]
