from domain_guard.infrastructure.rules.yaml_rule_repository import YamlRuleRepository

__all__ = ["YamlRuleRepository"]
