from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardSettings(BaseSettings):
    """Runtime settings for rule discovery, match persistence and action planning."""

    rules_root: Path = Field(default=Path("."), alias="DOMAIN_GUARD_RULES_ROOT")
    rule_file_suffix: str = Field(default=".dg", alias="DOMAIN_GUARD_RULE_SUFFIX")
    matches_file: Path = Field(
        default=Path("./runtime_data/matches.json"), alias="DOMAIN_GUARD_MATCHES_FILE"
    )
    max_assignees: int = Field(
        default=10,
        alias="DOMAIN_GUARD_MAX_ASSIGNEES",
        description="Hosting platforms cap how many users can be assigned at once",
    )
    summary_title: str = Field(
        default="Triggered Domain Guard rules:", alias="DOMAIN_GUARD_SUMMARY_TITLE"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("rule_file_suffix")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError(f"Rule file suffix must start with '.', got '{value}'")
        return value

    @field_validator("max_assignees")
    @classmethod
    def validate_max_assignees(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_assignees must be at least 1")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
