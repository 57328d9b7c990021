from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PersistedGuardRecord(BaseModel):
    """Shape of one entry of the matches file shared between runs."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    dir: str = Field(min_length=1)
    paths: list[str] = Field(default_factory=list)
    filters: dict[str, Any] = Field(default_factory=dict)
    actions: dict[str, Any] = Field(default_factory=dict)
