"""Unified data models for the plugin registry."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Canonical category tags emitted in the registry
CATEGORIES = (
    "productivity",
    "development",
    "ai",
    "data",
    "finance",
    "communication",
    "security",
    "utility",
    "integration",
)
DEFAULT_CATEGORY = "utility"

InstallType = Literal["pip", "npm", "go", "manual"]

# Zero value for unknown timestamps
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class Plugin(BaseModel):
    """A single registry entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Slug derived from the name")
    name: str = Field(min_length=1, description="Display name")
    description: str = Field(default="", description="Free text description")
    category: str = Field(
        default=DEFAULT_CATEGORY, description="Canonical category tag"
    )
    tags: Optional[list[str]] = Field(default=None, description="Free-text labels")
    license: Optional[str] = Field(default=None, description="SPDX identifier")
    repository: str = Field(
        min_length=1, description="Repository URL, unique within the registry"
    )
    author: str = Field(default="", description="Repository owner handle")

    # Enrichment (zero values when the metadata source had nothing)
    popularity: int = Field(default=0, ge=0, alias="stars")
    updated_at: datetime = Field(default=ZERO_TIME)
    primary_language: str = Field(default="", alias="language")
    install_type: InstallType = Field(default="manual")
    package: str = Field(default="", description="Install locator")

    verified: bool = False
    official: bool = False

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str) -> str:
        if value not in CATEGORIES:
            raise ValueError(f"unknown category {value!r}")
        return value

    def to_json(self) -> dict:
        """Dump in the registry wire format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GitHubLicense(BaseModel):
    spdx_id: Optional[str] = None


class GitHubRepo(BaseModel):
    """The subset of the GitHub repository payload the enricher reads."""

    stargazers_count: int = 0
    language: Optional[str] = None
    license: Optional[GitHubLicense] = None
    pushed_at: Optional[datetime] = None
