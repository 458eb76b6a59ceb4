"""Starred repository data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class RepositoryOwner(BaseModel):
    """Owner of a starred repository."""

    login: str = ""
    html_url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> "RepositoryOwner":
        """Create from the ``owner`` object of a REST API repository.

        Raises:
            ValueError: If ``owner`` is present but not an object
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Repository owner must be an object, got {type(data).__name__}")
        return cls(
            login=data.get("login") or "",
            html_url=data.get("html_url") or "",
        )


class StarredRepository(BaseModel):
    """A starred repository, normalized to the export schema.

    Field order matches the JSON export.
    """

    name: str = ""
    full_name: str = ""
    description: str | None = None
    html_url: str = ""
    stargazers_count: int = 0
    forks_count: int = 0
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    owner: RepositoryOwner = Field(default_factory=RepositoryOwner)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "StarredRepository":
        """Create from GitHub REST API response.

        Null counts are treated as zero and unknown fields are dropped.
        """
        return cls(
            name=data.get("name") or "",
            full_name=data.get("full_name") or "",
            description=data.get("description"),
            html_url=data.get("html_url") or "",
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            language=data.get("language"),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
            owner=RepositoryOwner.from_api(data.get("owner")),
        )

    def to_export(self) -> dict[str, Any]:
        """Return the JSON-ready record."""
        return self.model_dump(mode="json")


class StarredReport(BaseModel):
    """Output of a single report generation."""

    username: str
    markdown: str
    json_export: str
    count: int = 0
    repos: list[StarredRepository] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError, AttributeError):
        return None


def format_repo_data(repos: list[dict[str, Any]]) -> list[StarredRepository]:
    """Normalize raw API records, one output record per input, order preserved."""
    return [StarredRepository.from_api(r) for r in repos]
