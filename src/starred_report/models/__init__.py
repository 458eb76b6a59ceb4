"""Data models for Starred Report."""

from starred_report.models.repository import (
    RepositoryOwner,
    StarredReport,
    StarredRepository,
    format_repo_data,
)

__all__ = [
    "RepositoryOwner",
    "StarredRepository",
    "StarredReport",
    "format_repo_data",
]
