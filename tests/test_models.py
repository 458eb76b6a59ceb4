"""Tests for data models."""

from datetime import datetime, timezone

import pytest

from starred_report.models.repository import (
    RepositoryOwner,
    StarredReport,
    StarredRepository,
    format_repo_data,
)

EXPORT_FIELDS = [
    "name",
    "full_name",
    "description",
    "html_url",
    "stargazers_count",
    "forks_count",
    "language",
    "created_at",
    "updated_at",
    "owner",
]


class TestStarredRepository:
    """Tests for StarredRepository model."""

    def test_from_api(self, repo_factory):
        """Test creating StarredRepository from API response."""
        repo = StarredRepository.from_api(
            repo_factory("linux", stars=180000, forks=53000, owner="torvalds", language="C")
        )

        assert repo.name == "linux"
        assert repo.full_name == "torvalds/linux"
        assert repo.html_url == "https://github.com/torvalds/linux"
        assert repo.stargazers_count == 180000
        assert repo.forks_count == 53000
        assert repo.language == "C"
        assert repo.owner.login == "torvalds"
        assert repo.owner.html_url == "https://github.com/torvalds"
        assert repo.created_at == datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_from_api_missing_fields(self):
        """Test creating StarredRepository with missing optional fields."""
        repo = StarredRepository.from_api({"name": "minimal"})

        assert repo.name == "minimal"
        assert repo.description is None
        assert repo.language is None
        assert repo.stargazers_count == 0
        assert repo.forks_count == 0
        assert repo.created_at is None
        assert repo.owner == RepositoryOwner()

    def test_from_api_null_counts(self, repo_factory):
        """Null counts are normalized to zero."""
        data = repo_factory("nulls", stargazers_count=None, forks_count=None)
        data["owner"] = None

        repo = StarredRepository.from_api(data)

        assert repo.stargazers_count == 0
        assert repo.forks_count == 0
        assert repo.owner.login == ""

    @pytest.mark.parametrize("owner", ["octocat", ["x"], 42])
    def test_from_api_owner_not_an_object(self, repo_factory, owner):
        """A non-object owner is rejected with ValueError."""
        data = repo_factory("odd-owner")
        data["owner"] = owner

        with pytest.raises(ValueError, match="owner must be an object"):
            StarredRepository.from_api(data)

    @pytest.mark.parametrize(
        "field, value",
        [("name", 123), ("stargazers_count", "many")],
    )
    def test_from_api_wrong_types(self, repo_factory, field, value):
        """Wrong-typed fields fail validation as ValueError."""
        data = repo_factory("wrong-types")
        data[field] = value

        with pytest.raises(ValueError):
            StarredRepository.from_api(data)

    def test_from_api_bad_timestamp(self, repo_factory):
        """Unparsable timestamps become None."""
        repo = StarredRepository.from_api(repo_factory("odd", updated_at="yesterday"))

        assert repo.updated_at is None
        assert repo.created_at is not None

    def test_to_export_field_set(self, repo_factory):
        """Export has exactly the fixed field set, in order."""
        export = StarredRepository.from_api(repo_factory("hello-world")).to_export()

        assert list(export) == EXPORT_FIELDS
        assert export["owner"] == {
            "login": "octocat",
            "html_url": "https://github.com/octocat",
        }
        assert export["created_at"] == "2020-01-01T00:00:00Z"
        assert export["updated_at"] == "2024-06-01T12:30:00Z"
        assert "topics" not in export
        assert "pushed_at" not in export


class TestFormatRepoData:
    """Tests for format_repo_data."""

    def test_one_record_per_input(self, starred_payload):
        """Each input record yields exactly one output record, in order."""
        repos = format_repo_data(starred_payload)

        assert len(repos) == len(starred_payload)
        assert [r.name for r in repos] == ["hello-world", "linux", "spoon-knife"]

    def test_empty_input(self):
        """Empty input gives empty output."""
        assert format_repo_data([]) == []


class TestStarredReport:
    """Tests for StarredReport model."""

    def test_defaults(self):
        """Test report defaults."""
        report = StarredReport(username="octocat", markdown="# x", json_export="[]")

        assert report.count == 0
        assert report.repos == []
        assert isinstance(report.generated_at, datetime)
