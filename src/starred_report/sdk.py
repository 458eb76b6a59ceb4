"""Starred Report SDK - fetch, format and export a user's starred repositories."""

import logging
from pathlib import Path
from typing import Any

import httpx

from starred_report.config import Config, get_config
from starred_report.exceptions import StarredReportError
from starred_report.models.repository import (
    StarredReport,
    StarredRepository,
    format_repo_data,
)
from starred_report.output.json_writer import build_json_export, write_json_report
from starred_report.output.markdown_writer import generate_markdown, write_markdown_report
from starred_report.services.github_rest_client import GitHubRestClient
from starred_report.services.starred_collector import StarredCollector

logger = logging.getLogger(__name__)


class StarredRepos:
    """High-level API for a user's starred repositories.

    Example usage:
        ```python
        from starred_report import StarredRepos

        async with StarredRepos("octocat") as starred:
            report = await starred.generate_report()
            if report:
                starred.save_report(report)
        ```

    Args:
        username: GitHub user whose stars are reported
        config: Configuration (defaults to the global config)
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        username: str | None = None,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config or get_config()
        self.username = username or self._config.username
        self._transport = transport
        self._rest_client: GitHubRestClient | None = None
        self._initialized = False

    @property
    def api_url(self) -> str:
        """Endpoint the stars are fetched from."""
        return f"{self._config.github_api_url.rstrip('/')}/users/{self.username}/starred"

    async def __aenter__(self) -> "StarredRepos":
        """Async context manager entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize the HTTP client."""
        if self._initialized:
            return

        self._rest_client = GitHubRestClient(
            config=self._config,
            transport=self._transport,
        )
        self._initialized = True
        logger.debug("StarredRepos initialized for %s", self.username)

    async def close(self) -> None:
        """Close the HTTP connection."""
        if self._rest_client:
            await self._rest_client.close()
        self._initialized = False

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise StarredReportError(
                "Client not initialized. Use 'async with StarredRepos(...) as starred:'"
            )

    async def fetch_starred_repos(self) -> list[dict[str, Any]] | None:
        """Fetch the raw starred repository objects.

        Returns:
            The decoded JSON array, or None if fetching failed
        """
        self._ensure_initialized()
        collector = StarredCollector(self._rest_client)
        return await collector.fetch_starred_raw(self.username)

    def format_repo_data(self, repos: list[dict[str, Any]]) -> list[StarredRepository]:
        """Normalize raw API records to the export schema."""
        return format_repo_data(repos)

    def generate_markdown(self, repos: list[dict[str, Any]]) -> str:
        """Render the Markdown report for raw API records."""
        return generate_markdown(
            self.username,
            self.format_repo_data(repos),
            top_n=self._config.top_n,
            description_limit=self._config.description_limit,
        )

    async def generate_report(self) -> StarredReport | None:
        """Fetch the stars and build both report formats.

        Returns:
            StarredReport, or None if the repositories could not be fetched
        """
        logger.info("Fetching starred repositories for %s...", self.username)

        raw = await self.fetch_starred_repos()
        if raw is None:
            logger.error("Failed to fetch repositories")
            return None

        try:
            repos = self.format_repo_data(raw)
        except ValueError as e:
            logger.error("Failed to normalize repositories: %s", e)
            return None

        logger.info("Found %d starred repositories", len(raw))

        return StarredReport(
            username=self.username,
            markdown=generate_markdown(
                self.username,
                repos,
                top_n=self._config.top_n,
                description_limit=self._config.description_limit,
            ),
            json_export=build_json_export(repos),
            count=len(raw),
            repos=repos,
        )

    def save_report(
        self,
        report: StarredReport,
        markdown_path: Path | None = None,
        json_path: Path | None = None,
    ) -> tuple[Path, Path]:
        """Write the Markdown and JSON outputs.

        Paths default to the configured ones (README.md and starred-repos.json).
        """
        markdown_file = write_markdown_report(
            report.markdown, markdown_path or Path(self._config.markdown_path)
        )
        json_file = write_json_report(
            report.json_export, json_path or Path(self._config.json_path)
        )
        logger.info("Files saved: %s and %s", markdown_file, json_file)
        return markdown_file, json_file
