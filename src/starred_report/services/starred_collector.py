"""Starred repository collector service."""

import logging
from typing import Any

import httpx

from starred_report.exceptions import StarredReportError
from starred_report.models.repository import StarredRepository, format_repo_data
from starred_report.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class StarredCollector:
    """Collects a user's starred repositories.

    Failures never propagate: a failed fetch is logged and reported as ``None``.
    """

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def fetch_starred_raw(self, username: str) -> list[dict[str, Any]] | None:
        """Fetch the raw starred repository objects.

        Returns:
            The decoded JSON array, or None if the request or decoding failed
        """
        logger.debug("Fetching starred repositories for %s", username)

        try:
            repos = await self.rest_client.get_starred_repos(username)
        except (httpx.HTTPError, StarredReportError, ValueError) as e:
            logger.error("Error fetching starred repositories: %s", e)
            return None

        logger.debug("Received %d starred repositories", len(repos))
        return repos

    async def collect_starred(self, username: str) -> list[StarredRepository] | None:
        """Fetch and normalize the starred repositories.

        Returns:
            One StarredRepository per API record, or None on failure
        """
        raw = await self.fetch_starred_raw(username)
        if raw is None:
            return None

        try:
            return format_repo_data(raw)
        except ValueError as e:
            logger.error("Error normalizing starred repositories: %s", e)
            return None
