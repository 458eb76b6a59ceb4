"""GitHub REST API client."""

import logging
from typing import Any, Optional

import httpx

from starred_report._version import version as __version__
from starred_report.config import Config, get_config
from starred_report.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    InvalidResponseError,
)

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for the GitHub REST API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"starred-report/{__version__}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make an API request and raise on error status codes."""
        client = await self._get_client()
        logger.debug("%s %s", method, endpoint)
        response = await client.request(method, endpoint, **kwargs)

        if response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                status_code=404,
                response_body=_safe_body(response),
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        elif response.status_code >= 400:
            body = _safe_body(response) or {}
            raise GitHubAPIError(
                f"HTTP error! status: {response.status_code} "
                f"({body.get('message', 'Unknown error')})",
                status_code=response.status_code,
                response_body=body,
            )

        return response

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return the decoded JSON body."""
        response = await self._request("GET", endpoint, **kwargs)
        return response.json()

    async def get_starred_repos(self, username: str) -> list[dict[str, Any]]:
        """Get the repositories starred by a user.

        Only the first page the API returns is fetched.

        Raises:
            GitHubAPIError: On an error status code
            InvalidResponseError: If the body is not a list of objects
            ValueError: If the body is not valid JSON
        """
        data = await self.get(f"/users/{username}/starred")

        if not isinstance(data, list):
            raise InvalidResponseError(
                f"Expected a JSON array of repositories, got {type(data).__name__}",
                payload_type=type(data).__name__,
            )
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise InvalidResponseError(
                    f"Repository at index {index} is {type(item).__name__}, not an object",
                    payload_type=type(item).__name__,
                )

        return data


def _safe_body(response: httpx.Response) -> Optional[dict]:
    """Decode an error body if it is a JSON object."""
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
