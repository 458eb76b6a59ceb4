"""Exceptions for Starred Report.

Exception Hierarchy:
    StarredReportError (base)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   └── GitHubNotFoundError (404 not found)
    └── InvalidResponseError (body is not a JSON array of repository objects)
"""

__all__ = [
    "StarredReportError",
    "GitHubAPIError",
    "GitHubNotFoundError",
    "InvalidResponseError",
]


class StarredReportError(Exception):
    """Base exception for all Starred Report errors."""

    pass


class GitHubAPIError(StarredReportError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class InvalidResponseError(StarredReportError):
    """Raised when the starred endpoint returns something other than a list of objects."""

    def __init__(self, message: str, payload_type: str | None = None):
        super().__init__(message)
        self.payload_type = payload_type
