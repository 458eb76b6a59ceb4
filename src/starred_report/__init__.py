"""Starred Report - Markdown and JSON reports of a GitHub user's starred repositories.

Fetches the user's starred repositories, normalizes them to a fixed schema,
and renders a ranked Markdown report plus a JSON export.

Example usage:
    ```python
    from starred_report import StarredRepos

    async with StarredRepos("octocat") as starred:
        report = await starred.generate_report()
        print(report.markdown)
    ```
"""

from starred_report._version import version as __version__
from starred_report.config import Config
from starred_report.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    InvalidResponseError,
    StarredReportError,
)
from starred_report.models import (
    RepositoryOwner,
    StarredReport,
    StarredRepository,
)
from starred_report.sdk import StarredRepos

__all__ = [
    # Main SDK class
    "StarredRepos",
    # Configuration
    "Config",
    # Exceptions
    "StarredReportError",
    "GitHubAPIError",
    "GitHubNotFoundError",
    "InvalidResponseError",
    # Models
    "RepositoryOwner",
    "StarredRepository",
    "StarredReport",
    "__version__",
]
