"""Services for starred repository collection."""

from starred_report.services.github_rest_client import GitHubRestClient
from starred_report.services.starred_collector import StarredCollector

__all__ = [
    "GitHubRestClient",
    "StarredCollector",
]
