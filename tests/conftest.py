"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

from starred_report.config import Config, set_config


def make_repo(
    name: str,
    stars: int = 0,
    forks: int = 0,
    owner: str = "octocat",
    **extra: Any,
) -> dict[str, Any]:
    """Build a starred repository object shaped like the REST API response."""
    data = {
        "id": 1000 + len(name),
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": f"{name} description",
        "html_url": f"https://github.com/{owner}/{name}",
        "stargazers_count": stars,
        "watchers_count": stars,
        "forks_count": forks,
        "language": "Python",
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-06-01T12:30:00Z",
        "pushed_at": "2024-06-01T12:30:00Z",
        "topics": ["example"],
        "owner": {
            "login": owner,
            "id": 1,
            "html_url": f"https://github.com/{owner}",
            "type": "User",
        },
    }
    data.update(extra)
    return data


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(
        username="octocat",
        github_api_url="https://api.github.com",
    )
    set_config(config)
    return config


@pytest.fixture
def starred_payload() -> list[dict[str, Any]]:
    """Three starred repositories, out of star order, with a tie."""
    return [
        make_repo("hello-world", stars=2500, forks=300),
        make_repo("linux", stars=180000, forks=53000, owner="torvalds", language="C"),
        make_repo("spoon-knife", stars=2500, forks=150000),
    ]


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a transport that answers every request with one response."""

    def factory(
        status_code: int = 200,
        payload: Any = None,
        content: bytes | None = None,
        requests: list | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(
                status_code,
                content=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def repo_factory() -> Callable[..., dict[str, Any]]:
    """Expose make_repo to tests."""
    return make_repo
