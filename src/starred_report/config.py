"""Configuration management for Starred Report."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_USERNAME = "that-one-tom"


@dataclass
class Config:
    """Application configuration."""

    username: str = DEFAULT_USERNAME
    github_api_url: str = "https://api.github.com"

    # Output files
    markdown_path: str = "README.md"
    json_path: str = "starred-repos.json"

    # Report layout
    top_n: int = 10
    description_limit: int = 80

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        return cls(
            username=os.getenv("STARRED_REPORT_USERNAME", DEFAULT_USERNAME),
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            markdown_path=os.getenv("STARRED_REPORT_MARKDOWN_PATH", "README.md"),
            json_path=os.getenv("STARRED_REPORT_JSON_PATH", "starred-repos.json"),
            top_n=int(os.getenv("STARRED_REPORT_TOP_N", "10")),
            description_limit=int(os.getenv("STARRED_REPORT_DESCRIPTION_LIMIT", "80")),
        )


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
