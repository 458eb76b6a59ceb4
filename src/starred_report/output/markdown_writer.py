"""Markdown report rendering for starred repositories."""

import re
from pathlib import Path
from typing import Optional

from starred_report.models.repository import StarredRepository

NO_DESCRIPTION = "No description"
NO_LANGUAGE = "N/A"

_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")


def top_repositories(
    repos: list[StarredRepository],
    limit: Optional[int] = 10,
) -> list[StarredRepository]:
    """Rank repositories by star count, highest first.

    The sort is stable, so ties keep their input order. The input list is
    left untouched.
    """
    ranked = sorted(repos, key=lambda r: r.stargazers_count, reverse=True)
    if limit is None:
        return ranked
    return ranked[: max(limit, 0)]


def truncate_description(description: Optional[str], limit: int = 80) -> str:
    """Shorten a description for a table cell."""
    if not description:
        return NO_DESCRIPTION
    if len(description) > limit:
        return description[:limit] + "..."
    return description


def format_count(value: int) -> str:
    """Format a count with thousands separators (1234 -> 1,234)."""
    return f"{value:,}"


def _table_cell(text: str) -> str:
    """Keep a value on one line and stop it from splitting the row."""
    return _LINE_BREAKS.sub(" ", text).replace("|", "\\|")


def render_top_entry(index: int, repo: StarredRepository) -> str:
    lines = [
        f"### {index}. [{repo.name}]({repo.html_url})",
        f"**Owner**: [{repo.owner.login}]({repo.owner.html_url})",
        f"**Description**: {repo.description or NO_DESCRIPTION}",
        f"**Language**: {repo.language or NO_LANGUAGE} | "
        f"**Stars**: ⭐ {format_count(repo.stargazers_count)} | "
        f"**Forks**: 🍴 {format_count(repo.forks_count)}",
    ]
    return "\n".join(lines) + "\n\n"


def render_table_row(repo: StarredRepository, description_limit: int = 80) -> str:
    cells = [
        f"[{_table_cell(repo.name)}]({repo.html_url})",
        _table_cell(truncate_description(repo.description, description_limit)),
        _table_cell(repo.language or NO_LANGUAGE),
        f"⭐ {format_count(repo.stargazers_count)}",
        f"🍴 {format_count(repo.forks_count)}",
    ]
    return "| " + " | ".join(cells) + " |\n"


def generate_markdown(
    username: str,
    repos: list[StarredRepository],
    top_n: int = 10,
    description_limit: int = 80,
) -> str:
    """Render the Markdown report.

    The report has a header with the total count, a "Top N Most Starred"
    section, and a table of every repository. Both sections are ordered by
    stars, highest first.

    Args:
        username: GitHub username the stars belong to
        repos: Normalized repositories
        top_n: Number of repositories in the ranked summary
        description_limit: Max description characters shown in the table

    Returns:
        Markdown document as a string
    """
    ranked = top_repositories(repos, limit=None)

    parts = [
        f"# 🌟 Starred Repositories by {username}\n\n",
        f"> Total repositories: {len(repos)}\n\n",
        f"## 🔥 Top {top_n} Most Starred\n\n",
    ]

    for index, repo in enumerate(top_repositories(repos, limit=top_n), start=1):
        parts.append(render_top_entry(index, repo))

    parts.append("## 📊 All Repositories\n\n")
    parts.append("| Repository | Description | Language | Stars | Forks |\n")
    parts.append("|------------|-------------|----------|-------|-------|\n")

    for repo in ranked:
        parts.append(render_table_row(repo, description_limit))

    return "".join(parts)


def write_markdown_report(markdown: str, output_path: Path) -> Path:
    """Write the Markdown report to a file.

    Args:
        markdown: Rendered report
        output_path: Destination file

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(markdown)

    return output_path
