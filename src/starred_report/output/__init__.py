"""Output handlers for Starred Report."""

from starred_report.output.console import Console
from starred_report.output.json_writer import build_json_export, write_json_report
from starred_report.output.markdown_writer import (
    generate_markdown,
    top_repositories,
    write_markdown_report,
)

__all__ = [
    "build_json_export",
    "generate_markdown",
    "top_repositories",
    "write_json_report",
    "write_markdown_report",
    "Console",
]
