"""JSON output writer for starred repository exports."""

import json
from pathlib import Path
from typing import Any

from starred_report.models.repository import StarredRepository


def build_export(repos: list[StarredRepository]) -> list[dict[str, Any]]:
    """Convert repositories to JSON-ready records, order preserved."""
    return [repo.to_export() for repo in repos]


def build_json_export(repos: list[StarredRepository]) -> str:
    """Serialize repositories as a pretty-printed JSON array.

    Args:
        repos: Normalized repositories

    Returns:
        JSON text with 2-space indentation
    """
    return json.dumps(build_export(repos), indent=2, ensure_ascii=False)


def write_json_report(content: str, output_path: Path) -> Path:
    """Write the JSON export to a file.

    Args:
        content: Serialized JSON (see build_json_export)
        output_path: Destination file

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    return output_path
