"""Helpers shared by the subcommands."""

from __future__ import annotations

from pathlib import Path

from doksnet.config import DoksConfig, find_doks_file
from doksnet.errors import DoksError
from doksnet.partition import Partition

TRUNCATED_NOTICE = "... (truncated)"


def load_project() -> tuple[Path, DoksConfig]:
    """Find the nearest .doks file and load it, returning its path and contents."""
    path = find_doks_file()
    if path is None:
        raise DoksError("No .doks file found. Run 'doksnet new' first.")
    return path, DoksConfig.from_file(path)


def preview(content: str, limit: int = 200) -> str:
    """Return the first ``limit`` characters, noting when the content was longer."""
    text = content[:limit]
    if len(content.encode("utf-8")) > limit:
        text += "\n" + TRUNCATED_NOTICE
    return text


def extract_content_if_possible(partition_str: str) -> str | None:
    """Extract a partition's content, or return None when that fails."""
    try:
        return Partition.parse(partition_str).extract_content()
    except DoksError:
        return None