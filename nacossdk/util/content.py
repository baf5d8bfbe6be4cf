"""Shortening of configuration content for log output."""

from __future__ import annotations

SHOW_CONTENT_SIZE = 100


def truncate_content(content: str) -> str:
    """Return at most the first SHOW_CONTENT_SIZE characters of the content."""
    if not content:
        return ""
    return content[:SHOW_CONTENT_SIZE]