"""MD5 digests of configuration content."""

from __future__ import annotations

import hashlib


def md5_hex(content: str) -> str:
    """Return the lower-case hex MD5 of the UTF-8 content, or "" for empty content."""
    if not content:
        return ""
    return hashlib.md5(content.encode("utf-8")).hexdigest()