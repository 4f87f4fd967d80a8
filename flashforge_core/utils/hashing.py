"""Hashing utilities."""

import hashlib


def content_hash(content: str | bytes) -> str:
    """Return the hex SHA-256 digest of text (UTF-8 encoded) or bytes."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()
