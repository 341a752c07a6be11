"""
Utility functions for the profile viewer.
"""

import hashlib


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def etag_for(body: str) -> str:
    """Strong ETag (quoted) for a response body."""
    return f'"{_sha(body)}"'
