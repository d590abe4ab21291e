"""
Utility functions for HTTP signatures

This module provides helpers for header-name normalization, request-target
derivation and Date header generation.
"""

import time
from email.utils import formatdate
from typing import Optional
from urllib.parse import urlsplit


def normalize_header_name(name: str) -> str:
    """
    Normalize a component identifier to its canonical lowercase form.

    Args:
        name: Header name or pseudo-component

    Returns:
        str: Lowercase, whitespace-trimmed name
    """
    return name.strip().lower()


def request_target(url: str) -> str:
    """
    Derive the origin-form request target (path plus query) from a URL.

    Origin-form targets are used as given, less any fragment, so a target
    such as "//a/x" keeps its leading path segment.

    Args:
        url: Absolute URL or origin-form target

    Returns:
        str: Path (defaulting to "/") followed by "?query" when present
    """
    if url.startswith("/"):
        return url.split("#", 1)[0]

    parsed = urlsplit(url)
    path = parsed.path or "/"
    if parsed.query:
        return f"{path}?{parsed.query}"
    return path


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.

    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())


def format_http_date(timestamp: Optional[float] = None) -> str:
    """
    Format a timestamp as an HTTP Date header value.

    Args:
        timestamp: Unix timestamp (uses current time if None)

    Returns:
        str: IMF-fixdate string, e.g. "Tue, 07 Jun 2014 20:51:35 GMT"
    """
    if timestamp is None:
        timestamp = generate_timestamp()
    return formatdate(timestamp, usegmt=True)
