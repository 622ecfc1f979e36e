"""Source location helpers shared by planning and fetching."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit


def is_url(source: str) -> bool:
    """Return ``True`` when ``source`` is a well-formed absolute URL.

    Single-letter schemes are rejected so Windows drive paths such as
    ``C:\\icons`` stay local.
    """
    try:
        parts = urlsplit(source)
    except ValueError:
        return False
    return len(parts.scheme) > 1 and bool(parts.netloc)


def join_source(location: str, icon_name: str) -> str:
    """Build the full location of ``icon_name`` under a configured source.

    URLs are concatenated verbatim, so a URL source is expected to end with
    ``/``; local directories are joined as path segments.
    """
    if is_url(location):
        return location + icon_name
    return str(Path(location) / icon_name)
