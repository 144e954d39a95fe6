"""Shareable project links of the form `<base>?project=<id>`."""

from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit

PROJECT_QUERY_PARAM = "project"


def build_project_link(project_id: str, base_url: str = "") -> str:
    """Link that opens a project. An empty base yields just the query string."""
    query = urlencode({PROJECT_QUERY_PARAM: project_id})
    if not base_url:
        return f"?{query}"
    separator = "&" if urlsplit(base_url).query else "?"
    return f"{base_url}{separator}{query}"


def parse_project_link(link: str) -> Optional[str]:
    """Project id carried by a link, a bare query string or a bare id.

    Returns None when nothing usable is found.
    """
    link = (link or "").strip()
    if not link:
        return None

    query = urlsplit(link).query
    if query:
        values = parse_qs(query).get(PROJECT_QUERY_PARAM)
        return values[0] if values and values[0] else None

    # No query string: treat as a bare id unless it looks like a URL
    if "/" in link or "=" in link:
        return None
    return link
