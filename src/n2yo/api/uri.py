"""Request URI assembly for the N2YO REST API."""

from __future__ import annotations

from collections.abc import Iterable

BASE_URL = "https://api.n2yo.com/rest/v1/satellite"


def build_uri(segments: Iterable[str], api_key: str, base_url: str = BASE_URL) -> str:
    """Join path segments and the API key into a request URI.

    The key is appended with ``&apiKey=`` rather than a ``?`` query
    separator; this is the URL shape N2YO accepts. Nothing is URL-encoded.

    Example:
        >>> build_uri(["a", "b"], "K")
        'https://api.n2yo.com/rest/v1/satellite/a/b&apiKey=K'
    """
    parts = [base_url]
    for segment in segments:
        parts.append(f"/{segment}")
    parts.append(f"&apiKey={api_key}")
    return "".join(parts)


def mask_api_key(uri: str, api_key: str) -> str:
    """Hide the API key in a URI before it is logged."""
    if not api_key:
        return uri
    return uri.replace(f"&apiKey={api_key}", "&apiKey=***")
