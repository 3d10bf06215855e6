"""URL scheme hygiene."""

from typing import Optional
from urllib.parse import urlsplit


def is_https_url(url: Optional[str]) -> bool:
    """Check that a value parses as an absolute https URL with a host.

    Example:
        >>> is_https_url("https://example.com")
        True
        >>> is_https_url("http://example.com")
        False
        >>> is_https_url("//example.com")
        False
    """
    if not isinstance(url, str):
        return False

    candidate = url.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False

    try:
        parts = urlsplit(candidate)
        hostname = parts.hostname
    except ValueError:
        return False

    return parts.scheme.lower() == "https" and bool(hostname)


def clean_https_url(url: Optional[str]) -> Optional[str]:
    """Return the trimmed URL when it passes is_https_url(), else None."""
    if not is_https_url(url):
        return None
    return url.strip()
