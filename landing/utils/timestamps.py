"""UTC timestamp helpers for publish bookkeeping.

Timestamps never enter normalized content; they only stamp stored rows.
"""

from datetime import datetime, timezone
from typing import Optional

_STORAGE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Serialize for storage, e.g. ``2025-11-04T12:00:00.000000Z``."""
    if dt is None:
        return None
    return ensure_utc(dt).strftime(_STORAGE_FORMAT)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored timestamp (or any ISO-8601 string) back to UTC.

    Returns:
        Timezone-aware datetime, or None for empty or unparseable input
    """
    if not value or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        return None
