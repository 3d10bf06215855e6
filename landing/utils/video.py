"""Embeddable video URL recognition (Vimeo)."""

from typing import NamedTuple, Optional
from urllib.parse import urlsplit

from .urls import clean_https_url

VIMEO_HOST = "vimeo.com"
VIMEO_EMBED_BASE = "https://player.vimeo.com/video/"


class ResolvedVideo(NamedTuple):
    """A demo link resolved for rendering: exactly one field is set."""

    embed_url: Optional[str]
    link_url: Optional[str]


def parse_vimeo_id(url: Optional[str]) -> Optional[str]:
    """Extract the numeric video id from a Vimeo URL.

    The id is the segment right after a ``video`` segment when there is one,
    otherwise the first all-digit path segment.

    Supported forms:
        https://vimeo.com/123456789
        https://vimeo.com/channels/staffpicks/123456789
        https://player.vimeo.com/video/123456789
        https://vimeo.com/album/2838732/video/123456789

    Returns:
        Video id, or None if url is not a Vimeo video URL
    """
    if not isinstance(url, str):
        return None

    try:
        parts = urlsplit(url.strip())
        hostname = (parts.hostname or "").lower()
    except ValueError:
        return None

    if hostname != VIMEO_HOST and not hostname.endswith("." + VIMEO_HOST):
        return None

    segments = [segment for segment in parts.path.split("/") if segment]

    for index, segment in enumerate(segments[:-1]):
        if segment == "video" and segments[index + 1].isdigit():
            return segments[index + 1]

    for segment in segments:
        if segment.isdigit():
            return segment

    return None


def vimeo_embed_url(video_id: str) -> str:
    return f"{VIMEO_EMBED_BASE}{video_id}"


def resolve_video(url: Optional[str]) -> Optional[ResolvedVideo]:
    """Resolve a demo link to an embed URL or a plain link.

    Returns:
        ResolvedVideo, or None when url is not a valid https URL
    """
    cleaned = clean_https_url(url)
    if cleaned is None:
        return None

    video_id = parse_vimeo_id(cleaned)
    if video_id is None:
        return ResolvedVideo(embed_url=None, link_url=cleaned)

    return ResolvedVideo(embed_url=vimeo_embed_url(video_id), link_url=None)
