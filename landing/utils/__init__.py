"""Utility functions for hashing, text, URLs, colors, slugs and timestamps."""

from .contrast import AA_NORMAL, contrast_ratio, ensure_readable_text, parse_color
from .hashing import (
    FingerprintError,
    canonicalize_json,
    compare_sha,
    compute_content_sha,
    hash_string,
    stable_stringify,
)
from .slug import generate_slug, is_valid_slug, slugify, suggest_page_url_key
from .text import code_point_length, sanitize_text, truncate_at_word
from .timestamps import ensure_utc, format_timestamp, parse_timestamp, utc_now
from .urls import clean_https_url, is_https_url
from .video import ResolvedVideo, parse_vimeo_id, resolve_video, vimeo_embed_url

__all__ = [
    # Hashing
    "FingerprintError",
    "canonicalize_json",
    "stable_stringify",
    "compute_content_sha",
    "compare_sha",
    "hash_string",
    # Text
    "sanitize_text",
    "code_point_length",
    "truncate_at_word",
    # URLs
    "is_https_url",
    "clean_https_url",
    # Video
    "ResolvedVideo",
    "parse_vimeo_id",
    "vimeo_embed_url",
    "resolve_video",
    # Colors
    "AA_NORMAL",
    "parse_color",
    "contrast_ratio",
    "ensure_readable_text",
    # Slugs
    "slugify",
    "is_valid_slug",
    "generate_slug",
    "suggest_page_url_key",
    # Timestamps
    "utc_now",
    "ensure_utc",
    "format_timestamp",
    "parse_timestamp",
]
