"""Publish action for landing pages.

This module provides:
- PublishService: validate → fingerprint → compare-and-swap → revalidate
- PublishMeta / PublishResult: publish input and outcome
- PublishThrottle: per-slug rate limit on content changes
- Cache revalidators and cache_tag_for()
"""

from .exceptions import PublishError, RevalidationError
from .models import PublishMeta, PublishResult
from .revalidation import (
    CacheRevalidator,
    HttpCacheRevalidator,
    NoopRevalidator,
    build_revalidator,
    cache_tag_for,
)
from .service import PublishService
from .throttle import PublishThrottle

__all__ = [
    "PublishService",
    "PublishMeta",
    "PublishResult",
    "PublishThrottle",
    "CacheRevalidator",
    "HttpCacheRevalidator",
    "NoopRevalidator",
    "build_revalidator",
    "cache_tag_for",
    "PublishError",
    "RevalidationError",
]
