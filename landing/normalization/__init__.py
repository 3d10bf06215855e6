"""Normalization layer converting validated raw content to NormalizedContent.

This module provides:
- ContentNormalizer: builds the canonical, section-elided landing page
- NormalizationError: raised when invalid content reaches the normalizer
"""

from .exceptions import NormalizationError
from .service import ContentNormalizer

__all__ = [
    "ContentNormalizer",
    "NormalizationError",
]
