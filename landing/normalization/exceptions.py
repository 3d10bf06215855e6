"""Normalization layer exceptions."""

from typing import List, Optional

from landing.domain.models import ValidationIssue


class NormalizationError(Exception):
    """Raised when content that failed validation is passed to the normalizer.

    Malformed content is reported by the validator as data; reaching the
    normalizer with it is a caller bug.
    """

    def __init__(self, message: str, errors: Optional[List[ValidationIssue]] = None) -> None:
        """Initialize with the blocking issues that were found.

        Args:
            message: Human-readable error message
            errors: Validation errors that make the content unusable
        """
        super().__init__(message)
        self.errors = errors or []
