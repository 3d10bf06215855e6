"""Validation orchestrator: the single entry point to the content pipeline."""

import logging
from typing import Any, Optional

from landing.config.models import ContentDefaults
from landing.logging import get_logger
from landing.normalization.service import ContentNormalizer
from landing.utils.hashing import compute_content_sha
from landing.validation.service import ContentValidator

from .models import ValidationResult

logger = get_logger(__name__, component="pipeline")


class ContentPipeline:
    """
    Runs validate → normalize → fingerprint over one raw document.

    The pipeline holds no per-call state, so one instance can serve any
    number of concurrent callers.
    """

    def __init__(
        self,
        defaults: Optional[ContentDefaults] = None,
        validator: Optional[ContentValidator] = None,
        normalizer: Optional[ContentNormalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize the content pipeline.

        Args:
            defaults: Content defaults shared by validator and normalizer
            validator: Validator override (built from defaults if omitted)
            normalizer: Normalizer override (built from defaults if omitted)
            logger_instance: Logger instance (defaults to module logger)
        """
        self.defaults = defaults or ContentDefaults()
        self.validator = validator or ContentValidator(self.defaults)
        self.normalizer = normalizer or ContentNormalizer(self.defaults)
        self.logger = logger_instance or logger

    def validate_and_normalize(self, raw: Any) -> ValidationResult:
        """
        Validate raw content and, when valid, normalize and fingerprint it.

        Malformed content never raises; it comes back as errors. A failure of
        the normalizer or fingerprinter on content the validator accepted is a
        defect and propagates to the caller.

        Args:
            raw: Parsed JSON supplied by the caller

        Returns:
            ValidationResult with normalized and content_sha set iff valid
        """
        report = self.validator.validate(raw)

        if not report.is_valid:
            return ValidationResult(is_valid=False, errors=report.errors, warnings=report.warnings)

        normalized = self.normalizer.normalize(raw)
        content_sha = compute_content_sha(normalized)

        self.logger.info(
            "Content validated and normalized",
            extra={
                "event": "pipeline.content.normalized",
                "content_sha": content_sha,
                "warning_count": len(report.warnings),
            },
        )

        return ValidationResult(
            is_valid=True,
            errors=[],
            warnings=report.warnings,
            normalized=normalized,
            content_sha=content_sha,
        )


def validate_and_normalize(raw: Any, defaults: Optional[ContentDefaults] = None) -> ValidationResult:
    """Run the content pipeline once with the given (or built-in) defaults."""
    return ContentPipeline(defaults).validate_and_normalize(raw)
