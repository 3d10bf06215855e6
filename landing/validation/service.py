"""Content validation service.

ContentValidator checks one raw JSON document against the content contract:
1. Reads the JSON into RawContent (type errors recorded, never raised)
2. Required fields (headline, one of benefits/options/proof)
3. URL hygiene (https only)
4. Length limits (soft cap warns, hard limit errors)
5. Video embeddability and theme contrast (warnings only)

The input is never mutated.
"""

import logging
from typing import Any, Optional

from landing.config.models import ContentDefaults
from landing.logging import get_logger

from . import rules
from .models import ValidationReport
from .reader import read_raw_content

logger = get_logger(__name__, component="validation")


class ContentValidator:
    """Validates raw landing content and reports errors and warnings."""

    def __init__(
        self,
        defaults: Optional[ContentDefaults] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize ContentValidator.

        Args:
            defaults: Theme defaults used to judge the effective color pair
            logger_instance: Logger instance (defaults to module logger)
        """
        self.defaults = defaults or ContentDefaults()
        self.logger = logger_instance or logger

    def validate(self, raw: Any) -> ValidationReport:
        """Validate one raw document.

        Args:
            raw: Parsed JSON value supplied by the caller

        Returns:
            ValidationReport; is_valid is False when any error was found
        """
        content, type_errors = read_raw_content(raw)
        report = ValidationReport(errors=list(type_errors), content=content)

        if content is None:
            self._log_result(report)
            return report

        report.errors.extend(rules.check_required(content))

        url_errors, url_warnings = rules.check_urls(content)
        report.errors.extend(url_errors)
        report.warnings.extend(url_warnings)

        length_errors, length_warnings = rules.check_lengths(content)
        report.errors.extend(length_errors)
        report.warnings.extend(length_warnings)

        report.warnings.extend(rules.check_video(content))
        report.warnings.extend(rules.check_theme(content, self.defaults))

        self._log_result(report)
        return report

    def _log_result(self, report: ValidationReport) -> None:
        if report.is_valid:
            self.logger.debug(
                "Content passed validation",
                extra={
                    "event": "validation.passed",
                    "warning_count": len(report.warnings),
                    "warning_codes": sorted({issue.code for issue in report.warnings}),
                },
            )
        else:
            self.logger.info(
                f"Content failed validation with {len(report.errors)} error(s)",
                extra={
                    "event": "validation.failed",
                    "error_count": len(report.errors),
                    "error_codes": sorted({issue.code for issue in report.errors}),
                },
            )
