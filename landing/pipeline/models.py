"""Data models for pipeline results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from landing.domain.models import NormalizedContent, ValidationIssue


@dataclass
class ValidationResult:
    """
    Outcome of one validate → normalize → fingerprint run.

    Attributes:
        is_valid: Whether the content passed validation
        errors: Blocking issues (empty when valid)
        warnings: Degradations applied or flagged during validation
        normalized: Canonical content; present only when valid
        content_sha: Fingerprint of normalized; present only when valid
    """

    is_valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    normalized: Optional[NormalizedContent] = None
    content_sha: Optional[str] = None

    def __post_init__(self):
        """Enforce that normalized output accompanies validity and nothing else."""
        has_output = self.normalized is not None and self.content_sha is not None
        has_any_output = self.normalized is not None or self.content_sha is not None
        if self.is_valid and not has_output:
            raise ValueError("A valid result requires normalized content and its fingerprint")
        if not self.is_valid and has_any_output:
            raise ValueError("An invalid result cannot carry normalized content or a fingerprint")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys; absent outputs are omitted."""
        result: Dict[str, Any] = {
            "isValid": self.is_valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }
        if self.is_valid:
            result["normalized"] = self.normalized.to_json_dict()
            result["contentSha"] = self.content_sha
        return result
