"""Data models for the validation layer."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from landing.domain.models import ValidationIssue
from landing.domain.raw import RawContent


@dataclass
class ValidationReport:
    """Outcome of validating one raw document.

    Attributes:
        errors: Blocking issues; any entry makes the document invalid
        warnings: Degradations the normalizer corrects or renders around
        content: Typed view of the document, or None if the root was not an object
    """

    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    content: Optional[RawContent] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }
