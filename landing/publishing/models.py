"""Data models for the publish action."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_REGEX = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
MMYY_REGEX = r"^(0[1-9]|1[0-2])\d{2}$"


class PublishMeta(BaseModel):
    """Where and for whom a page is published.

    Examples:
        page_url_key="adient-cyngn-1025", buyer_id="adient", seller_id="cyngn", mmyy="1025"
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    page_url_key: str = Field(..., min_length=3, max_length=100, pattern=SLUG_REGEX)
    buyer_id: str = Field(..., min_length=1, max_length=50, pattern=SLUG_REGEX)
    seller_id: str = Field(..., min_length=1, max_length=50, pattern=SLUG_REGEX)
    mmyy: str = Field(..., pattern=MMYY_REGEX, description="Campaign month-year, e.g. 1025")

    @field_validator("buyer_id", "seller_id", mode="before")
    @classmethod
    def lowercase_id(cls, v: Any) -> Any:
        """Identifiers are case-insensitive; store them lowercased."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@dataclass
class PublishResult:
    """
    Outcome of one publish attempt.

    Attributes:
        ok: Whether the page is live with the submitted content
        url: Public page URL (when ok)
        content_sha: Fingerprint of the normalized content (when content was valid)
        changed: True if a write and cache revalidation happened
        error: Summary of why the publish was refused
        validation_errors: Field-addressed problems ({"field", "message"} dicts)
    """

    ok: bool
    url: Optional[str] = None
    content_sha: Optional[str] = None
    changed: Optional[bool] = None
    error: Optional[str] = None
    validation_errors: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result = {"ok": self.ok}
        for key in ("url", "content_sha", "changed", "error"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.validation_errors:
            result["validation_errors"] = self.validation_errors
        return result
