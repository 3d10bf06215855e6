"""Validation issue codes and their display messages.

Errors (``E-*``) block normalization. Warnings (``W-*``) leave the content
valid but flag a degradation the normalizer will correct or render around.
"""

from typing import Optional

from landing.domain.models import ValidationIssue

# Blocking errors
E_HERO_REQ = "E-HERO-REQ"
E_MIN_SECTION = "E-MIN-SECTION"
E_URL_SCHED = "E-URL-SCHED"
E_URL_SELLER = "E-URL-SELLER"
E_TEXT_LIMIT = "E-TEXT-LIMIT"
E_TYPE = "E-TYPE"
E_NORMALIZE = "E-NORMALIZE"

# Warnings
W_HERO_LONG = "W-HERO-LONG"
W_SUBHEAD_LONG = "W-SUBHEAD-LONG"
W_BENEFIT_LONG = "W-BENEFIT-LONG"
W_QUOTE_LONG = "W-QUOTE-LONG"
W_TEXT_LONG = "W-TEXT-LONG"
W_VIDEO_HOST = "W-VIDEO-HOST"
W_CONTRAST = "W-CONTRAST"
W_COLOR = "W-COLOR"
W_URL_DROPPED = "W-URL-DROPPED"

ERROR_MESSAGES = {
    E_HERO_REQ: "Hero headline is required.",
    E_MIN_SECTION: "Provide at least one of Benefits, Options, or Proof.",
    E_URL_SCHED: "Meeting scheduler link must be a valid https URL.",
    E_URL_SELLER: "Seller website must be a valid https URL.",
    E_TEXT_LIMIT: "Text exceeds allowed length; please shorten.",
    E_TYPE: "Field has the wrong type.",
    E_NORMALIZE: "Could not normalize content. Check field names and structure.",
}

WARNING_MESSAGES = {
    W_HERO_LONG: "Hero headline is quite long; consider ≤ 90 characters.",
    W_SUBHEAD_LONG: "Subhead is quite long; consider ≤ 180 characters.",
    W_BENEFIT_LONG: "Benefit description is long; consider ≤ 400 characters.",
    W_QUOTE_LONG: "Quote is long; consider ≤ 300 characters.",
    W_TEXT_LONG: "Text is quite long; consider shortening it.",
    W_VIDEO_HOST: "Video host not supported for embed; we'll show a link.",
    W_CONTRAST: "Brand colors reduce text contrast; we've auto-adjusted text color.",
    W_COLOR: "Color value not recognized; the default color is used.",
    W_URL_DROPPED: "Link is not a valid https URL and was removed.",
}


def create_error(code: str, field: Optional[str] = None, message: Optional[str] = None) -> ValidationIssue:
    """Build a blocking issue, using the standard message unless one is given."""
    return ValidationIssue(code=code, message=message or ERROR_MESSAGES.get(code, "Unknown error"), field=field)


def create_warning(code: str, field: Optional[str] = None, message: Optional[str] = None) -> ValidationIssue:
    """Build a warning, using the standard message unless one is given."""
    return ValidationIssue(
        code=code, message=message or WARNING_MESSAGES.get(code, "Unknown warning"), field=field
    )
