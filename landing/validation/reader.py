"""Read untyped JSON into RawContent.

The reader never raises for malformed content. A value of the wrong type is
reported as an ``E-TYPE`` issue at its field path and treated as absent, so
later checks only ever see ``None`` or a sanitized value of the right type.
"""

from typing import Any, Dict, List, Optional, Tuple

from landing.domain.models import ValidationIssue
from landing.domain.raw import (
    RawBenefit,
    RawBenefitBlock,
    RawBrand,
    RawColors,
    RawContent,
    RawFonts,
    RawOption,
    RawProof,
    RawSocialProof,
)
from landing.utils.text import sanitize_text

from .errors import E_NORMALIZE, E_TYPE, create_error

# JSON field names (authoring-tool contract)
HEADLINE = "biggestBusinessBenefitBuyerStatement"
SUBHEAD = "synopsisBusinessBenefit"
SHORT_DESCRIPTION = "shortDescriptionBusinessBenefit"
BUYER_NAME = "BuyersName"
SELLER_NAME = "SellersName"
SCHEDULER_LINK = "meetingSchedulerLink"
SELLER_WEBSITE = "sellerLinkWebsite"
SELLER_READ_MORE = "sellerLinkReadMore"
DEMO_LINK = "quickDemoLinks"
BENEFIT_BLOCK = "highestOperationalBenefit"
BENEFIT_BLOCK_STATEMENT = "highestOperationalBenefitStatement"
OPTIONS_INTRO = "synopsisAutomationOptions"
OPTIONS = "options"
PROOF = "mostRelevantProof"
SOCIAL_PROOFS = "socialProofs"
SECONDARY_STATEMENT = "secondHighestOperationalBenefitStatement"
SECONDARY_DESCRIPTION = "secondHighestOperationalBenefitDescription"
SELLER_DESCRIPTION = "sellerDescription"
BRAND = "brand"

_TYPE_NAMES = {str: "a string", dict: "an object", list: "a list"}


class _FieldReader:
    """Collects E-TYPE issues while pulling typed values out of JSON objects."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []

    def _typed(self, data: Dict[str, Any], key: str, path: str, expected: type) -> Any:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, expected):
            self.issues.append(
                create_error(E_TYPE, path, f"{path} must be {_TYPE_NAMES[expected]}, got {type(value).__name__}.")
            )
            return None
        return value

    def text(self, data: Dict[str, Any], key: str, path: str) -> Optional[str]:
        return sanitize_text(self._typed(data, key, path, str))

    def token(self, data: Dict[str, Any], key: str, path: str) -> Optional[str]:
        """URLs and colors: trimmed only, internal characters untouched."""
        value = self._typed(data, key, path, str)
        if value is None:
            return None
        return value.strip() or None

    def mapping(self, data: Dict[str, Any], key: str, path: str) -> Dict[str, Any]:
        return self._typed(data, key, path, dict) or {}

    def entries(self, data: Dict[str, Any], key: str, path: str) -> List[Tuple[str, Dict[str, Any]]]:
        """List of objects with their paths; malformed entries read as empty."""
        values = self._typed(data, key, path, list) or []
        entries = []
        for index, value in enumerate(values):
            entry_path = f"{path}[{index}]"
            if value is None:
                value = {}
            elif not isinstance(value, dict):
                self.issues.append(
                    create_error(
                        E_TYPE, entry_path, f"{entry_path} must be an object, got {type(value).__name__}."
                    )
                )
                value = {}
            entries.append((entry_path, value))
        return entries


def read_raw_content(raw: Any) -> Tuple[Optional[RawContent], List[ValidationIssue]]:
    """Convert caller-supplied JSON into RawContent.

    Args:
        raw: Parsed JSON value (normally a dict)

    Returns:
        Tuple of (RawContent or None, type issues). RawContent is None only
        when the root is not a JSON object.
    """
    if not isinstance(raw, dict):
        return None, [
            create_error(
                E_NORMALIZE,
                message=f"Content must be a JSON object, got {type(raw).__name__}.",
            )
        ]

    reader = _FieldReader()

    benefit_data = reader.mapping(raw, BENEFIT_BLOCK, BENEFIT_BLOCK)
    benefit_block = RawBenefitBlock(
        statement=reader.text(
            benefit_data, BENEFIT_BLOCK_STATEMENT, f"{BENEFIT_BLOCK}.{BENEFIT_BLOCK_STATEMENT}"
        ),
        benefits=tuple(
            RawBenefit(
                statement=reader.text(entry, "statement", f"{path}.statement"),
                content=reader.text(entry, "content", f"{path}.content"),
            )
            for path, entry in reader.entries(benefit_data, "benefits", f"{BENEFIT_BLOCK}.benefits")
        ),
    )

    options = tuple(
        RawOption(
            title=reader.text(entry, "title", f"{path}.title"),
            description=reader.text(entry, "description", f"{path}.description"),
        )
        for path, entry in reader.entries(raw, OPTIONS, OPTIONS)
    )

    proof_data = reader.mapping(raw, PROOF, PROOF)
    proof = RawProof(
        **{
            attribute: reader.text(proof_data, key, f"{PROOF}.{key}")
            for attribute, key in (
                ("title", "title"),
                ("summary_title", "summaryTitle"),
                ("summary_content", "summaryContent"),
                ("quote_content", "quoteContent"),
                ("quote_author_fullname", "quoteAuthorFullname"),
                ("quote_author_designation", "quoteAuthorDesignation"),
                ("quote_author_company", "quoteAuthorCompany"),
            )
        }
    )

    social_proofs = tuple(
        RawSocialProof(
            type=reader.text(entry, "type", f"{path}.type"),
            description=reader.text(entry, "description", f"{path}.description"),
            link=reader.token(entry, "link", f"{path}.link"),
        )
        for path, entry in reader.entries(raw, SOCIAL_PROOFS, SOCIAL_PROOFS)
    )

    brand_data = reader.mapping(raw, BRAND, BRAND)
    colors_data = reader.mapping(brand_data, "colors", f"{BRAND}.colors")
    fonts_data = reader.mapping(brand_data, "fonts", f"{BRAND}.fonts")
    brand = RawBrand(
        logo_url=reader.token(brand_data, "logoUrl", f"{BRAND}.logoUrl"),
        colors=RawColors(
            **{
                name: reader.token(colors_data, name, f"{BRAND}.colors.{name}")
                for name in ("primary", "accent", "bg", "text")
            }
        ),
        fonts=RawFonts(
            **{name: reader.text(fonts_data, name, f"{BRAND}.fonts.{name}") for name in ("heading", "body")}
        ),
    )

    content = RawContent(
        headline=reader.text(raw, HEADLINE, HEADLINE),
        subhead=reader.text(raw, SUBHEAD, SUBHEAD),
        short_description=reader.text(raw, SHORT_DESCRIPTION, SHORT_DESCRIPTION),
        buyer_name=reader.text(raw, BUYER_NAME, BUYER_NAME),
        seller_name=reader.text(raw, SELLER_NAME, SELLER_NAME),
        meeting_scheduler_link=reader.token(raw, SCHEDULER_LINK, SCHEDULER_LINK),
        seller_link_website=reader.token(raw, SELLER_WEBSITE, SELLER_WEBSITE),
        seller_link_read_more=reader.token(raw, SELLER_READ_MORE, SELLER_READ_MORE),
        demo_link=reader.token(raw, DEMO_LINK, DEMO_LINK),
        benefit_block=benefit_block,
        options_intro=reader.text(raw, OPTIONS_INTRO, OPTIONS_INTRO),
        options=options,
        proof=proof,
        social_proofs=social_proofs,
        secondary_statement=reader.text(raw, SECONDARY_STATEMENT, SECONDARY_STATEMENT),
        secondary_description=reader.text(raw, SECONDARY_DESCRIPTION, SECONDARY_DESCRIPTION),
        seller_description=reader.text(raw, SELLER_DESCRIPTION, SELLER_DESCRIPTION),
        brand=brand,
    )

    return content, reader.issues
