"""Core domain models for landing content.

This module defines the data structures used throughout the application:
- ValidationIssue: one error or warning reported by the validator
- NormalizedContent: canonical, section-elided landing page
- PublishedLanding: a stored page row with its fingerprint

NormalizedContent serializes with camelCase keys and omits absent values, so
"key present" always means "section has content".
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from landing.utils.timestamps import ensure_utc


class ValidationIssue(BaseModel):
    """A field-addressable validation error or warning."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Stable machine-readable code, e.g. E-HERO-REQ")
    message: str = Field(..., description="Human-readable message suitable for display")
    field: Optional[str] = Field(None, description="Path of the offending field in the raw JSON")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MetaSection(_ContentModel):
    description: Optional[str] = None


class BrandSection(_ContentModel):
    logo_url: Optional[str] = None
    buyer_name: Optional[str] = None
    seller_name: Optional[str] = None


class ThemeColorTokens(_ContentModel):
    primary: str
    accent: str
    bg: str
    text: str


class ThemeFontTokens(_ContentModel):
    heading: str
    body: str


class ThemeSection(_ContentModel):
    colors: ThemeColorTokens
    fonts: ThemeFontTokens


class CallToAction(_ContentModel):
    text: str
    href: str


class HeroMedia(_ContentModel):
    """Demo video: embed_url for a recognized player, link_url otherwise."""

    embed_url: Optional[str] = None
    link_url: Optional[str] = None


class HeroSection(_ContentModel):
    headline: str
    subhead: Optional[str] = None
    short_description: Optional[str] = None
    cta: Optional[CallToAction] = None
    media: Optional[HeroMedia] = None
    seller_name: Optional[str] = None


class BenefitItem(_ContentModel):
    title: Optional[str] = None
    body: Optional[str] = None


class BenefitsSection(_ContentModel):
    title: Optional[str] = None
    items: Optional[List[BenefitItem]] = None


class OptionCard(_ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None


class OptionsSection(_ContentModel):
    cards: List[OptionCard]
    intro: Optional[str] = None
    meeting_link: Optional[str] = None
    seller_name: Optional[str] = None


class QuoteAttribution(_ContentModel):
    name: Optional[str] = None
    role: Optional[str] = None
    company: Optional[str] = None


class ProofQuote(_ContentModel):
    text: Optional[str] = None
    attribution: Optional[QuoteAttribution] = None


class ProofSection(_ContentModel):
    title: Optional[str] = None
    summary_title: Optional[str] = None
    summary_body: Optional[str] = None
    quote: Optional[ProofQuote] = None


class SocialProofItem(_ContentModel):
    link: str
    type: Optional[str] = None
    description: Optional[str] = None


class SocialSection(_ContentModel):
    items: List[SocialProofItem]
    buyer_name: Optional[str] = None
    seller_name: Optional[str] = None
    read_more_link: Optional[str] = None


class SecondarySection(_ContentModel):
    title: Optional[str] = None
    body: Optional[str] = None
    link: Optional[str] = None
    seller_name: Optional[str] = None


class SellerLinks(_ContentModel):
    primary: Optional[str] = None
    more: Optional[str] = None


class SellerSection(_ContentModel):
    body: Optional[str] = None
    links: Optional[SellerLinks] = None


class FooterSection(_ContentModel):
    cta: CallToAction


class NormalizedContent(_ContentModel):
    """Canonical landing page consumed by renderers and stored on publish."""

    title: str
    theme: ThemeSection
    hero: HeroSection
    meta: Optional[MetaSection] = None
    brand: Optional[BrandSection] = None
    benefits: Optional[BenefitsSection] = None
    options: Optional[OptionsSection] = None
    proof: Optional[ProofSection] = None
    social: Optional[SocialSection] = None
    secondary: Optional[SecondarySection] = None
    seller: Optional[SellerSection] = None
    footer: Optional[FooterSection] = None

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON tree with camelCase keys and absent values omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_json_dict(cls, data: Dict[str, Any]) -> "NormalizedContent":
        """Rebuild from a tree produced by to_json_dict() (e.g. a stored row)."""
        return cls.model_validate(data)


class PublishedLanding(BaseModel):
    """A published landing page as held by the persistence layer."""

    page_url_key: str = Field(..., description="Global slug; primary key")
    buyer_id: str = Field(..., description="Buyer identifier")
    seller_id: str = Field(..., description="Seller identifier")
    mmyy: str = Field(..., description="Campaign month-year, MMYY")
    status: str = Field("published", description="Row status")
    raw_content: Dict[str, Any] = Field(..., description="Raw JSON as submitted")
    normalized_content: Dict[str, Any] = Field(..., description="NormalizedContent.to_json_dict()")
    content_sha: str = Field(..., min_length=64, max_length=64, description="Content fingerprint")
    published_at: datetime = Field(..., description="First publish time (UTC)")
    updated_at: datetime = Field(..., description="Last content change (UTC)")

    @field_validator("published_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        return ensure_utc(v)

    @property
    def normalized(self) -> NormalizedContent:
        return NormalizedContent.from_json_dict(self.normalized_content)
