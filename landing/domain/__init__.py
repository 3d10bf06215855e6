"""Domain models for raw and normalized landing content."""

from .models import (
    BenefitItem,
    BenefitsSection,
    BrandSection,
    CallToAction,
    FooterSection,
    HeroMedia,
    HeroSection,
    MetaSection,
    NormalizedContent,
    OptionCard,
    OptionsSection,
    ProofQuote,
    ProofSection,
    PublishedLanding,
    QuoteAttribution,
    SecondarySection,
    SellerLinks,
    SellerSection,
    SocialProofItem,
    SocialSection,
    ThemeColorTokens,
    ThemeFontTokens,
    ThemeSection,
    ValidationIssue,
)
from .raw import (
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

__all__ = [
    "ValidationIssue",
    "NormalizedContent",
    "PublishedLanding",
    # Normalized sections
    "MetaSection",
    "BrandSection",
    "ThemeSection",
    "ThemeColorTokens",
    "ThemeFontTokens",
    "HeroSection",
    "HeroMedia",
    "CallToAction",
    "BenefitsSection",
    "BenefitItem",
    "OptionsSection",
    "OptionCard",
    "ProofSection",
    "ProofQuote",
    "QuoteAttribution",
    "SocialSection",
    "SocialProofItem",
    "SecondarySection",
    "SellerSection",
    "SellerLinks",
    "FooterSection",
    # Raw content
    "RawContent",
    "RawBenefitBlock",
    "RawBenefit",
    "RawOption",
    "RawProof",
    "RawSocialProof",
    "RawBrand",
    "RawColors",
    "RawFonts",
]
