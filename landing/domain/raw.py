"""Typed view of caller-supplied landing content.

Every field is optional: RawContent records what the authoring tool sent,
after sanitizing, without judging it. Deciding whether the content is
acceptable is the validator's job.

The JSON field names are the authoring-tool contract (e.g.
``biggestBusinessBenefitBuyerStatement`` for the hero headline); see
landing.validation.reader for the mapping.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawBenefit:
    statement: Optional[str] = None
    content: Optional[str] = None

    def is_empty(self) -> bool:
        return self.statement is None and self.content is None


@dataclass(frozen=True)
class RawBenefitBlock:
    """``highestOperationalBenefit``: a titled list of benefit statements."""

    statement: Optional[str] = None
    benefits: Tuple[RawBenefit, ...] = ()

    @property
    def populated_benefits(self) -> Tuple[RawBenefit, ...]:
        return tuple(benefit for benefit in self.benefits if not benefit.is_empty())

    def has_content(self) -> bool:
        return self.statement is not None or bool(self.populated_benefits)


@dataclass(frozen=True)
class RawOption:
    title: Optional[str] = None
    description: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.description is None


@dataclass(frozen=True)
class RawProof:
    """``mostRelevantProof``: a case study summary with an optional quote."""

    title: Optional[str] = None
    summary_title: Optional[str] = None
    summary_content: Optional[str] = None
    quote_content: Optional[str] = None
    quote_author_fullname: Optional[str] = None
    quote_author_designation: Optional[str] = None
    quote_author_company: Optional[str] = None

    def has_attribution(self) -> bool:
        return any(
            value is not None
            for value in (
                self.quote_author_fullname,
                self.quote_author_designation,
                self.quote_author_company,
            )
        )

    def has_content(self) -> bool:
        return (
            any(
                value is not None
                for value in (self.title, self.summary_title, self.summary_content, self.quote_content)
            )
            or self.has_attribution()
        )


@dataclass(frozen=True)
class RawSocialProof:
    type: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class RawColors:
    primary: Optional[str] = None
    accent: Optional[str] = None
    bg: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class RawFonts:
    heading: Optional[str] = None
    body: Optional[str] = None


@dataclass(frozen=True)
class RawBrand:
    logo_url: Optional[str] = None
    colors: RawColors = RawColors()
    fonts: RawFonts = RawFonts()


@dataclass(frozen=True)
class RawContent:
    """One landing page document as read from JSON.

    List fields keep the raw positions (a malformed entry becomes an empty
    item) so issues can be addressed as ``options[2].title``.
    """

    headline: Optional[str] = None
    subhead: Optional[str] = None
    short_description: Optional[str] = None
    buyer_name: Optional[str] = None
    seller_name: Optional[str] = None
    meeting_scheduler_link: Optional[str] = None
    seller_link_website: Optional[str] = None
    seller_link_read_more: Optional[str] = None
    demo_link: Optional[str] = None
    benefit_block: RawBenefitBlock = RawBenefitBlock()
    options_intro: Optional[str] = None
    options: Tuple[RawOption, ...] = ()
    proof: RawProof = RawProof()
    social_proofs: Tuple[RawSocialProof, ...] = ()
    secondary_statement: Optional[str] = None
    secondary_description: Optional[str] = None
    seller_description: Optional[str] = None
    brand: RawBrand = RawBrand()

    @property
    def populated_options(self) -> Tuple[RawOption, ...]:
        return tuple(option for option in self.options if not option.is_empty())

    def has_benefits(self) -> bool:
        return self.benefit_block.has_content()

    def has_options(self) -> bool:
        return bool(self.populated_options)

    def has_proof(self) -> bool:
        return self.proof.has_content()
