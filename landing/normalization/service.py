"""Content normalization service for converting raw content to NormalizedContent.

This module implements the normalization logic that:
1. Rejects content with blocking validation errors (NormalizationError)
2. Drops optional links that are not https
3. Resolves the demo link to an embed URL or a plain link
4. Fills theme colors and fonts from defaults and repairs text contrast
5. Truncates the meta description for search snippets
6. Omits every section that has nothing to render

Apart from the meta description, text is never shortened here; soft-cap
breaches are reported by the validator and passed through verbatim.
"""

import logging
from typing import Any, List, Optional

from landing.config.models import ContentDefaults
from landing.domain.models import (
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
from landing.domain.raw import RawContent
from landing.logging import get_logger
from landing.utils.contrast import ensure_readable_text
from landing.utils.text import truncate_at_word
from landing.utils.urls import clean_https_url
from landing.utils.video import resolve_video
from landing.validation import rules
from landing.validation.reader import read_raw_content

from .exceptions import NormalizationError

logger = get_logger(__name__, component="normalization")


class ContentNormalizer:
    """Normalizes validated raw content into the canonical NormalizedContent shape.

    The normalizer is a pure function of its input and the injected defaults:
    the same raw document always produces an identical result.
    """

    def __init__(
        self,
        defaults: Optional[ContentDefaults] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize ContentNormalizer.

        Args:
            defaults: Theme, CTA text and contrast defaults
            logger_instance: Logger instance (defaults to module logger)
        """
        self.defaults = defaults or ContentDefaults()
        self.logger = logger_instance or logger

    def normalize(self, raw: Any) -> NormalizedContent:
        """Normalize one raw document.

        Args:
            raw: Parsed JSON that has passed validation

        Returns:
            NormalizedContent with empty sections omitted

        Raises:
            NormalizationError: If the content has blocking validation errors
        """
        content = self._read_valid_content(raw)

        cta = self._build_cta(content)
        normalized = NormalizedContent(
            title=content.headline,
            meta=self._build_meta(content),
            brand=self._build_brand(content),
            theme=self._build_theme(content),
            hero=self._build_hero(content, cta),
            benefits=self._build_benefits(content),
            options=self._build_options(content),
            proof=self._build_proof(content),
            social=self._build_social(content),
            secondary=self._build_secondary(content, cta),
            seller=self._build_seller(content),
            footer=FooterSection(cta=cta) if cta else None,
        )

        self.logger.debug(
            "Normalized content",
            extra={
                "event": "normalization.completed",
                "sections": sorted(normalized.to_json_dict().keys()),
            },
        )

        return normalized

    def _read_valid_content(self, raw: Any) -> RawContent:
        content, found_errors = read_raw_content(raw)
        if content is not None:
            found_errors = list(found_errors)
            found_errors.extend(rules.check_required(content))
            found_errors.extend(rules.check_urls(content)[0])
            found_errors.extend(rules.check_lengths(content)[0])

        if content is None or found_errors:
            self._raise_invalid(found_errors)

        return content

    def _raise_invalid(self, found_errors: List[ValidationIssue]) -> None:
        codes = sorted({issue.code for issue in found_errors})
        self.logger.error(
            "Refusing to normalize invalid content",
            extra={"event": "normalization.rejected", "error_codes": codes},
        )
        raise NormalizationError(
            f"Cannot normalize content with validation errors: {', '.join(codes)}",
            errors=found_errors,
        )

    def _build_cta(self, content: RawContent) -> Optional[CallToAction]:
        href = clean_https_url(content.meeting_scheduler_link) or clean_https_url(content.seller_link_website)
        if href is None:
            return None
        return CallToAction(text=self.defaults.cta_text, href=href)

    @staticmethod
    def _build_meta(content: RawContent) -> Optional[MetaSection]:
        description = content.subhead or content.short_description
        if description is None:
            return None
        return MetaSection(description=truncate_at_word(description, rules.META_DESCRIPTION_MAX))

    @staticmethod
    def _build_brand(content: RawContent) -> Optional[BrandSection]:
        brand = BrandSection(
            logo_url=clean_https_url(content.brand.logo_url),
            buyer_name=content.buyer_name,
            seller_name=content.seller_name,
        )
        if brand.logo_url is None and brand.buyer_name is None and brand.seller_name is None:
            return None
        return brand

    def _build_theme(self, content: RawContent) -> ThemeSection:
        colors = rules.resolve_theme_colors(content.brand.colors, self.defaults.theme.colors)
        check = ensure_readable_text(colors["bg"], colors["text"], self.defaults.min_contrast)
        if check.adjusted:
            self.logger.debug(
                "Adjusted theme text color for contrast",
                extra={
                    "event": "normalization.theme.contrast_adjusted",
                    "original_text": colors["text"],
                    "adjusted_text": check.text,
                    "background": colors["bg"],
                },
            )
            colors["text"] = check.text

        font_defaults = self.defaults.theme.fonts
        return ThemeSection(
            colors=ThemeColorTokens(**colors),
            fonts=ThemeFontTokens(
                heading=content.brand.fonts.heading or font_defaults.heading,
                body=content.brand.fonts.body or font_defaults.body,
            ),
        )

    @staticmethod
    def _build_hero(content: RawContent, cta: Optional[CallToAction]) -> HeroSection:
        media = None
        video = resolve_video(content.demo_link)
        if video is not None:
            media = HeroMedia(embed_url=video.embed_url, link_url=video.link_url)

        return HeroSection(
            headline=content.headline,
            subhead=content.subhead,
            short_description=content.short_description,
            cta=cta,
            media=media,
            seller_name=content.seller_name,
        )

    @staticmethod
    def _build_benefits(content: RawContent) -> Optional[BenefitsSection]:
        block = content.benefit_block
        if not block.has_content():
            return None

        items = [
            BenefitItem(title=benefit.statement, body=benefit.content) for benefit in block.populated_benefits
        ]
        return BenefitsSection(title=block.statement, items=items or None)

    @staticmethod
    def _build_options(content: RawContent) -> Optional[OptionsSection]:
        cards = [
            OptionCard(title=option.title, description=option.description)
            for option in content.populated_options
        ]
        if not cards:
            return None

        return OptionsSection(
            cards=cards,
            intro=content.options_intro,
            meeting_link=clean_https_url(content.meeting_scheduler_link),
            seller_name=content.seller_name,
        )

    @staticmethod
    def _build_proof(content: RawContent) -> Optional[ProofSection]:
        proof = content.proof
        if not proof.has_content():
            return None

        attribution = None
        if proof.has_attribution():
            attribution = QuoteAttribution(
                name=proof.quote_author_fullname,
                role=proof.quote_author_designation,
                company=proof.quote_author_company,
            )

        quote = None
        if proof.quote_content is not None or attribution is not None:
            quote = ProofQuote(text=proof.quote_content, attribution=attribution)

        return ProofSection(
            title=proof.title,
            summary_title=proof.summary_title,
            summary_body=proof.summary_content,
            quote=quote,
        )

    @staticmethod
    def _build_social(content: RawContent) -> Optional[SocialSection]:
        items = [
            SocialProofItem(link=clean_https_url(proof.link), type=proof.type, description=proof.description)
            for proof in rules.usable_social_proofs(content)
        ]
        if not items:
            return None

        return SocialSection(
            items=items,
            buyer_name=content.buyer_name,
            seller_name=content.seller_name,
            read_more_link=clean_https_url(content.seller_link_read_more),
        )

    @staticmethod
    def _build_secondary(content: RawContent, cta: Optional[CallToAction]) -> Optional[SecondarySection]:
        if content.secondary_statement is None and content.secondary_description is None:
            return None

        return SecondarySection(
            title=content.secondary_statement,
            body=content.secondary_description,
            link=cta.href if cta else None,
            seller_name=content.seller_name,
        )

    @staticmethod
    def _build_seller(content: RawContent) -> Optional[SellerSection]:
        primary = clean_https_url(content.seller_link_website)
        more = clean_https_url(content.seller_link_read_more)
        links = SellerLinks(primary=primary, more=more) if primary or more else None

        if content.seller_description is None and links is None:
            return None

        return SellerSection(body=content.seller_description, links=links)
