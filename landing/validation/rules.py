"""Content contract rules.

Length limits are part of the content contract with the authoring tool and
are versioned with it: bump CONTENT_CONTRACT_VERSION whenever a limit, a
required field or a URL rule changes.

Each check takes RawContent and returns issues; none of them raise. The
predicates shared with the normalizer (usable_social_proofs,
resolve_theme_colors) live here so both stages agree on what survives.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple

from landing.config.models import ContentDefaults, ThemeColors
from landing.domain.models import ValidationIssue
from landing.domain.raw import RawColors, RawContent, RawSocialProof
from landing.utils.contrast import contrast_ratio, parse_color
from landing.utils.text import code_point_length
from landing.utils.urls import is_https_url
from landing.utils.video import parse_vimeo_id

from . import errors
from .reader import (
    BENEFIT_BLOCK,
    BRAND,
    DEMO_LINK,
    HEADLINE,
    OPTIONS_INTRO,
    PROOF,
    SCHEDULER_LINK,
    SELLER_READ_MORE,
    SELLER_WEBSITE,
    SHORT_DESCRIPTION,
    SOCIAL_PROOFS,
    SUBHEAD,
)

CONTENT_CONTRACT_VERSION = "1.0"


class LengthLimit(NamedTuple):
    """Soft cap (warning) and hard limit (error), in code points."""

    soft: int
    hard: int


HEADLINE_LIMIT = LengthLimit(90, 108)
SUBHEAD_LIMIT = LengthLimit(180, 216)
SHORT_DESCRIPTION_LIMIT = LengthLimit(300, 360)
OPTIONS_INTRO_LIMIT = LengthLimit(250, 300)
BENEFIT_BODY_LIMIT = LengthLimit(400, 480)
QUOTE_LIMIT = LengthLimit(300, 360)

META_DESCRIPTION_MAX = 160

Issues = Tuple[List[ValidationIssue], List[ValidationIssue]]


def check_required(content: RawContent) -> List[ValidationIssue]:
    """Headline is required, plus at least one of benefits, options or proof."""
    found = []

    if content.headline is None:
        found.append(errors.create_error(errors.E_HERO_REQ, HEADLINE))

    if not (content.has_benefits() or content.has_options() or content.has_proof()):
        found.append(errors.create_error(errors.E_MIN_SECTION))

    return found


def check_length(
    value: Optional[str],
    limit: LengthLimit,
    field: str,
    label: str,
    warning_code: str,
) -> Issues:
    """Compare one sanitized text value against its soft and hard limits."""
    if value is None:
        return [], []

    length = code_point_length(value)
    if length > limit.hard:
        return [
            errors.create_error(
                errors.E_TEXT_LIMIT,
                field,
                f"{label} exceeds hard limit of {limit.hard} characters ({length}).",
            )
        ], []

    if length > limit.soft:
        message = None
        if warning_code == errors.W_TEXT_LONG:
            message = f"{label} is quite long; consider ≤ {limit.soft} characters."
        return [], [errors.create_warning(warning_code, field, message)]

    return [], []


def check_lengths(content: RawContent) -> Issues:
    checks = [
        (content.headline, HEADLINE_LIMIT, HEADLINE, "Headline", errors.W_HERO_LONG),
        (content.subhead, SUBHEAD_LIMIT, SUBHEAD, "Subhead", errors.W_SUBHEAD_LONG),
        (
            content.short_description,
            SHORT_DESCRIPTION_LIMIT,
            SHORT_DESCRIPTION,
            "Short description",
            errors.W_TEXT_LONG,
        ),
        (content.options_intro, OPTIONS_INTRO_LIMIT, OPTIONS_INTRO, "Options intro", errors.W_TEXT_LONG),
        (content.proof.quote_content, QUOTE_LIMIT, f"{PROOF}.quoteContent", "Quote", errors.W_QUOTE_LONG),
    ]
    for index, benefit in enumerate(content.benefit_block.benefits):
        checks.append(
            (
                benefit.content,
                BENEFIT_BODY_LIMIT,
                f"{BENEFIT_BLOCK}.benefits[{index}].content",
                "Benefit description",
                errors.W_BENEFIT_LONG,
            )
        )

    found_errors: List[ValidationIssue] = []
    found_warnings: List[ValidationIssue] = []
    for value, limit, field, label, warning_code in checks:
        length_errors, length_warnings = check_length(value, limit, field, label, warning_code)
        found_errors.extend(length_errors)
        found_warnings.extend(length_warnings)

    return found_errors, found_warnings


def usable_social_proofs(content: RawContent) -> List[RawSocialProof]:
    """Social proofs that survive normalization: those with an https link."""
    return [proof for proof in content.social_proofs if is_https_url(proof.link)]


def check_urls(content: RawContent) -> Issues:
    """https hygiene: hard fields error, optional fields warn and are dropped."""
    found_errors = []
    found_warnings = []

    for value, field, code in (
        (content.meeting_scheduler_link, SCHEDULER_LINK, errors.E_URL_SCHED),
        (content.seller_link_website, SELLER_WEBSITE, errors.E_URL_SELLER),
    ):
        if value is not None and not is_https_url(value):
            found_errors.append(errors.create_error(code, field))

    for value, field in (
        (content.seller_link_read_more, SELLER_READ_MORE),
        (content.demo_link, DEMO_LINK),
        (content.brand.logo_url, f"{BRAND}.logoUrl"),
    ):
        if value is not None and not is_https_url(value):
            found_warnings.append(errors.create_warning(errors.W_URL_DROPPED, field))

    for index, proof in enumerate(content.social_proofs):
        if is_https_url(proof.link):
            continue
        if proof.type is None and proof.description is None and proof.link is None:
            continue
        reason = "has no link" if proof.link is None else "link is not a valid https URL"
        found_warnings.append(
            errors.create_warning(
                errors.W_URL_DROPPED,
                f"{SOCIAL_PROOFS}[{index}].link",
                f"Social proof {reason}; it was removed.",
            )
        )

    return found_errors, found_warnings


def check_video(content: RawContent) -> List[ValidationIssue]:
    """Warn when an https demo link cannot be embedded."""
    if is_https_url(content.demo_link) and parse_vimeo_id(content.demo_link) is None:
        return [errors.create_warning(errors.W_VIDEO_HOST, DEMO_LINK)]
    return []


def resolve_theme_colors(colors: RawColors, defaults: ThemeColors) -> Dict[str, str]:
    """Supplied colors that parse, defaults for the rest (before contrast repair)."""
    resolved = {}
    for name in ("primary", "accent", "bg", "text"):
        supplied = getattr(colors, name)
        resolved[name] = supplied if parse_color(supplied) is not None else getattr(defaults, name)
    return resolved


def check_theme(content: RawContent, defaults: ContentDefaults) -> List[ValidationIssue]:
    """Flag unrecognized colors and a low-contrast effective text/bg pair."""
    found = []

    for name in ("primary", "accent", "bg", "text"):
        supplied = getattr(content.brand.colors, name)
        if supplied is not None and parse_color(supplied) is None:
            found.append(errors.create_warning(errors.W_COLOR, f"{BRAND}.colors.{name}"))

    colors = resolve_theme_colors(content.brand.colors, defaults.theme.colors)
    ratio = contrast_ratio(colors["text"], colors["bg"])
    if ratio is not None and ratio < defaults.min_contrast:
        found.append(
            errors.create_warning(
                errors.W_CONTRAST,
                f"{BRAND}.colors",
                f"Text/background contrast {ratio:.2f}:1 is below the {defaults.min_contrast}:1 minimum; "
                f"we've auto-adjusted text color.",
            )
        )

    return found
