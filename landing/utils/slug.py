"""Slug helpers for page URL keys."""

import re

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase and join alphanumeric runs with single hyphens.

    Example:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Foo---Bar")
        'foo-bar'
    """
    return _NON_ALNUM.sub("-", value.lower().strip()).strip("-")


def is_valid_slug(slug: str) -> bool:
    return bool(SLUG_PATTERN.match(slug))


def generate_slug(buyer_id: str, seller_id: str, mmyy: str) -> str:
    """Default page key: ``{buyer_id}-{seller_id}-{mmyy}``."""
    return f"{buyer_id}-{seller_id}-{mmyy}"


def suggest_page_url_key(buyer: str, seller: str, mmyy: str, version: int) -> str:
    """Suggest a versioned page key from display names.

    Example:
        >>> suggest_page_url_key("Acme Corp", "TechVendor Inc", "1024", 1)
        'acme-corp-techvendor-inc-1024-v1'
    """
    parts = [slugify(buyer), slugify(seller), slugify(mmyy), f"v{version}"]
    return "-".join(part for part in parts if part)
