"""Text sanitizing and truncation helpers.

The validator and the normalizer both measure and emit text through
sanitize_text(), so a length checked by one is the length rendered by the other.
"""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")
_DOUBLE_QUOTES = re.compile("[“”„‟″]")
_SINGLE_QUOTES = re.compile("[‘’‚‛′]")


def sanitize_text(text: Optional[str]) -> Optional[str]:
    """Trim, collapse internal whitespace and straighten typographic quotes.

    Returns:
        Sanitized text, or None when the input is None or whitespace-only
    """
    if text is None:
        return None

    sanitized = _WHITESPACE.sub(" ", text.strip())
    sanitized = _DOUBLE_QUOTES.sub('"', sanitized)
    sanitized = _SINGLE_QUOTES.sub("'", sanitized)

    return sanitized or None


def code_point_length(text: str) -> int:
    """Length in Unicode code points (Python str length, never bytes)."""
    return len(text)


def truncate_at_word(text: str, max_length: int, ellipsis: str = "...") -> str:
    """Cut text to at most max_length characters, ellipsis included.

    Breaks at the last space when it falls within the final 20% of the kept
    text; otherwise cuts mid-word.

    Example:
        >>> truncate_at_word("alpha beta gamma delta", 20)
        'alpha beta gamma...'
    """
    if len(text) <= max_length:
        return text

    budget = max(max_length - len(ellipsis), 0)
    truncated = text[:budget]
    last_space = truncated.rfind(" ")

    if last_space > budget * 0.8:
        truncated = truncated[:last_space]

    return truncated.rstrip() + ellipsis
