"""Non-fatal checks on raw configuration dictionaries."""

import warnings
from typing import Any, Dict, List
from urllib.parse import urlsplit

from landing.utils.contrast import AA_NORMAL, contrast_ratio


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """Return messages for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    content = config_dict.get("content", {})
    if isinstance(content, dict):
        theme = content.get("theme", {})
        colors = theme.get("colors", {}) if isinstance(theme, dict) else {}
        if isinstance(colors, dict) and colors.get("text") and colors.get("bg"):
            ratio = contrast_ratio(colors["text"], colors["bg"])
            if ratio is not None and ratio < AA_NORMAL:
                warning_messages.append(
                    f"Default theme text/bg contrast is {ratio:.2f}:1; pages without brand colors "
                    f"will have their text color auto-adjusted"
                )

    publishing = config_dict.get("publishing", {})
    if isinstance(publishing, dict):
        if publishing.get("throttle_seconds") == 0:
            warning_messages.append("publishing.throttle_seconds is 0; rapid re-publishes are not throttled")

        site_url = publishing.get("site_url")
        if isinstance(site_url, str) and site_url.startswith("http://"):
            host = urlsplit(site_url).hostname or ""
            if host not in ("localhost", "127.0.0.1"):
                warning_messages.append(
                    f"publishing.site_url ({site_url}) is not https; published page URLs will be insecure"
                )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit each message as a UserWarning."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
