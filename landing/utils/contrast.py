"""WCAG 2.0 color contrast calculations.

See https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

import re
from typing import NamedTuple, Optional

AA_NORMAL = 4.5
AA_LARGE = 3.0

BLACK = "#000000"
WHITE = "#FFFFFF"

_HEX = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB = re.compile(r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*[\d.]+\s*)?\)$", re.IGNORECASE)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class ContrastCheck(NamedTuple):
    """Outcome of ensure_readable_text()."""

    text: str
    adjusted: bool
    ratio: Optional[float]


def parse_color(color: Optional[str]) -> Optional[RGB]:
    """Parse #RGB, #RRGGBB, rgb(r, g, b) or rgba(r, g, b, a).

    Returns:
        RGB tuple, or None if the value is not a supported color
    """
    if not isinstance(color, str):
        return None

    value = color.strip()

    match = _HEX.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = _RGB.match(value)
    if match:
        channels = [int(group) for group in match.groups()]
        if all(0 <= channel <= 255 for channel in channels):
            return RGB(*channels)

    return None


def relative_luminance(rgb: RGB) -> float:
    """Relative luminance in [0, 1]."""

    def linear(channel: int) -> float:
        srgb = channel / 255
        return srgb / 12.92 if srgb <= 0.03928 else ((srgb + 0.055) / 1.055) ** 2.4

    return 0.2126 * linear(rgb.r) + 0.7152 * linear(rgb.g) + 0.0722 * linear(rgb.b)


def contrast_ratio(foreground: Optional[str], background: Optional[str]) -> Optional[float]:
    """Contrast ratio between two colors, 1.0 to 21.0.

    Returns:
        The ratio, or None if either color cannot be parsed

    Example:
        >>> round(contrast_ratio("#000", "#fff"), 1)
        21.0
    """
    fg = parse_color(foreground)
    bg = parse_color(background)
    if fg is None or bg is None:
        return None

    lighter, darker = sorted((relative_luminance(fg), relative_luminance(bg)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


def ensure_readable_text(background: str, text: str, min_ratio: float = AA_NORMAL) -> ContrastCheck:
    """Keep text when it meets min_ratio against background, else pick black or white.

    The replacement is whichever of black or white contrasts more with the
    background, which always clears 4.5:1. An unparseable background falls
    back to black text.
    """
    ratio = contrast_ratio(text, background)
    if ratio is not None and ratio >= min_ratio:
        return ContrastCheck(text=text, adjusted=False, ratio=ratio)

    bg = parse_color(background)
    if bg is None:
        return ContrastCheck(text=BLACK, adjusted=True, ratio=ratio)

    luminance = relative_luminance(bg)
    against_black = (luminance + 0.05) / 0.05
    against_white = 1.05 / (luminance + 0.05)
    replacement = BLACK if against_black >= against_white else WHITE
    return ContrastCheck(text=replacement, adjusted=True, ratio=ratio)
