"""CSS custom properties for rendering a normalized theme.

Only the brand tokens (four colors, two fonts) come from content; the rest
of the design system is fixed.
"""

from types import MappingProxyType
from typing import Dict

from landing.domain.models import ThemeSection

CSS_VARIABLES = MappingProxyType(
    {
        # Colors
        "color_primary": "--color-primary",
        "color_accent": "--color-accent",
        "color_bg": "--color-bg",
        "color_text": "--color-text",
        "color_text_light": "--color-text-light",
        "color_border": "--color-border",
        "color_success": "--color-success",
        "color_warning": "--color-warning",
        "color_error": "--color-error",
        # Fonts
        "font_heading": "--font-heading",
        "font_body": "--font-body",
        "font_mono": "--font-mono",
        # Spacing
        "spacing_xs": "--spacing-xs",
        "spacing_sm": "--spacing-sm",
        "spacing_md": "--spacing-md",
        "spacing_lg": "--spacing-lg",
        "spacing_xl": "--spacing-xl",
        "spacing_2xl": "--spacing-2xl",
        # Border radius
        "radius_sm": "--radius-sm",
        "radius_md": "--radius-md",
        "radius_lg": "--radius-lg",
        "radius_full": "--radius-full",
        # Layout
        "container_max_width": "--container-max-width",
    }
)

FIXED_TOKENS = MappingProxyType(
    {
        "color_text_light": "#6B7280",
        "color_border": "#E5E7EB",
        "color_success": "#10B981",
        "color_warning": "#F59E0B",
        "color_error": "#EF4444",
        "font_mono": '"JetBrains Mono", "Fira Code", Consolas, monospace',
        "spacing_xs": "0.5rem",
        "spacing_sm": "1rem",
        "spacing_md": "1.5rem",
        "spacing_lg": "2rem",
        "spacing_xl": "3rem",
        "spacing_2xl": "4rem",
        "radius_sm": "0.25rem",
        "radius_md": "0.5rem",
        "radius_lg": "1rem",
        "radius_full": "9999px",
        "container_max_width": "1200px",
    }
)


def build_theme_variables(theme: ThemeSection) -> Dict[str, str]:
    """Map a normalized theme onto CSS custom properties.

    Args:
        theme: Theme section of NormalizedContent (already defaulted and contrast-checked)

    Returns:
        Dict of CSS property name to value, in CSS_VARIABLES order
    """
    tokens = dict(FIXED_TOKENS)
    tokens.update(
        color_primary=theme.colors.primary,
        color_accent=theme.colors.accent,
        color_bg=theme.colors.bg,
        color_text=theme.colors.text,
        font_heading=theme.fonts.heading,
        font_body=theme.fonts.body,
    )
    return {property_name: tokens[token] for token, property_name in CSS_VARIABLES.items()}


def render_css(variables: Dict[str, str], selector: str = ":root") -> str:
    """Render variables as a CSS rule block.

    Example:
        >>> render_css({"--color-bg": "#FFFFFF"})
        ':root {\\n  --color-bg: #FFFFFF;\\n}'
    """
    body = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return f"{selector} {{\n{body}\n}}"
