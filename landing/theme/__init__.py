"""Theme token helpers for renderers."""

from .tokens import CSS_VARIABLES, FIXED_TOKENS, build_theme_variables, render_css

__all__ = ["CSS_VARIABLES", "FIXED_TOKENS", "build_theme_variables", "render_css"]
