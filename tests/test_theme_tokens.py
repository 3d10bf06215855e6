"""Tests for theme CSS custom properties."""

from landing.domain.models import ThemeColorTokens, ThemeFontTokens, ThemeSection
from landing.pipeline import validate_and_normalize
from landing.theme import CSS_VARIABLES, build_theme_variables, render_css


def _theme(**colors):
    palette = {"primary": "#2563EB", "accent": "#7C3AED", "bg": "#FFFFFF", "text": "#1F2937"}
    palette.update(colors)
    return ThemeSection(
        colors=ThemeColorTokens(**palette),
        fonts=ThemeFontTokens(heading="Poppins, sans-serif", body="Inter, sans-serif"),
    )


class TestBuildThemeVariables:
    """Tests for build_theme_variables."""

    def test_brand_tokens_mapped(self):
        """Test the four colors and two fonts land on their CSS properties."""
        variables = build_theme_variables(_theme(primary="#0F766E"))

        assert variables["--color-primary"] == "#0F766E"
        assert variables["--color-bg"] == "#FFFFFF"
        assert variables["--color-text"] == "#1F2937"
        assert variables["--font-heading"] == "Poppins, sans-serif"
        assert variables["--font-body"] == "Inter, sans-serif"

    def test_every_property_present_in_order(self):
        """Test the output covers every property in declaration order."""
        variables = build_theme_variables(_theme())

        assert list(variables) == list(CSS_VARIABLES.values())

    def test_fixed_tokens_do_not_depend_on_brand(self):
        """Test design-system tokens are the same for any brand."""
        first = build_theme_variables(_theme())
        second = build_theme_variables(_theme(primary="#000000", accent="#111111"))

        assert first["--spacing-md"] == second["--spacing-md"] == "1.5rem"
        assert first["--radius-full"] == "9999px"

    def test_uses_contrast_adjusted_text(self, make_content):
        """Test variables built from pipeline output carry the repaired text color."""
        result = validate_and_normalize(make_content(brand={"colors": {"text": "#FEFEFE"}}))

        assert build_theme_variables(result.normalized.theme)["--color-text"] == "#000000"


class TestRenderCss:
    """Tests for render_css."""

    def test_render_root_block(self):
        """Test variables render as one declaration per line."""
        css = render_css({"--color-bg": "#FFFFFF", "--color-text": "#000000"})

        assert css == ":root {\n  --color-bg: #FFFFFF;\n  --color-text: #000000;\n}"

    def test_custom_selector(self):
        """Test the rule can be scoped to another selector."""
        assert render_css({"--radius-sm": "0.25rem"}, selector=".landing").startswith(".landing {")
