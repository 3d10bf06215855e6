"""Unit tests for text, URL, color, slug and video helpers."""

import pytest

from landing.utils.contrast import AA_NORMAL, contrast_ratio, ensure_readable_text, parse_color
from landing.utils.slug import generate_slug, is_valid_slug, slugify, suggest_page_url_key
from landing.utils.text import code_point_length, sanitize_text, truncate_at_word
from landing.utils.urls import clean_https_url, is_https_url
from landing.utils.video import parse_vimeo_id, resolve_video, vimeo_embed_url


class TestSanitizeText:
    """Tests for sanitize_text function."""

    def test_trims_and_collapses(self):
        """Test outer whitespace is removed and inner runs collapse."""
        assert sanitize_text("  a \n\n b\t c  ") == "a b c"

    def test_straightens_quotes(self):
        """Test curly quotes become straight quotes."""
        assert sanitize_text("“Hi” it’s") == "\"Hi\" it's"

    def test_blank_is_none(self):
        """Test whitespace-only text is absent."""
        assert sanitize_text("   ") is None
        assert sanitize_text("") is None
        assert sanitize_text(None) is None

    def test_code_point_length(self):
        """Test length counts code points, not bytes."""
        assert code_point_length("né😀") == 3


class TestTruncateAtWord:
    """Tests for truncate_at_word function."""

    def test_short_text_unchanged(self):
        """Test text within the limit is returned as-is."""
        assert truncate_at_word("short", 10) == "short"

    def test_breaks_at_word(self):
        """Test a space near the end is used as the break."""
        assert truncate_at_word("alpha beta gamma delta", 20) == "alpha beta gamma..."

    def test_cuts_mid_word_without_nearby_space(self):
        """Test a long word is cut when no space is near the limit."""
        assert truncate_at_word("supercalifragilistic", 10) == "superca..."

    def test_never_exceeds_limit(self):
        """Test the result including the ellipsis fits."""
        text = "word " * 100

        assert len(truncate_at_word(text, 160)) <= 160


class TestUrls:
    """Tests for https URL checks."""

    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "https://example.com/a?b=c#d", "  https://example.com  ", "HTTPS://EXAMPLE.COM"],
    )
    def test_accepts_https(self, url):
        """Test absolute https URLs are accepted."""
        assert is_https_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "http://example.com",
            "ftp://example.com",
            "//example.com",
            "example.com",
            "https://",
            "https://exa mple.com",
            "javascript:alert(1)",
            "https://[::1",
        ],
    )
    def test_rejects_others(self, url):
        """Test anything but an absolute https URL with a host is rejected."""
        assert not is_https_url(url)

    def test_clean_https_url(self):
        """Test valid URLs are trimmed and invalid ones dropped."""
        assert clean_https_url(" https://example.com/x ") == "https://example.com/x"
        assert clean_https_url("http://example.com") is None


class TestContrast:
    """Tests for WCAG contrast helpers."""

    def test_parse_hex_and_rgb(self):
        """Test supported color notations parse to the same channels."""
        assert parse_color("#fff") == parse_color("#FFFFFF") == parse_color("rgb(255, 255, 255)")
        assert parse_color("rgba(0,0,0,0.5)") == (0, 0, 0)

    @pytest.mark.parametrize("color", ["white", "#ffff", "rgb(256,0,0)", "", None])
    def test_parse_rejects_unsupported(self, color):
        """Test names, bad lengths and out-of-range channels are rejected."""
        assert parse_color(color) is None

    def test_black_on_white(self):
        """Test the maximum ratio is 21:1."""
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_ratio_symmetric(self):
        """Test foreground and background order does not matter."""
        assert contrast_ratio("#2563EB", "#FFFFFF") == pytest.approx(contrast_ratio("#FFFFFF", "#2563EB"))

    def test_ratio_none_for_bad_color(self):
        """Test an unparseable color gives no ratio."""
        assert contrast_ratio("nope", "#FFFFFF") is None

    def test_readable_text_kept(self):
        """Test text meeting the minimum is not adjusted."""
        check = ensure_readable_text("#FFFFFF", "#1F2937")

        assert check.text == "#1F2937"
        assert not check.adjusted

    def test_unreadable_text_on_light_background(self):
        """Test black is chosen on a light background."""
        check = ensure_readable_text("#FAFAFA", "#DDDDDD")

        assert check.text == "#000000"
        assert check.adjusted
        assert check.ratio < AA_NORMAL

    def test_unreadable_text_on_dark_background(self):
        """Test white is chosen on a dark background."""
        assert ensure_readable_text("#0B1020", "#1A1A1A").text == "#FFFFFF"

    def test_replacement_always_meets_minimum(self):
        """Test the chosen replacement clears AA on a mid-tone background."""
        check = ensure_readable_text("#777777", "#888888")

        assert contrast_ratio(check.text, "#777777") >= AA_NORMAL


class TestSlug:
    """Tests for slug helpers."""

    def test_slugify(self):
        """Test punctuation and spaces collapse to single hyphens."""
        assert slugify("  Acme Corp!! ") == "acme-corp"
        assert slugify("Foo---Bar") == "foo-bar"

    def test_is_valid_slug(self):
        """Test the slug pattern."""
        assert is_valid_slug("adient-cyngn-1025")
        assert not is_valid_slug("Adient-Cyngn")
        assert not is_valid_slug("-leading")
        assert not is_valid_slug("double--hyphen")

    def test_generate_slug(self):
        """Test the default page key format."""
        assert generate_slug("adient", "cyngn", "1025") == "adient-cyngn-1025"

    def test_suggest_page_url_key(self):
        """Test a versioned key is suggested from display names."""
        assert suggest_page_url_key("Acme Corp", "TechVendor Inc", "1024", 2) == "acme-corp-techvendor-inc-1024-v2"


class TestVimeo:
    """Tests for Vimeo URL recognition."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://vimeo.com/123456789",
            "https://www.vimeo.com/123456789",
            "https://vimeo.com/channels/staffpicks/123456789",
            "https://player.vimeo.com/video/123456789",
            "https://vimeo.com/album/2838732/video/123456789",
            "https://vimeo.com/123456789?share=copy",
        ],
    )
    def test_parse_vimeo_id(self, url):
        """Test supported Vimeo URL forms yield the video id."""
        assert parse_vimeo_id(url) == "123456789"

    @pytest.mark.parametrize(
        "url",
        [
            "https://youtube.com/watch?v=123456789",
            "https://evilvimeo.com/123456789",
            "https://vimeo.com/about",
            None,
        ],
    )
    def test_parse_vimeo_id_rejects(self, url):
        """Test other hosts and non-video pages yield no id."""
        assert parse_vimeo_id(url) is None

    def test_first_numeric_segment_wins(self):
        """Test the first all-digit segment is the id when there is no video segment."""
        assert parse_vimeo_id("https://vimeo.com/123/456") == "123"
        assert parse_vimeo_id("https://vimeo.com/123456789/abcdef0123") == "123456789"

    def test_embed_url(self):
        """Test the player embed URL format."""
        assert vimeo_embed_url("42") == "https://player.vimeo.com/video/42"

    def test_resolve_video(self):
        """Test resolution picks an embed for Vimeo and a link otherwise."""
        assert resolve_video("https://vimeo.com/42").embed_url == "https://player.vimeo.com/video/42"
        assert resolve_video("https://loom.com/share/abc").link_url == "https://loom.com/share/abc"
        assert resolve_video("http://vimeo.com/42") is None
