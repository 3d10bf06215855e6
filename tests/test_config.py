"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from landing.config import (
    AppConfig,
    ConfigurationError,
    ContentDefaults,
    load_config,
    load_environment_config,
    validate_config_file,
)
from landing.config.validators import check_for_warnings

ENV_VARS = ("DATABASE_URL", "SITE_URL", "REVALIDATE_SECRET", "LOG_LEVEL", "ENVIRONMENT")
EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.yaml"


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset every variable the loader reads and run from an empty directory."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestLoadConfig:
    """Test suite for load_config."""

    def test_defaults_without_file(self, clean_env):
        """Test built-in defaults apply when no config file exists."""
        app_config, env_config = load_config()

        assert app_config.content.cta_text == "Book a meeting"
        assert app_config.content.min_contrast == 4.5
        assert app_config.publishing.throttle_seconds == 15
        assert app_config.logging.level == "INFO"
        assert env_config.database_url == "sqlite:///./data/landing_pages.db"
        assert env_config.revalidate_secret is None

    def test_example_config_matches_defaults(self, clean_env):
        """Test the shipped example file loads and mirrors the defaults."""
        app_config, _ = load_config(EXAMPLE_CONFIG)

        assert app_config == AppConfig()

    def test_config_yaml_found_in_working_directory(self, clean_env, tmp_path):
        """Test config.yaml in the current directory is picked up."""
        (tmp_path / "config.yaml").write_text("content:\n  cta_text: Talk to sales\n")

        app_config, _ = load_config()

        assert app_config.content.cta_text == "Talk to sales"

    def test_config_file_not_found(self, clean_env, tmp_path):
        """Test an explicit missing path is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml_syntax(self, clean_env, tmp_path):
        """Test YAML syntax errors are reported as configuration errors."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("content:\n  cta_text: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config(config_file)

    def test_top_level_must_be_mapping(self, clean_env, tmp_path):
        """Test a YAML list at the top level is rejected."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_file)

    def test_invalid_values_collected(self, clean_env, tmp_path):
        """Test every invalid field is listed in one error."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "content:\n"
            "  min_contrast: 30\n"
            "  theme:\n"
            "    colors:\n"
            "      bg: not-a-color\n"
            "publishing:\n"
            "  site_url: ftp://example.com\n"
        )

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert len(exc_info.value.errors) == 3
        assert any("min_contrast" in error for error in exc_info.value.errors)
        assert any("bg" in error for error in exc_info.value.errors)

    def test_environment_overrides(self, clean_env):
        """Test SITE_URL and LOG_LEVEL override the file values."""
        clean_env.setenv("SITE_URL", "https://pages.example.com/")
        clean_env.setenv("LOG_LEVEL", "debug")

        app_config, env_config = load_config()

        assert app_config.publishing.site_url == "https://pages.example.com"
        assert app_config.logging.level == "DEBUG"
        assert env_config.site_url == "https://pages.example.com"


class TestContentDefaults:
    """Test suite for content default models."""

    def test_cta_text_stripped(self):
        """Test surrounding whitespace is removed from the CTA label."""
        assert ContentDefaults(cta_text="  Book now ").cta_text == "Book now"

    def test_blank_cta_text_rejected(self):
        """Test a whitespace-only CTA label is rejected."""
        with pytest.raises(ValueError):
            ContentDefaults(cta_text="   ")

    def test_defaults_are_frozen(self):
        """Test defaults cannot be changed after construction."""
        defaults = ContentDefaults()

        with pytest.raises(ValueError):
            defaults.cta_text = "Other"


class TestEnvironmentConfig:
    """Test suite for environment variable loading."""

    def test_optional_env_vars(self, clean_env):
        """Test every variable is optional."""
        env_config = load_environment_config()

        assert env_config.site_url is None
        assert env_config.environment == "local"

    def test_invalid_values_reported_together(self, clean_env):
        """Test all invalid variables appear in one error."""
        clean_env.setenv("DATABASE_URL", "landing.db")
        clean_env.setenv("LOG_LEVEL", "LOUD")
        clean_env.setenv("REVALIDATE_SECRET", "  ")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 3

    def test_secret_hidden_in_repr(self, clean_env):
        """Test the revalidation secret never appears in repr()."""
        clean_env.setenv("REVALIDATE_SECRET", "s3cret")

        env_config = load_environment_config()

        assert env_config.revalidate_secret == "s3cret"
        assert "s3cret" not in repr(env_config)


class TestConfigWarnings:
    """Test suite for non-fatal configuration checks."""

    def test_low_contrast_default_theme_warns(self):
        """Test a default palette with poor contrast is flagged."""
        warnings = check_for_warnings({"content": {"theme": {"colors": {"text": "#EEEEEE", "bg": "#FFFFFF"}}}})

        assert len(warnings) == 1
        assert "contrast" in warnings[0]

    def test_insecure_public_site_warns(self):
        """Test an http site URL outside localhost is flagged."""
        warnings = check_for_warnings({"publishing": {"site_url": "http://pages.example.com"}})

        assert len(warnings) == 1

    def test_localhost_http_is_fine(self):
        """Test local development URLs are not flagged."""
        assert check_for_warnings({"publishing": {"site_url": "http://localhost:3000"}}) == []

    def test_low_contrast_config_emits_user_warning(self, clean_env, tmp_path):
        """Test load_config surfaces the checks as UserWarning."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("publishing:\n  throttle_seconds: 0\n")

        with pytest.warns(UserWarning, match="throttle_seconds"):
            load_config(config_file)


class TestValidateConfigFile:
    """Test suite for validate_config_file utility."""

    def test_example_file_is_valid(self, capsys):
        """Test the shipped example passes."""
        assert validate_config_file(EXAMPLE_CONFIG)
        assert "is valid" in capsys.readouterr().out

    def test_invalid_file_reported(self, tmp_path, capsys):
        """Test an invalid file fails with the problem printed."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: LOUD\n")

        assert not validate_config_file(config_file)
        assert "level" in capsys.readouterr().out
