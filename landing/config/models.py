"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from landing.utils.contrast import parse_color


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


DEFAULT_FONT_STACK = '"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif'


class ThemeColors(BaseModel):
    """Fallback theme colors; the defaults meet WCAG AA text contrast."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field("#2563EB", description="Primary brand color (buttons, links)")
    accent: str = Field("#7C3AED", description="Accent color")
    bg: str = Field("#FFFFFF", description="Page background")
    text: str = Field("#1F2937", description="Body text color")

    @field_validator("primary", "accent", "bg", "text")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Require a color the contrast checker can parse."""
        stripped = v.strip()
        if parse_color(stripped) is None:
            raise ValueError(f"Unsupported color value: {v!r} (use #RGB, #RRGGBB or rgb())")
        return stripped


class ThemeFonts(BaseModel):
    """Fallback font stacks."""

    model_config = ConfigDict(frozen=True)

    heading: str = Field(DEFAULT_FONT_STACK, min_length=1)
    body: str = Field(DEFAULT_FONT_STACK, min_length=1)


class ThemeDefaults(BaseModel):
    """Theme values used when the content supplies none."""

    model_config = ConfigDict(frozen=True)

    colors: ThemeColors = Field(default_factory=ThemeColors)
    fonts: ThemeFonts = Field(default_factory=ThemeFonts)


class ContentDefaults(BaseModel):
    """Immutable defaults injected into the validator and normalizer."""

    model_config = ConfigDict(frozen=True)

    theme: ThemeDefaults = Field(default_factory=ThemeDefaults)
    cta_text: str = Field("Book a meeting", min_length=1, description="Label of hero/footer CTA")
    min_contrast: float = Field(4.5, ge=1.0, le=21.0, description="Minimum text/background contrast")

    @field_validator("cta_text")
    @classmethod
    def strip_cta_text(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("cta_text cannot be empty or whitespace-only")
        return stripped


class PublishingConfig(BaseModel):
    """Publish action settings."""

    site_url: str = Field(
        "http://localhost:3000", description="Public base URL used for page links and revalidation"
    )
    throttle_seconds: int = Field(
        15, ge=0, le=3600, description="Minimum seconds between publishes of one slug (0 disables)"
    )
    revalidate_timeout: float = Field(
        5.0, gt=0, le=60, description="Timeout for the cache revalidation request (seconds)"
    )

    @field_validator("site_url")
    @classmethod
    def validate_site_url(cls, v: str) -> str:
        stripped = v.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("site_url must start with http:// or https://")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(LogFormat.KEY_VALUE, description="Log output format")

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object."""

    content: ContentDefaults = Field(default_factory=ContentDefaults)
    publishing: PublishingConfig = Field(default_factory=PublishingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
