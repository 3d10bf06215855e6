"""Configuration management for the landing content pipeline."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    ContentDefaults,
    LogFormat,
    LogLevel,
    LoggingConfig,
    PublishingConfig,
    ThemeColors,
    ThemeDefaults,
    ThemeFonts,
)

__all__ = [
    # Loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ContentDefaults",
    "ThemeDefaults",
    "ThemeColors",
    "ThemeFonts",
    "PublishingConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
