"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

DEFAULT_DATABASE_URL = "sqlite:///./data/landing_pages.db"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Settings that come from the process environment (secrets, URLs)."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        site_url: Optional[str] = None,
        revalidate_secret: Optional[str] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.database_url = database_url or DEFAULT_DATABASE_URL
        self.site_url = site_url.rstrip("/") if site_url else None
        self.revalidate_secret = revalidate_secret
        self.log_level = log_level
        self.environment = environment or "local"

    def __repr__(self) -> str:
        # Never print the secret
        return (
            f"EnvironmentConfig(database_url={self.database_url!r}, site_url={self.site_url!r}, "
            f"revalidate_secret={'***' if self.revalidate_secret else None}, "
            f"log_level={self.log_level!r}, environment={self.environment!r})"
        )


def load_environment_config() -> EnvironmentConfig:
    """Load and validate environment variables.

    All variables are optional:
    - DATABASE_URL: SQLAlchemy URL (default: sqlite:///./data/landing_pages.db)
    - SITE_URL: public base URL; overrides publishing.site_url from the config file
    - REVALIDATE_SECRET: shared secret for the cache revalidation endpoint
    - LOG_LEVEL: overrides logging.level from the config file
    - ENVIRONMENT: label stamped on log records (default: local)

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    database_url = os.getenv("DATABASE_URL")
    site_url = os.getenv("SITE_URL")
    revalidate_secret = os.getenv("REVALIDATE_SECRET")
    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")

    if database_url is not None and "://" not in database_url:
        errors.append(f"Invalid DATABASE_URL: '{database_url}'. Expected a URL such as sqlite:///path.db")

    if site_url and not site_url.startswith(("http://", "https://")):
        errors.append(f"Invalid SITE_URL: '{site_url}'. Must start with http:// or https://")

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if revalidate_secret is not None and not revalidate_secret.strip():
        errors.append("REVALIDATE_SECRET is set but empty")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        database_url=database_url,
        site_url=site_url,
        revalidate_secret=revalidate_secret,
        log_level=log_level.upper() if log_level else None,
        environment=environment,
    )
