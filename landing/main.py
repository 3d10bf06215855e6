"""Command-line entry point for the landing content pipeline."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

from landing.config.environment import EnvironmentConfig
from landing.config.exceptions import ConfigurationError
from landing.config.loader import load_config
from landing.config.models import AppConfig
from landing.logging import get_logger
from landing.logging.config import configure_logging
from landing.persistence.database import close_database, get_session, init_database
from landing.persistence.exceptions import PersistenceError
from landing.persistence.repositories import LandingPageRepository
from landing.pipeline import ContentPipeline
from landing.publishing import PublishService, PublishThrottle, build_revalidator
from landing.theme import build_theme_variables

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


class InputError(Exception):
    """The content file could not be read or is not JSON."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landing",
        description="Landing content pipeline - validate, normalize, fingerprint and publish landing pages",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present, else built-in defaults)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "key-value"],
        help="Log output format (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate and normalize a content file")
    validate_parser.add_argument("file", help="Raw content JSON file ('-' for stdin)")
    validate_parser.add_argument(
        "--css", action="store_true", help="Include the theme's CSS custom properties in the output"
    )

    publish_parser = subparsers.add_parser("publish", help="Publish a content file under a slug")
    publish_parser.add_argument("file", help="Raw content JSON file ('-' for stdin)")
    publish_parser.add_argument("--slug", required=True, help="Page URL key, e.g. adient-cyngn-1025")
    publish_parser.add_argument("--buyer-id", required=True, help="Buyer identifier")
    publish_parser.add_argument("--seller-id", required=True, help="Seller identifier")
    publish_parser.add_argument("--mmyy", required=True, help="Campaign month-year, e.g. 1025")

    show_parser = subparsers.add_parser("show", help="Print a published page")
    show_parser.add_argument("slug", help="Page URL key")

    return parser


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str], log_format_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply CLI overrides.

    Log level priority: CLI > LOG_LEVEL environment variable > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    updates = {}
    if log_level_override:
        updates["level"] = log_level_override
    if log_format_override:
        updates["format"] = log_format_override
    if updates:
        app_config = app_config.model_copy(update={"logging": app_config.logging.model_copy(update=updates)})

    return app_config, env_config


def read_content(path: str) -> Any:
    """Read raw content JSON from a file path or '-' for stdin.

    Raises:
        InputError: If the file is unreadable, not UTF-8 or not valid JSON
    """
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def _print_json(document: Any) -> None:
    print(json.dumps(document, indent=2, ensure_ascii=False))


def run_validate(args: argparse.Namespace, app_config: AppConfig) -> int:
    raw = read_content(args.file)
    result = ContentPipeline(app_config.content).validate_and_normalize(raw)

    output = result.to_dict()
    if args.css and result.is_valid:
        output["cssVariables"] = build_theme_variables(result.normalized.theme)
    _print_json(output)

    logger.info(
        "Validation finished",
        extra={
            "event": "cli.validate.completed",
            "file": args.file,
            "is_valid": result.is_valid,
            "error_count": len(result.errors),
            "warning_count": len(result.warnings),
        },
    )
    return EXIT_OK if result.is_valid else EXIT_INVALID


def run_publish(args: argparse.Namespace, app_config: AppConfig, env_config: EnvironmentConfig) -> int:
    raw = read_content(args.file)
    meta = {
        "page_url_key": args.slug,
        "buyer_id": args.buyer_id,
        "seller_id": args.seller_id,
        "mmyy": args.mmyy,
    }

    publishing = app_config.publishing
    service = PublishService(
        pipeline=ContentPipeline(app_config.content),
        revalidator=build_revalidator(
            publishing.site_url, env_config.revalidate_secret, timeout=publishing.revalidate_timeout
        ),
        site_url=publishing.site_url,
        throttle=PublishThrottle(publishing.throttle_seconds),
    )

    init_database(env_config.database_url)
    try:
        result = service.publish(raw, meta)
    finally:
        close_database()

    _print_json(result.to_dict())
    return EXIT_OK if result.ok else EXIT_INVALID


def run_show(args: argparse.Namespace, env_config: EnvironmentConfig) -> int:
    init_database(env_config.database_url)
    try:
        with get_session() as session:
            page = LandingPageRepository(session).get_by_slug(args.slug)
    finally:
        close_database()

    if page is None:
        print(f"No published page with slug {args.slug!r}", file=sys.stderr)
        return EXIT_FAILURE

    _print_json(page.model_dump(mode="json"))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the landing CLI.

    Returns:
        Exit code: 0 success, 2 invalid content or publish refused, 1 other failures
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.log_format)
        configure_logging(
            level=app_config.logging.level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        if args.command == "validate":
            return run_validate(args, app_config)
        if args.command == "publish":
            return run_publish(args, app_config, env_config)
        return run_show(args, env_config)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except InputError as e:
        print(f"Input Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except PersistenceError as e:
        print(f"Database Error: {e}", file=sys.stderr)
        logger.error(
            f"Database error: {e}",
            extra={"event": "cli.database_error", "error_type": type(e).__name__},
        )
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
