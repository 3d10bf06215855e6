#!/usr/bin/env python3
"""Sample validation harness for eyeballing pipeline output.

Runs every JSON file in a directory through validate_and_normalize() and
prints a summary table plus the issues found, without running pytest.

Usage:
    # Run against the bundled fixtures
    python scripts/run_sample_validation.py

    # Custom fixtures directory and config
    python scripts/run_sample_validation.py --fixtures path/to/json --config config.yaml
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from landing.config.loader import load_config
from landing.logging.config import configure_logging
from landing.pipeline import ContentPipeline


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print one line per file: validity, issue counts and fingerprint prefix."""
    print_header("Validation Summary")
    print(f"{'File':<32} {'Valid':<6} {'Errors':>6} {'Warnings':>8}  SHA")
    print("-" * 80)
    for name, result in rows:
        sha = result.content_sha[:12] if result.content_sha else "-"
        print(
            f"{name:<32} {'yes' if result.is_valid else 'no':<6} "
            f"{len(result.errors):>6} {len(result.warnings):>8}  {sha}"
        )


def print_issues(rows):
    """Print every error and warning, grouped by file."""
    for name, result in rows:
        if not result.errors and not result.warnings:
            continue
        print_header(f"Issues: {name}")
        for issue in result.errors:
            print(f"  ✗ {issue.code:<15} {issue.field or '-':<45} {issue.message}")
        for issue in result.warnings:
            print(f"  ! {issue.code:<15} {issue.field or '-':<45} {issue.message}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run sample content through the landing pipeline")
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=Path(__file__).parent.parent / "tests" / "fixtures",
        help="Directory of raw content JSON files (default: tests/fixtures)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Optional configuration file")
    args = parser.parse_args()

    app_config, env_config = load_config(args.config)
    configure_logging(level="WARNING", format_type="key-value", environment=env_config.environment)

    files = sorted(args.fixtures.glob("*.json"))
    if not files:
        print(f"✗ No JSON files found in {args.fixtures}")
        return 1

    pipeline = ContentPipeline(app_config.content)
    rows = []
    for path in files:
        with open(path, "r", encoding="utf-8") as f:
            rows.append((path.name, pipeline.validate_and_normalize(json.load(f))))

    print_summary_table(rows)
    print_issues(rows)

    return 0 if all(result.is_valid for _, result in rows) else 2


if __name__ == "__main__":
    sys.exit(main())
