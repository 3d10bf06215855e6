"""Shared fixtures for landing pipeline tests."""

import copy
import json
from pathlib import Path

import pytest

from landing.logging.context import clear_log_context
from landing.persistence.database import close_database, init_database

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def full_content():
    """Every section populated, brand colors readable, Vimeo demo link."""
    return load_fixture("full_content.json")


@pytest.fixture
def minimal_content():
    """Headline plus one option: the smallest valid document."""
    return load_fixture("minimal_content.json")


@pytest.fixture
def invalid_content():
    """No headline, http scheduler link, no content sections."""
    return load_fixture("invalid_content.json")


@pytest.fixture
def make_content(minimal_content):
    """Build a document from the minimal one with top-level overrides."""

    def _make(**overrides):
        content = copy.deepcopy(minimal_content)
        content.update(overrides)
        return content

    return _make


@pytest.fixture
def database(tmp_path):
    """Initialized SQLite database in a temp directory."""
    init_database(f"sqlite:///{tmp_path / 'landing_pages.db'}")
    yield
    close_database()


@pytest.fixture(autouse=True)
def clean_log_context():
    clear_log_context()
    yield
    clear_log_context()
