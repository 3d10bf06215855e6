"""Unit tests for persistence layer."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError

from landing.domain.models import PublishedLanding
from landing.persistence import (
    DatabaseConnectionError,
    LandingPageRepository,
    PersistenceError,
    close_database,
    get_engine,
    get_session,
    init_database,
)
from landing.persistence.schema import LandingPageModel
from landing.pipeline import validate_and_normalize

PUBLISHED_AT = datetime(2025, 10, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_page(minimal_content):
    """Build a PublishedLanding from the minimal document."""

    def _make(slug="adient-cyngn-1025", raw=None, updated_at=PUBLISHED_AT):
        raw = raw or minimal_content
        result = validate_and_normalize(raw)
        return PublishedLanding(
            page_url_key=slug,
            buyer_id="adient",
            seller_id="cyngn",
            mmyy="1025",
            raw_content=raw,
            normalized_content=result.normalized.to_json_dict(),
            content_sha=result.content_sha,
            published_at=updated_at,
            updated_at=updated_at,
        )

    return _make


class TestDatabaseInitialization:
    """Tests for database initialization."""

    def test_init_database_success(self, tmp_path):
        """Test successful database initialization."""
        db_file = tmp_path / "test.db"

        init_database(f"sqlite:///{db_file}")

        assert db_file.exists()
        with get_session() as session:
            assert session is not None

        close_database()

    def test_init_database_creates_parent_directories(self, tmp_path):
        """Test initialization creates parent directories if missing."""
        db_file = tmp_path / "subdir" / "nested" / "test.db"

        init_database(f"sqlite:///{db_file}")

        assert db_file.exists()
        close_database()

    def test_init_database_in_memory(self):
        """Test in-memory databases share their tables across sessions."""
        init_database("sqlite:///:memory:")

        with get_session() as session:
            session.execute(text("SELECT COUNT(*) FROM landing_pages"))
        with get_session() as session:
            session.execute(text("SELECT COUNT(*) FROM landing_pages"))

        close_database()

    def test_init_database_invalid_url_raises_error(self):
        """Test initialization with invalid URL raises DatabaseConnectionError."""
        with pytest.raises(DatabaseConnectionError):
            init_database("")

        with pytest.raises(DatabaseConnectionError):
            init_database(None)

        with pytest.raises(DatabaseConnectionError):
            init_database("not a url")

    def test_schema_creation_is_idempotent(self, tmp_path):
        """Test initializing twice against the same file works."""
        db_url = f"sqlite:///{tmp_path / 'test.db'}"

        init_database(db_url)
        close_database()
        init_database(db_url)

        assert "landing_pages" in inspect(get_engine()).get_table_names()
        close_database()

    def test_session_before_init_raises(self):
        """Test get_session() without init_database() fails clearly."""
        close_database()

        with pytest.raises(DatabaseConnectionError):
            with get_session():
                pass

    def test_close_database_is_safe_twice(self):
        """Test closing an uninitialized database is a no-op."""
        close_database()
        close_database()


class TestLandingPageRepository:
    """Tests for LandingPageRepository."""

    def test_get_missing_page(self, database):
        """Test unknown slugs return None."""
        with get_session() as session:
            repo = LandingPageRepository(session)

            assert repo.get_by_slug("nope") is None
            assert repo.get_content_sha("nope") is None

    def test_insert_and_read_back(self, database, make_page):
        """Test a first write inserts the page."""
        page = make_page()

        with get_session() as session:
            assert LandingPageRepository(session).compare_and_swap(page, None)

        with get_session() as session:
            stored = LandingPageRepository(session).get_by_slug(page.page_url_key)

        assert stored == page
        assert stored.normalized.title == "Cut forklift labor costs by 40%"

    def test_insert_refused_when_page_exists(self, database, make_page):
        """Test expecting no page fails once the slug is taken."""
        page = make_page()
        with get_session() as session:
            LandingPageRepository(session).compare_and_swap(page, None)

        with get_session() as session:
            assert not LandingPageRepository(session).compare_and_swap(page, None)

    def test_update_with_expected_sha(self, database, make_page, make_content):
        """Test an update succeeds against the current fingerprint and keeps published_at."""
        first = make_page()
        later = PUBLISHED_AT + timedelta(hours=1)
        second = make_page(
            raw=make_content(biggestBusinessBenefitBuyerStatement="Cut costs by 50%"), updated_at=later
        )

        with get_session() as session:
            LandingPageRepository(session).compare_and_swap(first, None)
        with get_session() as session:
            assert LandingPageRepository(session).compare_and_swap(second, first.content_sha)

        with get_session() as session:
            stored = LandingPageRepository(session).get_by_slug(first.page_url_key)

        assert stored.content_sha == second.content_sha
        assert stored.published_at == PUBLISHED_AT
        assert stored.updated_at == later
        assert stored.raw_content["biggestBusinessBenefitBuyerStatement"] == "Cut costs by 50%"

    def test_update_with_stale_sha_refused(self, database, make_page, make_content):
        """Test a writer holding an old fingerprint loses."""
        first = make_page()
        second = make_page(raw=make_content(biggestBusinessBenefitBuyerStatement="Version two"))

        with get_session() as session:
            LandingPageRepository(session).compare_and_swap(first, None)

        with get_session() as session:
            assert not LandingPageRepository(session).compare_and_swap(second, "0" * 64)

        with get_session() as session:
            assert LandingPageRepository(session).get_content_sha(first.page_url_key) == first.content_sha

    def test_update_of_missing_page_refused(self, database, make_page):
        """Test an update expecting a fingerprint fails when nothing is stored."""
        with get_session() as session:
            assert not LandingPageRepository(session).compare_and_swap(make_page(), "0" * 64)

    def test_list_published_newest_first(self, database, make_page):
        """Test listing orders by last update."""
        with get_session() as session:
            repo = LandingPageRepository(session)
            repo.compare_and_swap(make_page(slug="older-page-0925", updated_at=PUBLISHED_AT), None)
            repo.compare_and_swap(
                make_page(slug="newer-page-1025", updated_at=PUBLISHED_AT + timedelta(days=1)), None
            )

        with get_session() as session:
            pages = LandingPageRepository(session).list_published()

        assert [page.page_url_key for page in pages] == ["newer-page-1025", "older-page-0925"]

    def test_list_published_limit(self, database, make_page):
        """Test the limit caps the result."""
        with get_session() as session:
            repo = LandingPageRepository(session)
            for index in range(3):
                repo.compare_and_swap(make_page(slug=f"page-{index}"), None)

        with get_session() as session:
            assert len(LandingPageRepository(session).list_published(limit=2)) == 2

    def test_database_errors_wrapped(self):
        """Test SQLAlchemy failures surface as PersistenceError."""
        session = Mock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))

        with pytest.raises(PersistenceError):
            LandingPageRepository(session).get_content_sha("adient-cyngn-1025")

    def test_json_columns_sorted(self, database, make_page):
        """Test stored JSON text is written with sorted keys."""
        page = make_page()
        with get_session() as session:
            LandingPageRepository(session).compare_and_swap(page, None)

        with get_session() as session:
            row = session.get(LandingPageModel, page.page_url_key)
            keys = list(json.loads(row.normalized_content))

        assert keys == sorted(keys)
