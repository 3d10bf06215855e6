"""Data access layer for published landing pages.

LandingPageRepository returns domain models rather than ORM rows and wraps
every SQLAlchemy failure in PersistenceError.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from landing.domain.models import PublishedLanding
from landing.utils.timestamps import format_timestamp

from .exceptions import DataIntegrityError, PersistenceError
from .schema import LandingPageModel, dump_json

logger = logging.getLogger(__name__)


class LandingPageRepository:
    """Repository for landing page database operations."""

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_slug(self, page_url_key: str) -> Optional[PublishedLanding]:
        """Retrieve a page by slug.

        Returns:
            PublishedLanding if found, None otherwise

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            page_model = self.session.get(LandingPageModel, page_url_key)
            return page_model.to_domain() if page_model else None
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving landing page {page_url_key}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve landing page: {e}") from e

    def get_content_sha(self, page_url_key: str) -> Optional[str]:
        """Stored fingerprint for a slug, or None if the page does not exist.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = select(LandingPageModel.content_sha).where(LandingPageModel.page_url_key == page_url_key)
            return self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error reading content_sha for {page_url_key}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to read content fingerprint: {e}") from e

    def compare_and_swap(self, page: PublishedLanding, expected_sha: Optional[str]) -> bool:
        """Write a page only if its stored fingerprint is still expected_sha.

        With expected_sha None the page must not exist yet and is inserted.
        Otherwise the row is updated only while its content_sha equals
        expected_sha; published_at keeps its first value.

        Args:
            page: Page to store
            expected_sha: Fingerprint read before deciding to write

        Returns:
            True if the write happened, False if another writer got there first

        Raises:
            DataIntegrityError: If a concurrent insert of the same slug wins at flush time
            PersistenceError: If database error occurs
        """
        try:
            if expected_sha is None:
                if self.session.get(LandingPageModel, page.page_url_key) is not None:
                    return False
                self.session.add(LandingPageModel.from_domain(page))
                self.session.flush()
                return True

            stmt = (
                update(LandingPageModel)
                .where(
                    LandingPageModel.page_url_key == page.page_url_key,
                    LandingPageModel.content_sha == expected_sha,
                )
                .values(
                    buyer_id=page.buyer_id,
                    seller_id=page.seller_id,
                    mmyy=page.mmyy,
                    status=page.status,
                    raw_content=dump_json(page.raw_content),
                    normalized_content=dump_json(page.normalized_content),
                    content_sha=page.content_sha,
                    updated_at=format_timestamp(page.updated_at),
                )
                .execution_options(synchronize_session=False)
            )
            result = self.session.execute(stmt)
            self.session.flush()
            return result.rowcount == 1

        except IntegrityError as e:
            logger.error(f"Integrity error writing landing page {page.page_url_key}: {e}", exc_info=True)
            raise DataIntegrityError(f"Landing page {page.page_url_key} was written concurrently: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error writing landing page {page.page_url_key}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to write landing page: {e}") from e

    def list_published(self, limit: int = 50) -> List[PublishedLanding]:
        """Most recently updated published pages first.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                select(LandingPageModel)
                .where(LandingPageModel.status == "published")
                .order_by(LandingPageModel.updated_at.desc())
                .limit(limit)
            )
            return [page_model.to_domain() for page_model in self.session.execute(stmt).scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing landing pages: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list landing pages: {e}") from e
