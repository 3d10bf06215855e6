"""Database schema definition and ORM models.

This module defines the landing_pages table and conversion between the ORM
row and the PublishedLanding domain model.
"""

import json
import logging
from typing import Any, Dict

from sqlalchemy import Column, Index, String, Text, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from landing.domain.models import PublishedLanding
from landing.utils.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)

Base = declarative_base()


class LandingPageModel(Base):
    """ORM model for the landing_pages table.

    One row per published page, keyed by its global slug. content_sha is the
    fingerprint of normalized_content and guards compare-and-swap updates.
    """

    __tablename__ = "landing_pages"

    page_url_key = Column(String(100), primary_key=True, nullable=False)

    buyer_id = Column(String(50), nullable=False)
    seller_id = Column(String(50), nullable=False)
    mmyy = Column(String(4), nullable=False)
    status = Column(String(20), nullable=False, default="published")

    # JSON documents stored as text
    raw_content = Column(Text, nullable=False)
    normalized_content = Column(Text, nullable=False)
    content_sha = Column(String(64), nullable=False)

    # Timestamps (stored as ISO 8601 strings)
    published_at = Column(String(50), nullable=False)
    updated_at = Column(String(50), nullable=False)

    __table_args__ = (
        Index("idx_landing_pages_buyer_seller", "buyer_id", "seller_id"),
        Index("idx_landing_pages_updated", "updated_at"),
    )

    def to_domain(self) -> PublishedLanding:
        return PublishedLanding(
            page_url_key=self.page_url_key,
            buyer_id=self.buyer_id,
            seller_id=self.seller_id,
            mmyy=self.mmyy,
            status=self.status,
            raw_content=_load_json(self.raw_content),
            normalized_content=_load_json(self.normalized_content),
            content_sha=self.content_sha,
            published_at=parse_timestamp(self.published_at),
            updated_at=parse_timestamp(self.updated_at),
        )

    @classmethod
    def from_domain(cls, page: PublishedLanding) -> "LandingPageModel":
        return cls(
            page_url_key=page.page_url_key,
            buyer_id=page.buyer_id,
            seller_id=page.seller_id,
            mmyy=page.mmyy,
            status=page.status,
            raw_content=dump_json(page.raw_content),
            normalized_content=dump_json(page.normalized_content),
            content_sha=page.content_sha,
            published_at=format_timestamp(page.published_at),
            updated_at=format_timestamp(page.updated_at),
        )


def dump_json(document: Dict[str, Any]) -> str:
    """Serialize a JSON document for a text column."""
    return json.dumps(document, ensure_ascii=False, sort_keys=True)


def _load_json(stored: str) -> Dict[str, Any]:
    return json.loads(stored)


def create_schema(engine: Engine) -> None:
    """Create all tables and indexes if they don't exist (idempotent).

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.create_all(engine, checkfirst=True)
    tables = inspect(engine).get_table_names()
    logger.info(f"Database schema ready. Tables: {', '.join(tables)}")
