"""Publish action: validate, fingerprint, store and revalidate a landing page.

Flow:
1. Validate publish metadata (slug, buyer_id, seller_id, mmyy)
2. Refuse rapid re-writes of the same slug (throttle)
3. Run the content pipeline
4. Compare the new fingerprint with the stored one; equal means no-op
5. Compare-and-swap write keyed by slug
6. Revalidate cache tag landing:<slug>
7. Return the public URL

Re-publishing identical content is idempotent: nothing is written and no
cache is invalidated.
"""

import logging
import math
import time
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from landing.domain.models import PublishedLanding
from landing.logging import get_logger
from landing.logging.context import log_context
from landing.persistence.database import get_session
from landing.persistence.exceptions import DataIntegrityError, PersistenceError
from landing.persistence.repositories import LandingPageRepository
from landing.pipeline.runner import ContentPipeline
from landing.utils.hashing import compare_sha
from landing.utils.timestamps import utc_now

from .exceptions import RevalidationError
from .models import PublishMeta, PublishResult
from .revalidation import CacheRevalidator, cache_tag_for
from .throttle import PublishThrottle

logger = get_logger(__name__, component="publishing")


class PublishService:
    """
    Publishes landing pages through the content pipeline.

    The service owns the fingerprint-compare-then-write step; concurrent
    publishes of one slug are serialized by the repository's compare-and-swap.
    """

    def __init__(
        self,
        pipeline: ContentPipeline,
        revalidator: CacheRevalidator,
        site_url: str,
        throttle: Optional[PublishThrottle] = None,
        session_factory: Callable[[], ContextManager[Session]] = get_session,
        clock: Callable[[], datetime] = utc_now,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize the publish service.

        Args:
            pipeline: Content pipeline (validate → normalize → fingerprint)
            revalidator: Cache revalidation collaborator
            site_url: Public base URL used to build page links
            throttle: Per-slug throttle (default: 15 second window)
            session_factory: Context manager yielding a transactional session
            clock: UTC time source for stored timestamps
            logger_instance: Logger instance (defaults to module logger)
        """
        self.pipeline = pipeline
        self.revalidator = revalidator
        self.site_url = site_url.rstrip("/")
        self.throttle = throttle or PublishThrottle(15)
        self.session_factory = session_factory
        self.clock = clock
        self.logger = logger_instance or logger

    def page_url(self, slug: str) -> str:
        return f"{self.site_url}/p/{slug}"

    def publish(self, raw: Any, meta: Any) -> PublishResult:
        """
        Publish raw content under the slug given in meta.

        Args:
            raw: Raw landing content JSON
            meta: PublishMeta or a dict with its fields

        Returns:
            PublishResult; ok is False for invalid input, throttling,
            a lost write race or a storage failure
        """
        if raw is None:
            return PublishResult(ok=False, error="Content is required")
        if meta is None:
            return PublishResult(ok=False, error="Metadata is required")

        try:
            publish_meta = meta if isinstance(meta, PublishMeta) else PublishMeta.model_validate(meta)
        except ValidationError as e:
            self.logger.warning(
                "Invalid publish metadata",
                extra={"event": "publish.meta.invalid", "error_count": e.error_count()},
            )
            return PublishResult(
                ok=False,
                error="Invalid publish metadata",
                validation_errors=[
                    {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]}
                    for error in e.errors()
                ],
            )

        with log_context(slug=publish_meta.page_url_key):
            return self._publish(raw, publish_meta)

    def _publish(self, raw: Any, meta: PublishMeta) -> PublishResult:
        slug = meta.page_url_key
        started = time.perf_counter()

        wait = self.throttle.retry_after(slug)
        if wait > 0:
            self.logger.warning(
                "Publish throttled",
                extra={"event": "publish.throttled", "retry_after_seconds": round(wait, 1)},
            )
            return PublishResult(
                ok=False,
                error=f"Publishing too quickly; try again in {math.ceil(wait)} seconds",
            )

        result = self.pipeline.validate_and_normalize(raw)
        if not result.is_valid:
            return PublishResult(
                ok=False,
                error="Content failed validation",
                validation_errors=[issue.to_dict() for issue in result.errors],
            )

        now = self.clock()
        page = PublishedLanding(
            page_url_key=slug,
            buyer_id=meta.buyer_id,
            seller_id=meta.seller_id,
            mmyy=meta.mmyy,
            raw_content=raw,
            normalized_content=result.normalized.to_json_dict(),
            content_sha=result.content_sha,
            published_at=now,
            updated_at=now,
        )

        try:
            with self.session_factory() as session:
                repo = LandingPageRepository(session)
                stored_sha = repo.get_content_sha(slug)

                if compare_sha(stored_sha, result.content_sha):
                    self.logger.info(
                        "Content unchanged; skipping write and revalidation",
                        extra={"event": "publish.unchanged", "content_sha": result.content_sha},
                    )
                    return PublishResult(
                        ok=True, url=self.page_url(slug), content_sha=result.content_sha, changed=False
                    )

                written = repo.compare_and_swap(page, stored_sha)
        except DataIntegrityError:
            written = False
        except PersistenceError as e:
            self.logger.error(
                f"Failed to store landing page: {e}",
                extra={"event": "publish.store_failed", "error_type": type(e).__name__},
            )
            return PublishResult(ok=False, content_sha=result.content_sha, error="Failed to store landing page")

        if not written:
            self.logger.warning(
                "Landing page changed concurrently; publish not applied",
                extra={"event": "publish.conflict", "content_sha": result.content_sha},
            )
            return PublishResult(
                ok=False,
                content_sha=result.content_sha,
                error="Landing page was updated by another publish; reload and try again",
            )

        self.throttle.mark(slug)

        try:
            self.revalidator.revalidate(slug)
        except RevalidationError as e:
            self.logger.warning(
                f"Cache revalidation failed: {e}",
                extra={
                    "event": "publish.revalidation_failed",
                    "tag": cache_tag_for(slug),
                    "status_code": e.status_code,
                },
            )

        self.logger.info(
            "Landing page published",
            extra={
                "event": "publish.completed",
                "content_sha": result.content_sha,
                "previous_sha": stored_sha,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )

        return PublishResult(ok=True, url=self.page_url(slug), content_sha=result.content_sha, changed=True)
