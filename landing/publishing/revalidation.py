"""On-demand cache revalidation for published pages.

After a write that changed a page's fingerprint, the site must drop its
cached render tagged ``landing:<slug>``. HttpCacheRevalidator asks the site
to do that; NoopRevalidator stands in when no secret is configured.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests

from landing.logging import get_logger

from .exceptions import RevalidationError

logger = get_logger(__name__, component="revalidation")

REVALIDATE_PATH = "/api/revalidate"
SECRET_HEADER = "x-revalidate-secret"


def cache_tag_for(slug: str) -> str:
    """Cache tag of a published page.

    Example:
        >>> cache_tag_for("adient-cyngn-1025")
        'landing:adient-cyngn-1025'
    """
    return f"landing:{slug}"


class CacheRevalidator(ABC):
    """Invalidates the cached render of one page."""

    @abstractmethod
    def revalidate(self, slug: str) -> None:
        """Invalidate cache tag landing:<slug>.

        Raises:
            RevalidationError: If the cache could not be invalidated
        """
        pass


class HttpCacheRevalidator(CacheRevalidator):
    """POSTs the page's cache tag to the site's revalidation endpoint."""

    def __init__(
        self,
        site_url: str,
        secret: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            site_url: Site base URL, without trailing slash
            secret: Shared secret sent in the x-revalidate-secret header
            timeout: Request timeout in seconds
            session: requests session to reuse (a new one by default)
        """
        self.endpoint = f"{site_url.rstrip('/')}{REVALIDATE_PATH}"
        self.timeout = timeout
        self._secret = secret
        self._session = session or requests.Session()

    def revalidate(self, slug: str) -> None:
        tag = cache_tag_for(slug)

        try:
            response = self._session.post(
                self.endpoint,
                json={"tag": tag, "slug": slug},
                headers={SECRET_HEADER: self._secret},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise RevalidationError(
                f"Revalidation request timed out after {self.timeout} seconds", url=self.endpoint
            ) from e
        except requests.exceptions.RequestException as e:
            raise RevalidationError(f"Revalidation request failed: {e}", url=self.endpoint) from e

        if response.status_code >= 400:
            raise RevalidationError(
                f"Revalidation endpoint returned HTTP {response.status_code}: {response.reason}",
                url=self.endpoint,
                status_code=response.status_code,
            )

        logger.info(
            f"Revalidated {tag}",
            extra={"event": "revalidation.succeeded", "tag": tag, "status_code": response.status_code},
        )


class NoopRevalidator(CacheRevalidator):
    """Used when no revalidation secret is configured (local runs, tests)."""

    def revalidate(self, slug: str) -> None:
        logger.debug(
            f"Skipping revalidation of {cache_tag_for(slug)}; no secret configured",
            extra={"event": "revalidation.skipped", "tag": cache_tag_for(slug)},
        )


def build_revalidator(site_url: str, secret: Optional[str], timeout: float = 5.0) -> CacheRevalidator:
    """HTTP revalidator when a secret is configured, otherwise a no-op."""
    if not secret:
        return NoopRevalidator()
    return HttpCacheRevalidator(site_url, secret, timeout=timeout)
