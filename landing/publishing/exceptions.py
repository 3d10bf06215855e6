"""Custom exceptions for the publish action."""

from typing import Optional


class PublishError(Exception):
    """Base exception for publish collaborators."""

    pass


class RevalidationError(PublishError):
    """Cache revalidation request failed.

    A failed revalidation never fails a publish: the page is stored and the
    cache expires on its own schedule.
    """

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        """Initialize with the endpoint and, for HTTP errors, the status code.

        Args:
            message: Human-readable error message
            url: Revalidation endpoint that failed
            status_code: HTTP status code, or None for network errors
        """
        super().__init__(message)
        self.url = url
        self.status_code = status_code
