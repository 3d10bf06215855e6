"""Scoped logging context.

Fields pushed here (slug, content_sha, ...) are merged into every log record
emitted while the scope is active. Backed by contextvars so concurrent
publishes in different threads or tasks never see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

_log_context: ContextVar[Dict[str, Any]] = ContextVar("landing_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current scope."""
    return dict(_log_context.get())


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the active context.

    Returns:
        Token to hand back to pop_log_context() to restore the previous state
    """
    return _log_context.set({**_log_context.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context captured by push_log_context()."""
    _log_context.reset(token)


def clear_log_context() -> None:
    """Drop every field from the active context (used by tests)."""
    _log_context.set({})


class log_context:
    """Context manager binding fields for the duration of a block.

    Example:
        >>> with log_context(slug="acme-globex-1025"):
        ...     logger.info("Publishing")  # record carries slug
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
