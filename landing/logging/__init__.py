"""Structured logging helpers shared by every pipeline component."""

import logging
from typing import Optional


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that injects a default component into every record.

    Fields passed through ``extra`` at call time win over the adapter's own.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, component: Optional[str] = None):
    """Get a logger, optionally bound to a component name.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier added to all records from this logger

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="validation")
        >>> logger.info("Content validated", extra={"event": "validation.completed"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
