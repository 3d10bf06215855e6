"""Per-slug publish throttle.

The throttle lives in process memory; separate processes each keep their
own window.
"""

import threading
import time
from typing import Callable, Dict


class PublishThrottle:
    """Refuses a second content change to the same slug within a time window."""

    def __init__(self, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the throttle.

        Args:
            window_seconds: Minimum seconds between writes to one slug (0 disables)
            clock: Monotonic time source, injectable for tests
        """
        self.window_seconds = window_seconds
        self._clock = clock
        self._last_write: Dict[str, float] = {}
        self._lock = threading.Lock()

    def retry_after(self, slug: str) -> float:
        """Seconds until slug may be written again (0.0 when allowed now)."""
        with self._lock:
            last = self._last_write.get(slug)
            if last is None:
                return 0.0
            return max(0.0, self.window_seconds - (self._clock() - last))

    def is_throttled(self, slug: str) -> bool:
        return self.retry_after(slug) > 0

    def mark(self, slug: str) -> None:
        """Record a write to slug and forget slugs whose window has passed."""
        with self._lock:
            now = self._clock()
            self._last_write = {
                key: stamp for key, stamp in self._last_write.items() if now - stamp < self.window_seconds
            }
            if self.window_seconds > 0:
                self._last_write[slug] = now
