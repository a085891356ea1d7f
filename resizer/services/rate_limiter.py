"""Fixed-window request counter keyed by client address.

Counts live for the lifetime of the process only.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, Tuple

from resizer.config import get_settings
from resizer.errors import RateLimitExceededError

logger = logging.getLogger(__name__)
settings = get_settings()

LIMIT_MESSAGE = "Limit reached: at most {max} descriptions per hour. Try again later."


class FixedWindowRateLimiter:
    """Allow ``max_requests`` hits per ``window_seconds`` for each key."""

    def __init__(
        self,
        *,
        max_requests: int = 10,
        window_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}  # key -> (window start, hits)
        self._lock = threading.Lock()

    def hit(self, key: str) -> bool:
        """Record one request for *key*; return False when it is over the cap."""

        now = self._clock()
        with self._lock:
            self._drop_elapsed(now)
            started, hits = self._windows.get(key, (now, 0))
            hits += 1
            self._windows[key] = (started, hits)
        if hits > self.max_requests:
            logger.info("Rate limit exceeded for %s (%d hits)", key, hits)
            return False
        return True

    def check(self, key: str) -> None:
        """Like :meth:`hit` but raise ``RateLimitExceededError`` when over the cap."""

        if not self.hit(key):
            raise RateLimitExceededError(LIMIT_MESSAGE.format(max=self.max_requests))

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _drop_elapsed(self, now: float) -> None:
        elapsed = [k for k, (started, _) in self._windows.items() if now - started >= self.window_seconds]
        for k in elapsed:
            del self._windows[k]


# Singleton instance
copy_rate_limiter = FixedWindowRateLimiter(
    max_requests=settings.rate_limit_max_requests,
    window_seconds=settings.rate_limit_window_seconds,
)


def get_rate_limiter() -> FixedWindowRateLimiter:
    return copy_rate_limiter
