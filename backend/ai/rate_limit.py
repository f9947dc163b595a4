"""
Sliding-window rate limiter for draft generation.

Keeps request timestamps per key and prunes entries older than the window
on each check. There is no background cleanup.
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from config import RATE_LIMIT_PER_HOUR
from .exceptions import RateLimitExceeded

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


class RateLimiter:
    """
    Allows at most ``limit`` requests per ``window`` seconds.

    All callers currently share DEFAULT_KEY, so the quota is process-wide.
    """

    def __init__(
        self,
        limit: int = RATE_LIMIT_PER_HOUR,
        window: float = 3600.0,
        clock: Callable[[], float] = time.time,
    ):
        self.limit = limit
        self.window = window
        self.clock = clock
        self.requests: Dict[str, List[float]] = {}

    def recent(self, key: str = DEFAULT_KEY, now: Optional[float] = None) -> List[float]:
        """Timestamps for ``key`` that are still inside the window."""
        now = self.clock() if now is None else now
        cutoff = now - self.window
        return [t for t in self.requests.get(key, []) if t > cutoff]

    def check(self, key: str = DEFAULT_KEY) -> None:
        """
        Record one request for ``key``.

        Raises:
            RateLimitExceeded: If the window is full. Stored timestamps are left as they were.
        """
        now = self.clock()
        recent = self.recent(key, now)

        if len(recent) >= self.limit:
            logger.warning(f"Rate limit hit for {key}: {len(recent)} requests in the last {int(self.window)}s")
            raise RateLimitExceeded(f"Rate limit exceeded: {self.limit} requests per hour")

        recent.append(now)
        self.requests[key] = recent
