"""Token-bucket throttling for outbound API calls.

The Notion API allows an average of three requests per second per
integration. The sync issues calls strictly one after another, so a single
shared bucket in front of every call is enough to stay under that budget.
Throttling only delays calls; it never retries a failed one.
"""

import time
import logging
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_REQUESTS_PER_SECOND = 3.0


class RateLimiter:
    """Token bucket that blocks the caller until a request slot is free.

    Args:
        requests_per_second: Sustained refill rate of the bucket
        burst: Bucket capacity (defaults to one second's worth of tokens)

    Raises:
        ValueError: If requests_per_second is not positive

    Example:
        >>> limiter = RateLimiter(requests_per_second=3)
        >>> page = limiter.call(client.pages.retrieve, page_id="abc")
    """

    def __init__(self, requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND,
                 burst: Optional[int] = None):
        if requests_per_second <= 0:
            raise ValueError(
                f"requests_per_second must be positive, got {requests_per_second}"
            )
        self.rate = float(requests_per_second)
        self.capacity = float(burst if burst is not None else max(1, int(self.rate)))
        self._tokens = self.capacity
        self._last_refill = time.monotonic()

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._last_refill
        self._last_refill = now
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)

    def acquire(self) -> float:
        """Take one token, sleeping until one is available.

        Returns:
            Seconds spent waiting (0.0 when a token was immediately available)
        """
        self._refill()
        if self._tokens >= 1:
            self._tokens -= 1
            return 0.0

        wait_time = (1 - self._tokens) / self.rate
        logger.debug(f"Throttling request for {wait_time:.2f}s")
        time.sleep(wait_time)
        self._refill()
        self._tokens = max(0.0, self._tokens - 1)
        return wait_time

    def call(self, func: Callable[..., T], *args, **kwargs) -> T:
        """Acquire a token, then invoke func with the given arguments."""
        self.acquire()
        return func(*args, **kwargs)
