import logging
import time
from typing import Callable, Optional
from fastapi import Request
from service.redis import Redis
import error

logger = logging.getLogger(__name__)


def get_client_id(request: Request) -> str:
    """Extract client identifier from request."""
    # The service sits behind a single proxy, trust its forwarding headers
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


class FixedWindowRateLimiter:
    """
    Counts requests per client in windows aligned to multiples of
    window_seconds. Counters live in Redis and expire with their window.

    Used as a route dependency; raises RateLimitError once a client
    goes over the limit. When Redis cannot be reached the request
    is let through.
    """

    def __init__(
        self,
        scope: str,
        limit: int,
        window_seconds: int,
        enabled: bool = True,
        counter=None,
        clock: Callable[[], float] = time.time,
    ):
        self.scope = scope
        self.limit = limit
        self.window_seconds = window_seconds
        self.enabled = enabled
        self._counter = counter
        self._clock = clock

    @property
    def counter(self):
        if self._counter is None:
            self._counter = Redis()
        return self._counter

    def window_key(self, client_id: str, now: Optional[float] = None) -> str:
        now = self._clock() if now is None else now
        window = int(now // self.window_seconds)
        return f"rate-limit:{self.scope}:{client_id}:{window}"

    def __call__(self, request: Request) -> None:
        if not self.enabled:
            return

        client_id = get_client_id(request)
        key = self.window_key(client_id)
        count = self.counter.increment(key)
        if count is None:
            logger.warning(f"Rate limit counter unavailable, allowing {client_id}")
            return

        if count == 1:
            self.counter.expire(key, self.window_seconds)

        if count > self.limit:
            logger.warning(
                f"Rate limit exceeded for {client_id} on {self.scope} "
                f"({count}/{self.limit})"
            )
            raise error.RateLimitError()
