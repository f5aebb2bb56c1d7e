"""Token-bucket rate limiting for aumai-cfguard."""

from __future__ import annotations

import asyncio
import math
import time
from collections.abc import Awaitable, Callable

from aumai_cfguard.errors import RateLimitTimeout
from aumai_cfguard.models import BucketSnapshot

DEFAULT_CAPACITY = 100
DEFAULT_REFILL_RATE = 10.0


class TokenBucketRateLimiter:
    """Process-wide token bucket consulted before every outbound call.

    Tokens refill continuously at *refill_rate* per second up to *capacity*;
    each admitted call consumes exactly one.  Waiters queue on an
    ``asyncio.Lock`` so refill-and-decrement is atomic and callers are
    admitted in arrival order.

    *clock* and *sleep* are injectable so tests can drive time by hand.

    Example::

        limiter = TokenBucketRateLimiter(capacity=5, refill_rate=1.0)
        await limiter.acquire()
        print(limiter.available_tokens())  # 4
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        refill_rate: float = DEFAULT_REFILL_RATE,
        *,
        initial_tokens: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if refill_rate <= 0:
            raise ValueError("refill_rate must be positive")
        self._capacity = capacity
        self._refill_rate = float(refill_rate)
        start = float(capacity) if initial_tokens is None else float(initial_tokens)
        self._tokens = min(float(capacity), max(0.0, start))
        self._clock = clock
        self._sleep = sleep
        self._last_refill = clock()
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._refill_rate

    async def acquire(self, timeout: float | None = None) -> None:
        """Wait until a token is available, then consume it.

        Args:
            timeout: Optional bound in seconds on the wait for a token once
                this caller reaches the head of the queue.  ``None`` waits
                indefinitely.

        Raises:
            RateLimitTimeout: When *timeout* is set and the bucket cannot
                supply a token before the deadline.  No token is consumed.
        """
        async with self._lock:
            deadline = None if timeout is None else self._clock() + timeout
            while True:
                self._refill()
                if self._tokens >= 1.0:
                    self._tokens -= 1.0
                    return
                wait = (1.0 - self._tokens) / self._refill_rate
                if deadline is not None and self._clock() + wait > deadline:
                    raise RateLimitTimeout(
                        f"no rate-limit token available within {timeout:g}s"
                    )
                await self._sleep(wait)

    def available_tokens(self) -> int:
        """Return the whole number of tokens available now without consuming any."""
        self._refill()
        return math.floor(self._tokens)

    def snapshot(self) -> BucketSnapshot:
        """Return the current bucket state after applying elapsed refill."""
        self._refill()
        return BucketSnapshot(
            capacity=self._capacity,
            tokens=self._tokens,
            refill_rate=self._refill_rate,
            last_refill=self._last_refill,
        )

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self._capacity), self._tokens + elapsed * self._refill_rate)
        self._last_refill = now


__all__ = ["DEFAULT_CAPACITY", "DEFAULT_REFILL_RATE", "TokenBucketRateLimiter"]
