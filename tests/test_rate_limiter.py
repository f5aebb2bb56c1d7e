"""Tests for aumai_cfguard.rate_limiter."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from aumai_cfguard.errors import RateLimitTimeout
from aumai_cfguard.rate_limiter import (
    DEFAULT_CAPACITY,
    DEFAULT_REFILL_RATE,
    TokenBucketRateLimiter,
)

if TYPE_CHECKING:
    from conftest import FakeClock


def _bucket(clock: FakeClock, capacity: int = 5, rate: float = 2.0, **kwargs: float) -> TokenBucketRateLimiter:
    return TokenBucketRateLimiter(capacity, rate, clock=clock, sleep=clock.sleep, **kwargs)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self, limiter: TokenBucketRateLimiter) -> None:
        assert limiter.capacity == DEFAULT_CAPACITY == 100
        assert limiter.refill_rate == DEFAULT_REFILL_RATE == 10.0

    def test_starts_full(self, limiter: TokenBucketRateLimiter) -> None:
        assert limiter.available_tokens() == 100

    def test_initial_tokens_clamped_to_capacity(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=3, initial_tokens=50)
        assert bucket.available_tokens() == 3

    def test_negative_initial_tokens_clamped_to_zero(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, initial_tokens=-4)
        assert bucket.available_tokens() == 0

    def test_zero_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="capacity"):
            TokenBucketRateLimiter(capacity=0)

    def test_non_positive_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="refill_rate"):
            TokenBucketRateLimiter(refill_rate=0)


# ---------------------------------------------------------------------------
# acquire
# ---------------------------------------------------------------------------


class TestAcquire:
    @pytest.mark.asyncio
    async def test_acquire_consumes_one_token(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock)
        await bucket.acquire()
        assert bucket.available_tokens() == 4
        assert fake_clock.sleeps == []

    @pytest.mark.asyncio
    async def test_full_bucket_admits_burst_without_waiting(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=5)
        for _ in range(5):
            await bucket.acquire()
        assert bucket.available_tokens() == 0
        assert fake_clock.sleeps == []

    @pytest.mark.asyncio
    async def test_empty_bucket_waits_one_refill_interval(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, rate=4.0, initial_tokens=0)
        await bucket.acquire()
        assert fake_clock.sleeps == [0.25]
        assert fake_clock.now == 0.25
        assert bucket.available_tokens() == 0

    @pytest.mark.asyncio
    async def test_partial_token_waits_only_for_deficit(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, rate=2.0, initial_tokens=0.5)
        await bucket.acquire()
        assert fake_clock.sleeps == [0.25]

    @pytest.mark.asyncio
    async def test_refill_after_elapsed_time(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=10, rate=2.0, initial_tokens=0)
        fake_clock.advance(2.0)
        assert bucket.available_tokens() == 4
        await bucket.acquire()
        assert bucket.available_tokens() == 3

    @pytest.mark.asyncio
    async def test_refill_never_exceeds_capacity(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=3)
        await bucket.acquire()
        fake_clock.advance(1000.0)
        assert bucket.available_tokens() == 3

    @pytest.mark.asyncio
    async def test_waiters_admitted_in_arrival_order(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=2, rate=4.0, initial_tokens=0)
        admitted: list[int] = []

        async def caller(index: int) -> None:
            await bucket.acquire()
            admitted.append(index)

        await asyncio.gather(*(caller(i) for i in range(3)))

        assert admitted == [0, 1, 2]
        assert fake_clock.sleeps == [0.25, 0.25, 0.25]
        assert fake_clock.now == 0.75

    @pytest.mark.asyncio
    async def test_concurrent_burst_never_overdraws(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=4, rate=4.0)
        await asyncio.gather(*(bucket.acquire() for _ in range(8)))
        # Four from the burst, four more at one per 0.25s.
        assert fake_clock.now == 1.0
        assert bucket.snapshot().tokens == 0.0


class TestAcquireTimeout:
    @pytest.mark.asyncio
    async def test_timeout_raises_without_consuming(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, rate=1.0, initial_tokens=0)
        with pytest.raises(RateLimitTimeout):
            await bucket.acquire(timeout=0.5)
        assert fake_clock.sleeps == []
        fake_clock.advance(1.0)
        assert bucket.available_tokens() == 1

    @pytest.mark.asyncio
    async def test_timeout_long_enough_admits(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, rate=2.0, initial_tokens=0)
        await bucket.acquire(timeout=1.0)
        assert fake_clock.sleeps == [0.5]

    @pytest.mark.asyncio
    async def test_timeout_ignored_when_token_available(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock)
        await bucket.acquire(timeout=0)
        assert bucket.available_tokens() == 4


# ---------------------------------------------------------------------------
# Observation
# ---------------------------------------------------------------------------


class TestSnapshot:
    def test_snapshot_reports_state(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, capacity=8, rate=2.0, initial_tokens=1)
        fake_clock.advance(1.5)
        snap = bucket.snapshot()
        assert snap.capacity == 8
        assert snap.refill_rate == 2.0
        assert snap.tokens == 4.0
        assert snap.last_refill == 1.5

    def test_available_tokens_does_not_consume(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock)
        for _ in range(3):
            assert bucket.available_tokens() == 5

    def test_backwards_clock_does_not_drain(self, fake_clock: FakeClock) -> None:
        bucket = _bucket(fake_clock, initial_tokens=2)
        fake_clock.advance(-10.0)
        assert bucket.available_tokens() == 2


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestConservation:
    @given(
        capacity=st.integers(min_value=1, max_value=20),
        rate=st.sampled_from([0.5, 1.0, 2.0, 4.0, 10.0]),
        steps=st.lists(
            st.tuples(
                st.floats(min_value=0.0, max_value=5.0, allow_nan=False),
                st.integers(min_value=0, max_value=4),
            ),
            max_size=15,
        ),
    )
    @settings(max_examples=60, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_tokens_follow_refill_then_decrement(
        self,
        fake_clock: FakeClock,
        capacity: int,
        rate: float,
        steps: list[tuple[float, int]],
    ) -> None:
        bucket = _bucket(fake_clock, capacity=capacity, rate=rate)

        async def run() -> None:
            for elapsed, calls in steps:
                fake_clock.advance(elapsed)
                for _ in range(calls):
                    before = bucket.snapshot().tokens
                    waited = len(fake_clock.sleeps)
                    await bucket.acquire()
                    after = bucket.snapshot().tokens
                    assert 0.0 <= after <= capacity
                    if len(fake_clock.sleeps) == waited:
                        assert after == pytest.approx(before - 1.0)

        asyncio.run(run())
