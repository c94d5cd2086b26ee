"""Tests for the per-instance rate limiter."""

import asyncio
import time

import pytest

from bittrex_api.api.rate_limiter import RateLimiter


class TestRateLimiter:
    def test_interval(self):
        assert RateLimiter(2).interval == 0.5
        assert RateLimiter(0.5).interval == 2.0

    def test_rejects_non_positive_rate(self):
        with pytest.raises(ValueError):
            RateLimiter(0)

    async def test_first_call_does_not_wait(self):
        limiter = RateLimiter(0.1)  # 10 second interval
        start = time.monotonic()
        async with limiter:
            pass
        assert time.monotonic() - start < 0.5
        assert limiter.last_call is not None

    async def test_sequential_calls_are_spaced(self):
        limiter = RateLimiter(10)
        stamps = []
        for _ in range(4):
            async with limiter:
                stamps.append(time.monotonic())
        gaps = [b - a for a, b in zip(stamps, stamps[1:])]
        assert all(gap >= 0.1 - 0.01 for gap in gaps)

    async def test_concurrent_calls_queue(self):
        """Calls on one instance serialize even when issued concurrently."""
        limiter = RateLimiter(10)
        stamps = []

        async def call():
            async with limiter:
                stamps.append(time.monotonic())

        start = time.monotonic()
        await asyncio.gather(*(call() for _ in range(4)))
        assert time.monotonic() - start >= 0.3 - 0.01
        stamps.sort()
        gaps = [b - a for a, b in zip(stamps, stamps[1:])]
        assert all(gap >= 0.1 - 0.01 for gap in gaps)

    async def test_last_call_only_moves_forward(self):
        limiter = RateLimiter(1000)
        async with limiter:
            pass
        first = limiter.last_call
        async with limiter:
            pass
        assert limiter.last_call >= first

    async def test_lock_released_on_error(self):
        limiter = RateLimiter(1000)
        with pytest.raises(RuntimeError):
            async with limiter:
                raise RuntimeError("boom")
        async with limiter:
            pass

    async def test_instances_are_independent(self):
        slow = RateLimiter(0.1)
        other = RateLimiter(0.1)
        async with slow:
            pass
        start = time.monotonic()
        async with other:
            pass
        assert time.monotonic() - start < 0.5
