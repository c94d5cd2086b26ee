"""
Per-instance request throttling.

The limiter is an async context manager. Entering it takes the lock and
waits until the minimum interval has passed since the previous dispatch
completed; leaving it records the completion time. Because the lock is held
for the whole dispatch, concurrent calls on one client queue behind each
other and the interval holds across all of them.
"""

import asyncio
import time
from types import TracebackType

from bittrex_api.utils.logger import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """Allows at most one dispatch per ``1 / calls_per_second`` seconds."""

    def __init__(self, calls_per_second: float) -> None:
        if calls_per_second <= 0:
            raise ValueError("calls_per_second must be positive")
        self.interval = 1.0 / calls_per_second
        self._lock = asyncio.Lock()
        self._last_call: float | None = None
        self._total_wait = 0.0

    @property
    def last_call(self) -> float | None:
        """Monotonic time the previous dispatch completed, None before the first"""
        return self._last_call

    @property
    def total_wait(self) -> float:
        return self._total_wait

    async def wait(self) -> None:
        """Sleep for whatever is left of the interval. The first call never waits."""
        if self._last_call is None:
            return

        elapsed = time.monotonic() - self._last_call
        if elapsed < self.interval:
            delay = self.interval - elapsed
            logger.debug("Rate limit wait", delay=round(delay, 3))
            self._total_wait += delay
            await asyncio.sleep(delay)

    def mark(self) -> None:
        now = time.monotonic()
        if self._last_call is None or now > self._last_call:
            self._last_call = now

    async def __aenter__(self) -> "RateLimiter":
        await self._lock.acquire()
        try:
            await self.wait()
        except BaseException:
            self._lock.release()
            raise
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.mark()
        self._lock.release()
