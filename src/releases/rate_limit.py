"""Token-bucket throttle used to space out per-release API lookups."""

from __future__ import annotations

import time
from typing import Callable, Protocol


class Limiter(Protocol):
    def acquire(self) -> float: ...


class TokenBucket:
    """Blocking token bucket; `acquire()` waits until one token is available.

    `clock` and `sleep` are injectable so callers can drive it with a virtual
    clock instead of wall time.
    """

    def __init__(
        self,
        rate_per_sec: float,
        capacity: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if rate_per_sec <= 0:
            raise ValueError("rate_per_sec must be positive")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.rate_per_sec = float(rate_per_sec)
        self.capacity = float(capacity)
        self._clock = clock
        self._sleep = sleep
        self._tokens = self.capacity
        self._last = clock()

    @classmethod
    def from_interval(cls, interval_sec: float, **kwargs) -> "TokenBucket":
        """One token every `interval_sec` seconds, no burst."""
        return cls(rate_per_sec=1.0 / interval_sec, capacity=1.0, **kwargs)

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last)
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate_per_sec)
        self._last = now

    def acquire(self) -> float:
        """Take one token, sleeping as needed; returns the seconds waited."""
        self._refill()
        waited = 0.0
        if self._tokens < 1.0:
            waited = (1.0 - self._tokens) / self.rate_per_sec
            self._sleep(waited)
            self._refill()
            # the clock may not have advanced by exactly `waited`
            self._tokens = max(self._tokens, 1.0)
        self._tokens -= 1.0
        return waited


class NoLimit:
    """Stand-in limiter that never waits."""

    def acquire(self) -> float:
        return 0.0


def limiter_for_delay(delay_sec: float, **kwargs) -> Limiter:
    """Build the limiter for a fixed inter-release delay; 0 or less disables throttling."""
    if delay_sec <= 0:
        return NoLimit()
    return TokenBucket.from_interval(delay_sec, **kwargs)


__all__ = ["Limiter", "TokenBucket", "NoLimit", "limiter_for_delay"]
