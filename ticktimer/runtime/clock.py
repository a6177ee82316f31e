"""Time sources for timers."""

from __future__ import annotations

from time import perf_counter_ns


def system_seconds() -> float:
    """Return monotonic high-resolution clock reading in seconds."""
    return perf_counter_ns() * 1.0e-9


class ManualClock:
    """Deterministic time source advanced explicitly by the caller."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        """Move the clock by seconds (negative simulates rollback)."""
        self._now += float(seconds)
        return self._now

    def set(self, seconds: float) -> None:
        self._now = float(seconds)
