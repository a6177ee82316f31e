"""Public fixed-tick timer API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

TimeSource: TypeAlias = Callable[[], float]
TickAction: TypeAlias = Callable[[], object]
FpsAction: TypeAlias = Callable[[int], object]


class Timer(Protocol):
    """Fixed-rate tick timer driven once per host loop iteration.

    Typical host loop::

        timer = create_system_timer(20.0)
        while running:
            timer.advance_time()
            timer.perform_ticks(tick)
            render(timer.partial_tick)
            timer.calc_fps(on_fps)
    """

    @property
    def ticks_per_second(self) -> float:
        """Return configured fixed tick rate."""

    @property
    def delta_time(self) -> float:
        """Return last raw elapsed seconds between two advance calls."""

    @property
    def frames_per_second(self) -> int:
        """Return frames counted in the current, still open FPS window."""

    @property
    def partial_tick(self) -> float:
        """Return fractional progress towards the next tick."""

    @property
    def tick_count(self) -> int:
        """Return ticks due for the current loop iteration."""

    @property
    def timescale(self) -> float:
        """Return elapsed-time multiplier; 0 pauses, 2 doubles tick rate."""

    @timescale.setter
    def timescale(self, value: float) -> None: ...

    @property
    def max_tick_count(self) -> int:
        """Return cap on ticks per loop iteration."""

    @max_tick_count.setter
    def max_tick_count(self, value: int) -> None: ...

    def advance_time(self) -> None:
        """Sample the time source and recompute tick count and partial tick."""

    def perform_ticks(self, action: TickAction | None) -> None:
        """Invoke action once per due tick."""

    def calc_fps(self, action: FpsAction | None = None) -> None:
        """Count one frame and report each closed one-second window."""


def create_timer(ticks_per_second: float, time_source: TimeSource) -> Timer:
    """Create default timer reading seconds from the given time source."""
    from ticktimer.runtime.timer import DefaultTimer

    if not callable(time_source):
        raise TypeError("time_source must be callable")
    return DefaultTimer(ticks_per_second, time_source=time_source)


def create_system_timer(ticks_per_second: float) -> Timer:
    """Create default timer over the process monotonic clock."""
    from ticktimer.runtime.clock import system_seconds
    from ticktimer.runtime.timer import DefaultTimer

    return DefaultTimer(ticks_per_second, time_source=system_seconds)
