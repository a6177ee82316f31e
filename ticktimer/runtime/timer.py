"""Default fixed-tick timer implementation."""

from __future__ import annotations

import logging
import math

from ticktimer.api.timer import FpsAction, TickAction, TimeSource

_LOG = logging.getLogger("ticktimer.timer")

_MAX_DELTA_SECONDS = 1.0
_FPS_WINDOW_SECONDS = 1.0


class DefaultTimer:
    """Converts clock readings into bounded tick counts and FPS windows."""

    def __init__(self, ticks_per_second: float, *, time_source: TimeSource) -> None:
        ticks_per_second = float(ticks_per_second)
        if not math.isfinite(ticks_per_second) or ticks_per_second <= 0.0:
            raise ValueError("ticks_per_second must be a finite value > 0")
        self._time_source = time_source
        self._ticks_per_second = ticks_per_second
        self._default_max_tick_count = int(5 * ticks_per_second)
        self._max_tick_count = self._default_max_tick_count
        now = float(time_source())
        self._last_time = now
        self._passed_time = 0.0
        self._delta_time = 0.0
        self._partial_tick = 0.0
        self._timescale = 1.0
        self._tick_count = 0
        self._accum_time = now
        self._frames = 0

    @property
    def ticks_per_second(self) -> float:
        return self._ticks_per_second

    @property
    def delta_time(self) -> float:
        return self._delta_time

    @property
    def frames_per_second(self) -> int:
        return self._frames

    @property
    def partial_tick(self) -> float:
        return self._partial_tick

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def timescale(self) -> float:
        return self._timescale

    @timescale.setter
    def timescale(self, value: float) -> None:
        self._timescale = float(value)

    @property
    def max_tick_count(self) -> int:
        return self._max_tick_count

    @max_tick_count.setter
    def max_tick_count(self, value: int) -> None:
        value = int(value)
        self._max_tick_count = value if value > 0 else self._default_max_tick_count

    @property
    def default_max_tick_count(self) -> int:
        return self._default_max_tick_count

    def advance_time(self) -> None:
        """Sample the clock and compute ticks due for this iteration.

        Elapsed time is clamped to [0, 1] seconds before scaling, and the
        resulting tick count to [0, max_tick_count]. Debt above the cap is
        kept in ``partial_tick`` rather than replayed. A non-finite clock
        reading counts as no elapsed time and does not move ``last_time``;
        non-finite debt (from an overflowing or NaN timescale) is dropped.
        """
        now = float(self._time_source())
        delta = now - self._last_time
        self._delta_time = delta
        if math.isfinite(now):
            self._last_time = now
        else:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug("timer_clock_invalid reading=%r", now)
            delta = 0.0

        if delta < 0.0:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug("timer_clock_rollback delta=%.6f", delta)
            delta = 0.0
        elif delta > _MAX_DELTA_SECONDS:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug("timer_delta_clamped delta=%.6f", delta)
            delta = _MAX_DELTA_SECONDS

        self._passed_time += delta * self._timescale * self._ticks_per_second
        passed = self._passed_time
        if math.isnan(passed) or passed < 0.0:
            tick_count = 0
        elif passed >= self._max_tick_count + 1:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug(
                    "timer_ticks_capped due=%s max_tick_count=%d",
                    passed,
                    self._max_tick_count,
                )
            tick_count = self._max_tick_count
        else:
            tick_count = int(passed)
        self._tick_count = tick_count
        if math.isfinite(passed):
            self._passed_time = passed - tick_count
        else:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug("timer_debt_dropped passed=%s", passed)
            self._passed_time = 0.0
        self._partial_tick = self._passed_time

    def perform_ticks(self, action: TickAction | None) -> None:
        """Invoke action ``tick_count`` times without arguments."""
        if action is None:
            return
        for _ in range(self._tick_count):
            action()

    def calc_fps(self, action: FpsAction | None = None) -> None:
        """Count one frame and close every FPS window the clock has passed.

        A window closes once the clock reads at least one second past its
        start. Windows stay aligned to the first start time, so a stall
        reports the pending frames once and then zero for each skipped window.
        Non-finite clock readings close no window.
        """
        self._frames += 1
        now = float(self._time_source())
        if not math.isfinite(now):
            return
        if not math.isfinite(self._accum_time):
            self._accum_time = now
        while now >= self._accum_time + _FPS_WINDOW_SECONDS:
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug(
                    "timer_fps_window start=%.3f frames=%d", self._accum_time, self._frames
                )
            if action is not None:
                action(self._frames)
            self._accum_time += _FPS_WINDOW_SECONDS
            self._frames = 0
            now = float(self._time_source())
            if not math.isfinite(now):
                return
