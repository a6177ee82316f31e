from __future__ import annotations

import pytest

import ticktimer
from ticktimer.api.timer import create_system_timer, create_timer
from ticktimer.runtime.clock import ManualClock
from ticktimer.runtime.timer import DefaultTimer


def test_create_timer_reads_from_given_time_source() -> None:
    values = iter([2.0, 2.25])
    timer = create_timer(8.0, lambda: next(values))

    timer.advance_time()

    assert isinstance(timer, DefaultTimer)
    assert timer.delta_time == pytest.approx(0.25)
    assert timer.tick_count == 2
    assert timer.max_tick_count == 40


def test_create_timer_requires_callable_time_source() -> None:
    with pytest.raises(TypeError):
        create_timer(20.0, 1.5)  # type: ignore[arg-type]


def test_create_timer_validates_ticks_per_second(manual_clock: ManualClock) -> None:
    with pytest.raises(ValueError):
        create_timer(0.0, manual_clock)


def test_create_system_timer_uses_monotonic_clock() -> None:
    timer = create_system_timer(20.0)

    timer.advance_time()
    timer.advance_time()

    assert timer.ticks_per_second == 20.0
    assert timer.delta_time >= 0.0
    assert 0 <= timer.tick_count <= timer.max_tick_count


def test_package_exports_factories() -> None:
    assert ticktimer.create_timer is create_timer
    assert ticktimer.create_system_timer is create_system_timer
    assert "Timer" in ticktimer.__all__
