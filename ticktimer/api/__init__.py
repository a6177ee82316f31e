"""Public timer API contracts."""

from ticktimer.api.logging import JsonFormatter, TimerLoggingConfig
from ticktimer.api.timer import (
    FpsAction,
    TickAction,
    Timer,
    TimeSource,
    create_system_timer,
    create_timer,
)

__all__ = [
    "FpsAction",
    "JsonFormatter",
    "TickAction",
    "TimeSource",
    "Timer",
    "TimerLoggingConfig",
    "create_system_timer",
    "create_timer",
]
