"""Timer runtime modules."""

from ticktimer.runtime.clock import ManualClock, system_seconds
from ticktimer.runtime.config import (
    TimerConfig,
    create_timer_from_config,
    load_timer_config,
    resolve_log_level_name,
)
from ticktimer.runtime.logging import (
    configure_timer_logging,
    logging_config_for,
    setup_timer_logging,
    shutdown_timer_logging,
)
from ticktimer.runtime.timer import DefaultTimer

__all__ = [
    "DefaultTimer",
    "ManualClock",
    "TimerConfig",
    "configure_timer_logging",
    "create_timer_from_config",
    "load_timer_config",
    "logging_config_for",
    "resolve_log_level_name",
    "setup_timer_logging",
    "shutdown_timer_logging",
    "system_seconds",
]
