"""Timer configuration sourced from environment."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping

from ticktimer.api.timer import Timer, TimeSource

_LOG = logging.getLogger("ticktimer.config")

DEFAULT_TICKS_PER_SECOND = 20.0
LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class TimerConfig:
    """Immutable timer configuration."""

    ticks_per_second: float = DEFAULT_TICKS_PER_SECOND
    max_tick_count: int = 0
    timescale: float = 1.0
    log_level: str = "INFO"
    log_format: str = "text"  # text|json
    log_file: str | None = None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(name: str, default: int, *, env: Mapping[str, str] | None = None) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        _LOG.warning("config_invalid_int name=%s value=%r default=%d", name, raw, default)
        return default


def _float(
    name: str,
    default: float,
    *,
    positive: bool = False,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        _LOG.warning("config_invalid_float name=%s value=%r default=%s", name, raw, default)
        return default
    if not math.isfinite(value) or (positive and value <= 0.0):
        _LOG.warning("config_out_of_range name=%s value=%r default=%s", name, raw, default)
        return default
    return value


def _choice(
    name: str,
    default: str,
    choices: frozenset[str],
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        _LOG.warning("config_invalid_choice name=%s value=%r default=%s", name, raw, default)
        return default
    return value


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with timer-prefixed override."""
    value = _raw("TICKTIMER_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_timer_config(env: Mapping[str, str] | None = None) -> TimerConfig:
    """Load immutable timer configuration from env vars."""
    return TimerConfig(
        ticks_per_second=_float(
            "TICKTIMER_TICKS_PER_SECOND", DEFAULT_TICKS_PER_SECOND, positive=True, env=env
        ),
        max_tick_count=_int("TICKTIMER_MAX_TICK_COUNT", 0, env=env),
        timescale=_float("TICKTIMER_TIMESCALE", 1.0, env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=_choice("TICKTIMER_LOG_FORMAT", "text", LOG_FORMATS, env=env),
        log_file=(_raw("TICKTIMER_LOG_FILE", env=env) or "").strip() or None,
    )


def create_timer_from_config(
    config: TimerConfig, *, time_source: TimeSource | None = None
) -> Timer:
    """Create timer and apply configured timescale and tick cap."""
    from ticktimer.api.timer import create_system_timer, create_timer

    if time_source is None:
        timer = create_system_timer(config.ticks_per_second)
    else:
        timer = create_timer(config.ticks_per_second, time_source)
    timer.timescale = config.timescale
    timer.max_tick_count = config.max_tick_count
    return timer
