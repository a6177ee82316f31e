"""Replay clock readings through a timer and print the resulting schedule."""

from __future__ import annotations

import argparse
import json
import logging
import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass, replace

from ticktimer.runtime.clock import ManualClock
from ticktimer.runtime.config import (
    LOG_FORMATS,
    TimerConfig,
    create_timer_from_config,
    load_timer_config,
)
from ticktimer.runtime.logging import setup_timer_logging, shutdown_timer_logging

_LOG = logging.getLogger("ticktimer.replay")


@dataclass(frozen=True, slots=True)
class ReplayStep:
    """Timer state observed after one replayed clock reading."""

    time: float
    delta_time: float
    tick_count: int
    partial_tick: float
    fps_reports: tuple[int, ...] = ()


def parse_times(text: str) -> list[float]:
    """Parse comma separated clock readings; each must be a finite number."""
    readings: list[float] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        value = float(part)
        if not math.isfinite(value):
            raise ValueError(f"clock reading must be finite: {part!r}")
        readings.append(value)
    return readings


def run_replay(config: TimerConfig, times: Sequence[float]) -> list[ReplayStep]:
    """Drive a timer with the given readings; the first one is construction time."""
    if not times:
        return []
    clock = ManualClock(times[0])
    timer = create_timer_from_config(config, time_source=clock)
    steps: list[ReplayStep] = []
    for reading in times[1:]:
        clock.set(reading)
        timer.advance_time()
        reports: list[int] = []
        timer.calc_fps(reports.append)
        steps.append(
            ReplayStep(
                time=reading,
                delta_time=timer.delta_time,
                tick_count=timer.tick_count,
                partial_tick=timer.partial_tick,
                fps_reports=tuple(reports),
            )
        )
    return steps


def _format_step(step: ReplayStep) -> str:
    reports = ",".join(str(count) for count in step.fps_reports) or "-"
    return (
        f"time={step.time:.4f} delta={step.delta_time:.4f} ticks={step.tick_count} "
        f"partial={step.partial_tick:.4f} fps={reports}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    defaults = load_timer_config()
    parser = argparse.ArgumentParser(description="Fixed-tick timer schedule replay.")
    parser.add_argument("--tps", type=float, default=defaults.ticks_per_second)
    parser.add_argument("--times", required=True, help="comma separated clock readings")
    parser.add_argument("--timescale", type=float, default=defaults.timescale)
    parser.add_argument("--max-ticks", type=int, default=defaults.max_tick_count)
    parser.add_argument("--json", action="store_true", help="emit one JSON object per step")
    parser.add_argument("--log-level", default=defaults.log_level)
    parser.add_argument("--log-format", choices=sorted(LOG_FORMATS), default=defaults.log_format)
    parser.add_argument("--log-file", default=defaults.log_file, help="append JSON log lines")
    args = parser.parse_args(argv)

    try:
        times = parse_times(args.times)
    except ValueError as exc:
        parser.error(f"invalid --times value: {exc}")
    if not (math.isfinite(args.tps) and args.tps > 0.0):
        parser.error("--tps must be a finite value > 0")
    config = replace(
        defaults,
        ticks_per_second=args.tps,
        timescale=args.timescale,
        max_tick_count=args.max_ticks,
        log_level=args.log_level.strip().upper(),
        log_format=args.log_format,
        log_file=args.log_file,
    )

    setup_timer_logging(config)
    try:
        _LOG.info(
            "replay_started tps=%s readings=%d timescale=%s",
            config.ticks_per_second,
            len(times),
            config.timescale,
        )
        steps = run_replay(config, times)
        for step in steps:
            print(json.dumps(asdict(step)) if args.json else _format_step(step))
        _LOG.info("replay_done steps=%d", len(steps))
    finally:
        shutdown_timer_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
