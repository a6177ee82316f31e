from __future__ import annotations

import json
import logging

import pytest

from ticktimer.replay import ReplayStep, main, parse_times, run_replay
from ticktimer.runtime.config import TimerConfig


def test_parse_times_skips_blank_parts() -> None:
    assert parse_times("0, 0.5,,1.25 ") == [0.0, 0.5, 1.25]


@pytest.mark.parametrize("text", ["0,nan", "0,inf", "-inf,1", "0,abc"])
def test_parse_times_rejects_invalid_readings(text: str) -> None:
    with pytest.raises(ValueError):
        parse_times(text)


def test_run_replay_replays_readings() -> None:
    steps = run_replay(TimerConfig(ticks_per_second=20.0), [0.0, 0.125, 0.125, 1.5])

    assert [step.tick_count for step in steps] == [2, 0, 20]
    assert steps[0].partial_tick == pytest.approx(0.5)
    assert steps[1].delta_time == 0.0
    assert steps[2].delta_time == pytest.approx(1.375)
    assert [step.fps_reports for step in steps] == [(), (), (3,)]


def test_replay_step_is_immutable() -> None:
    step = ReplayStep(time=1.0, delta_time=0.5, tick_count=2, partial_tick=0.0, fps_reports=(4,))

    with pytest.raises(AttributeError):
        step.fps_reports = ()  # type: ignore[misc]
    assert hash(step) == hash(ReplayStep(1.0, 0.5, 2, 0.0, (4,)))


def test_run_replay_without_readings_is_empty() -> None:
    assert run_replay(TimerConfig(), []) == []


def test_replay_main_prints_json_rows(capsys) -> None:
    exit_code = main(["--tps", "10", "--times", "0,0.25,0.5", "--json"])

    assert exit_code == 0
    rows = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [row["tick_count"] for row in rows] == [2, 3]
    assert rows[1]["partial_tick"] == pytest.approx(0.0)
    assert rows[1]["fps_reports"] == []


def test_replay_main_prints_text_rows(capsys) -> None:
    main(["--tps", "10", "--times", "0,2", "--max-ticks", "4"])

    out = capsys.readouterr().out
    assert "ticks=4" in out
    assert "fps=1,0" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--times", "0,abc"],
        ["--times", "0,nan"],
        ["--tps", "0", "--times", "0,1"],
        ["--tps", "nan", "--times", "0,1"],
        ["--times", "0,1", "--log-format", "xml"],
    ],
)
def test_replay_main_rejects_invalid_input(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        main(argv)


def test_replay_main_writes_json_log_file(tmp_path, capsys) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "replay.jsonl"
    try:
        main(
            [
                "--tps",
                "10",
                "--times",
                "0,0.25",
                "--log-level",
                "debug",
                "--log-file",
                str(log_file),
            ]
        )
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)

    assert "ticks=2" in capsys.readouterr().out
    events = [json.loads(line)["event"] for line in log_file.read_text("utf-8").splitlines()]
    assert events[0] == "replay_started"
    assert events[-1] == "replay_done"
    records = [json.loads(line) for line in log_file.read_text("utf-8").splitlines()]
    assert records[-1]["fields"] == {"steps": 1}
