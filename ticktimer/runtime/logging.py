"""Timer logging setup driven by ``TimerConfig``."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from ticktimer.api.logging import JsonFormatter, TimerLoggingConfig
from ticktimer.runtime.config import TimerConfig

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def logging_config_for(config: TimerConfig) -> TimerLoggingConfig:
    """Map timer settings onto the logging pipeline; files always get JSON lines."""
    return TimerLoggingConfig(
        level_name=config.log_level,
        console_format=config.log_format,
        file_path=config.log_file,
        file_format="json",
    )


def configure_timer_logging(config: TimerLoggingConfig) -> None:
    """Install console logging and, when a file is set, stream to it off-thread."""
    global _QUEUE_LISTENER

    shutdown_timer_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(config.console_format))
    root.addHandler(console_handler)
    if not config.file_path:
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_formatter(config.file_format))
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, file_handler, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_timer_logging(config: TimerConfig) -> None:
    """Configure logging unless the host already did and no log file is requested."""
    if logging.getLogger().handlers and not config.log_file:
        return
    configure_timer_logging(logging_config_for(config))


def shutdown_timer_logging() -> None:
    """Drain queued records to the log file and close it."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    listener, _QUEUE_LISTENER = _QUEUE_LISTENER, None
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
