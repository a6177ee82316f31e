"""Public timer logging API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

_STANDARD_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message"}


@dataclass(frozen=True, slots=True)
class TimerLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def split_event_message(message: str) -> tuple[str | None, dict[str, object]]:
    """Split ``"timer_ticks_capped due=60 max_tick_count=50"`` into event and fields."""
    event: str | None = None
    fields: dict[str, object] = {}
    for index, token in enumerate(message.split()):
        key, sep, raw = token.partition("=")
        if sep and key:
            fields[key] = _coerce(raw)
        elif index == 0:
            event = token
    return event, fields


def _coerce(raw: str) -> object:
    for kind in (int, float):
        try:
            return kind(raw)
        except ValueError:
            continue
    return raw


class JsonFormatter(logging.Formatter):
    """JSON line formatter for ``event key=value`` timer log messages."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        event, fields = split_event_message(message)
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": event,
            "msg": message,
        }
        fields.update(
            (k, v) for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS
        )
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)
