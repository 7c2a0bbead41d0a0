"""Structured event logging."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

_DEFAULT_KEY_ORDER = ("ts", "level", "logger")


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


class StructuredTextFormatter(logging.Formatter):
    """Format log records as human-readable ``=== event ===`` blocks."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # Blank line between entries, none after the last one.
        self._first_entry = True

    @staticmethod
    def _format_value(value: Any) -> str:
        return str(value).replace("\n", "\\n")

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {"level": record.levelname, "logger": record.name}

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except json.JSONDecodeError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        preferred = [k for k in _DEFAULT_KEY_ORDER if base.get(k) is not None]
        remaining = sorted(k for k in base if k not in preferred and base[k] is not None)
        for key in preferred + remaining:
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        body = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return body
        return "\n" + body


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event."""
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: Path | None = None) -> None:
    """Log to log_file when given; otherwise silence logging entirely."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
