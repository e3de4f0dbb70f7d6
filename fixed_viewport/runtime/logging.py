"""Logging pipeline implementation.

Sync-path loggers pass their counters and ids through ``extra=``; the JSON
formatter nests them under ``fields`` so log files can be filtered on
``fields.writes`` or ``fields.reason`` without parsing the message text.
"""

from __future__ import annotations

import json
import logging
import queue
from collections.abc import Mapping
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from fixed_viewport.api.logging import ViewportLoggingConfig
from fixed_viewport.runtime.config import load_viewport_config

_QUEUE_LISTENER: QueueListener | None = None

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the structured fields attached to ``record``, sorted by name."""
    return {
        key: record.__dict__[key]
        for key in sorted(record.__dict__)
        if key not in _RECORD_ATTRIBUTES
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record with structured fields under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_logging(config: ViewportLoggingConfig) -> None:
    """Install console (and optional queued file) handlers on the root logger."""
    global _QUEUE_LISTENER

    shutdown_logging()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if not config.file_path:
        root.addHandler(console_handler)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_resolve_formatter(config.file_format))

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(
        log_queue, console_handler, file_handler, respect_handler_level=True
    )
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the background file listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    _QUEUE_LISTENER = None


def setup_logging(*, env: Mapping[str, str] | None = None) -> None:
    """Configure logging from ``VIEWPORT_LOG_*`` settings unless handlers already exist."""
    if logging.getLogger().handlers:
        return
    configure_logging(load_viewport_config(env=env).logging)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)
