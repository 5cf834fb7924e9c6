"""
json-decode - structured logging setup

File: src/json_decode/observability/logging.py
Last updated: 2026-10-18

Purpose
- Attach a JSON-lines handler to the ``json_decode`` logger hierarchy.

What should be included in this file
- A formatter emitting one canonical JSON object per record.
- Idempotent setup and teardown that leave foreign handlers alone.

Non-functional requirements
- Never configure logging at import time.
"""

from __future__ import annotations

import json
import logging
import math
import sys
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal
from typing import Final, TextIO

from json_decode.config.schema import DecodeSettings
from json_decode.constants import LOGGER_NAME
from json_decode.json_types import JSONValue

_NON_FINITE_VALUE: Final[str] = "<non-finite>"
_HANDLER_MARKER: Final[str] = "_json_decode_handler"

_STANDARD_LOG_RECORD_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    }
)

_SETUP_LOCK = threading.Lock()


class _JsonLineFormatter(logging.Formatter):
    """Formatter that emits canonical JSON objects per log line."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, JSONValue] = {
            "timestamp": _iso8601z_from_epoch(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = _extract_extra_fields(record)
        if extras:
            event["fields"] = extras

        if record.exc_info is not None:
            event["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            event["stack"] = str(record.stack_info)

        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def setup_logging(
    settings: DecodeSettings | None = None,
    *,
    stream: TextIO | None = None,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Attach a JSON-lines handler to the package logger and return it.

    Calling this again replaces the handler installed by the previous call;
    handlers added by the application are left alone.
    """

    effective = settings or DecodeSettings()
    level = _parse_log_level(effective.log_level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_JsonLineFormatter())
    setattr(handler, _HANDLER_MARKER, True)

    logger = logging.getLogger(logger_name)
    with _SETUP_LOCK:
        _remove_installed_handlers(logger)
        logger.setLevel(level)
        logger.propagate = False
        logger.addHandler(handler)
    return logger


def shutdown_logging(logger_name: str = LOGGER_NAME) -> None:
    """Remove handlers installed by ``setup_logging`` and restore propagation."""

    logger = logging.getLogger(logger_name)
    with _SETUP_LOCK:
        _remove_installed_handlers(logger)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)
            existing.close()


def _parse_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value

    normalized = value.strip().upper()
    parsed = logging.getLevelName(normalized)
    if isinstance(parsed, int):
        return parsed

    raise ValueError(f"unsupported logging level {value!r}")


def _iso8601z_from_epoch(epoch_seconds: float) -> str:
    timestamp = datetime.fromtimestamp(epoch_seconds, tz=UTC)
    return timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, JSONValue]:
    fields: dict[str, JSONValue] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_LOG_RECORD_FIELDS:
            continue
        if key.startswith("_"):
            continue
        fields[key] = _normalize_json_value(value)
    return fields


def _normalize_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, float):
        if math.isfinite(value):
            return value
        return _NON_FINITE_VALUE
    if isinstance(value, Mapping):
        return {str(key): _normalize_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_json_value(item) for item in value]
    return repr(value)


__all__ = ["setup_logging", "shutdown_logging"]
