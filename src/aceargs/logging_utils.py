"""Logging utilities for aceargs."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from .constants import LOGGER_NAME
from .errors import ConfigError

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _to_log_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_to_log_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _to_log_safe(item) for key, item in value.items()}
    return str(value)


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    """Emit a structured log event on the aceargs logger."""
    logger = get_logger()
    if not logger.isEnabledFor(level):
        return

    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: str | None = None, level: int = logging.DEBUG) -> None:
    """Set up logging for the aceargs logger.

    With a log file, events are written there at the given level. Without one
    the logger stays silent. Existing handlers are only replaced once the new
    file is open.
    """
    logger = get_logger()

    new_handler: logging.Handler
    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            new_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot open log file '{log_file}': {exc}") from exc
        new_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        new_handler = logging.NullHandler()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(new_handler)

    if log_file:
        logger.setLevel(level)
        logger.propagate = False
    else:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
