"""Logging utilities.

Key goal:
- Each step logs clearly so failures can be located quickly in CloudWatch.
- One JSON object per line; keep config minimal so the caller's logging
  setup (e.g. pytest's caplog) still receives records through propagation.
"""
from __future__ import annotations

import json
import logging
import os
import traceback
from datetime import datetime, timezone

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


def resolve_level(name: str | None) -> int:
    return _LEVELS.get((name or "").strip().lower(), logging.INFO)


_DEFAULT_LEVEL = resolve_level(os.environ.get("LOG_LEVEL", "info"))
_LOGGERS: list = []


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            data["errorName"] = type(exc).__name__
            data["errorMessage"] = str(exc)
            data["errorStack"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    # If already configured elsewhere, do not attach handlers again.
    if logger.handlers:
        return logger

    logger.setLevel(_DEFAULT_LEVEL)
    if logger not in _LOGGERS:
        _LOGGERS.append(logger)

    # The Lambda runtime installs a root handler; records reach it through
    # propagation, so a second handler here would print every line twice.
    if logging.getLogger().handlers:
        return logger

    h = logging.StreamHandler()
    h.setFormatter(JsonFormatter())
    logger.addHandler(h)

    return logger


def set_level(level: str) -> None:
    """Apply a configured level name to every logger built by get_logger()."""
    lvl = resolve_level(level)
    for logger in _LOGGERS:
        logger.setLevel(lvl)


def log_step(logger: logging.Logger, step: str, msg: str):
    logger.info("[STEP %s] %s", step, msg)


def log_trace(logger: logging.Logger, msg: str, *args):
    logger.log(TRACE, msg, *args)


def truncate(text: str, limit: int = 100) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
