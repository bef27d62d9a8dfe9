"""Logging utilities for the Yuque client."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import orjson

LEVEL_ENV = "YUQUE_LOG_LEVEL"
PACKAGE_LOGGER = "yuque_client"


class JsonFormatter(logging.Formatter):
    """Lightweight JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info
        for key, value in record.__dict__.items():
            if key.startswith("ctx_"):
                payload[key] = value
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(level: str | int | None = None, use_json: bool = True) -> None:
    """Configure the package logger; ``level`` falls back to ``YUQUE_LOG_LEVEL``."""
    if level is None:
        level = os.environ.get(LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    if use_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a package logger, configuring the package root on first call."""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
