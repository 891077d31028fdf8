"""Logging utilities for fsriver.

Library modules only ask for loggers under the ``fsriver`` namespace. The
root logger is touched solely by :func:`configure_logging`, which the CLI and
the HTTP app call on startup.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import orjson

LOGGER_NAMESPACE = "fsriver"
_DEFAULT_LEVEL = os.environ.get("FSRIVER_LOG_LEVEL", "INFO")

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``ctx_*`` extras are copied through."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        payload.update({key: value for key, value in record.__dict__.items() if key.startswith("ctx_")})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=repr).decode("utf-8")


def configure_logging(level: str | int = _DEFAULT_LEVEL, use_json: bool = True) -> None:
    """Install a single stderr handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    if use_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.handlers = [handler]


def get_logger(name: str = LOGGER_NAMESPACE) -> logging.Logger:
    """Return a logger inside the ``fsriver`` namespace without configuring anything."""
    if name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "LOGGER_NAMESPACE", "configure_logging", "get_logger"]
