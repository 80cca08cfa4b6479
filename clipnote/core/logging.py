from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

APP_LOGGER_PREFIX = "clipnote"

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"

# uvicorn's startup lines are the only third-party output kept below WARNING.
_THIRD_PARTY_INFO = ("uvicorn.error",)

# Attributes every LogRecord carries; anything else on a record is context.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Attach fields (request_id, page_id, ...) to every log line in this scope."""
    token = _LOG_CONTEXT.set({**(_LOG_CONTEXT.get() or {}), **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class ContextFilter(logging.Filter):
    """Copy the active log context onto the record and drop third-party chatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _RECORD_ATTRS:
                setattr(record, key, value)

        if _under(record.name, APP_LOGGER_PREFIX) or record.name == "__main__":
            return True
        if any(_under(record.name, prefix) for prefix in _THIRD_PARTY_INFO):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


class ContextFormatter(logging.Formatter):
    """Append context fields as ``[key=value ...]``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if not context:
            return message
        return message + " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"


def resolve_log_level(log_level: str | None = None) -> int:
    """An explicit ``log_level`` wins over LOG_LEVEL; unknown names fall back to INFO."""
    level_name = (log_level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(*, log_level: str | None = None) -> None:
    """
    Route all logging to stdout with context fields appended.

    ``log_level`` applies to clipnote loggers; when omitted, LOG_LEVEL is read
    from the environment (default INFO).
    """
    level = resolve_log_level(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.addFilter(ContextFilter())

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    logging.getLogger(APP_LOGGER_PREFIX).setLevel(level)
    logging.captureWarnings(True)

    logging.getLogger(__name__).info("Logging configured", extra={"log_level": logging.getLevelName(level)})
