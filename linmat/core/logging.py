"""
Structured logging for linmat.

Library modules only emit records, through context loggers that attach
``extra_data`` (routine name, shapes, iteration counts). Handlers are
installed on the ``linmat`` logger when an application calls
``setup_logging``; importing the package never configures logging.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Settings, get_settings

PACKAGE_LOGGER = "linmat"


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Render the record and its extra_data as one JSON object."""
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(getattr(record, "extra_data", None) or {})

        # shapes are tuples and scalars may be numpy types
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter; extra_data is appended as ``[key=value ...]``."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "extra_data", None)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"


def _build_handlers(settings: Settings, level: int) -> List[logging.Handler]:
    formatter: logging.Formatter
    if settings.LOG_FORMAT == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach handlers to the ``linmat`` logger.

    Calling it again replaces the handlers from the previous call. Records
    stop propagating to the root logger so they are not printed twice.

    Args:
        settings: Source of LOG_LEVEL, LOG_FORMAT and LOG_FILE (defaults to
            the cached settings)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    for handler in _build_handlers(settings, level):
        package_logger.addHandler(handler)

    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger that merges permanent context with per-call ``extra_data``."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        call_data = kwargs.pop("extra_data", {})
        extra = kwargs.setdefault("extra", {})
        extra["extra_data"] = {**self.extra, **call_data}
        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    return LoggerAdapter(get_logger(name), context)
