"""
catchcase Logging

Structured logging for the classification engine. Modules log through
``logging.getLogger(__name__)``; applications call ``configure_logging``
once to attach a handler to the ``catchcase`` logger.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import ClassificationSettings

LOGGER_NAME = "catchcase"

# Extra attributes copied into JSON log entries when present on the record.
_EXTRA_FIELDS = ("document_number", "case_type", "landing_id", "duration_ms")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(
    level: Optional[str] = None,
    json_format: bool = True,
    handler: Optional[logging.Handler] = None,
    settings: Optional[ClassificationSettings] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    The level is taken from ``level`` when given, else from
    ``settings.log_level``, else INFO. Replaces any handler installed by an
    earlier call so repeated configuration does not duplicate output.
    """
    if level is None:
        level = settings.log_level if settings is not None else "INFO"
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for existing in list(logger.handlers):
        if getattr(existing, "_catchcase_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._catchcase_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
