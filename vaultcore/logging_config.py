# Path: vaultcore/logging_config.py
# Purpose: Configure log output for the vaultcore package.
# Layer: core.
# Details: Human-readable or JSON lines on stderr; modules log through logging.getLogger(__name__).

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Union

PACKAGE_LOGGER = "vaultcore"
CONTEXT_FIELDS = ("doc_id", "operation")


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """``TIMESTAMP - LOGGER - LEVEL - MESSAGE`` with optional ``[doc_id=...]`` suffix."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        parts = [f"{field}={getattr(record, field)}" for field in CONTEXT_FIELDS if getattr(record, field, None)]
        if parts:
            return f"{base} [{' '.join(parts)}]"
        return base


def configure_logging(level: Union[int, str] = logging.INFO, structured: bool = False) -> logging.Logger:
    """
    Attach a stream handler to the ``vaultcore`` logger.

    Only the level is updated on repeated calls so handlers are never duplicated.
    Returns the package logger.
    """

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter() if structured else HumanReadableFormatter())
        package_logger.addHandler(handler)

    return package_logger
