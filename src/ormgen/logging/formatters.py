"""
Log formatters for ormgen.

JSON lines for build pipelines and a compact text line for terminals.
Both put the run context first and the keyword fields of the call after it.
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any

CONTEXT_FIELDS = ("run_id", "driver", "table")

# Attributes every LogRecord carries before extras are attached
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the keyword fields a logger call attached to ``record``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and key not in CONTEXT_FIELDS and not key.startswith("_")
    }


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = {}
    for name in CONTEXT_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = value
    return fields


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, the context
    fields that are set, ``exception`` when there is one and ``extra`` for
    the call's keyword fields.
    """

    def __init__(self, include_extra: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context_fields(record),
        }

        if record.exc_info:
            exc_type, exc, tb = record.exc_info
            log_dict["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc) if exc else None,
                "traceback": traceback.format_exception(exc_type, exc, tb),
            }

        if self.include_extra:
            extra = record_fields(record)
            if extra:
                log_dict["extra"] = extra

        return json.dumps(log_dict, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """
    Single-line text: ``12:00:01 INFO ormgen.codegen [table=users] Built table data to_many=2``.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%H:%M:%S")

        context = " ".join(f"{k}={v}" for k, v in _context_fields(record).items())
        fields = " ".join(f"{k}={v}" for k, v in record_fields(record).items())

        parts = [timestamp, f"{record.levelname:<7}", record.name]
        if context:
            parts.append(f"[{context}]")
        parts.append(record.getMessage())
        if fields:
            parts.append(fields)

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
