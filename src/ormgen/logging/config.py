"""
Logging setup for generation runs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from ormgen.logging.context import ContextFilter
from ormgen.logging.formatters import JSONFormatter, TextFormatter

_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JSONFormatter,
    "text": TextFormatter,
}


class OrmGenLogger:
    """
    Logger whose keyword arguments become structured record fields.

    Example:
        logger = get_logger(__name__)
        logger.debug("Derived accessor", accessor="AuthorPosts")
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, *args: Any, **fields: Any) -> None:
        self._logger.log(level, msg, *args, extra=fields)

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **fields)

    def info(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.INFO, msg, *args, **fields)

    def warning(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.WARNING, msg, *args, **fields)


def get_logger(name: str) -> OrmGenLogger:
    return OrmGenLogger(name)


def configure_logging(
    level: int | str = "INFO",
    format: str = "text",
    output: TextIO | None = None,
    include_context: bool = True,
) -> None:
    """
    Install a single handler on the ``ormgen`` logger.

    Call once before a run. Records stop at ``ormgen`` and are not passed
    to the root logger.

    Args:
        level: Level number or name, case-insensitive
        format: ``"json"`` for pipelines, ``"text"`` for terminals
        output: Stream to write to (defaults to stderr)
        include_context: Whether run and table fields are added to records

    Raises:
        ValueError: If the level or format is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    formatter_cls = _FORMATTERS.get(format.lower())
    if formatter_cls is None:
        raise ValueError(f"Unknown log format: {format!r}; expected one of {sorted(_FORMATTERS)}")

    handler = logging.StreamHandler(output if output is not None else sys.stderr)
    handler.setFormatter(formatter_cls())
    if include_context:
        handler.addFilter(ContextFilter())

    ormgen_logger = logging.getLogger("ormgen")
    ormgen_logger.setLevel(level)
    ormgen_logger.handlers.clear()
    ormgen_logger.addHandler(handler)
    ormgen_logger.propagate = False
