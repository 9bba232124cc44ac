"""
Run and table context for ormgen log records.

``build_schema_data`` opens a run scope and ``build_table_data`` a table
scope inside it; every record emitted within them carries those fields.
"""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ormgen.core.context import RunContext

_log_context: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar(
    "ormgen_log_context",
    default={},
)


@dataclass(frozen=True)
class LogContext:
    """Fields identifying the generation run and the table being processed."""

    run_id: str | None = None
    driver: str | None = None
    table: str | None = None

    @classmethod
    def for_run(cls, ctx: RunContext) -> LogContext:
        return cls(run_id=ctx.run_id, driver=ctx.driver)

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@contextmanager
def with_log_context(context: LogContext | None = None, **fields: Any) -> Iterator[None]:
    """
    Layer context fields over the enclosing scope until the block exits.

    Example:
        with with_log_context(LogContext.for_run(ctx)):
            with with_log_context(table="users"):
                logger.debug("Built table data")  # run_id, driver and table
    """
    merged = dict(_log_context.get())
    if context is not None:
        merged.update(context.to_dict())
    merged.update(fields)

    token = _log_context.set(merged)
    try:
        yield
    finally:
        _log_context.reset(token)


class ContextFilter(logging.Filter):
    """Copy the active context fields onto each record without overriding its own."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
