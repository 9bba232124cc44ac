"""
ormgen structured logging.

Records carry the run and table being processed plus the keyword fields
of each call, rendered as JSON lines or text.
"""

from ormgen.logging.config import OrmGenLogger, configure_logging, get_logger
from ormgen.logging.context import ContextFilter, LogContext, with_log_context
from ormgen.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "OrmGenLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    # Context
    "ContextFilter",
    "LogContext",
    "with_log_context",
]
