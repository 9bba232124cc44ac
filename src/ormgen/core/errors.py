"""
Error taxonomy for ormgen.

All ormgen errors inherit from OrmGenError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional hints describing how to fix the schema or configuration
"""

from typing import Any


class OrmGenError(Exception):
    """
    Base class for all ormgen errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        hints: Suggestions for how to fix the underlying problem
        details: Additional error context
    """

    code: str = "ORMGEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        hints: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints or []
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
            "details": self.details,
        }


class SchemaInconsistencyError(OrmGenError):
    """
    The schema snapshot contradicts itself or the requested operation.

    These errors abort the generation run. Continuing would emit code that
    references tables or columns that do not exist.
    """

    code = "SCHEMA_INCONSISTENCY"


class TableNotFoundError(SchemaInconsistencyError):
    """A referenced table is not part of the schema snapshot."""

    code = "TABLE_NOT_FOUND"

    def __init__(
        self,
        table: str,
        available_tables: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        hints = []
        if available_tables:
            hints.append(f"Known tables: {', '.join(available_tables[:10])}")
            if len(available_tables) > 10:
                hints[-1] += f" (and {len(available_tables) - 10} more)"
        super().__init__(
            f"Table '{table}' not found in schema",
            hints=hints,
            details={"table": table, "available_tables": available_tables},
            **kwargs,
        )


class ColumnNotFoundError(SchemaInconsistencyError):
    """A referenced column does not exist on its table."""

    code = "COLUMN_NOT_FOUND"

    def __init__(
        self,
        column: str,
        table: str | None = None,
        available_columns: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        hints = []
        if available_columns:
            hints.append(f"Columns: {', '.join(available_columns)}")
        where = f" on table '{table}'" if table else ""
        super().__init__(
            f"Column '{column}' not found{where}",
            hints=hints,
            details={
                "column": column,
                "table": table,
                "available_columns": available_columns,
            },
            **kwargs,
        )


class EmptyPrimaryKeyError(SchemaInconsistencyError):
    """A primary-key predicate was requested for an empty key."""

    code = "EMPTY_PRIMARY_KEY"

    def __init__(self, table: str | None = None, **kwargs: Any) -> None:
        where = f" for table '{table}'" if table else ""
        super().__init__(
            f"Cannot build a primary key clause{where}: no primary key columns",
            hints=["Tables without a primary key are not supported by this operation"],
            details={"table": table},
            **kwargs,
        )
