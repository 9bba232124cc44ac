"""
SQLAlchemy schema introspection.

Builds the ormgen schema snapshot from SQLAlchemy table metadata, either
declared in code or reflected from a live database.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, MetaData
from sqlalchemy import Column as SAColumn
from sqlalchemy import Table as SATable
from sqlalchemy.engine import Engine
from sqlalchemy.exc import CompileError, NoReferencedColumnError, NoReferencedTableError
from sqlalchemy.sql.sqltypes import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    Numeric,
    SmallInteger,
    String,
    Time,
)

from ormgen.core.errors import ColumnNotFoundError, TableNotFoundError
from ormgen.core.types import Column, ForeignKey, PrimaryKey, Schema, Table
from ormgen.logging import get_logger
from ormgen.utils.defaults import DEFAULT_POSTGRES, GeneratorProfile

logger = get_logger(__name__)

# Checked in order: subclasses before their bases
TYPE_MAPPING: list[tuple[type, str]] = [
    (Boolean, "bool"),
    (SmallInteger, "int16"),
    (BigInteger, "int64"),
    (Integer, "int"),
    (Float, "float64"),
    (Numeric, "float64"),
    (DateTime, "time.Time"),
    (Date, "time.Time"),
    (Time, "time.Time"),
    (LargeBinary, "[]byte"),
    (JSON, "types.JSON"),
    (String, "string"),
]

# Value field of the nullable wrapper for each target type
NULLABLE_TYPES: dict[str, str] = {
    "bool": "Bool",
    "int16": "Int16",
    "int64": "Int64",
    "int": "Int",
    "float64": "Float64",
    "time.Time": "Time",
    "[]byte": "Bytes",
    "types.JSON": "JSON",
    "string": "String",
}


class SQLAlchemyIntrospector:
    """
    Introspects SQLAlchemy table metadata to build a schema snapshot.
    """

    def __init__(
        self,
        metadata: MetaData,
        profile: GeneratorProfile = DEFAULT_POSTGRES,
    ) -> None:
        """
        Initialize with SQLAlchemy metadata.

        Args:
            metadata: MetaData holding the tables to generate code for
            profile: Generator profile (driver, naming, exclusions)
        """
        self.metadata = metadata
        self.profile = profile

    @classmethod
    def from_engine(
        cls,
        engine: Engine,
        schema: str | None = None,
        profile: GeneratorProfile = DEFAULT_POSTGRES,
    ) -> SQLAlchemyIntrospector:
        """
        Reflect the tables of a live database.

        Args:
            engine: Engine connected to the database
            schema: Database schema to reflect (default schema if None)
            profile: Generator profile
        """
        metadata = MetaData()
        metadata.reflect(bind=engine, schema=schema)
        logger.info(
            "Reflected database tables",
            dialect=engine.dialect.name,
            tables=len(metadata.sorted_tables),
        )
        return cls(metadata, profile=profile)

    def introspect(self) -> Schema:
        """
        Introspect all tables and return the schema snapshot.

        Raises:
            TableNotFoundError: If a foreign key references a table that is
                not part of the metadata
        """
        tables = [
            self._introspect_table(sa_table)
            for sa_table in self.metadata.tables.values()
            if not self.profile.is_excluded(sa_table.name)
        ]
        return Schema.from_tables(tables)

    def _introspect_table(self, sa_table: SATable) -> Table:
        """Introspect a single table."""
        columns = tuple(self._introspect_column(sa_table, c) for c in sa_table.columns)

        return Table(
            name=sa_table.name,
            columns=columns,
            primary_key=self._introspect_primary_key(sa_table),
            foreign_keys=self._introspect_foreign_keys(sa_table),
        )

    def _introspect_column(self, sa_table: SATable, column: SAColumn) -> Column:
        """Introspect a single column."""
        nullable = bool(column.nullable)
        return Column(
            name=column.name,
            type=self._get_target_type(column.type, nullable),
            db_type=self._get_db_type(column.type),
            nullable=nullable,
            default=self._get_default(sa_table, column),
        )

    def _introspect_primary_key(self, sa_table: SATable) -> PrimaryKey | None:
        constraint = sa_table.primary_key
        names = tuple(column.name for column in constraint.columns)
        if not names:
            return None
        return PrimaryKey(name=constraint.name or f"{sa_table.name}_pkey", columns=names)

    def _introspect_foreign_keys(self, sa_table: SATable) -> tuple[ForeignKey, ...]:
        fkeys = []
        for fk in sorted(sa_table.foreign_keys, key=lambda f: (f.parent.name, f.target_fullname)):
            try:
                target = fk.column
            except NoReferencedTableError as e:
                raise TableNotFoundError(
                    fk.target_fullname.rsplit(".", 1)[0],
                    sorted(t.name for t in self.metadata.tables.values()),
                ) from e
            except NoReferencedColumnError as e:
                raise ColumnNotFoundError(
                    e.column_name,
                    e.table_name,
                ) from e

            if self.profile.is_excluded(target.table.name):
                logger.warning(
                    "Dropping foreign key to excluded table",
                    table=sa_table.name,
                    column=fk.parent.name,
                    foreign_table=target.table.name,
                )
                continue

            name = fk.constraint.name if fk.constraint is not None else None
            fkeys.append(ForeignKey(
                name=name or f"{sa_table.name}_{fk.parent.name}_fkey",
                column=fk.parent.name,
                nullable=bool(fk.parent.nullable),
                foreign_table=target.table.name,
                foreign_column=target.name,
                foreign_column_nullable=bool(target.nullable),
            ))
        return tuple(fkeys)

    def _get_target_type(self, sa_type: Any, nullable: bool) -> str:
        """Map a SQLAlchemy type to the generated code's type name."""
        base = "string"
        for sa_class, type_name in TYPE_MAPPING:
            if isinstance(sa_type, sa_class):
                base = type_name
                break
        else:
            # Dialect types outside the generic hierarchy, e.g. postgres UUID/JSONB
            type_name = type(sa_type).__name__.lower()
            if "json" in type_name:
                base = "types.JSON"

        if not nullable:
            return base
        return f"{self.profile.nullable_type_prefix}{NULLABLE_TYPES[base]}"

    def _get_db_type(self, sa_type: Any) -> str:
        try:
            return str(sa_type.compile()).lower()
        except CompileError:
            # Types without a generic compilation (e.g. NullType)
            return type(sa_type).__name__.lower()

    def _get_default(self, sa_table: SATable, column: SAColumn) -> str:
        """
        Extract the column default expression.

        Auto-increment primary keys without a server default get the
        driver's canonical auto-increment expression.
        """
        server_default = column.server_default
        if server_default is not None:
            arg = getattr(server_default, "arg", None)
            if arg is not None:
                return str(getattr(arg, "text", arg))

        if sa_table.autoincrement_column is column:
            return self.profile.capabilities.auto_increment_default_for(sa_table.name, column.name)

        return ""
