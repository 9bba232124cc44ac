"""
Schema model for ormgen.

Normalized, immutable snapshot of the tables, columns and keys of a database.
Built once per generation run and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ormgen.core.errors import ColumnNotFoundError, TableNotFoundError


class Column(BaseModel):
    """A table column."""

    name: str
    type: str  # Target-language type, e.g. "int64" or "null.Int64"
    db_type: str = ""  # Raw database type, e.g. "bigint"
    nullable: bool = False
    default: str = ""  # Empty means no default

    model_config = {"frozen": True}

    @property
    def has_default(self) -> bool:
        return self.default != ""


class PrimaryKey(BaseModel):
    """A primary key. Column order is significant."""

    name: str
    columns: tuple[str, ...] = ()

    model_config = {"frozen": True}


class ForeignKey(BaseModel):
    """An outgoing foreign key of a table."""

    name: str = ""
    column: str
    nullable: bool = False
    foreign_table: str
    foreign_column: str
    foreign_column_nullable: bool = False
    to_join_table: bool = False  # The key belongs to a pure join table

    model_config = {"frozen": True}


class ToManyRelationship(BaseModel):
    """
    An incoming relationship: another table's foreign key pointing here.

    For relationships through a join table, ``foreign_table`` is the table on
    the far side of the join table and the ``join_*`` fields describe the
    join table itself.
    """

    column: str
    nullable: bool = False
    foreign_table: str
    foreign_column: str
    foreign_column_nullable: bool = False
    to_join_table: bool = False

    join_table: str = ""
    join_local_column: str = ""
    join_local_column_nullable: bool = False
    join_foreign_column: str = ""
    join_foreign_column_nullable: bool = False

    model_config = {"frozen": True}


class Table(BaseModel):
    """A database table."""

    name: str = Field(min_length=1)
    columns: tuple[Column, ...] = ()
    primary_key: PrimaryKey | None = None
    foreign_keys: tuple[ForeignKey, ...] = ()
    to_many_relationships: tuple[ToManyRelationship, ...] = ()
    is_join_table: bool = False

    model_config = {"frozen": True}

    def get_column(self, name: str) -> Column:
        """
        Get a column by name.

        Raises:
            ColumnNotFoundError: If the table has no such column
        """
        for column in self.columns:
            if column.name == name:
                return column
        raise ColumnNotFoundError(name, self.name, self.column_names())

    def has_column(self, name: str) -> bool:
        return any(column.name == name for column in self.columns)

    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]


class Schema(BaseModel):
    """Complete schema snapshot for one generation run."""

    tables: tuple[Table, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_tables(cls, tables: Iterable[Table]) -> Schema:
        """
        Build a snapshot with join tables marked and to-many relationships
        inferred from the tables' foreign keys.
        """
        from ormgen.core.inference import infer_relationships

        return cls(tables=tuple(infer_relationships(list(tables))))

    def get_table(self, name: str) -> Table:
        """
        Get a table by name.

        Raises:
            TableNotFoundError: If the schema has no such table
        """
        for table in self.tables:
            if table.name == name:
                return table
        raise TableNotFoundError(name, self.table_names())

    def has_table(self, name: str) -> bool:
        return any(table.name == name for table in self.tables)

    def table_names(self) -> list[str]:
        return [table.name for table in self.tables]
