"""
Relationship inference over a set of tables.

Detects pure join tables and derives each table's incoming (to-many)
relationships from the foreign keys of every other table.
"""

from __future__ import annotations

from ormgen.core.types import ForeignKey, Table, ToManyRelationship


def is_join_table(table: Table) -> bool:
    """
    Check whether a table only links two other tables.

    A join table has exactly two columns, a two-column primary key, at least
    two foreign keys, and every primary key column is a foreign key column.
    """
    pkey = table.primary_key
    if pkey is None or len(pkey.columns) != 2:
        return False
    if len(table.foreign_keys) < 2 or len(table.columns) > 2:
        return False

    fkey_columns = {fkey.column for fkey in table.foreign_keys}
    return all(column in fkey_columns for column in pkey.columns)


def to_many_relationships(table_name: str, tables: list[Table]) -> list[ToManyRelationship]:
    """
    Find all relationships where another table's foreign key points at
    ``table_name``.

    Join tables are looked through: a link table ``users_tags`` between
    ``users`` and ``tags`` yields a relationship from ``users`` to ``tags``.
    """
    relationships: list[ToManyRelationship] = []

    for other in tables:
        if other.name == table_name:
            continue

        join = is_join_table(other)
        for fkey in other.foreign_keys:
            if fkey.foreign_table != table_name:
                continue

            if not join:
                relationships.append(ToManyRelationship(
                    column=fkey.foreign_column,
                    nullable=fkey.foreign_column_nullable,
                    foreign_table=other.name,
                    foreign_column=fkey.column,
                    foreign_column_nullable=fkey.nullable,
                ))
                continue

            far = _other_foreign_key(other, fkey)
            if far is None:
                continue
            relationships.append(ToManyRelationship(
                column=fkey.foreign_column,
                nullable=fkey.foreign_column_nullable,
                foreign_table=far.foreign_table,
                foreign_column=far.foreign_column,
                foreign_column_nullable=far.foreign_column_nullable,
                to_join_table=True,
                join_table=other.name,
                join_local_column=fkey.column,
                join_local_column_nullable=fkey.nullable,
                join_foreign_column=far.column,
                join_foreign_column_nullable=far.nullable,
            ))

    return relationships


def _other_foreign_key(table: Table, fkey: ForeignKey) -> ForeignKey | None:
    for candidate in table.foreign_keys:
        if candidate.column != fkey.column:
            return candidate
    return None


def infer_relationships(tables: list[Table]) -> list[Table]:
    """
    Return copies of ``tables`` with join tables flagged and to-many
    relationships filled in. The input tables are not modified.
    """
    flagged: list[Table] = []
    for table in tables:
        join = is_join_table(table)
        fkeys = tuple(
            fkey.model_copy(update={"to_join_table": join}) for fkey in table.foreign_keys
        )
        flagged.append(table.model_copy(update={"is_join_table": join, "foreign_keys": fkeys}))

    return [
        table.model_copy(update={
            "to_many_relationships": tuple(to_many_relationships(table.name, flagged)),
        })
        for table in flagged
    ]
