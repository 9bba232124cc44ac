"""
Relationship text derivation.

Turns foreign keys and inferred to-many relationships into the names and
assignment expressions generated relationship accessors are built from.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, Field

from ormgen.core.types import Column, ForeignKey, Schema, Table, ToManyRelationship
from ormgen.logging import get_logger
from ormgen.mangle.case import camel_case, title_case
from ormgen.mangle.inflection import plural, singular
from ormgen.mangle.strings import strip_suffix
from ormgen.utils.defaults import DEFAULT_POSTGRES, GeneratorProfile

logger = get_logger(__name__)


class LocalTableToOne(BaseModel):
    name_go: str
    column_name_go: str

    model_config = {"frozen": True}


class ForeignTableToOne(BaseModel):
    name_go: str
    column_name_go: str

    model_config = {"frozen": True}


class ToOneFunction(BaseModel):
    varname: str
    receiver: str
    local_assignment: str
    foreign_assignment: str

    model_config = {"frozen": True}


class RelationshipToOneTexts(BaseModel):
    """Names for an accessor that follows an outgoing foreign key."""

    local_table: LocalTableToOne
    foreign_table: ForeignTableToOne
    function: ToOneFunction

    model_config = {"frozen": True}


class LocalTableToMany(BaseModel):
    name_go: str
    name_singular: str

    model_config = {"frozen": True}


class ForeignTableToMany(BaseModel):
    name_go: str
    name_singular: str
    name_plural_go: str
    name_human_readable: str
    slice: str  # Collection type name

    model_config = {"frozen": True}


class ToManyFunction(BaseModel):
    name: str
    receiver: str
    local_assignment: str
    foreign_assignment: str

    model_config = {"frozen": True}


class RelationshipToManyTexts(BaseModel):
    """Names for an accessor that loads the rows pointing at a table."""

    local_table: LocalTableToMany
    foreign_table: ForeignTableToMany
    function: ToManyFunction

    model_config = {"frozen": True}


class TableRelationships(BaseModel):
    """All relationship texts of one table."""

    table: str
    to_one: list[RelationshipToOneTexts] = Field(default_factory=list)
    to_many: list[RelationshipToManyTexts] = Field(default_factory=list)

    model_config = {"frozen": True}

    def accessor_names(self) -> list[str]:
        return [r.function.name for r in self.to_many]


def receiver_name(table_name: str) -> str:
    """Short receiver identifier: the table's first letter, lower-cased."""
    return table_name[:1].lower()


def assignment(column: Column, nullable: bool, profile: GeneratorProfile) -> str:
    """
    Expression reading a join column's value.

    Nullable columns are read through the wrapper type's value field, e.g.
    ``UserID.Int64`` for a ``null.Int64`` column.
    """
    name = title_case(column.name, profile.initialisms)
    if not nullable:
        return name
    value_field = column.type.removeprefix(profile.nullable_type_prefix)
    return f"{name}.{value_field}"


def texts_from_foreign_key(
    schema: Schema,
    table: Table,
    fkey: ForeignKey,
    profile: GeneratorProfile = DEFAULT_POSTGRES,
) -> RelationshipToOneTexts:
    """
    Derive the to-one texts for an outgoing foreign key of ``table``.

    Raises:
        TableNotFoundError: If the foreign table is not in the schema
        ColumnNotFoundError: If either join column does not exist
    """
    initialisms = profile.initialisms
    foreign = schema.get_table(fkey.foreign_table)

    local_column = table.get_column(fkey.column)
    foreign_column = foreign.get_column(fkey.foreign_column)

    def display(name: str) -> str:
        return title_case(singular(strip_suffix(name, profile.id_suffix)), initialisms)

    texts = RelationshipToOneTexts(
        local_table=LocalTableToOne(
            name_go=title_case(singular(table.name), initialisms),
            column_name_go=display(fkey.column),
        ),
        foreign_table=ForeignTableToOne(
            name_go=title_case(singular(fkey.foreign_table), initialisms),
            column_name_go=display(fkey.foreign_column),
        ),
        function=ToOneFunction(
            varname=camel_case(singular(fkey.foreign_table), initialisms),
            receiver=receiver_name(table.name),
            local_assignment=assignment(local_column, fkey.nullable, profile),
            foreign_assignment=assignment(foreign_column, fkey.foreign_column_nullable, profile),
        ),
    )

    logger.debug(
        "Derived to-one relationship",
        relationship=f"{table.name}.{fkey.column}->{fkey.foreign_table}.{fkey.foreign_column}",
    )
    return texts


def texts_from_relationship(
    schema: Schema,
    table: Table,
    rel: ToManyRelationship,
    profile: GeneratorProfile = DEFAULT_POSTGRES,
) -> RelationshipToManyTexts:
    """
    Derive the to-many texts for a relationship pointing at ``table``.

    The accessor is named after the plural foreign table when the
    relationship goes through a join table or the foreign key is simply named
    after this table (``posts.user_id`` on ``users`` gives ``Posts``).
    Otherwise the foreign key column is prefixed so several keys between the
    same pair of tables stay distinct (``AuthorPosts``, ``EditorPosts``).

    Raises:
        TableNotFoundError: If the foreign table is not in the schema
        ColumnNotFoundError: If either join column does not exist
    """
    initialisms = profile.initialisms
    foreign = schema.get_table(rel.foreign_table)

    local_column = table.get_column(rel.column)
    foreign_column = foreign.get_column(rel.foreign_column)

    local_singular = singular(table.name)
    foreign_singular = singular(rel.foreign_table)
    foreign_plural_go = title_case(plural(rel.foreign_table), initialisms)

    column_stem = strip_suffix(rel.foreign_column, profile.id_suffix)
    if rel.to_join_table or column_stem == local_singular:
        name = foreign_plural_go
    else:
        name = title_case(column_stem, initialisms) + foreign_plural_go

    texts = RelationshipToManyTexts(
        local_table=LocalTableToMany(
            name_go=title_case(local_singular, initialisms),
            name_singular=local_singular,
        ),
        foreign_table=ForeignTableToMany(
            name_go=title_case(foreign_singular, initialisms),
            name_singular=foreign_singular,
            name_plural_go=foreign_plural_go,
            name_human_readable=rel.foreign_table.replace("_", " "),
            slice=camel_case(foreign_singular, initialisms) + profile.collection_suffix,
        ),
        function=ToManyFunction(
            name=name,
            receiver=receiver_name(table.name),
            local_assignment=assignment(local_column, rel.nullable, profile),
            foreign_assignment=assignment(foreign_column, rel.foreign_column_nullable, profile),
        ),
    )

    logger.debug(
        "Derived to-many relationship",
        relationship=f"{table.name}.{rel.column}<-{rel.foreign_table}.{rel.foreign_column}",
        accessor=name,
    )
    return texts


def derive_relationships(
    schema: Schema,
    table: Table,
    profile: GeneratorProfile = DEFAULT_POSTGRES,
) -> TableRelationships:
    """
    Derive the texts for every relationship of ``table``.

    Logs a warning when two to-many accessors still share a name after
    disambiguation; the emitter would produce duplicate methods for them.
    """
    to_one = [texts_from_foreign_key(schema, table, fkey, profile) for fkey in table.foreign_keys]
    to_many = [
        texts_from_relationship(schema, table, rel, profile)
        for rel in table.to_many_relationships
    ]

    result = TableRelationships(table=table.name, to_one=to_one, to_many=to_many)

    counts = Counter(result.accessor_names())
    for accessor, count in counts.items():
        if count > 1:
            logger.warning(
                "Relationship accessor name is not unique",
                table=table.name,
                accessor=accessor,
                occurrences=count,
            )

    return result
