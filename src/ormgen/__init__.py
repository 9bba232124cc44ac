"""
ormgen - schema-driven naming and relationship derivation for ORM code generation.

ormgen reads a normalized snapshot of a database schema (tables, columns,
primary and foreign keys) and derives the identifiers, SQL fragments and
relationship accessor names that generated data-access code is built from.
"""

__version__ = "0.1.0"

from ormgen.codegen import (
    RelationshipToManyTexts,
    RelationshipToOneTexts,
    TableData,
    build_schema_data,
    build_table_data,
    derive_relationships,
    texts_from_foreign_key,
    texts_from_relationship,
)
from ormgen.core.context import RunContext
from ormgen.core.errors import (
    ColumnNotFoundError,
    EmptyPrimaryKeyError,
    OrmGenError,
    SchemaInconsistencyError,
    TableNotFoundError,
)
from ormgen.core.types import (
    Column,
    ForeignKey,
    PrimaryKey,
    Schema,
    Table,
    ToManyRelationship,
)
from ormgen.utils.defaults import GeneratorProfile

__all__ = [
    # Version
    "__version__",
    # Schema model
    "Column",
    "PrimaryKey",
    "ForeignKey",
    "ToManyRelationship",
    "Table",
    "Schema",
    # Run
    "RunContext",
    "GeneratorProfile",
    # Derivation
    "RelationshipToOneTexts",
    "RelationshipToManyTexts",
    "texts_from_foreign_key",
    "texts_from_relationship",
    "derive_relationships",
    "TableData",
    "build_table_data",
    "build_schema_data",
    # Errors
    "OrmGenError",
    "SchemaInconsistencyError",
    "TableNotFoundError",
    "ColumnNotFoundError",
    "EmptyPrimaryKeyError",
]
