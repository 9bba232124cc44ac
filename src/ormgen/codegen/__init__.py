"""
ormgen Code Generation Module.

Derives relationship texts and per-table template data from a schema snapshot.
"""

from ormgen.codegen.table_data import TableData, build_schema_data, build_table_data
from ormgen.codegen.texts import (
    RelationshipToManyTexts,
    RelationshipToOneTexts,
    TableRelationships,
    derive_relationships,
    texts_from_foreign_key,
    texts_from_relationship,
)

__all__ = [
    "RelationshipToOneTexts",
    "RelationshipToManyTexts",
    "TableRelationships",
    "texts_from_foreign_key",
    "texts_from_relationship",
    "derive_relationships",
    "TableData",
    "build_table_data",
    "build_schema_data",
]
