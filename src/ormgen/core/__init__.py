"""
Core schema model, driver capabilities and error taxonomy.
"""

from ormgen.core.drivers import DriverCapabilities, get_capabilities
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

__all__ = [
    "DriverCapabilities",
    "get_capabilities",
    "OrmGenError",
    "SchemaInconsistencyError",
    "TableNotFoundError",
    "ColumnNotFoundError",
    "EmptyPrimaryKeyError",
    "Column",
    "PrimaryKey",
    "ForeignKey",
    "ToManyRelationship",
    "Table",
    "Schema",
]
