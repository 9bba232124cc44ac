"""
SQLAlchemy adapter for ormgen.
"""

from ormgen.adapters.sqlalchemy.introspection import (
    NULLABLE_TYPES,
    TYPE_MAPPING,
    SQLAlchemyIntrospector,
)

__all__ = [
    "SQLAlchemyIntrospector",
    "TYPE_MAPPING",
    "NULLABLE_TYPES",
]
