"""
ormgen Adapters Module.

Adapters build the schema snapshot from an external metadata source.
"""


# Imported on first use so `import ormgen` does not load SQLAlchemy
def get_sqlalchemy_introspector():
    """Get the SQLAlchemy introspector class."""
    from ormgen.adapters.sqlalchemy import SQLAlchemyIntrospector
    return SQLAlchemyIntrospector
