"""
Utilities for ormgen: generator profiles and presets.
"""

from ormgen.utils.defaults import (
    DEFAULT_MYSQL,
    DEFAULT_POSTGRES,
    DEFAULT_SQLITE,
    GeneratorProfile,
    profile_for_driver,
)

__all__ = [
    "GeneratorProfile",
    "DEFAULT_POSTGRES",
    "DEFAULT_MYSQL",
    "DEFAULT_SQLITE",
    "profile_for_driver",
]
