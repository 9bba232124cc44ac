"""
Default generator profiles for ormgen.
"""

from dataclasses import dataclass, field, replace

from ormgen.core.drivers import DriverCapabilities, get_capabilities, normalize_driver_name
from ormgen.mangle.case import DEFAULT_INITIALISMS, make_initialisms


@dataclass(frozen=True)
class GeneratorProfile:
    """
    Settings for one generation run.

    Profiles select the driver and control how identifiers are derived.
    """

    driver: str = "postgres"

    # Naming
    nullable_type_prefix: str = "null."
    id_suffix: str = "_id"
    collection_suffix: str = "Slice"
    initialisms: frozenset[str] = field(default=DEFAULT_INITIALISMS)

    # Tables left out of the snapshot
    exclude_tables: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "driver", normalize_driver_name(self.driver))

    @property
    def capabilities(self) -> DriverCapabilities:
        return get_capabilities(self.driver)

    def with_initialisms(self, *extra: str) -> "GeneratorProfile":
        """Copy of this profile with additional initialisms."""
        return replace(self, initialisms=make_initialisms(extra, base=self.initialisms))

    def with_excluded(self, *tables: str) -> "GeneratorProfile":
        """Copy of this profile that also excludes ``tables``."""
        return replace(self, exclude_tables=(*self.exclude_tables, *tables))

    def is_excluded(self, table: str) -> bool:
        return table in self.exclude_tables


# Built-in profiles

DEFAULT_POSTGRES = GeneratorProfile(driver="postgres")

DEFAULT_MYSQL = GeneratorProfile(driver="mysql")

DEFAULT_SQLITE = GeneratorProfile(driver="sqlite3")


def profile_for_driver(driver: str) -> GeneratorProfile:
    """Built-in profile for a driver, or a default profile bound to it."""
    canonical = normalize_driver_name(driver)
    for profile in (DEFAULT_POSTGRES, DEFAULT_MYSQL, DEFAULT_SQLITE):
        if profile.driver == canonical:
            return profile
    return GeneratorProfile(driver=canonical)
