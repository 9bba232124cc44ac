"""
Driver capability table.

Driver-specific behavior is looked up by driver name instead of being
expressed through a driver class hierarchy.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class DriverCapabilities:
    """
    What the generator needs to know about a database driver.

    Attributes:
        name: Driver identifier (e.g. "postgres")
        auto_increment_pattern: Regex matched against column defaults to
            detect server-generated columns
        auto_increment_default: Default expression written for auto-increment
            columns that carry no explicit server default. May reference
            ``{table}`` and ``{column}``.
        uses_last_insert_id: Driver returns the generated row id rather than
            the inserted row
    """

    name: str
    auto_increment_pattern: str
    auto_increment_default: str
    uses_last_insert_id: bool = False
    case_insensitive_default: bool = False

    @property
    def auto_increment_regex(self) -> re.Pattern[str]:
        flags = re.IGNORECASE if self.case_insensitive_default else 0
        return re.compile(self.auto_increment_pattern, flags)

    def is_auto_increment(self, default: str) -> bool:
        """Check whether a column default marks a server-generated column."""
        if not default:
            return False
        return self.auto_increment_regex.search(default) is not None

    def auto_increment_default_for(self, table: str, column: str) -> str:
        return self.auto_increment_default.format(table=table, column=column)


POSTGRES = DriverCapabilities(
    name="postgres",
    auto_increment_pattern=r"^nextval\(.*\)",
    auto_increment_default="nextval('{table}_{column}_seq'::regclass)",
)

MYSQL = DriverCapabilities(
    name="mysql",
    auto_increment_pattern=r"^auto_increment$",
    auto_increment_default="auto_increment",
    uses_last_insert_id=True,
    case_insensitive_default=True,
)

SQLITE3 = DriverCapabilities(
    name="sqlite3",
    auto_increment_pattern=r"^autoincrement$",
    auto_increment_default="autoincrement",
    uses_last_insert_id=True,
    case_insensitive_default=True,
)

DQLITE = DriverCapabilities(
    name="dqlite",
    auto_increment_pattern=r"^autoincrement$",
    auto_increment_default="autoincrement",
    uses_last_insert_id=True,
    case_insensitive_default=True,
)

DRIVER_CAPABILITIES: dict[str, DriverCapabilities] = {
    caps.name: caps for caps in (POSTGRES, MYSQL, SQLITE3, DQLITE)
}

# Aliases commonly used in connection URLs
DRIVER_ALIASES: dict[str, str] = {
    "postgresql": "postgres",
    "psql": "postgres",
    "sqlite": "sqlite3",
    "mariadb": "mysql",
}


def normalize_driver_name(name: str) -> str:
    """Map a driver name or URL dialect alias to its canonical name."""
    lowered = name.strip().lower()
    return DRIVER_ALIASES.get(lowered, lowered)


def get_capabilities(name: str) -> DriverCapabilities:
    """
    Look up the capabilities for a driver.

    Unknown drivers get postgres-style auto-increment detection and do not
    use last-insert-id.
    """
    canonical = normalize_driver_name(name)
    caps = DRIVER_CAPABILITIES.get(canonical)
    if caps is not None:
        return caps
    return DriverCapabilities(
        name=canonical,
        auto_increment_pattern=POSTGRES.auto_increment_pattern,
        auto_increment_default=POSTGRES.auto_increment_default,
    )


def list_drivers() -> list[str]:
    """List the drivers with known capabilities."""
    return list(DRIVER_CAPABILITIES.keys())
