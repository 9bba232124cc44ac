"""
SQL fragment builders.

Builds the placeholder lists, primary key predicates and quoted column lists
that generated data-access code embeds in its queries.
"""

import re
from collections.abc import Sequence

from ormgen.core.drivers import get_capabilities
from ormgen.core.errors import ColumnNotFoundError, EmptyPrimaryKeyError
from ormgen.core.types import Column, PrimaryKey
from ormgen.mangle.strings import quote_join

# Integer kinds, both target-language names and database names
INTEGER_TYPE_PATTERN = re.compile(
    r"^(u?int(8|16|32|64)?|int[248]|(tiny|small|medium|big)?int(eger)?|(small|big)?serial)$",
    re.IGNORECASE,
)


def is_integer_type(type_name: str) -> bool:
    return INTEGER_TYPE_PATTERN.match(type_name) is not None


def auto_inc_primary_key(columns: Sequence[Column], pkey: PrimaryKey | None) -> str:
    """
    Name of the primary key column the database assigns, or ``""``.

    The key qualifies only when it has exactly one column, that column is
    present in ``columns``, has an integer type, has a default and is not
    nullable.
    """
    if pkey is None or len(pkey.columns) != 1:
        return ""

    name = pkey.columns[0]
    for column in columns:
        if column.name != name:
            continue
        if not is_integer_type(column.type):
            return ""
        if not column.has_default or column.nullable:
            return ""
        return name

    return ""


def driver_uses_last_insert_id(driver: str) -> bool:
    """Whether the driver returns the generated id instead of the inserted row."""
    return get_capabilities(driver).uses_last_insert_id


def generate_param_flags(count: int, start_at: int = 1) -> str:
    """
    Positional placeholders for ``count`` parameters.

    Example:
        >>> generate_param_flags(3, 2)
        '$2,$3,$4'
    """
    return ",".join(f"${n}" for n in range(start_at, start_at + count))


def primary_key_func_sig(columns: Sequence[Column], pkey_names: Sequence[str]) -> str:
    """
    Parameter list for a function taking the primary key, e.g.
    ``"one int64, three string"``.

    Raises:
        ColumnNotFoundError: If a key column is missing from ``columns``
    """
    by_name = {column.name: column for column in columns}
    params = []
    for name in pkey_names:
        column = by_name.get(name)
        if column is None:
            raise ColumnNotFoundError(name, available_columns=list(by_name))
        params.append(f"{name} {column.type}")
    return ", ".join(params)


def where_primary_key(pkey_names: Sequence[str], start_at: int = 1) -> str:
    """
    Equality predicates for every primary key column.

    Example:
        >>> where_primary_key(["col1", "col2"], 4)
        'col1=$4 AND col2=$5'

    Raises:
        EmptyPrimaryKeyError: If ``pkey_names`` is empty
    """
    if not pkey_names:
        raise EmptyPrimaryKeyError()

    return " AND ".join(
        f"{name}=${start_at + offset}" for offset, name in enumerate(pkey_names)
    )


def filter_columns_by_default(columns: Sequence[Column], want_default: bool) -> str:
    """Quoted list of the columns that do (or do not) have a default."""
    return quote_join([column.name for column in columns if column.has_default == want_default])


def filter_columns_by_auto_increment(columns: Sequence[Column], driver: str = "postgres") -> str:
    """Quoted list of the columns whose default is the driver's auto-increment."""
    caps = get_capabilities(driver)
    return quote_join([column.name for column in columns if caps.is_auto_increment(column.default)])
