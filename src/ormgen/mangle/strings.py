"""
Small sequence and string helpers used when building identifiers.
"""

from collections.abc import Callable, Iterable, Sequence

from ormgen.core.types import Column


def string_map(fn: Callable[[str], str], values: Iterable[str]) -> list[str]:
    """Apply ``fn`` to every string, keeping length and order."""
    return [fn(value) for value in values]


def column_names(columns: Iterable[Column]) -> list[str]:
    """Names of the given columns, in order."""
    return [column.name for column in columns]


def has_element(needle: str, values: Iterable[str]) -> bool:
    return needle in values


def prefix_string_slice(prefix: str, values: Iterable[str]) -> list[str]:
    """Prepend ``prefix`` to every string, e.g. ``"o."`` for table aliases."""
    return [f"{prefix}{value}" for value in values]


def make_db_name(first: str, second: str) -> str:
    """Join two identifiers the way database names are joined."""
    return f"{first}_{second}"


def substring(start: int, end: int, value: str) -> str:
    """
    Return the characters in ``[start, end)``.

    Offsets count characters, not encoded bytes. ``end`` is clamped to the
    length of the string.
    """
    if start < 0 or end < start:
        raise ValueError(f"invalid substring bounds [{start}, {end})")
    end = min(end, len(value))
    return value[start:end]


def strip_suffix(value: str, suffix: str) -> str:
    """Remove ``suffix`` from the end of ``value`` if present."""
    if suffix and value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def quote_join(values: Sequence[str], quote: str = '"', sep: str = ",") -> str:
    """Quote each value and join them; an empty sequence gives ``""``."""
    return sep.join(f"{quote}{value}{quote}" for value in values)
