"""
Identifier mangling.

Pure functions turning raw database identifiers into generated-code names
and SQL fragments.
"""

from ormgen.mangle.case import DEFAULT_INITIALISMS, camel_case, make_initialisms, title_case
from ormgen.mangle.inflection import plural, singular
from ormgen.mangle.sql import (
    auto_inc_primary_key,
    driver_uses_last_insert_id,
    filter_columns_by_auto_increment,
    filter_columns_by_default,
    generate_param_flags,
    is_integer_type,
    primary_key_func_sig,
    where_primary_key,
)
from ormgen.mangle.strings import (
    column_names,
    has_element,
    make_db_name,
    prefix_string_slice,
    string_map,
    strip_suffix,
    substring,
)

__all__ = [
    # Inflection
    "singular",
    "plural",
    # Case
    "DEFAULT_INITIALISMS",
    "make_initialisms",
    "title_case",
    "camel_case",
    # Strings
    "string_map",
    "column_names",
    "has_element",
    "prefix_string_slice",
    "make_db_name",
    "substring",
    "strip_suffix",
    # SQL
    "auto_inc_primary_key",
    "driver_uses_last_insert_id",
    "generate_param_flags",
    "primary_key_func_sig",
    "where_primary_key",
    "filter_columns_by_default",
    "filter_columns_by_auto_increment",
    "is_integer_type",
]
