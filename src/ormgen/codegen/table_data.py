"""
Per-table template data.

Collects every derived fact an emitter needs to render the data-access code
of one table: names, SQL fragments and relationship texts.
"""

from pydantic import BaseModel, Field

from ormgen.codegen.texts import (
    RelationshipToManyTexts,
    RelationshipToOneTexts,
    derive_relationships,
    receiver_name,
)
from ormgen.core.context import RunContext
from ormgen.core.types import Table
from ormgen.logging import LogContext, get_logger, with_log_context
from ormgen.mangle.case import camel_case, title_case
from ormgen.mangle.inflection import plural, singular
from ormgen.mangle.sql import (
    auto_inc_primary_key,
    driver_uses_last_insert_id,
    filter_columns_by_auto_increment,
    filter_columns_by_default,
    generate_param_flags,
    primary_key_func_sig,
    where_primary_key,
)
from ormgen.mangle.strings import column_names

logger = get_logger(__name__)


class TableData(BaseModel):
    """Derived template data for one table."""

    table: str
    is_join_table: bool = False

    # Names
    name_singular: str
    name_plural: str
    name_go: str
    name_plural_go: str
    varname: str
    receiver: str

    # Columns
    column_names: list[str] = Field(default_factory=list)
    pkey_columns: list[str] = Field(default_factory=list)
    pkey_func_sig: str = ""
    where_pkey: str = ""
    auto_inc_pkey: str = ""
    uses_last_insert_id: bool = False

    # Insert support
    columns_with_default: str = ""
    columns_without_default: str = ""
    auto_increment_columns: str = ""
    insert_param_flags: str = ""

    # Relationships
    to_one: list[RelationshipToOneTexts] = Field(default_factory=list)
    to_many: list[RelationshipToManyTexts] = Field(default_factory=list)

    model_config = {"frozen": True}


def build_table_data(ctx: RunContext, table: Table) -> TableData:
    """
    Build the template data for ``table``.

    Raises:
        SchemaInconsistencyError: If the table references tables or columns
            missing from the snapshot
    """
    profile = ctx.profile
    initialisms = profile.initialisms

    with with_log_context(table=table.name):
        pkey_columns = list(table.primary_key.columns) if table.primary_key else []
        without_default = [c for c in table.columns if not c.has_default]

        relationships = derive_relationships(ctx.schema, table, profile)

        data = TableData(
            table=table.name,
            is_join_table=table.is_join_table,
            name_singular=singular(table.name),
            name_plural=plural(table.name),
            name_go=title_case(singular(table.name), initialisms),
            name_plural_go=title_case(plural(table.name), initialisms),
            varname=camel_case(singular(table.name), initialisms),
            receiver=receiver_name(table.name),
            column_names=column_names(table.columns),
            pkey_columns=pkey_columns,
            pkey_func_sig=primary_key_func_sig(table.columns, pkey_columns) if pkey_columns else "",
            where_pkey=where_primary_key(pkey_columns, 1) if pkey_columns else "",
            auto_inc_pkey=auto_inc_primary_key(table.columns, table.primary_key),
            uses_last_insert_id=driver_uses_last_insert_id(profile.driver),
            columns_with_default=filter_columns_by_default(table.columns, True),
            columns_without_default=filter_columns_by_default(table.columns, False),
            auto_increment_columns=filter_columns_by_auto_increment(table.columns, profile.driver),
            insert_param_flags=generate_param_flags(len(without_default), 1),
            to_one=relationships.to_one,
            to_many=relationships.to_many,
        )

        if not pkey_columns:
            logger.warning("Table has no primary key; key-based accessors are skipped")
        logger.debug(
            "Built table data",
            to_one=len(data.to_one),
            to_many=len(data.to_many),
        )

    return data


def build_schema_data(ctx: RunContext) -> list[TableData]:
    """
    Build the template data for every table of the run, in schema order.

    Tables excluded by the profile are skipped.
    """
    with with_log_context(LogContext.for_run(ctx)):
        tables = ctx.tables()
        logger.info("Deriving template data", tables=len(tables))
        return [build_table_data(ctx, table) for table in tables]
