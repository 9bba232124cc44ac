"""
Tests for SQL fragment builders.
"""

import pytest

from ormgen.core.errors import ColumnNotFoundError, EmptyPrimaryKeyError
from ormgen.core.types import Column, PrimaryKey
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


class TestParamFlags:
    def test_start_at_one(self):
        assert generate_param_flags(5, 1) == "$1,$2,$3,$4,$5"

    def test_offset(self):
        assert generate_param_flags(3, 2) == "$2,$3,$4"

    def test_zero_count(self):
        assert generate_param_flags(0, 1) == ""


class TestAutoIncPrimaryKey:
    PKEY = PrimaryKey(name="pkey", columns=("one",))

    @pytest.mark.parametrize(
        ("columns", "pkey", "expected"),
        [
            # no primary key
            ([Column(name="one", type="int32", default="some")], None, ""),
            # simple integer key with a default
            (
                [
                    Column(name="one", type="int32", default="some"),
                    Column(name="two", type="string"),
                ],
                PKEY,
                "one",
            ),
            # key column missing from the column list
            ([Column(name="two", type="int32", default="some")], PKEY, ""),
            # non-integer key
            ([Column(name="one", type="string", default="some")], PKEY, ""),
            # no default
            ([Column(name="one", type="int32")], PKEY, ""),
            # nullable key
            ([Column(name="one", type="int32", default="some", nullable=True)], PKEY, ""),
        ],
        ids=["nillcase", "easycase", "missingcase", "wrongtype", "nodefault", "nullable"],
    )
    def test_auto_inc_primary_key(self, columns, pkey, expected):
        assert auto_inc_primary_key(columns, pkey) == expected

    def test_composite_key_is_never_auto_increment(self):
        columns = [
            Column(name="one", type="int32", default="some"),
            Column(name="two", type="int32", default="some"),
        ]
        pkey = PrimaryKey(name="pkey", columns=("one", "two"))
        assert auto_inc_primary_key(columns, pkey) == ""

    @pytest.mark.parametrize("type_name", ["int", "int64", "uint32", "bigint", "integer", "serial", "INT4"])
    def test_integer_types(self, type_name):
        assert is_integer_type(type_name)

    @pytest.mark.parametrize("type_name", ["string", "float64", "null.Int64", "text"])
    def test_non_integer_types(self, type_name):
        assert not is_integer_type(type_name)


class TestPrimaryKeyFragments:
    def test_func_sig(self):
        columns = [
            Column(name="one", type="int64"),
            Column(name="two", type="string"),
            Column(name="three", type="string"),
        ]
        assert primary_key_func_sig(columns, ["one"]) == "one int64"
        assert primary_key_func_sig(columns, ["one", "three"]) == "one int64, three string"

    def test_func_sig_missing_column(self):
        columns = [Column(name="one", type="int64")]
        with pytest.raises(ColumnNotFoundError) as exc_info:
            primary_key_func_sig(columns, ["two"])
        assert exc_info.value.details["column"] == "two"

    def test_where_single(self):
        assert where_primary_key(["col1"], 2) == "col1=$2"

    def test_where_composite(self):
        assert where_primary_key(["col1", "col2"], 4) == "col1=$4 AND col2=$5"

    def test_where_empty(self):
        with pytest.raises(EmptyPrimaryKeyError):
            where_primary_key([], 1)


class TestColumnFilters:
    COLUMNS = [
        Column(name="col1", type="int"),
        Column(name="col2", type="int", default="things"),
        Column(name="col3", type="int"),
        Column(name="col4", type="int", default="things2"),
    ]

    def test_with_default(self):
        assert filter_columns_by_default(self.COLUMNS, True) == '"col2","col4"'

    def test_without_default(self):
        assert filter_columns_by_default(self.COLUMNS, False) == '"col1","col3"'

    def test_empty_input(self):
        assert filter_columns_by_default([], True) == ""
        assert filter_columns_by_auto_increment([]) == ""

    def test_auto_increment_postgres(self):
        columns = [
            Column(name="col1", type="int", default="nextval('users_col1_seq'::regclass)"),
            Column(name="col2", type="int", default="things"),
            Column(name="col3", type="int"),
            Column(name="col4", type="int", default="nextval(\"thing\")"),
        ]
        assert filter_columns_by_auto_increment(columns, "postgres") == '"col1","col4"'

    def test_auto_increment_mysql(self):
        columns = [
            Column(name="col1", type="int", default="auto_increment"),
            Column(name="col2", type="int", default="nextval('x')"),
        ]
        assert filter_columns_by_auto_increment(columns, "mysql") == '"col1"'


class TestDriverLastInsertId:
    @pytest.mark.parametrize(
        ("driver", "expected"),
        [
            ("postgres", False),
            ("mysql", True),
            ("sqlite3", True),
            ("dqlite", True),
            ("unknown", False),
        ],
    )
    def test_driver_uses_last_insert_id(self, driver, expected):
        assert driver_uses_last_insert_id(driver) is expected
