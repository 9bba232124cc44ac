"""
Tests for sequence and string helpers.
"""

import pytest

from ormgen.core.types import Column
from ormgen.mangle.strings import (
    column_names,
    has_element,
    make_db_name,
    prefix_string_slice,
    quote_join,
    string_map,
    strip_suffix,
    substring,
)


class TestHelpers:
    def test_string_map(self):
        assert string_map(str.lower, ["HELLO", "WORLD"]) == ["hello", "world"]

    def test_string_map_empty(self):
        assert string_map(str.lower, []) == []

    def test_column_names(self):
        cols = [
            Column(name="one", type="int"),
            Column(name="two", type="int"),
            Column(name="three", type="int"),
        ]
        assert " ".join(column_names(cols)) == "one two three"

    def test_has_element(self):
        elements = ["one", "two"]
        assert has_element("one", elements)
        assert not has_element("three", elements)

    def test_prefix_string_slice(self):
        assert prefix_string_slice("o.", ["one", "two"]) == ["o.one", "o.two"]

    def test_make_db_name(self):
        assert make_db_name("a", "b") == "a_b"

    def test_strip_suffix(self):
        assert strip_suffix("user_id", "_id") == "user"
        assert strip_suffix("identity", "_id") == "identity"
        assert strip_suffix("user_id_id", "_id") == "user_id"

    def test_quote_join(self):
        assert quote_join(["a", "b"]) == '"a","b"'
        assert quote_join([]) == ""


class TestSubstring:
    def test_ascii(self):
        value = "hello"
        assert substring(0, 5, value) == "hello"
        assert substring(1, 4, value) == "ell"
        assert substring(2, 3, value) == "l"
        assert substring(5, 5, value) == ""

    def test_counts_characters_not_bytes(self):
        assert substring(1, 3, "héllo") == "él"
        assert substring(0, 2, "日本語") == "日本"

    def test_end_is_clamped(self):
        assert substring(2, 10, "hello") == "llo"

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            substring(3, 1, "hello")
