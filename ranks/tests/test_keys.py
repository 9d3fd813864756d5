"""
Tests for ranks/keys.py — key selectors and best rank among keys.
"""

import sqlite3

from collections import namedtuple
from dataclasses import dataclass, field

import pytest

from ranks.constants import MatchRank
from ranks.sorter import match_sorter
from ranks.keys import (
    KeySelector,
    get_field_value,
    get_highest_ranking,
    normalize_keys,
)


@dataclass
class Video:
    title: str
    owner: dict = field(default_factory=dict)


# ============================================================================
# get_field_value tests
# ============================================================================


class TestGetFieldValue:
    def test_dict_field(self):
        assert get_field_value({"name": "baz"}, "name") == "baz"

    def test_nested_path(self):
        item = {"owner": {"name": "foo", "mid": 1}}
        assert get_field_value(item, "owner.name") == "foo"
        assert get_field_value(item, "owner.mid") == 1

    def test_dotted_key_preferred(self):
        """A key that exists as a whole is not split."""
        item = {"owner.name": "whole", "owner": {"name": "nested"}}
        assert get_field_value(item, "owner.name") == "whole"

    def test_missing_fields(self):
        assert get_field_value({}, "name") is None
        assert get_field_value({"owner": {}}, "owner.name") is None
        assert get_field_value({"owner": None}, "owner.name") is None
        assert get_field_value({"owner": "str"}, "owner.name") is None

    def test_object_attributes(self):
        video = Video(title="Two Cities", owner={"name": "foo"})
        assert get_field_value(video, "title") == "Two Cities"
        assert get_field_value(video, "owner.name") == "foo"
        assert get_field_value(video, "desc") is None

    def test_plain_string_item(self):
        assert get_field_value("abc", "upper") is None

    def test_indexable_records(self):
        """Records that support item[key] without being Mappings, like sqlite3.Row."""
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        rows = conn.execute("select 'baz' as name union all select 'foo'").fetchall()
        conn.close()
        assert get_field_value(rows[0], "name") == "baz"
        assert get_field_value(rows[0], "desc") is None

        res = match_sorter(rows, "ba", keys=["name"])
        assert len(res) == 1
        assert res[0] is rows[0]

    def test_namedtuple_attributes(self):
        Owner = namedtuple("Owner", ["name", "mid"])
        item = {"owner": Owner(name="foo", mid=1)}
        assert get_field_value(item, "owner.name") == "foo"
        assert get_field_value(Owner("bar", 2), "mid") == 2


# ============================================================================
# KeySelector tests
# ============================================================================


class TestKeySelector:
    def test_field_name(self):
        selector = KeySelector("name")
        assert selector.name == "name"
        assert selector.resolver is None
        assert selector.get_value({"name": "baz"}) == "baz"

    def test_resolver(self):
        def first_tag(item):
            return item["tags"][0]

        selector = KeySelector(first_tag)
        assert selector.name == "first_tag"
        assert selector.get_value({"tags": ["bar", "baz"]}) == "bar"

    def test_invalid_key_type(self):
        with pytest.raises(TypeError):
            KeySelector(123)
        with pytest.raises(TypeError):
            normalize_keys(["name", None])

    def test_normalize_keys(self):
        assert normalize_keys(None) == []
        assert normalize_keys([]) == []
        selectors = normalize_keys("name")
        assert len(selectors) == 1
        assert selectors[0].name == "name"

        selector = KeySelector("title")
        selectors = normalize_keys([selector, "owner.name", len])
        assert selectors[0] is selector
        assert [s.name for s in selectors] == ["title", "owner.name", "len"]


# ============================================================================
# get_highest_ranking tests
# ============================================================================


class TestGetHighestRanking:
    def test_no_keys(self):
        assert get_highest_ranking("Foo", None, "foo") == (MatchRank.EQUALS, -1)
        assert get_highest_ranking("Bar", [], "foo") == (MatchRank.NO_MATCH, -1)

    def test_best_key_wins(self):
        item = {"name": "baz", "reverse": "zab"}
        rank, key_index = get_highest_ranking(item, ["name", "reverse"], "ab")
        assert rank == MatchRank.CONTAINS
        assert key_index == 1

    def test_later_key_strictly_better(self):
        item = {"a": "xmatch", "b": "match"}
        assert get_highest_ranking(item, ["a", "b"], "match") == (MatchRank.EQUALS, 1)

    def test_tie_keeps_earlier_key(self):
        item = {"a": "match", "b": "match"}
        assert get_highest_ranking(item, ["a", "b"], "match") == (MatchRank.EQUALS, 0)

    def test_missing_fields_no_match(self):
        item = {"first": "not"}
        rank, key_index = get_highest_ranking(item, ["second", "third"], "match")
        assert rank == MatchRank.NO_MATCH
        assert key_index == -1

    def test_missing_field_with_empty_query(self):
        """Absent fields are empty text, which equals the empty query."""
        assert get_highest_ranking({}, ["name"], "") == (MatchRank.EQUALS, 0)

    def test_selectors_and_resolvers(self):
        video = Video(title="Two Cities", owner={"name": "ttotc"})
        keys = [KeySelector("title"), lambda v: v.owner["name"]]
        assert get_highest_ranking(video, keys, "ttotc") == (MatchRank.EQUALS, 1)
