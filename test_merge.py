"""Tests for the recursive config merge."""

from confload.config.merge import UNSET, ReplaceValue, merge


def test_later_mapping_wins_at_matching_keys():
    assert merge({"a": 1, "b": 1}, {"b": 2}, {"c": 3}) == {"a": 1, "b": 2, "c": 3}


def test_nested_mappings_are_merged():
    base = {"db": {"host": "localhost", "port": 5432}}
    override = {"db": {"host": "db.internal"}}

    assert merge(base, override) == {"db": {"host": "db.internal", "port": 5432}}


def test_lists_are_concatenated():
    assert merge({"plugins": ["a", "b"]}, {"plugins": ["c"]}) == {"plugins": ["a", "b", "c"]}


def test_non_matching_types_are_replaced():
    assert merge({"cache": {"ttl": 5}}, {"cache": False}) == {"cache": False}
    assert merge({"cache": False}, {"cache": {"ttl": 5}}) == {"cache": {"ttl": 5}}
    assert merge({"hosts": ["a"]}, {"hosts": "b"}) == {"hosts": "b"}


def test_replace_value_skips_merging():
    result = merge(
        {"plugins": ["a"], "db": {"host": "x", "port": 1}},
        {"plugins": ReplaceValue(["b"]), "db": ReplaceValue({"host": "y"})},
    )

    assert result == {"plugins": ["b"], "db": {"host": "y"}}


def test_unset_removes_key():
    assert merge({"a": 1, "b": {"c": 2, "d": 3}}, {"a": UNSET, "b": {"d": UNSET}}) == {"b": {"c": 2}}


def test_unset_for_missing_key_is_ignored():
    assert merge({"a": 1}, {"z": UNSET}) == {"a": 1}


def test_markers_without_counterpart_are_resolved():
    assert merge({}, {"db": {"host": ReplaceValue("y"), "pool": UNSET}}) == {"db": {"host": "y"}}


def test_inputs_are_not_mutated():
    first = {"db": {"host": "x"}, "plugins": ["a"]}
    second = {"db": {"port": 1}, "plugins": ["b"]}

    result = merge(first, second)
    result["db"]["host"] = "changed"
    result["plugins"].append("c")

    assert first == {"db": {"host": "x"}, "plugins": ["a"]}
    assert second == {"db": {"port": 1}, "plugins": ["b"]}


def test_empty_and_missing_mappings():
    assert merge() == {}
    assert merge({}, None, {"a": 1}) == {"a": 1}


def test_unset_items_are_dropped_from_lists():
    assert merge({}, {"plugins": ["a", UNSET, {"b": UNSET, "c": 1}]}) == {"plugins": ["a", {"c": 1}]}
    assert merge({"plugins": ["a"]}, {"plugins": [UNSET, "b"]}) == {"plugins": ["a", "b"]}
