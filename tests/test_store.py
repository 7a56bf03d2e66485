from __future__ import annotations

import pytest

from listcounter.models import ExtractRule, Record, Settings
from listcounter.store import Store


def test_increment_absent_then_again():
    store = Store.empty("t")
    assert store.increment("x").count == 1
    assert store.increment("x").count == 2
    assert store.find("x").full_line == "x"
    assert len(store) == 1


def test_increment_existing(make_store):
    store = make_store({"x": 3})
    store.increment("x")
    assert store.counts() == {"x": 4}


def test_find_missing(make_store):
    assert make_store({"x": 1}).find("y") is None


def test_merge_line_keeps_count(make_store):
    store = make_store({"x": 3})
    store.merge_line("x", "x full")
    store.merge_line("y", "y full")
    assert store.counts() == {"x": 3, "y": 0}
    assert store.find("x").full_line == "x full"
    assert store.find("y").full_line == "y full"


def test_remove(make_store):
    store = make_store({"x": 1, "y": 2})
    assert store.remove("x")
    assert store.counts() == {"y": 2}


def test_remove_absent_leaves_store_unchanged(make_store):
    store = make_store({"x": 1, "y": 2})
    assert not store.remove("z")
    assert store.counts() == {"x": 1, "y": 2}


def test_drop_empty(make_store):
    store = make_store({"a": 0, "b": 2, "c": -1})
    assert store.drop_empty() == 2
    assert store.counts() == {"b": 2}


def test_duplicate_identifiers_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        Store(Settings("t"), [Record("a", 1), Record("a", 2)])


def test_uniqueness_across_operations():
    store = Store.empty("t")
    for ident in ["a", "b", "a", "c", "b", "a"]:
        store.increment(ident)
        store.merge_line(ident, ident + "!")
    identifiers = [r.identifier for r in store]
    assert len(identifiers) == len(set(identifiers)) == 3


def test_sort_ascending_breaks_ties_by_identifier(make_store):
    store = make_store({"b": 2, "A": 2})
    assert [r.identifier for r in store.sort_ascending()] == ["A", "b"]
    assert [r.identifier for r in store.records] == ["A", "b"]


def test_sort_ascending_by_count(make_store):
    store = make_store({"hi": 5, "lo": 1, "mid": 3})
    assert [r.identifier for r in store.sort_ascending()] == ["lo", "mid", "hi"]


def test_sort_descending_is_reverse(make_store):
    store = make_store({"b": 2, "A": 2, "c": 1, "D": 7, "a": 2})
    ascending = [r.identifier for r in store.sort_ascending()]
    descending = [r.identifier for r in store.sort_descending()]
    assert descending == list(reversed(ascending))
    assert [r.identifier for r in store.records] == descending


def test_rule_disables_tie_break(make_store):
    store = make_store({"b": 2, "A": 2, "c": 1}, rule=ExtractRule(",", 0))
    # Python's sort is stable, so equal counts keep insertion order.
    assert [r.identifier for r in store.sort_ascending()] == ["c", "b", "A"]


def test_explicit_tie_break_override(make_store):
    store = make_store({"b": 2, "A": 2}, rule=ExtractRule(",", 0))
    assert [r.identifier for r in store.sort_ascending(tie_break=True)] == ["A", "b"]
