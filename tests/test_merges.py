"""Unit tests for the merge rule table."""

import logging

from bpetok import MergeTable
from bpetok.merges import parse_merge_entry


def test_rank_is_load_order():
    table = MergeTable.from_entries(["a b", ["ab", "c"]])
    assert table.rank_of("a", "b") == 0
    assert table.rank_of("ab", "c") == 1
    assert table.rank_of("b", "c") is None
    assert len(table) == 2


def test_string_entry_splits_at_first_space():
    assert parse_merge_entry("a b c") == ("a", "b c")


def test_malformed_entries_are_skipped(caplog):
    """Skipped entries do not consume a rank."""
    with caplog.at_level(logging.WARNING, logger="bpetok.merges"):
        table = MergeTable.from_entries(
            ["nospace", ["x"], ["a", "b", "c"], [1, 2], 3, None, "a b", ["b", "c"]]
        )
    assert list(table) == [("a", "b"), ("b", "c")]
    assert table.rank_of("a", "b") == 0
    assert table.rank_of("b", "c") == 1
    assert "malformed" in caplog.text


def test_duplicate_pair_keeps_last_rank():
    table = MergeTable([("a", "b"), ("c", "d"), ("a", "b")])
    assert table.rank_of("a", "b") == 2


def test_best_pair():
    table = MergeTable([("c", "d"), ("a", "b")])
    assert table.best_pair({("a", "b"), ("c", "d"), ("x", "y")}) == ("c", "d")
    assert table.best_pair({("x", "y")}) is None
    assert table.best_pair(set()) is None


def test_contains():
    table = MergeTable([("a", "b")])
    assert ("a", "b") in table
    assert ("b", "a") not in table
