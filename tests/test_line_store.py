"""Test the line store that backs the text model."""

import pytest
from linepad.model import LineStore


def test_empty_store_has_one_empty_line():
    """A store created without lines still holds one empty line."""
    assert LineStore().to_list() == [""]
    assert LineStore([]).to_list() == [""]


def test_insert_shifts_following_rows_down():
    store = LineStore(["a", "c"])
    store.insert(1, "b")
    assert store.to_list() == ["a", "b", "c"]


def test_insert_at_end():
    store = LineStore(["a"])
    store.insert(1, "b")
    assert store.to_list() == ["a", "b"]


def test_remove_shifts_following_rows_up():
    store = LineStore(["a", "b", "c"])
    removed = store.remove(1)
    assert removed == "b"
    assert store.to_list() == ["a", "c"]


def test_remove_last_line_is_refused():
    """The store can never become empty."""
    store = LineStore(["only"])
    with pytest.raises(ValueError):
        store.remove(0)
    assert store.to_list() == ["only"]


def test_replace_and_read():
    store = LineStore(["hello", "world"])
    store.replace(1, "there")
    assert store[1] == "there"
    assert len(store) == 2
    assert list(store) == ["hello", "there"]


def test_compares_equal_to_list():
    assert LineStore(["x", "y"]) == ["x", "y"]
    assert LineStore(["x"]) == LineStore(["x"])
    assert LineStore(["x"]) != ["y"]


def test_store_copies_input():
    source = ["a", "b"]
    store = LineStore(source)
    store.replace(0, "changed")
    assert source == ["a", "b"]
