import pytest

from algodrills.linked import (
    LinkedList,
    NodeNotFoundError,
    drop_first,
    format_list,
    merge_sort,
    unique_in_order,
)


def test_linked_list_preserves_append_order():
    values = [3, 1, 4, 1, 5]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_append_adds_at_tail():
    linked = LinkedList([1, 2])
    linked.append(9)
    assert list(linked)[-1] == 9


def test_render_format():
    assert LinkedList([1, 2]).render("Linked List") == "Linked List : ->1->2"


def test_render_empty_list():
    assert LinkedList().render("Linked List") == "Linked List : "


def test_insert_after_places_value_after_key():
    linked = LinkedList([10, 20, 30])
    linked.insert_after(20, 25)
    assert list(linked) == [10, 20, 25, 30]
    assert len(linked) == 4


def test_insert_after_tail_then_append():
    linked = LinkedList([10, 20])
    linked.insert_after(20, 25)
    linked.append(40)
    assert list(linked) == [10, 20, 25, 40]


def test_insert_after_missing_key_raises():
    linked = LinkedList([1, 2, 3])
    with pytest.raises(NodeNotFoundError):
        linked.insert_after(7, 8)
    assert list(linked) == [1, 2, 3]


def test_merge_sort_matches_sorted():
    values = [38, 27, 43, 3, 9, 82, 10, 3]
    assert merge_sort(values) == sorted(values)


def test_merge_sort_trivial_inputs():
    assert merge_sort([]) == []
    assert merge_sort([5]) == [5]


def test_format_list_uses_label():
    assert format_list("Marks", [7, 8]) == "Marks : ->7->8"


def test_unique_in_order_keeps_first_occurrence():
    assert unique_in_order([4, 2, 4, 3, 2]) == [4, 2, 3]


def test_unique_in_order_is_idempotent():
    values = [5, 5, 1, 5, 9, 1]
    once = unique_in_order(values)
    assert unique_in_order(once) == once
    assert set(once) == set(values)


def test_drop_first_removes_prefix():
    values = [1, 2, 3, 4, 5]
    assert drop_first(values, 2) == values[2:]
    assert drop_first(values, 0) == values


def test_drop_first_negative_raises():
    with pytest.raises(ValueError):
        drop_first([1, 2], -1)