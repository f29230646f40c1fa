"""Singly linked list and list-processing exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


class NodeNotFoundError(LookupError):
    """Raised when a node holding a given value is not in the list."""


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of integers with appends at the tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, key: int, value: int) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        node = self._head
        while node is not None and node.data != key:
            node = node.next
        if node is None:
            raise NodeNotFoundError(f"Node not found: {key}")
        node.next = _Node(value, node.next)
        if node is self._tail:
            self._tail = node.next
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self, label: str = "Linked List") -> str:
        """Return the list as ``label : ->a->b->c``."""
        return format_list(label, self)


def format_list(label: str, values: Iterable[int]) -> str:
    """Return ``label : `` followed by ``->value`` for each value."""
    return f"{label} : " + "".join(f"->{value}" for value in values)


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    left_iter, right_iter = iter(left), iter(right)
    a = next(left_iter, None)
    b = next(right_iter, None)
    while a is not None and b is not None:
        if a <= b:
            merged.append(a)
            a = next(left_iter, None)
        else:
            merged.append(b)
            b = next(right_iter, None)
    if a is not None:
        merged.append(a)
        merged.extend(left_iter)
    if b is not None:
        merged.append(b)
        merged.extend(right_iter)
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def unique_in_order(values: Iterable[int]) -> list[int]:
    """Return the values with later duplicates removed, first occurrences kept in order."""
    return list(dict.fromkeys(values))


def drop_first(values: Sequence[int], count: int) -> list[int]:
    """Return the values without the first ``count`` of them."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(values[count:])