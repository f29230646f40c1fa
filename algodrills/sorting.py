"""Sorting exercises: classic sorts with pass traces and sort-based puzzles."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SortTrace:
    """The sorted values together with a snapshot taken after every pass."""

    result: list[int]
    passes: list[list[int]] = field(default_factory=list)


def membership(haystack: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Tell for each query whether it occurs in ``haystack``."""
    present = set(haystack)
    return [query in present for query in queries]


def negative_gain(values: Iterable[int], limit: int) -> int:
    """Return the total magnitude of the non-positive values among the ``limit`` smallest."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    smallest = sorted(values)[:limit]
    return sum(-value for value in smallest if value <= 0)


def extreme_sums(values: Sequence[int], groups: int) -> tuple[int, int]:
    """Return the sums of the ``ceil(n / (groups + 1))`` smallest and largest values."""
    if groups < 0:
        raise ValueError("groups must not be negative")
    taken = math.ceil(len(values) / (groups + 1))
    ordered = sorted(values)
    small = sum(ordered[:taken])
    big = sum(ordered[len(ordered) - taken :])
    return small, big


def sort_by_frequency(values: Iterable[int]) -> list[int]:
    """Order the values by falling frequency, smaller values first on ties."""
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, count in ranked for _ in range(count)]


def merge_descending(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two descending sequences into one descending list, ``first`` first on ties."""
    return list(heapq.merge(first, second, reverse=True))


def bubble_swap_count(values: Iterable[int]) -> int:
    """Return how many swaps a plain bubble sort makes on the values."""
    items = list(values)
    swaps = 0
    for done in range(len(items) - 1):
        for position in range(len(items) - done - 1):
            if items[position] > items[position + 1]:
                items[position], items[position + 1] = items[position + 1], items[position]
                swaps += 1
    return swaps


def sorts_in_time(values: Iterable[int], minutes: int, seconds_per_swap: int) -> bool:
    """Tell whether bubble-sorting the values fits in ``minutes`` at ``seconds_per_swap`` a swap."""
    return bubble_swap_count(values) * seconds_per_swap <= minutes * 60


def count_consecutive_runs(values: Iterable[int]) -> int:
    """Return how many runs of consecutive integers the sorted values fall into."""
    ordered = sorted(values)
    if not ordered:
        return 0
    return 1 + sum(1 for low, high in zip(ordered, ordered[1:]) if low + 1 != high)


def selection_sort(values: Iterable[int]) -> SortTrace:
    """Selection-sort the values, recording the list after each pass."""
    items = list(values)
    passes: list[list[int]] = []
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
        passes.append(list(items))
    return SortTrace(items, passes)


def bubble_sort(values: Iterable[int]) -> SortTrace:
    """Bubble-sort the values, recording the list after each pass."""
    items = list(values)
    passes: list[list[int]] = []
    for done in range(len(items) - 1):
        for position in range(len(items) - done - 1):
            if items[position] > items[position + 1]:
                items[position], items[position + 1] = items[position + 1], items[position]
        passes.append(list(items))
    return SortTrace(items, passes)


def insertion_sort(values: Iterable[int]) -> SortTrace:
    """Insertion-sort the values, recording the list after each insertion."""
    items = list(values)
    passes: list[list[int]] = []
    for current in range(1, len(items)):
        value = items[current]
        slot = current
        while slot > 0 and items[slot - 1] > value:
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = value
        passes.append(list(items))
    return SortTrace(items, passes)


def gap_to_max(values: Sequence[int], threshold: int) -> Optional[int]:
    """Return how far the largest value exceeds ``threshold``, or None if it does not."""
    if not values:
        raise ValueError("values must not be empty")
    largest = max(values)
    return largest - threshold if largest > threshold else None


def drop_two_largest(values: Iterable[int]) -> list[int]:
    """Return the values ascending without the two largest."""
    ordered = sorted(values)
    return ordered[: max(len(ordered) - 2, 0)]


def min_dot_product(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the smallest dot product over all pairings of the two sequences."""
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    descending = sorted(first, reverse=True)
    ascending = sorted(second)
    return sum(a * b for a, b in zip(descending, ascending))


def max_pair_product(values: Sequence[int]) -> int:
    """Return the product of the two largest values."""
    if len(values) < 2:
        raise ValueError(f"max_pair_product needs at least 2 values, got {len(values)}")
    largest, runner_up = heapq.nlargest(2, values)
    return largest * runner_up


def sum_between_ranks(values: Sequence[int], low: int, high: int) -> int:
    """Return the sum of the values ranked strictly between the ``low``-th and ``high``-th smallest."""
    if not 1 <= low <= high <= len(values):
        raise ValueError(f"ranks {low}..{high} are outside 1..{len(values)}")
    return sum(sorted(values)[low : high - 1])