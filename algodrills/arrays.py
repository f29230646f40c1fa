"""Exercises on plain integer arrays and word lists."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce


class WordCounter:
    """Counts how often each word has been added."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def add(self, word: str) -> None:
        """Record one more occurrence of ``word``."""
        self._counts[word] += 1

    def count(self, word: str) -> int:
        """Return how many times ``word`` was added, 0 if never."""
        return self._counts[word]


def _require(values: Sequence[int], minimum: int, what: str) -> None:
    if len(values) < minimum:
        raise ValueError(f"{what} needs at least {minimum} value(s), got {len(values)}")


def mean_of_two_largest(values: Sequence[int]) -> float:
    """Return the mean of the two largest values."""
    _require(values, 2, "mean_of_two_largest")
    first, second = heapq.nlargest(2, values)
    return (first + second) / 2


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value left after removing one occurrence of the maximum."""
    _require(values, 2, "second_largest")
    return heapq.nlargest(2, values)[1]


def count_increasing_steps(values: Sequence[int]) -> int:
    """Return one plus the number of adjacent pairs that strictly increase."""
    return 1 + sum(1 for left, right in zip(values, values[1:]) if left < right)


def mean(values: Sequence[int]) -> float:
    """Return the arithmetic mean of the values."""
    _require(values, 1, "mean")
    return sum(values) / len(values)


def recursive_sum(values: Iterable[int]) -> int:
    """Return the sum of the values as a fold over the sequence."""
    return reduce(lambda total, value: total + value, values, 0)


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    # On ties the element of ``second`` comes first.
    return list(heapq.merge(second, first))


def unpaired_descending(values: Iterable[int]) -> list[int]:
    """Pair up the values from the largest down and keep the top of each unequal pair."""
    descending = sorted(values, reverse=True)
    return [
        upper
        for upper, lower in zip(descending[0::2], descending[1::2])
        if upper != lower
    ]


def reversed_values(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(list(values)))


def left_rotate(values: Sequence[int], shift: int) -> list[int]:
    """Rotate the values left by ``shift`` positions."""
    if shift < 0:
        raise ValueError("shift must not be negative")
    items = list(values)
    if not items:
        return items
    shift %= len(items)
    return items[shift:] + items[:shift]


def max_range_sum(size: int, updates: Iterable[tuple[int, int, int]]) -> int:
    """Add each amount to positions ``start..end`` (1-based) and return the largest total.

    The result is never below 0.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    deltas = [0] * (size + 2)
    for start, end, amount in updates:
        if not 1 <= start <= end <= size:
            raise ValueError(f"range {start}..{end} is outside 1..{size}")
        deltas[start] += amount
        deltas[end + 1] -= amount
    best = running = 0
    for delta in deltas[1 : size + 1]:
        running += delta
        best = max(best, running)
    return best


def odds_then_evens(values: Iterable[int]) -> list[int]:
    """Return the non-negative odd values ascending, then the non-negative even ones."""
    ordered = sorted(value for value in values if value >= 0)
    return [v for v in ordered if v % 2] + [v for v in ordered if not v % 2]


def sort_names(names: Iterable[str]) -> list[str]:
    """Return the names in lexicographic order."""
    return sorted(names)