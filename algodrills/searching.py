"""Searching exercises: lookups, range queries and pattern counts."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import combinations
from typing import Optional

_TRIANGULAR_LIMIT = 100_000


@dataclass(frozen=True)
class _Order:
    weight: int
    timestamp: int


@dataclass
class OrderLog:
    """Records orders and sums their weights over time windows."""

    _orders: list[_Order] = field(default_factory=list)

    def add(self, weight: int, timestamp: int) -> None:
        """Record an order of ``weight`` placed at ``timestamp``."""
        self._orders.append(_Order(weight, timestamp))

    def weight_within(self, span: int, moment: int) -> int:
        """Return the total weight of orders placed in ``moment - span .. moment``.

        The window never starts before time 0.
        """
        start = max(moment - span, 0)
        return sum(
            order.weight for order in self._orders if start <= order.timestamp <= moment
        )


def find_position(values: Iterable[int], target: int) -> Optional[int]:
    """Return the 1-based position of the first ``target``, or None when absent."""
    for position, value in enumerate(values, start=1):
        if value == target:
            return position
    return None


def count_and_sum_at_most(values: Iterable[int], limit: int) -> tuple[int, int]:
    """Return how many values are at most ``limit`` and their sum."""
    chosen = [value for value in values if value <= limit]
    return len(chosen), sum(chosen)


def max_monotone_distance(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the largest ``j - i`` with ``second[j] >= first[i]``, or 0.

    ``second`` must be non-increasing; for each ``i`` the last ``j`` with
    ``second[j] >= first[i]`` is found by binary search.
    """
    negated = [-value for value in second]
    best = 0
    for index, value in enumerate(first):
        last = bisect_right(negated, -value) - 1
        best = max(best, last - index)
    return best


def count_unique_triples(triples: Iterable[Sequence[int]]) -> int:
    """Return how many triples occur exactly once, ignoring order within a triple."""
    counts = Counter(tuple(sorted(triple)) for triple in triples)
    for key in counts:
        if len(key) != 3:
            raise ValueError(f"expected triples, got {key!r}")
    return sum(1 for count in counts.values() if count == 1)


def is_sum_of_two_triangulars(number: int) -> bool:
    """Tell whether ``number`` is the sum of two triangular numbers ``k(k+1)/2``, ``k >= 1``."""
    for index in range(1, _TRIANGULAR_LIMIT + 1):
        triangular = index * (index + 1) // 2
        if triangular > number // 2:
            break
        rest = (number - triangular) * 2
        root = math.isqrt(rest)
        if rest == root * (root + 1):
            return True
    return False


def _consecutive_runs(number: int) -> Iterator[list[int]]:
    for start in range(1, number):
        total = 0
        terms: list[int] = []
        for value in range(start, number):
            total += value
            terms.append(value)
            if total >= number:
                break
        if total == number:
            yield terms


def consecutive_sums(number: int) -> list[list[int]]:
    """Return every run of two or more consecutive positive integers summing to ``number``."""
    return list(_consecutive_runs(number))


def zero_sum_triples(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every triple of values, in input order, whose sum is zero."""
    return [triple for triple in combinations(values, 3) if sum(triple) == 0]


def linear_search(values: Iterable[int], target: int) -> int:
    """Return the 0-based index of the first ``target``, or -1 when absent."""
    return next(
        (index for index, value in enumerate(values) if value == target), -1
    )


def third_largest(values: Sequence[int]) -> int:
    """Return the value at third place when the values are sorted descending."""
    if len(values) < 3:
        raise ValueError(f"third_largest needs at least 3 values, got {len(values)}")
    return sorted(values, reverse=True)[2]


def closest_triple(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> tuple[int, int, int]:
    """Pick one value from each ascending sequence so that max - min is smallest."""
    if not (first and second and third):
        raise ValueError("all three sequences must be non-empty")
    i = j = k = 0
    best = (first[0], second[0], third[0])
    best_diff = math.inf
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        low, high = min(a, b, c), max(a, b, c)
        if high - low < best_diff:
            best, best_diff = (a, b, c), high - low
        if best_diff == 0:
            break
        if a == low:
            i += 1
        elif b == low:
            j += 1
        else:
            k += 1
    return best


def count_suvo(text: str) -> tuple[int, int]:
    """Return ``(suvo, suvojit)``: occurrences of ``SUVO`` not part of ``SUVOJIT``, and of ``SUVOJIT``."""
    suvo = suvojit = 0
    for index, char in enumerate(text):
        if char != "S":
            continue
        if text.startswith("SUVOJIT", index):
            suvojit += 1
        elif text.startswith("SUVO", index):
            suvo += 1
    return suvo, suvojit


def streak_broken(number: int) -> bool:
    """Tell whether ``number`` is a multiple of 21 or contains the digits ``21``."""
    if number % 21 == 0:
        return True
    return number > 0 and "21" in str(number)