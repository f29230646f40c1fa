"""Stack, heap, union-find and graph exercises."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator, Sequence

DEFAULT_CAPACITY = 5


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is already full."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """A stack of integers that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackFullError(f"stack is full (capacity {self.capacity})")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class CommunityTracker:
    """Merges people ``1..size`` into communities and tracks the size spread."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._parent = list(range(size + 1))
        self._members = [1] * (size + 1)
        self._sizes: Counter[int] = Counter({1: size})

    def _root(self, person: int) -> int:
        if not 1 <= person <= self._size:
            raise ValueError(f"person {person} is outside 1..{self._size}")
        root = person
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[person] != root:
            self._parent[person], person = root, self._parent[person]
        return root

    def _discard(self, size: int) -> None:
        self._sizes[size] -= 1
        if not self._sizes[size]:
            del self._sizes[size]

    def merge(self, first: int, second: int) -> int:
        """Join the communities of two people and return largest minus smallest size."""
        a, b = self._root(first), self._root(second)
        if a != b:
            if self._members[a] > self._members[b]:
                keep, gone = a, b
            else:
                keep, gone = b, a
            self._discard(self._members[keep])
            self._discard(self._members[gone])
            self._members[keep] += self._members[gone]
            self._members[gone] = 0
            self._parent[gone] = keep
            self._sizes[self._members[keep]] += 1
        return max(self._sizes) - min(self._sizes)


def sort_stack(values: Iterable[int]) -> list[int]:
    """Sort a stack given bottom to top so the largest ends on top; return it bottom to top."""
    stack = list(values)
    ordered: list[int] = []
    while stack:
        value = stack.pop()
        while ordered and ordered[-1] > value:
            stack.append(ordered.pop())
        ordered.append(value)
    return ordered


def pop_order(values: Sequence[int]) -> list[int]:
    """Push every value onto a stack and return them in the order they are popped."""
    stack = BoundedStack(len(values))
    for value in values:
        stack.push(value)
    return [stack.pop() for _ in range(len(stack))]


def stock_span(prices: Iterable[int]) -> list[int]:
    """Return for each day how many consecutive days up to it had a price not above it."""
    spans: list[int] = []
    pending: list[tuple[int, int]] = []
    for day, price in enumerate(prices):
        while pending and pending[-1][1] <= price:
            pending.pop()
        spans.append(day - pending[-1][0] if pending else day + 1)
        pending.append((day, price))
    return spans


def max_ticket_revenue(seats: Iterable[int], tickets: int) -> int:
    """Sell each ticket from the row with most free seats at that count and return the total."""
    if tickets < 0:
        raise ValueError("tickets must not be negative")
    heap = [-count for count in seats]
    if tickets and not heap:
        raise ValueError("no rows to sell from")
    heapq.heapify(heap)
    total = 0
    for _ in range(tickets):
        best = -heapq.heappop(heap)
        total += best
        heapq.heappush(heap, -(best - 1))
    return total


def running_mode(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return ``(mode, count)`` after each value; ties go to the larger value."""
    counts: Counter[int] = Counter()
    result: list[tuple[int, int]] = []
    mode, best = 0, 0
    for value in values:
        counts[value] += 1
        seen = counts[value]
        if seen > best or (seen == best and value > mode):
            mode, best = value, seen
        result.append((mode, best))
    return result


def top_five(
    records: Iterable[tuple[int, int, int, int, int, int]]
) -> list[tuple[int, int]]:
    """Rank ``(id, base, p, l, c, s)`` records by gain and return ``(id, total)`` of the top five.

    The gain is ``50p + 5l + 10c + 20s - base`` and the total is ``base + gain``;
    ties are broken by the larger id, then the larger total.
    """
    ranked = []
    for ident, base, p, l, c, s in records:
        gain = p * 50 + l * 5 + c * 10 + s * 20 - base
        ranked.append((gain, ident, base + gain))
    if len(ranked) < 5:
        raise ValueError(f"top_five needs at least 5 records, got {len(ranked)}")
    return [(ident, total) for _, ident, total in heapq.nlargest(5, ranked)]


def adjacency_lists(edges: Iterable[tuple[int, int]], count: int) -> list[list[int]]:
    """Return the neighbours of vertices ``0..count-1``, most recently added first."""
    if count < 0:
        raise ValueError("count must not be negative")
    neighbours: defaultdict[int, list[int]] = defaultdict(list)
    for first, second in edges:
        if first < 0 or second < 0:
            raise ValueError(f"edge ({first}, {second}) has a negative vertex")
        neighbours[second].append(first)
        neighbours[first].append(second)
    return [list(reversed(neighbours[vertex])) for vertex in range(count)]