# algodrills

Compact solutions to classic programming exercises, grouped by topic.
Every solution is a plain function or a small class that takes Python
values and returns Python values. The package has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.arrays`

Integer arrays and word lists: `mean_of_two_largest`, `second_largest`,
`count_increasing_steps`, `mean`, `recursive_sum`, `merge_sorted`,
`unpaired_descending`, `reversed_values`, `left_rotate`, `max_range_sum`,
`odds_then_evens` and `sort_names`, plus `WordCounter`, which counts words
with `add(word)` and `count(word)`.

### `algodrills.linked`

`LinkedList`, a singly linked list of integers built from an iterable, with
`append`, `insert_after(key, value)`, iteration, `len()` and
`render(label)`, which gives text such as `Linked List : ->3->1->2`.
`insert_after` raises `NodeNotFoundError` (a `LookupError`) when no node
holds `key`. Also `merge_sort`, `format_list`, `unique_in_order` and
`drop_first`.

### `algodrills.strings`

Letter counts and simple hashes: `PrefixCounts` (range queries with
`query(left, right)`, 1-based and inclusive), `zombies_killed`,
`count_rubies`, `can_group_equally`, `has_all_vowels`, `game_winner`,
`most_frequent_char`, `consonant_verdict`, `letters_by_frequency`,
`min_removals_for_palindrome`, `anagram_distance`, `digit_hash` and
`hash_collisions`.

### `algodrills.searching`

`OrderLog`, which records orders with `add(weight, timestamp)` and sums
them with `weight_within(span, moment)`; and `find_position` (1-based, or
`None`), `linear_search` (0-based, or `-1`), `count_and_sum_at_most`,
`max_monotone_distance`, `count_unique_triples`,
`is_sum_of_two_triangulars`, `consecutive_sums`, `zero_sum_triples`,
`third_largest`, `closest_triple`, `count_suvo` and `streak_broken`.

### `algodrills.sorting`

`selection_sort`, `bubble_sort` and `insertion_sort` return a `SortTrace`
holding the sorted `result` and a snapshot of the list after each pass in
`passes`. Also `membership`, `negative_gain`, `extreme_sums`,
`sort_by_frequency`, `merge_descending`, `bubble_swap_count`,
`sorts_in_time`, `count_consecutive_runs`, `gap_to_max`,
`drop_two_largest`, `min_dot_product`, `max_pair_product` and
`sum_between_ranks`.

### `algodrills.structures`

`BoundedStack(capacity)` with `push`, `pop`, iteration from bottom to top
and `len()`; pushing onto a full stack raises `StackFullError` (an
`OverflowError`) and popping an empty one raises `StackEmptyError` (an
`IndexError`). `CommunityTracker(size)` merges people `1..size` and its
`merge(first, second)` returns the largest minus the smallest community
size. Also `sort_stack`, `pop_order`, `stock_span`, `max_ticket_revenue`,
`running_mode`, `top_five` and `adjacency_lists`.

## Example

```python
from algodrills.arrays import merge_sorted, WordCounter
from algodrills.linked import LinkedList
from algodrills.sorting import bubble_sort
from algodrills.structures import stock_span

merge_sorted([1, 4, 9], [2, 3, 10])   # [1, 2, 3, 4, 9, 10]

counter = WordCounter()
counter.add("apple")
counter.add("apple")
counter.count("apple")                # 2

LinkedList([3, 1, 2]).render("Linked List")   # 'Linked List : ->3->1->2'

trace = bubble_sort([3, 1, 2])
trace.result                          # [1, 2, 3]

stock_span([100, 80, 60, 70, 60, 75, 85])     # [1, 1, 1, 2, 1, 4, 6]
```

Invalid input, such as too few values, an out-of-range position or a
negative size, raises `ValueError`; the exceptions named above are raised
where stated. Each function's docstring says what it returns.

## What it does not do

The package is a library only. It has no command-line program and reads
nothing from standard input or files: callers pass values in and get
results back, and format or print them as they wish.