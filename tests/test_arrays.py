import pytest

from algodrills.arrays import (
    WordCounter,
    count_increasing_steps,
    left_rotate,
    max_range_sum,
    mean,
    mean_of_two_largest,
    merge_sorted,
    odds_then_evens,
    recursive_sum,
    reversed_values,
    second_largest,
    sort_names,
    unpaired_descending,
)


def test_mean_of_two_largest_matches_mean_of_top_pair():
    assert mean_of_two_largest([2, 8, 5, 1]) == mean([8, 5])


def test_mean_of_two_largest_equal_values():
    assert mean_of_two_largest([4, 4]) == 4


def test_mean_of_two_largest_needs_two_values():
    with pytest.raises(ValueError):
        mean_of_two_largest([3])


def test_second_largest_picks_runner_up():
    assert second_largest([1, 7, 3]) == 3


def test_second_largest_with_duplicate_maximum():
    assert second_largest([5, 2, 5]) == 5


def test_second_largest_needs_two_values():
    with pytest.raises(ValueError):
        second_largest([9])


def test_count_increasing_steps_strictly_increasing():
    values = [1, 2, 3, 4, 5]
    assert count_increasing_steps(values) == len(values)


def test_count_increasing_steps_decreasing():
    assert count_increasing_steps([5, 3, 1]) == 1


def test_count_increasing_steps_flat_equals_decreasing():
    assert count_increasing_steps([9, 9, 9]) == count_increasing_steps([3, 2, 1])


def test_mean_of_constant_values():
    assert mean([7, 7, 7]) == 7


def test_mean_times_length_is_sum():
    values = [3, 10, -4, 8]
    assert mean(values) * len(values) == pytest.approx(sum(values))


def test_mean_of_empty_raises():
    with pytest.raises(ValueError):
        mean([])


def test_recursive_sum_matches_builtin():
    values = [4, -2, 19, 6]
    assert recursive_sum(values) == sum(values)


def test_recursive_sum_empty():
    assert recursive_sum([]) == 0


def test_merge_sorted_is_sorted_union():
    first, second = [1, 4, 9], [2, 4, 5, 11]
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sorted_with_empty_side():
    assert merge_sorted([], [3, 6]) == [3, 6]


def test_unpaired_descending_all_paired():
    assert unpaired_descending([1, 1, 2, 2]) == []


def test_unpaired_descending_keeps_top_of_unequal_pair():
    assert unpaired_descending([4, 7, 4]) == [7]


def test_reversed_values_round_trip():
    values = [5, 1, 8, 2]
    assert reversed_values(reversed_values(values)) == values
    assert reversed_values(values)[0] == values[-1]


def test_left_rotate_composes():
    values = [10, 20, 30, 40, 50]
    assert left_rotate(left_rotate(values, 2), 1) == left_rotate(values, 3)


def test_left_rotate_moves_element_to_front():
    values = [10, 20, 30, 40, 50]
    rotated = left_rotate(values, 2)
    assert rotated[0] == values[2]
    assert sorted(rotated) == sorted(values)


def test_left_rotate_by_length_is_identity():
    values = [1, 2, 3]
    assert left_rotate(values, len(values)) == values


def test_left_rotate_negative_shift_raises():
    with pytest.raises(ValueError):
        left_rotate([1, 2], -1)


def test_max_range_sum_single_update():
    assert max_range_sum(5, [(1, 3, 5)]) == 5


def test_max_range_sum_disjoint_updates():
    assert max_range_sum(6, [(1, 2, 5), (4, 6, 7)]) == 7


def test_max_range_sum_rejects_out_of_range():
    with pytest.raises(ValueError):
        max_range_sum(3, [(2, 4, 1)])


def test_odds_then_evens_orders_and_filters():
    result = odds_then_evens([4, -3, 7, 2, 1])
    assert -3 not in result
    assert result == [1, 7, 2, 4]


def test_sort_names_matches_sorted():
    names = ["delta", "alpha", "charlie", "bravo"]
    assert sort_names(names) == sorted(names)


def test_word_counter_counts_additions():
    counter = WordCounter()
    words = ["apple", "pear", "apple"]
    for word in words:
        counter.add(word)
    assert counter.count("apple") == words.count("apple")
    assert counter.count("plum") == words.count("plum")