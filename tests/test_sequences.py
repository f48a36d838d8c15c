import pytest

from algodrills.sequences import (
    daily_temperatures,
    first_missing_positive,
    length_of_lis,
    length_of_lis_dp,
    longest_consecutive,
    majority_element,
    max_profit,
    max_profit_multi,
    max_sub_array,
    merge_sorted,
    min_sub_array_len,
    next_permutation,
    rob,
    three_sum,
    two_sum,
)


def test_daily_temperatures_source_case():
    assert daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) == [1, 1, 4, 2, 1, 1, 0, 0]


def test_daily_temperatures_empty():
    assert daily_temperatures([]) == []


@pytest.mark.parametrize(
    "nums, expected",
    [([9, 1, 2, 3, 7, 8], 4), ([1, 2, 0], 3), ([], 1), ([7, 8, 9], 1), ([1, 2, 3], 4)],
)
def test_first_missing_positive(nums, expected):
    assert first_missing_positive(nums) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([0, 1, 0, 3, 2, 3], 4),
        ([10, 9, 2, 5, 3, 7, 101, 18], 4),
        ([7, 7, 7], 1),
        ([], 0),
        ([5], 1),
    ],
)
def test_length_of_lis_both_methods(nums, expected):
    assert length_of_lis(list(nums)) == expected
    assert length_of_lis_dp(list(nums)) == expected


def test_longest_consecutive():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([]) == 0
    assert longest_consecutive([1, 1, 2]) == 2


def test_majority_element():
    assert majority_element([1, 2, 2]) == 2
    assert majority_element([1, 2, 3]) == -1


def test_max_profit():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5
    assert max_profit([7, 6, 4, 3, 1]) == 0
    assert max_profit([]) == 0


def test_max_profit_multi():
    assert max_profit_multi([1, 3, 4, 2, 5]) == 6
    assert max_profit_multi([7, 1, 5, 3, 6, 4]) == 7
    assert max_profit_multi([]) == 0


def test_max_sub_array():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6
    assert max_sub_array([-3, -1, -2]) == -1


def test_max_sub_array_empty_raises():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_merge_sorted_source_case():
    nums1 = [3, 6, 7, 8, 0, 0]
    assert merge_sorted(nums1, 4, [1, 10], 2) is None
    assert nums1 == [1, 3, 6, 7, 8, 10]


def test_merge_sorted_too_short_raises():
    with pytest.raises(ValueError):
        merge_sorted([1], 1, [2], 1)


def test_min_sub_array_len():
    assert min_sub_array_len(5, [3, 3]) == 2
    assert min_sub_array_len(7, [2, 3, 1, 2, 4, 3]) == 2
    assert min_sub_array_len(100, [1, 2]) == 0


def test_min_sub_array_len_rejects_non_positive_target():
    with pytest.raises(ValueError):
        min_sub_array_len(0, [1, 2])


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([4, 5, 2, 6, 3, 1], [4, 5, 3, 1, 2, 6]),
        ([3, 2, 1], [1, 2, 3]),
        ([1, 2, 3], [1, 3, 2]),
        ([1, 1, 5], [1, 5, 1]),
        ([1], [1]),
        ([], []),
    ],
)
def test_next_permutation(nums, expected):
    next_permutation(nums)
    assert nums == expected


def test_rob():
    assert rob([1, 2, 3, 1]) == 4
    assert rob([2, 7, 9, 3, 1]) == 12
    assert rob([]) == 0
    assert rob([5]) == 5


def test_three_sum_source_case():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_no_triples_and_sorts_input():
    nums = [3, 1, 2]
    assert three_sum(nums) == []
    assert nums == [1, 2, 3]


def test_three_sum_all_zero():
    assert three_sum([0, 0, 0, 0]) == [[0, 0, 0]]


def test_two_sum():
    assert two_sum([2, 7, 11, 15], 9) == [1, 0]
    assert two_sum([3, 3], 6) == [1, 0]
    assert two_sum([1, 2], 10) is None